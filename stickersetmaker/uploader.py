# SPDX-License-Identifier: MIT
"""
Builds a sticker set out of the images in a directory.

The first image (in sorted path order) creates the set and every other image
is appended to it, one at a time. The first failure stops the run; stickers
that were already added stay in the set.
"""

from .client import StickerSetClient
from .config import AddConf, Auth, load_auth, load_emoji_mapping
from .emoji import resolve_emojis
from .files import check_input_dir, discover_images

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
import logging

ADD_STICKERS_URL = "https://t.me/addstickers/"

NO_STICKERS_MESSAGE = "no stickers found, no sticker set created."


class UploadState(Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    VALIDATING = "validating"
    CREATING = "creating"
    APPENDING = "appending"
    DONE = "done"
    FAILED = "failed"


@dataclass
class UploadResult:
    """Outcome of a finished upload."""

    state: UploadState

    #: Message shown to the user.
    message: str

    #: Full sticker set name, or None if no set was created.
    set_name: Optional[str] = None

    title: Optional[str] = None
    sticker_count: int = 0

    #: Link that adds the sticker set in Telegram.
    link: Optional[str] = None


def sticker_set_name(name: str, bot_name: str) -> str:
    return f"{name}_by_{bot_name}"


def _default_client_factory(auth: Auth, logger: logging.Logger) -> StickerSetClient:
    return StickerSetClient(auth.bot_token, auth.user_id, logger=logger)


class StickerSetUploader:
    """
    Runs one add command. Each instance does a single pass over the files.
    """

    def __init__(
        self,
        conf: AddConf,
        logger: logging.Logger,
        client_factory: Optional[Callable[[Auth, logging.Logger], StickerSetClient]] = None,
    ):
        """
        :param conf: options of the add command.
        :param logger: logger to report progress to.
        :param client_factory: callable building the API client from the
            auth values; defaults to StickerSetClient.
        """
        self.conf = conf
        self.logger = logger
        self.client_factory = client_factory or _default_client_factory

        self.state = UploadState.IDLE

        #: Number of stickers successfully sent so far.
        self.uploaded = 0

    def run(self) -> UploadResult:
        """
        Upload all the images.

        :raises ConfigError: on a missing input directory or bad config file.
        :raises ValidationError: on an invalid emoji mapping.
        :raises RequestError: if an API call fails; remaining images are
            not sent.
        """
        if self.state != UploadState.IDLE:
            raise RuntimeError("StickerSetUploader can only be run once")

        try:
            return self._run()
        except Exception:
            self.state = UploadState.FAILED
            raise

    def _run(self) -> UploadResult:
        conf = self.conf

        self.state = UploadState.DISCOVERING
        check_input_dir(conf.indir)

        emoji_mapping = None
        if conf.emoji_mapping is not None:
            emoji_mapping = load_emoji_mapping(conf.emoji_mapping)

        image_paths = discover_images(conf.indir, conf.glob)
        self.logger.debug(f"Found {len(image_paths)} image(s) in {conf.indir}")

        self.state = UploadState.VALIDATING
        auth = load_auth(conf.auth_path)

        if not image_paths:
            self.state = UploadState.DONE
            self.logger.info(NO_STICKERS_MESSAGE.capitalize())
            return UploadResult(state=self.state, message=NO_STICKERS_MESSAGE)

        set_name = sticker_set_name(conf.sticker_set_name, auth.bot_name)
        first_path, rest_paths = image_paths[0], image_paths[1:]

        with self.client_factory(auth, self.logger) as client:
            # first image must create the new sticker set
            self.state = UploadState.CREATING
            self.logger.debug(f"Sending first image {str(first_path)!r}...")
            client.create_new_sticker_set(
                set_name,
                conf.sticker_set_title,
                first_path,
                resolve_emojis(first_path, emoji_mapping, conf.default_emoji),
            )
            self.uploaded += 1

            self.state = UploadState.APPENDING
            for rest_path in rest_paths:
                self.logger.debug(f"Sending image {str(rest_path)!r}...")
                client.add_sticker_to_set(
                    set_name,
                    rest_path,
                    resolve_emojis(rest_path, emoji_mapping, conf.default_emoji),
                )
                self.uploaded += 1

        self.state = UploadState.DONE
        link = ADD_STICKERS_URL + set_name

        self.logger.debug(
            f'New sticker set name: "{set_name}", title: {conf.sticker_set_title}, '
            f"# of stickers: {len(image_paths)}"
        )
        self.logger.info(f"Click in Telegram to add: {link}")

        return UploadResult(
            state=self.state,
            message=f"Created sticker set {set_name} with {len(image_paths)} sticker(s).",
            set_name=set_name,
            title=conf.sticker_set_title,
            sticker_count=len(image_paths),
            link=link,
        )


def add(
    conf: AddConf,
    logger: logging.Logger,
    client_factory: Optional[Callable[[Auth, logging.Logger], StickerSetClient]] = None,
) -> UploadResult:
    """Create a sticker set as described by conf. See StickerSetUploader.run."""
    return StickerSetUploader(conf, logger, client_factory).run()
