# SPDX-License-Identifier: MIT
"""
Telegram Bot API client for the sticker set calls.
"""

from .emoji import EmojiAnnotation
from .request import create_session, request_post

from os import PathLike
from typing import Optional, Union
import logging

from requests import Session

API_URL = "https://api.telegram.org"


def format_emojis(emojis: EmojiAnnotation) -> str:
    """Join emoji into the string the Bot API expects."""
    return "".join(str(e) for e in emojis)


class StickerSetClient:
    """
    Creates sticker sets and adds stickers to them through the Bot API.

    Every call blocks until the API answers and is never retried.
    """

    def __init__(
        self,
        token: str,
        user_id: str,
        session: Optional[Session] = None,
        api_url: str = API_URL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        :param token: bot token.
        :param user_id: ID of the user who will own the sticker set.
        :param session: requests session to use; a new one is created if
            not provided.
        :param api_url: base URL of the Bot API.
        """
        self.token = token
        self.user_id = user_id
        self.api_url = api_url.rstrip("/")
        self.session = session or create_session()
        self.logger = logger or logging.getLogger("stickersetmaker")

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.session.close()

    def _method_url(self, method: str) -> str:
        return f"{self.api_url}/bot{self.token}/{method}"

    def _call(self, method: str, params: dict, png_path: Union[str, PathLike]) -> str:
        return request_post(
            self.session,
            self._method_url(method),
            params=params,
            file_field="png_sticker",
            file_path=png_path,
            logger=self.logger,
        )

    def create_new_sticker_set(
        self,
        name: str,
        title: str,
        png_path: Union[str, PathLike],
        emojis: EmojiAnnotation,
    ) -> str:
        """
        Create a new sticker set with its first sticker.

        :param name: full sticker set name, ending in _by_<bot name>.
        :param title: sticker set title.
        :param png_path: image of the first sticker.
        :param emojis: emoji for the first sticker.
        :raises RequestError: if the set could not be created.
        """
        return self._call(
            "createNewStickerSet",
            {
                "user_id": self.user_id,
                "name": name,
                "title": title,
                "emojis": format_emojis(emojis),
            },
            png_path,
        )

    def add_sticker_to_set(
        self,
        name: str,
        png_path: Union[str, PathLike],
        emojis: EmojiAnnotation,
    ) -> str:
        """
        Add a sticker to an existing sticker set.

        :raises RequestError: if the sticker could not be added.
        """
        return self._call(
            "addStickerToSet",
            {
                "user_id": self.user_id,
                "name": name,
                "emojis": format_emojis(emojis),
            },
            png_path,
        )
