# SPDX-License-Identifier: MIT
"""
Run configuration, Telegram credentials and emoji mapping files.
"""

from .emoji import Emoji, EmojiMapping, mapping_from_dict

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Self, Union
import re
import tomllib

DEFAULT_AUTH_PATH = ".telegram-auth.toml"
DEFAULT_GLOB = "*.png"
DEFAULT_EMOJI = "😄"

BOT_TOKEN_RE = re.compile(r"\d+:.+")


class ConfigError(Exception):
    """Raised when the input directory or a configuration file is unusable."""


@dataclass(frozen=True)
class AddConf:
    """Options for the add command."""

    #: Input directory with the 512 px sized PNG image files.
    indir: Path

    #: Sticker set name without the bot suffix. Must not contain spaces.
    sticker_set_name: str

    #: Human-readable title of the sticker set.
    sticker_set_title: str

    #: Default emoji for every sticker not present in the emoji mapping.
    default_emoji: Emoji

    #: File with the Telegram authentication values.
    auth_path: Path = Path(DEFAULT_AUTH_PATH)

    #: Glob pattern, relative to indir, selecting the image files.
    glob: str = DEFAULT_GLOB

    #: Optional emoji mapping file.
    emoji_mapping: Optional[Path] = None


@dataclass(frozen=True)
class Auth:
    """Telegram authentication values."""

    #: Bot token whose format is <BOT_ID>:<REST_OF_TOKEN>.
    bot_token: str

    #: Bot name, used for the sticker set suffix.
    bot_name: str

    #: User ID to put the new sticker set under.
    user_id: str

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """
        Create an Auth object from a parsed auth file.

        :raises ConfigError: if a field is missing, is not a string, or the
            bot token is malformed.
        """
        values = {}
        for field in ("bot_token", "bot_name", "user_id"):
            if field not in data:
                raise ConfigError(f"Missing {field} in auth file")
            if not isinstance(data[field], str):
                raise ConfigError(f"{field} in auth file must be a string")
            values[field] = data[field]

        validate_bot_token(values["bot_token"])
        return cls(**values)


def validate_bot_token(token: str):
    """:raises ConfigError: if the token is not <digits>:<rest>."""
    if not BOT_TOKEN_RE.fullmatch(token):
        raise ConfigError("Bot token is not of correct format!")


def _read_toml(path: Union[str, PathLike], what: str) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Could not read {what} {path}: {e.strerror}") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Malformed {what} {path}: {e}") from e


def load_auth(path: Union[str, PathLike]) -> Auth:
    """
    Load the Telegram authentication values from a TOML file.

    :raises ConfigError: if the file is unreadable or invalid.
    """
    return Auth.from_dict(_read_toml(path, "auth file"))


def parse_emoji_mapping(content: str) -> EmojiMapping:
    """
    Parse an emoji mapping TOML document, e.g.::

        "1192266.png" = "wink"
        "1192267.png" = ["blush", "relaxed"]

    :raises ConfigError: if the document is not valid TOML.
    :raises ValidationError: if an entry is empty or has an unknown alias.
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed emoji mapping: {e}") from e

    return mapping_from_dict(data)


def load_emoji_mapping(path: Union[str, PathLike]) -> EmojiMapping:
    """Load an emoji mapping TOML file. See parse_emoji_mapping."""
    return mapping_from_dict(_read_toml(path, "emoji mapping"))
