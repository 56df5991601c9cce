# SPDX-License-Identifier: MIT
"""Code for emoji parsing and per-sticker emoji lookup."""

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Dict, Optional, Self, Tuple, Union

import emoji as emoji_data

VARIATION_SELECTOR = "\ufe0f"


class ValidationError(ValueError):
    """Raised when an emoji or an emoji mapping entry is invalid."""


@dataclass(frozen=True)
class Emoji:
    """Class representing a single emoji character."""

    #: The unicode character for this emoji.
    char: str

    def __post_init__(self):
        if len(self.char) != 1 or not _is_emoji_char(self.char):
            raise ValidationError(f"Not a single emoji character: {self.char!r}")

    def __str__(self) -> str:
        return self.char

    @classmethod
    def from_alias(cls, alias: str) -> Self:
        """
        Create an Emoji from its short name, e.g. "wink".

        :raises ValidationError: if the alias does not resolve to exactly one
            emoji character.
        """
        name = alias.strip().strip(":")
        if not name:
            raise ValidationError("Empty emoji alias")

        char = emoji_data.emojize(f":{name}:", language="alias")
        try:
            return cls(char.rstrip(VARIATION_SELECTOR))
        except ValidationError:
            raise ValidationError(
                f"Emoji alias {alias!r} does not resolve to a single emoji"
            ) from None

    @classmethod
    def parse(cls, value: str) -> Self:
        """
        Create an Emoji from either a literal emoji character or an alias.

        :raises ValidationError: if neither interpretation works.
        """
        char = value.strip().rstrip(VARIATION_SELECTOR)
        if len(char) == 1 and _is_emoji_char(char):
            return cls(char)
        return cls.from_alias(value)


#: Non-empty sequence of emoji attached to one sticker.
EmojiAnnotation = Tuple[Emoji, ...]

#: Sticker file name to emoji mapping.
EmojiMapping = Dict[str, EmojiAnnotation]


def _is_emoji_char(char: str) -> bool:
    return emoji_data.is_emoji(char) or emoji_data.is_emoji(char + VARIATION_SELECTOR)


def annotation_from_value(value: Union[str, list]) -> EmojiAnnotation:
    """
    Normalize a mapping entry into an emoji annotation.

    Entries are either a single alias ("wink") or a list of aliases
    (["blush", "relaxed"]).

    :raises ValidationError: if the entry is empty, of the wrong type, or
        contains an invalid alias.
    """
    if isinstance(value, str):
        return (Emoji.parse(value),)

    if not isinstance(value, list):
        raise ValidationError(
            f"Expected an emoji alias or a list of aliases, got {type(value).__name__}"
        )

    if not value:
        raise ValidationError("Emoji list must contain at least one emoji")

    emojis = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f"Emoji alias must be a string, got {type(item).__name__}")
        emojis.append(Emoji.parse(item))

    return tuple(emojis)


def mapping_from_dict(data: dict) -> EmojiMapping:
    """
    Build an EmojiMapping out of a parsed mapping document.

    :raises ValidationError: if any entry is invalid; the offending file name
        is included in the message.
    """
    mapping = {}
    for file_name, value in data.items():
        try:
            mapping[file_name] = annotation_from_value(value)
        except ValidationError as e:
            raise ValidationError(f"Invalid emoji mapping for {file_name!r}: {e}") from e
    return mapping


def resolve_emojis(
    file_path: Union[str, PathLike],
    mapping: Optional[EmojiMapping],
    default_emoji: Emoji,
) -> EmojiAnnotation:
    """
    Get the emoji for a sticker file. Always returns at least one emoji.

    Lookup uses the exact base name of the file; anything not present in
    the mapping gets the default emoji.
    """
    if mapping:
        emojis = mapping.get(Path(file_path).name)
        if emojis:
            return emojis

    return (default_emoji,)
