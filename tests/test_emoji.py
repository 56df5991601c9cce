"""Tests for emoji parsing and lookup."""
import pytest
from pathlib import Path

from stickersetmaker.emoji import (
    Emoji,
    ValidationError,
    annotation_from_value,
    mapping_from_dict,
    resolve_emojis,
)

WINK = "\U0001F609"
SMILE = "\U0001F604"
BLUSH = "\U0001F60A"


def test_from_alias():
    assert str(Emoji.from_alias("wink")) == WINK
    assert str(Emoji.from_alias(":wink:")) == WINK
    assert str(Emoji.from_alias("smile")) == SMILE


def test_from_alias_unknown():
    with pytest.raises(ValidationError):
        Emoji.from_alias("definitely_not_an_emoji_alias")


def test_from_alias_empty():
    with pytest.raises(ValidationError):
        Emoji.from_alias("")


def test_parse_accepts_literal_and_alias():
    assert Emoji.parse(SMILE) == Emoji(SMILE)
    assert Emoji.parse("blush") == Emoji(BLUSH)


def test_emoji_rejects_non_emoji():
    with pytest.raises(ValidationError):
        Emoji("a")
    with pytest.raises(ValidationError):
        Emoji(WINK + SMILE)


def test_annotation_single_alias():
    assert annotation_from_value("wink") == (Emoji(WINK),)


def test_annotation_list():
    assert annotation_from_value(["blush", "wink"]) == (Emoji(BLUSH), Emoji(WINK))


def test_annotation_empty_list_is_invalid():
    with pytest.raises(ValidationError):
        annotation_from_value([])


@pytest.mark.parametrize("value", [1, {"png": "wink"}, ["wink", 2]])
def test_annotation_wrong_type(value):
    with pytest.raises(ValidationError):
        annotation_from_value(value)


def test_mapping_error_names_file():
    with pytest.raises(ValidationError, match="1192266.png"):
        mapping_from_dict({"1192266.png": []})


def test_resolve_uses_mapping_then_default():
    mapping = mapping_from_dict({"a.png": ["wink"]})
    default = Emoji.from_alias("smile")

    assert resolve_emojis(Path("/stickers/a.png"), mapping, default) == (Emoji(WINK),)
    assert resolve_emojis(Path("/stickers/b.png"), mapping, default) == (Emoji(SMILE),)


def test_resolve_matches_base_name_exactly():
    mapping = mapping_from_dict({"a.png": "wink"})
    default = Emoji(SMILE)

    assert resolve_emojis("dir/A.png", mapping, default) == (default,)
    assert resolve_emojis("*.png", mapping, default) == (default,)
    assert resolve_emojis("a.png/", mapping, default) == (Emoji(WINK),)


def test_resolve_without_mapping():
    default = Emoji(SMILE)
    assert resolve_emojis("a.png", None, default) == (default,)
