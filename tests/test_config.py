"""Tests for auth and emoji mapping files."""
import pytest

from stickersetmaker.config import (
    Auth,
    ConfigError,
    load_auth,
    load_emoji_mapping,
    parse_emoji_mapping,
    validate_bot_token,
)
from stickersetmaker.emoji import Emoji, ValidationError


def write_auth(path, token="12345:ABCDE", name="TestBot", user_id="42"):
    path.write_text(
        f'bot_token = "{token}"\nbot_name = "{name}"\nuser_id = "{user_id}"\n',
        encoding="utf-8",
    )
    return path


def test_validate_bot_token():
    validate_bot_token("12345:ABCDE")
    with pytest.raises(ConfigError):
        validate_bot_token("notanumber:ABCDE")
    with pytest.raises(ConfigError):
        validate_bot_token("12345:")
    with pytest.raises(ConfigError):
        validate_bot_token("abc12345:ABCDE")


def test_load_auth(tmp_path):
    auth = load_auth(write_auth(tmp_path / "auth.toml"))
    assert auth == Auth(bot_token="12345:ABCDE", bot_name="TestBot", user_id="42")


def test_load_auth_bad_token(tmp_path):
    with pytest.raises(ConfigError, match="Bot token"):
        load_auth(write_auth(tmp_path / "auth.toml", token="notanumber:ABCDE"))


def test_load_auth_missing_field(tmp_path):
    path = tmp_path / "auth.toml"
    path.write_text('bot_token = "1:x"\nbot_name = "bot"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="user_id"):
        load_auth(path)


def test_load_auth_wrong_type(tmp_path):
    path = tmp_path / "auth.toml"
    path.write_text('bot_token = "1:x"\nbot_name = "bot"\nuser_id = 42\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="string"):
        load_auth(path)


def test_load_auth_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_auth(tmp_path / "nope.toml")


def test_load_auth_malformed(tmp_path):
    path = tmp_path / "auth.toml"
    path.write_text("bot_token = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_auth(path)


@pytest.mark.parametrize(
    "content",
    [
        "",
        '"1192266.png" = ["wink"]',
        '"1192267.png" = ["blush", "relaxed"]',
        '"1192266.png" = ["wink"]\n"1192267.png" = ["blush", "relaxed"]',
        '"1192266.png" = "wink"',
    ],
)
def test_emoji_mapping_valid(content):
    parse_emoji_mapping(content)


def test_emoji_mapping_values():
    mapping = parse_emoji_mapping('"a.png" = "wink"\n"b.png" = ["blush", "smile"]')
    assert mapping == {
        "a.png": (Emoji.from_alias("wink"),),
        "b.png": (Emoji.from_alias("blush"), Emoji.from_alias("smile")),
    }


def test_emoji_mapping_empty_list():
    with pytest.raises(ValidationError):
        parse_emoji_mapping('"1192266.png" = []')


def test_emoji_mapping_unknown_alias():
    with pytest.raises(ValidationError):
        parse_emoji_mapping('"1192266.png" = ["not_an_emoji_alias_at_all"]')


def test_emoji_mapping_unquoted_dotted_key():
    # a.png unquoted is a nested table, not a file name
    with pytest.raises(ValidationError):
        parse_emoji_mapping('a.png = "wink"')


def test_emoji_mapping_malformed():
    with pytest.raises(ConfigError):
        parse_emoji_mapping('"a.png" = [')


def test_load_emoji_mapping(tmp_path):
    path = tmp_path / "mapping.toml"
    path.write_text('"a.png" = ["wink"]\n', encoding="utf-8")
    assert load_emoji_mapping(path) == {"a.png": (Emoji.from_alias("wink"),)}


def test_load_auth_invalid_utf8(tmp_path):
    path = tmp_path / "auth.toml"
    path.write_bytes(b'bot_token = "1:\xff"\nbot_name = "bot"\nuser_id = "2"\n')
    with pytest.raises(ConfigError, match="Malformed auth file"):
        load_auth(path)


def test_load_emoji_mapping_invalid_utf8(tmp_path):
    path = tmp_path / "mapping.toml"
    path.write_bytes(b'"a\xff.png" = "wink"\n')
    with pytest.raises(ConfigError, match="Malformed emoji mapping"):
        load_emoji_mapping(path)
