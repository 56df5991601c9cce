# SPDX-License-Identifier: MIT

from . import VERSION, create_logger
from .utils import colors
from .config import (
    DEFAULT_AUTH_PATH,
    DEFAULT_EMOJI,
    DEFAULT_GLOB,
    AddConf,
    ConfigError,
)
from .emoji import Emoji, ValidationError
from .request import RequestError
from .uploader import add

from pathlib import Path
import argparse
import sys

parser = argparse.ArgumentParser(
    prog="stickersetmaker",
    description="Create Telegram sticker sets from a directory of images",
)
parser.add_argument(
    "-v",
    dest="verbose",
    action="count",
    default=0,
    help="verbose flag (-v, -vv, -vvv)",
)
parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

subparsers = parser.add_subparsers(dest="command", required=True)

add_parser = subparsers.add_parser("add", help="create a new sticker set")
add_parser.add_argument(
    "indir", type=Path, help="input directory with the 512 px sized PNG image files"
)
add_parser.add_argument(
    "-a",
    "--auth",
    dest="auth_path",
    type=Path,
    default=Path(DEFAULT_AUTH_PATH),
    help="file path to required Telegram authentication values",
)
add_parser.add_argument(
    "-g", "--glob", default=DEFAULT_GLOB, help="glob pattern to get PNG image files"
)
add_parser.add_argument(
    "-n",
    "--name",
    dest="sticker_set_name",
    required=True,
    help="sticker set name without bot suffix; must not contain spaces and must be unique",
)
add_parser.add_argument(
    "-t",
    "--title",
    dest="sticker_set_title",
    required=True,
    help="sticker set title, human-reading friendly name of the sticker set",
)
add_parser.add_argument(
    "--default-emoji",
    default=DEFAULT_EMOJI,
    help="default emoji (or emoji alias, e.g. wink) to assign to every sticker in the set",
)
add_parser.add_argument(
    "-e",
    "--emoji-mapping",
    type=Path,
    help="emoji mapping file to use; if not provided, all stickers will use the default emoji",
)


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    logger = create_logger(args.verbose)

    logger.debug(f"{colors['bold']}stickersetmaker{colors['reset']} {VERSION}")

    try:
        conf = AddConf(
            indir=args.indir,
            sticker_set_name=args.sticker_set_name,
            sticker_set_title=args.sticker_set_title,
            default_emoji=Emoji.parse(args.default_emoji),
            auth_path=args.auth_path,
            glob=args.glob,
            emoji_mapping=args.emoji_mapping,
        )
        add(conf, logger)
    except (ConfigError, ValidationError, RequestError) as e:
        logger.error(str(e))
        return 1

    logger.debug(f"{colors['green']}stickersetmaker COMPLETED!{colors['reset']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
