# SPDX-License-Identifier: MIT
"""Image file discovery."""

from .config import ConfigError

from os import PathLike
from pathlib import Path
from typing import List, Union
import glob
import os.path


def check_input_dir(base_dir: Union[str, PathLike]):
    """:raises ConfigError: if the input directory does not exist."""
    if not os.path.exists(base_dir):
        raise ConfigError(f"{str(base_dir)!r} input directory does not exist!")


def discover_images(base_dir: Union[str, PathLike], pattern: str) -> List[Path]:
    """
    Find the image files matching a glob pattern inside a directory.

    Directories are left out and the result is sorted by path, so the first
    entry is the file that creates the sticker set. Entries that cannot be
    inspected (e.g. permission denied) are skipped.

    :param base_dir: directory to search in.
    :param pattern: glob pattern relative to base_dir, e.g. "*.png".
    :raises ConfigError: if base_dir does not exist.
    """
    check_input_dir(base_dir)

    merged_glob = os.path.join(glob.escape(os.fspath(base_dir)), pattern)

    image_paths = []
    for match in glob.iglob(merged_glob, recursive=True, include_hidden=True):
        path = Path(match)
        try:
            if path.is_dir():
                continue
        except OSError:
            continue
        image_paths.append(path)

    return sorted(image_paths)
