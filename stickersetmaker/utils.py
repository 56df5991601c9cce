# SPDX-License-Identifier: MIT
"""Miscellaneous helpers."""

#: ANSI escape sequences for terminal output.
colors = {
    "bold": "\x1b[1m",
    "green": "\x1b[32m",
    "reset": "\x1b[0m",
}
