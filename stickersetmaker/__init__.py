# SPDX-License-Identifier: MIT
"""
stickersetmaker - Create Telegram sticker sets from a directory of images
"""

import logging

VERSION = "0.1.0"

# Logger configuration


class LogFormatter(logging.Formatter):
    # https://stackoverflow.com/questions/384076/how-can-i-color-python-logging-output
    FORMATS = {
        logging.DEBUG: "%(message)s",
        logging.INFO: "%(message)s",
        logging.WARNING: "\x1b[33;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.ERROR: "\x1b[31;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.CRITICAL: "\x1b[31;1m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, "%(message)s")
        return logging.Formatter(log_fmt).format(record)


def create_logger(verbosity: int = 0, name: str = "stickersetmaker") -> logging.Logger:
    """
    Create the logger handed to the uploader and the CLI.

    :param verbosity: number of -v flags; 0 shows info messages, anything
        above that also shows debug messages.
    :param name: name of the logger to configure.
    """
    level = logging.DEBUG if verbosity > 0 else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.name == "my_handler":
            logger.removeHandler(handler)

    _log_stream = logging.StreamHandler()
    _log_stream.setFormatter(LogFormatter())
    _log_stream.setLevel(level)
    _log_stream.name = "my_handler"

    logger.addHandler(_log_stream)
    return logger
