# SPDX-License-Identifier: MIT
"""Wrapper for making requests"""

from . import VERSION

from os import PathLike
from typing import Optional, Union
from urllib.parse import urlparse
import logging

import requests
from requests import Session

HEADERS = {
    "User-Agent": f"stickersetmaker {VERSION}",
}

_logger = logging.getLogger("stickersetmaker")


class RequestError(Exception):
    """Base class for request exceptions."""


class RemoteApiError(RequestError):
    """The API answered with a non-success status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Server returned error {status}: {body}")
        self.status = status
        self.body = body


class TransportError(RequestError):
    """The request could not be sent or no response was received."""


def create_session() -> Session:
    """Create a requests session with our headers set."""
    session = Session()
    session.headers.update(HEADERS)
    return session


def request_post(
    session: Session,
    url: str,
    params: dict,
    file_field: str,
    file_path: Union[str, PathLike],
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Send a multipart POST request with one file and return the response body.

    No timeout is set; the call blocks until the server answers or the
    connection fails.

    :raises RemoteApiError: if the response status is not 200.
    :raises TransportError: if the file cannot be read or the connection fails.
    """
    logger = logger or _logger

    try:
        with open(file_path, "rb") as f:
            req = session.post(
                url,
                params=params,
                files={file_field: f},
                timeout=None,
            )
    # RequestException subclasses OSError, so it has to come first
    except requests.exceptions.RequestException as e:
        host = urlparse(url).netloc
        raise TransportError(f"Request to {host} failed: {type(e).__name__}") from e
    except OSError as e:
        raise TransportError(f"Could not read {file_path}: {e.strerror}") from e

    if req.status_code != 200:
        logger.warning(f"Request error: {req.status_code}")
        logger.warning("Server response:\n" + req.text)
        raise RemoteApiError(req.status_code, req.text)

    return req.text
