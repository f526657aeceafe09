"""Base image loading from local files or http(s) URLs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import requests

logger = logging.getLogger(__name__)

ImageLoader = Callable[[str], bytes]

_URL_SCHEMES = ("http://", "https://")


class ImageSourceError(Exception):
    """Base image bytes could not be obtained."""


def is_url(source: str) -> bool:
    return source.lower().startswith(_URL_SCHEMES)


def load_base_image(source: str, timeout: float = 10.0) -> bytes:
    """Read raw image bytes from ``source``. Nothing is cached between calls."""
    if is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ImageSourceError(f"failed to fetch {source}: {e}") from e
        logger.debug("Fetched %s (%d bytes)", source, len(response.content))
        return response.content

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise ImageSourceError(f"failed to read {source}: {e}") from e
