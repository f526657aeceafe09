"""Process-wide font registry.

Fonts are registered once at startup from TrueType files and looked up by
family name at render time. Registration failures are logged and tolerated:
renders fall back to Pillow's bundled scalable font.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import ImageFont

logger = logging.getLogger(__name__)


class FontRegistry:
    """Maps font family names to TrueType files."""

    def __init__(self) -> None:
        self._paths: dict[str, Path] = {}

    def register(self, path: str | Path, family: str) -> bool:
        if family in self._paths:
            return True
        font_path = Path(path)
        try:
            # Opening once validates the file before any request depends on it.
            ImageFont.truetype(str(font_path), size=12)
        except (OSError, ValueError) as e:
            logger.error(
                "Failed to register font %r from %s. Text might not render correctly: %s",
                family,
                font_path,
                e,
            )
            return False
        self._paths[family] = font_path
        logger.info("Registered font %r from %s", family, font_path)
        return True

    def is_registered(self, family: str) -> bool:
        return family in self._paths

    def get(self, family: str, size: int) -> ImageFont.FreeTypeFont:
        """Return ``family`` at ``size`` px, or the default font if it was never registered."""
        path = self._paths.get(family)
        if path is None:
            logger.debug("Font %r not registered, using default font at %dpx", family, size)
            return ImageFont.load_default(size=size)
        return ImageFont.truetype(str(path), size=size)

    @property
    def count(self) -> int:
        return len(self._paths)


# Module-level singleton
_registry = FontRegistry()


def get_font_registry() -> FontRegistry:
    return _registry


def register_font(path: str | Path, family: str) -> bool:
    return _registry.register(path, family)
