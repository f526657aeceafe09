"""Annotation error taxonomy.

Every render-level error carries the shape it failed on, so the message a
caller sees always says which of the two images broke.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from profile_cards.engine.shapes import Shape


class AnnotationError(Exception):
    """Base class for failures of a single shape render."""

    def __init__(self, shape: Shape, detail: str) -> None:
        self.shape = shape
        self.detail = detail
        super().__init__(f"Error during {shape.value} image processing: {detail}")


class InputShapeError(AnnotationError):
    """Dataset is missing a name, has a foreign name, or a position is missing."""


class DecodeError(AnnotationError):
    """Base image could not be loaded or decoded."""


class RenderError(AnnotationError):
    """Drawing, font resolution or encoding failed."""


class CompositeFailure(Exception):
    """One of the concurrent renders failed; no image is returned for either."""

    def __init__(self, cause: AnnotationError) -> None:
        self.cause = cause
        super().__init__(str(cause))
