"""Percentage annotation engine."""

from profile_cards.engine.composite import CompositeResult, ImageGenerator
from profile_cards.engine.errors import (
    AnnotationError,
    CompositeFailure,
    DecodeError,
    InputShapeError,
    RenderError,
)
from profile_cards.engine.renderer import Label, RenderResult, render
from profile_cards.engine.selector import select_max
from profile_cards.engine.shapes import Shape, StyleRules, get_shape

__all__ = [
    "AnnotationError",
    "CompositeFailure",
    "CompositeResult",
    "DecodeError",
    "ImageGenerator",
    "InputShapeError",
    "Label",
    "RenderError",
    "RenderResult",
    "Shape",
    "StyleRules",
    "get_shape",
    "render",
    "select_max",
]
