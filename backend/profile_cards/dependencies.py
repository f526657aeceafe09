"""FastAPI dependency injection."""

from __future__ import annotations

from functools import partial

from profile_cards.config import settings
from profile_cards.engine.composite import ImageGenerator
from profile_cards.engine.shapes import Shape, default_style_rules
from profile_cards.utils.image_source import load_base_image


def get_settings():
    return settings


def get_image_generator() -> ImageGenerator:
    return ImageGenerator(
        sources={
            Shape.ANIMAL: settings.animal_base_image,
            Shape.BRAIN: settings.brain_base_image,
        },
        loader=partial(load_base_image, timeout=settings.base_image_timeout),
        styles=default_style_rules(settings.font_family),
    )
