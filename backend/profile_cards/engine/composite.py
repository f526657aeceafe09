"""Composite operation: both shapes rendered concurrently, joined all-or-nothing."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from profile_cards.engine.errors import AnnotationError, CompositeFailure, DecodeError
from profile_cards.engine.fonts import FontRegistry
from profile_cards.engine.renderer import RenderResult, render
from profile_cards.engine.shapes import ShadowStyle, Shape, StyleRules, default_style_rules, get_shape
from profile_cards.utils.image_source import ImageLoader, ImageSourceError, load_base_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeResult:
    animal: RenderResult
    brain: RenderResult


class ImageGenerator:
    """Renders the animal and brain images for one request."""

    def __init__(
        self,
        sources: Mapping[Shape, str],
        loader: ImageLoader = load_base_image,
        styles: StyleRules | None = None,
        shadow: ShadowStyle | None = None,
        fonts: FontRegistry | None = None,
    ) -> None:
        self.sources = dict(sources)
        self.loader = loader
        self.styles = styles or default_style_rules()
        self.shadow = shadow or ShadowStyle()
        self.fonts = fonts

    def render_shape(self, shape: Shape, dataset: Mapping[str, int]) -> RenderResult:
        """Validate ``dataset`` against its shape, load the base image and render it."""
        config = get_shape(shape)
        values = config.normalize(dataset)

        source = self.sources[shape]
        try:
            base_image = self.loader(source)
        except ImageSourceError as e:
            raise DecodeError(shape, str(e)) from e

        return render(
            shape,
            base_image,
            values,
            config.positions,
            self.styles,
            shadow=self.shadow,
            fonts=self.fonts,
        )

    async def generate(
        self,
        animal: Mapping[str, int],
        brain: Mapping[str, int],
    ) -> CompositeResult:
        """Render both images in worker threads; any failure fails the whole call."""
        try:
            animal_result, brain_result = await asyncio.gather(
                asyncio.to_thread(self.render_shape, Shape.ANIMAL, animal),
                asyncio.to_thread(self.render_shape, Shape.BRAIN, brain),
            )
        except AnnotationError as e:
            logger.error("Image generation failed: %s", e)
            raise CompositeFailure(e) from e
        return CompositeResult(animal=animal_result, brain=brain_result)
