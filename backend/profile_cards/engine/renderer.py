"""Annotation renderer: percentage labels drawn over a base image.

One renderer serves both shapes; the shape only changes the position table
and the base image handed in.

    surface = base image blitted at (0, 0), same size
    for each (name, value): shadow, then "<value>%" centered on positions[name]
    encode surface -> PNG
"""

from __future__ import annotations

import base64
import io
import logging
import math
import time
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw, ImageFilter

from profile_cards.engine.errors import AnnotationError, DecodeError, InputShapeError, RenderError
from profile_cards.engine.fonts import FontRegistry, get_font_registry
from profile_cards.engine.selector import select_max
from profile_cards.engine.shapes import LabelStyle, Position, ShadowStyle, Shape, StyleRules

logger = logging.getLogger(__name__)

# Canvas shadowBlur maps to a Gaussian with sigma = blur / 2.
_BLUR_TO_SIGMA = 0.5

# A Gaussian is visually zero past 3 sigma.
_SHADOW_EXTENT_SIGMAS = 3

_PNG_MIME = "image/png"


@dataclass(frozen=True)
class Label:
    name: str
    text: str
    position: Position
    style: LabelStyle
    dominant: bool = False


@dataclass(frozen=True)
class RenderResult:
    shape: Shape
    png: bytes
    width: int
    height: int
    dominant: str
    labels: tuple[Label, ...]

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.png).decode("ascii")
        return f"data:{_PNG_MIME};base64,{encoded}"


def format_percentage(value: int) -> str:
    return f"{value}%"


def layout_labels(
    shape: Shape,
    dataset: Mapping[str, int],
    positions: Mapping[str, Position],
    styles: StyleRules,
) -> list[Label]:
    """Pick the dominant entry and resolve text, position and style for every label."""
    if not dataset:
        raise InputShapeError(shape, "dataset is empty")
    dominant = select_max(dataset)

    labels: list[Label] = []
    for name, value in dataset.items():
        try:
            position = positions[name]
        except KeyError:
            raise InputShapeError(shape, f"no label position configured for {name!r}") from None
        is_dominant = name == dominant
        labels.append(
            Label(
                name=name,
                text=format_percentage(value),
                position=position,
                style=styles.for_label(is_dominant),
                dominant=is_dominant,
            )
        )
    return labels


def render(
    shape: Shape,
    base_image: bytes | Image.Image,
    dataset: Mapping[str, int],
    positions: Mapping[str, Position],
    styles: StyleRules,
    *,
    shadow: ShadowStyle | None = None,
    fonts: FontRegistry | None = None,
) -> RenderResult:
    """Draw ``dataset`` over ``base_image`` and return the encoded PNG.

    A fresh surface is allocated per call; ``base_image`` is never modified.
    """
    start = time.perf_counter()
    shadow = shadow or ShadowStyle()
    fonts = fonts or get_font_registry()

    surface = _new_surface(shape, base_image)
    labels = layout_labels(shape, dataset, positions, styles)

    try:
        for label in labels:
            _draw_label(surface, label, shadow, fonts)
        png = _encode_png(surface)
    except AnnotationError:
        raise
    except Exception as e:
        raise RenderError(shape, str(e) or type(e).__name__) from e

    dominant = next(label.name for label in labels if label.dominant)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Rendered %s image %dx%d (%d labels, dominant=%s) in %.1fms",
        shape.value,
        surface.width,
        surface.height,
        len(labels),
        dominant,
        elapsed,
    )
    return RenderResult(
        shape=shape,
        png=png,
        width=surface.width,
        height=surface.height,
        dominant=dominant,
        labels=tuple(labels),
    )


def _new_surface(shape: Shape, base_image: bytes | Image.Image) -> Image.Image:
    """Decode the base image and blit it onto a same-sized RGBA surface."""
    try:
        if isinstance(base_image, Image.Image):
            base = base_image.convert("RGBA")
        else:
            with Image.open(io.BytesIO(base_image)) as img:
                img.load()
                base = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(shape, f"cannot decode base image: {e}") from e

    surface = Image.new("RGBA", base.size, (0, 0, 0, 0))
    surface.paste(base, (0, 0))
    return surface


def _draw_label(
    surface: Image.Image,
    label: Label,
    shadow: ShadowStyle,
    fonts: FontRegistry,
) -> None:
    font = fonts.get(label.style.font_family, label.style.font_size)
    draw = ImageDraw.Draw(surface)
    origin = _centered_origin(draw, label.text, font, label.position)
    _draw_shadow(surface, draw, label.text, font, origin, shadow)
    # Fresh handle: the shadow was pasted into the surface after `draw` was made.
    ImageDraw.Draw(surface).text(origin, label.text, font=font, fill=label.style.color)


def _centered_origin(draw, text, font, position: Position) -> tuple[float, float]:
    """Text origin that puts the glyph bounding-box center on ``position``."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x, y = position
    return x - (left + right) / 2, y - (top + bottom) / 2


def _draw_shadow(
    surface: Image.Image,
    draw: ImageDraw.ImageDraw,
    text: str,
    font,
    origin: tuple[float, float],
    shadow: ShadowStyle,
) -> None:
    """Composite a blurred silhouette of ``text`` under where it will be drawn.

    Works on a padded patch around the text so the blur never touches the
    rest of the surface and nothing carries over to the next label.
    """
    alpha = shadow.color[3]
    if alpha == 0:
        return

    sigma = shadow.blur * _BLUR_TO_SIGMA
    pad = math.ceil(sigma * _SHADOW_EXTENT_SIGMAS) + 1
    ox = origin[0] + shadow.offset[0]
    oy = origin[1] + shadow.offset[1]

    left, top, right, bottom = draw.textbbox((ox, oy), text, font=font)
    x0, y0 = math.floor(left) - pad, math.floor(top) - pad
    x1, y1 = math.ceil(right) + pad, math.ceil(bottom) + pad

    mask = Image.new("L", (x1 - x0, y1 - y0), 0)
    ImageDraw.Draw(mask).text((ox - x0, oy - y0), text, font=font, fill=255)
    if sigma > 0:
        mask = mask.filter(ImageFilter.GaussianBlur(sigma))

    scaled = np.asarray(mask, dtype=np.float32) * (alpha / 255.0)
    layer = Image.new("RGBA", mask.size, (*shadow.color[:3], 0))
    layer.putalpha(Image.fromarray(np.rint(scaled).astype(np.uint8)))

    # Clip the patch to the surface; alpha_composite needs a non-negative dest.
    cx0, cy0 = max(x0, 0), max(y0, 0)
    cx1, cy1 = min(x1, surface.width), min(y1, surface.height)
    if cx0 >= cx1 or cy0 >= cy1:
        return
    surface.alpha_composite(
        layer,
        dest=(cx0, cy0),
        source=(cx0 - x0, cy0 - y0, cx1 - x0, cy1 - y0),
    )


def _encode_png(surface: Image.Image) -> bytes:
    buf = io.BytesIO()
    surface.save(buf, format="PNG")
    return buf.getvalue()
