"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from profile_cards.engine.composite import ImageGenerator
from profile_cards.engine.fonts import FontRegistry
from profile_cards.engine.shapes import Shape
from profile_cards.utils.image_source import ImageSourceError


# Large enough that every configured label position is on-canvas
BASE_SIZE = (1000, 1100)

# Datasets from the original handler's examples
ANIMAL_DATA = {"lobo": 40, "aguia": 55, "tubarao": 55, "gato": 10}
BRAIN_DATA = {"pensante": 20, "atuante": 30, "razao": 25, "emocao": 25}


def make_base_image(size: tuple[int, int] = BASE_SIZE, gray: int | None = None) -> Image.Image:
    """Deterministic RGB test image: flat gray, or a horizontal/vertical gradient."""
    width, height = size
    if gray is not None:
        return Image.new("RGB", size, (gray, gray, gray))
    xs = np.linspace(0, 255, width, dtype=np.float64)
    ys = np.linspace(0, 255, height, dtype=np.float64)
    r = np.tile(xs, (height, 1))
    g = np.tile(ys[:, None], (1, width))
    b = np.full((height, width), 96.0)
    arr = np.stack([r, g, b], axis=-1).astype(np.uint8)
    return Image.fromarray(arr)


def to_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    with Image.open(io.BytesIO(data)) as img:
        return np.asarray(img.convert("RGBA")).copy()


class DictLoader:
    """In-memory base image loader keyed by source name."""

    def __init__(self, images: dict[str, bytes]) -> None:
        self.images = images
        self.calls: list[str] = []

    def __call__(self, source: str) -> bytes:
        self.calls.append(source)
        try:
            return self.images[source]
        except KeyError:
            raise ImageSourceError(f"failed to read {source}: not found") from None


@pytest.fixture
def fonts() -> FontRegistry:
    # Nothing registered: labels use Pillow's bundled default font
    return FontRegistry()


@pytest.fixture
def base_png() -> bytes:
    return to_png(make_base_image())


@pytest.fixture
def animal_data() -> dict[str, int]:
    return dict(ANIMAL_DATA)


@pytest.fixture
def brain_data() -> dict[str, int]:
    return dict(BRAIN_DATA)


@pytest.fixture
def loader(base_png: bytes) -> DictLoader:
    return DictLoader({"animal.png": base_png, "brain.png": base_png})


@pytest.fixture
def generator(loader: DictLoader, fonts: FontRegistry) -> ImageGenerator:
    return ImageGenerator(
        sources={Shape.ANIMAL: "animal.png", Shape.BRAIN: "brain.png"},
        loader=loader,
        fonts=fonts,
    )
