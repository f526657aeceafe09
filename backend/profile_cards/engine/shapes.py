"""Fixed per-shape configuration: names, label positions, label styles.

Both shapes share one renderer. What differs between them lives here as
immutable tables selected by the ``Shape`` tag.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from profile_cards.engine.errors import InputShapeError

# (x, y) in base-image pixels; a label's bounding-box center lands here.
Position = tuple[int, int]

DEFAULT_FONT_FAMILY = "Arial Bold"


class Shape(enum.Enum):
    ANIMAL = "animal"
    BRAIN = "brain"


@dataclass(frozen=True)
class LabelStyle:
    font_size: int
    color: str
    font_family: str = DEFAULT_FONT_FAMILY


@dataclass(frozen=True)
class StyleRules:
    """Normal/emphasized label style pair. The dominant entry gets ``emphasized``."""

    normal: LabelStyle
    emphasized: LabelStyle

    def __post_init__(self) -> None:
        if self.emphasized.font_size <= self.normal.font_size:
            raise ValueError(
                f"Emphasized font size ({self.emphasized.font_size}px) must be larger "
                f"than normal ({self.normal.font_size}px)"
            )

    def for_label(self, dominant: bool) -> LabelStyle:
        return self.emphasized if dominant else self.normal


@dataclass(frozen=True)
class ShadowStyle:
    # rgba(0, 0, 0, 0.8)
    color: tuple[int, int, int, int] = (0, 0, 0, 204)
    blur: float = 10.0
    offset: Position = (0, 0)


@dataclass(frozen=True)
class ShapeConfig:
    shape: Shape
    names: tuple[str, ...]
    positions: Mapping[str, Position] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", MappingProxyType(dict(self.positions)))

    def normalize(self, dataset: Mapping[str, int]) -> dict[str, int]:
        """Check ``dataset`` against the closed name set and reorder it to declared order."""
        missing = [name for name in self.names if name not in dataset]
        if missing:
            raise InputShapeError(self.shape, f"missing value for {', '.join(missing)}")
        unknown = [name for name in dataset if name not in self.names]
        if unknown:
            raise InputShapeError(self.shape, f"unknown name {', '.join(unknown)}")
        return {name: dataset[name] for name in self.names}


def default_style_rules(font_family: str | None = None) -> StyleRules:
    family = font_family or DEFAULT_FONT_FAMILY
    return StyleRules(
        normal=LabelStyle(font_size=36, color="#FFFFFF", font_family=family),
        emphasized=LabelStyle(font_size=40, color="#FFFF00", font_family=family),
    )


ANIMAL = ShapeConfig(
    shape=Shape.ANIMAL,
    names=("lobo", "aguia", "tubarao", "gato"),
    positions={
        "lobo": (250, 680),
        "aguia": (750, 680),
        "tubarao": (250, 970),
        "gato": (750, 970),
    },
)

BRAIN = ShapeConfig(
    shape=Shape.BRAIN,
    names=("pensante", "atuante", "razao", "emocao"),
    positions={
        "razao": (270, 480),
        "emocao": (740, 480),
        "pensante": (500, 310),
        "atuante": (500, 710),
    },
)

SHAPES: Mapping[Shape, ShapeConfig] = MappingProxyType({
    Shape.ANIMAL: ANIMAL,
    Shape.BRAIN: BRAIN,
})


def get_shape(shape: Shape) -> ShapeConfig:
    return SHAPES[shape]
