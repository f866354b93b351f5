# config.py
# Run-wide settings passed explicitly into the generation pass

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Protocol, Sequence

from .colors import Color

TAU = math.pi * 2

DEFAULT_WIDTH = 5120
DEFAULT_HEIGHT = 2880

# Arc length between two perimeter samples
DEFAULT_RESOLUTION = 80

DEFAULT_PALETTE = ("#454d66", "#309975", "#58b368", "#dad873", "#efeeb4")

# Background luminance below which outlines are white. Luminance at which
# white and black give the same contrast ratio.
DEFAULT_FOREGROUND_THRESHOLD = 0.179


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0,1), e.g. ``random.Random``."""

    def random(self) -> float: ...


class DirectionSet(NamedTuple):
    """Gradient bias angles in radians, chosen once per image."""

    base: float
    opposite: float
    offset: float

    @classmethod
    def random(cls, rng: RandomSource) -> "DirectionSet":
        angle = rng.random() * TAU
        return cls(
            angle,
            angle + TAU / 2,
            angle + TAU / 8 + math.floor(rng.random() * 4) * TAU / 4,
        )


@dataclass
class ArtConfig:
    """Configuration for one generated image."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    palette: Sequence[str] = DEFAULT_PALETTE
    background: Optional[str] = None  # None picks one from the palette
    resolution: float = DEFAULT_RESOLUTION
    stroke_width: float = 1.0
    foreground_threshold: float = DEFAULT_FOREGROUND_THRESHOLD

    def validate(self) -> None:
        """Raise ValueError for bad dimensions and InvalidColor for bad colors."""
        if int(self.width) != self.width or self.width <= 0:
            raise ValueError(f"width must be a positive integer, got {self.width!r}")
        if int(self.height) != self.height or self.height <= 0:
            raise ValueError(f"height must be a positive integer, got {self.height!r}")
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution!r}")
        if not self.palette:
            raise ValueError("palette is empty")
        for value in self.palette:
            Color.parse(value)
        if self.background is not None:
            Color.parse(self.background)
