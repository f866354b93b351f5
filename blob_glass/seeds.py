# seeds.py
# Blob placement and perimeter sampling that feed the tessellation

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .colors import Color
from .config import TAU, ArtConfig, DirectionSet, RandomSource

FLAT = "flat"
GRADIENT = "gradient"


@dataclass
class Blob:
    """A filled circle placed during generation."""

    x: int
    y: int
    radius: int
    color: str
    style: str
    alpha: float
    angle: Optional[float] = None  # gradient direction, None for flat fills

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def gradient_line(self) -> Tuple[float, float, float, float]:
        """Start and end of the gradient axis across the blob's diameter."""
        dx = math.cos(self.angle) * self.radius
        dy = math.sin(self.angle) * self.radius
        return self.x - dx, self.y - dy, self.x + dx, self.y + dy


@dataclass
class SeedSet:
    """Seed points sampled from blob outlines.

    ``forces`` holds one unit vector per point; nothing downstream consumes
    them yet, they are kept for a weighted tessellation.
    """

    points: List[Tuple[int, int]] = field(default_factory=list)
    forces: List[Tuple[float, float]] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    initial_area: float = 0.0
    covered_area: float = 0.0
    blob_count: int = 0

    def add(self, x: int, y: int, force: Tuple[float, float]) -> None:
        # same integer position: last write wins in the index
        self.index[seed_key(x, y)] = len(self.points)
        self.points.append((x, y))
        self.forces.append(force)

    def as_array(self) -> np.ndarray:
        return np.array(self.points, dtype=np.float64).reshape(-1, 2)

    def __len__(self):
        return len(self.points)


def seed_key(x, y):
    return f"{x}/{y}"


def pick_color_excluding(palette: Sequence[str], rng: RandomSource, *exclusions: str) -> str:
    """Random palette entry that is none of ``exclusions`` (compared as colors)."""
    excluded = {Color.parse(e).to_hex() for e in exclusions}
    if all(Color.parse(c).to_hex() in excluded for c in palette):
        raise ValueError(f"No palette color left after excluding {', '.join(exclusions)}")
    while True:
        color = palette[math.floor(rng.random() * len(palette))]
        if Color.parse(color).to_hex() not in excluded:
            return color


def make_blob(config: ArtConfig, rng: RandomSource, directions: DirectionSet, color: str, pow_: float) -> Blob:
    width, height = config.width, config.height
    size = min(width, height)

    choice = math.floor(rng.random() * 4)
    radius = round(10 + rng.random() ** pow_ * size / 5)
    x = math.floor(rng.random() * width)
    y = math.floor(rng.random() * height)

    if not choice:
        return Blob(x, y, radius, color, FLAT, 0.1 + 0.85 * rng.random())
    return Blob(x, y, radius, color, GRADIENT, 0.1 + 0.9 * rng.random(), directions[choice - 1])


def sample_outline(blob: Blob, rng: RandomSource, seeds: SeedSet, resolution: float) -> int:
    """Sample the blob's circumference into ``seeds``; returns the sample count."""
    count = math.floor(TAU * blob.radius / resolution)
    offset = math.floor(rng.random() * 4) * TAU / 4
    if count <= 0:
        return 0

    step = TAU / count
    angle = 0.0
    for _ in range(count):
        sx = round(blob.x + math.cos(angle) * blob.radius)
        sy = round(blob.y + math.sin(angle) * blob.radius)
        seeds.add(sx, sy, (math.cos(angle + offset), math.sin(angle + offset)))
        angle += step
    return count


def sample_seeds(
    config: ArtConfig,
    rng: RandomSource,
    directions: DirectionSet,
    background: str,
    foreground: str,
    paint: Optional[Callable[[Blob], None]] = None,
) -> SeedSet:
    """Stamp blobs until the coverage budget runs out.

    The budget starts between 15% and 100% of the canvas area and every blob
    subtracts its own area, so the loop always ends. ``paint`` is called with
    each blob as soon as it is placed.
    """
    pow_ = 0.2 + rng.random()
    area = config.width * config.height * (0.15 + 0.85 * rng.random())

    seeds = SeedSet(initial_area=area)
    while area > 0:
        color = pick_color_excluding(config.palette, rng, background, foreground)
        blob = make_blob(config, rng, directions, color, pow_)
        if paint is not None:
            paint(blob)

        sample_outline(blob, rng, seeds, config.resolution)

        area -= blob.area
        seeds.covered_area += blob.area
        seeds.blob_count += 1

    return seeds
