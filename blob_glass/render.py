# render.py
# Blob painting, cell drawing and the full generation pass

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .colors import Color, contrast_ratio
from .config import ArtConfig, DirectionSet, RandomSource
from .seeds import FLAT, Blob, SeedSet, sample_seeds
from .surface import FlatFill, Surface
from .tessellation import compute_cells

WHITE = "#ffffff"
BLACK = "#000000"


@dataclass
class Artwork:
    surface: Surface
    seeds: SeedSet
    polygons: List[List[Tuple[float, float]]]
    background: str
    foreground: str
    directions: DirectionSet

    def to_bytes(self):
        return self.surface.to_bytes()


def choose_foreground(background, threshold):
    """White outlines on backgrounds darker than ``threshold``, black otherwise."""
    if Color.parse(background).luminance() < threshold:
        return WHITE
    return BLACK


def paint_background(surface, background):
    surface.fill_style = FlatFill(Color.parse(background).to_hex())
    surface.fill_rect(0, 0, surface.width, surface.height)


def paint_blob(surface, blob: Blob):
    """Set the blob's fill style on the surface and fill its circle."""
    color = Color.parse(blob.color).to_hex()
    if blob.style == FLAT:
        surface.fill_style = FlatFill(color, blob.alpha)
    else:
        gradient = surface.create_linear_gradient(*blob.gradient_line())
        gradient.add_color_stop(0, color, blob.alpha)
        gradient.add_color_stop(1, color, 0)
        surface.fill_style = gradient
    surface.fill_circle(blob.x, blob.y, blob.radius)


def draw_cells(surface, polygons, foreground):
    """Fill and stroke every cell.

    Cells are filled with whatever fill style the last painted blob left on
    the surface; only the stroke is set here.
    """
    surface.stroke_style = foreground
    drawn = 0
    for polygon in polygons:
        if surface.fill_polygon(polygon) is not None:
            drawn += 1
    return drawn


def generate(config: Optional[ArtConfig] = None, rng: Optional[RandomSource] = None, debug=False) -> Artwork:
    """Run one generation pass and return the finished artwork.

    Nothing is written to disk here; an invalid palette or background raises
    InvalidColor before any drawing happens.
    """
    if config is None:
        config = ArtConfig()
    if rng is None:
        rng = random.Random()
    config.validate()

    directions = DirectionSet.random(rng)

    palette = list(config.palette)
    background = config.background
    if background is None:
        background = palette[math.floor(rng.random() * len(palette))]
    foreground = choose_foreground(background, config.foreground_threshold)

    surface = Surface(config.width, config.height, stroke_width=config.stroke_width)
    paint_background(surface, background)

    seeds = sample_seeds(
        config,
        rng,
        directions,
        background,
        foreground,
        paint=lambda blob: paint_blob(surface, blob),
    )

    polygons = compute_cells(seeds.points, config.width, config.height, debug=debug)
    drawn = draw_cells(surface, polygons, foreground)

    if debug:
        print(f"   Blobs: {seeds.blob_count}, cells drawn: {drawn}")
        print(
            f"   Background {background}, outline {foreground}"
            f" (contrast {contrast_ratio(background, foreground):.1f}:1)"
        )

    return Artwork(surface, seeds, polygons, background, foreground, directions)


def write_artwork(artwork: Artwork, path, png_path=None, scale=1.0):
    """Write the SVG to ``path`` (overwriting) and optionally a PNG preview."""
    data = artwork.to_bytes()
    with open(path, "wb") as f:
        f.write(data)
    print(f"✅ Saved SVG: {path}")

    if png_path is not None:
        import cairosvg

        surface = artwork.surface
        cairosvg.svg2png(
            bytestring=data,
            write_to=str(png_path),
            output_width=int(surface.width * scale),
            output_height=int(surface.height * scale),
        )
        print(f"✅ Saved PNG: {png_path}")
