"""Stained-glass images from blob outlines and Voronoi cells."""

from .colors import Color, InvalidColor, contrast_ratio, luminance, parse_color
from .config import ArtConfig, DirectionSet
from .render import Artwork, generate, write_artwork

__version__ = "0.1.0"
