# cli.py
# Command line entry point

import argparse
import random
import sys

from .colors import Color, random_palette
from .config import DEFAULT_HEIGHT, DEFAULT_PALETTE, DEFAULT_WIDTH, ArtConfig
from .render import generate, write_artwork


def positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def build_parser():
    # -h is the height, so help is only available as --help
    p = argparse.ArgumentParser(
        prog="blob-glass",
        description="Generates a random stained-glass image from blobs and Voronoi cells",
        add_help=False,
    )
    p.add_argument("output", nargs="*", help="Output SVG path (default: output.svg)")
    p.add_argument("--help", action="help", help="Show this help message and exit")
    p.add_argument("--width", "-w", type=positive_int, default=DEFAULT_WIDTH, help="SVG width")
    p.add_argument("--height", "-h", type=positive_int, default=DEFAULT_HEIGHT, help="SVG height")
    p.add_argument("--png", default=None, help="Also write a PNG preview to this path")
    p.add_argument("--scale", type=float, default=1.0, help="PNG size multiplier relative to the SVG (e.g. 2.0 = double size)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument(
        "--palette",
        default=None,
        help="Comma separated hex colors for the blobs, or 'random' (default: built-in palette)",
    )
    p.add_argument("--background", default=None, help="Background hex color (default: random palette entry)")
    p.add_argument("--debug", action="store_true", help="Print tessellation and palette summary")
    return p


def parse_palette(value, rng):
    if value is None:
        return DEFAULT_PALETTE
    if value.strip().lower() == "random":
        return tuple(random_palette(rng))
    return tuple(c.strip() for c in value.split(",") if c.strip())


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    files = args.output or ["output.svg"]
    if len(files) > 1:
        p.print_usage()
        print("Generates a random image from a palette of colors")
        return 1

    if args.scale <= 0:
        p.error("--scale must be positive")

    rng = random.Random(args.seed)
    config = ArtConfig(
        width=args.width,
        height=args.height,
        palette=parse_palette(args.palette, rng),
        background=args.background,
    )

    print(f"Creating SVG ({config.width} x {config.height})")
    try:
        if args.debug:
            print(f"   Palette: {', '.join(Color.parse(c).to_hex() for c in config.palette)}")
        artwork = generate(config, rng, debug=args.debug)
        write_artwork(artwork, files[0], png_path=args.png, scale=args.scale)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Could not write output: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
