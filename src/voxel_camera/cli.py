"""
Command-Line Interface for Voxel Camera

Usage:
    voxcam --tile-size 32 -x 3 -y 3 -z 1
    voxcam --tile-size 32 -x 1 -y 1 -z 5 --json
    voxcam -x 4 -y 2 -z 6 --preview frame.png

"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .preview import save_preview
from .projection import camera_rotation_degrees
from .settings import BlenderSettings, Dimensions, compute_settings


DEFAULT_TILE_SIZE = 32
DEFAULT_DECIMALS = 5


def coerce_int(text) -> int:
    """
    Read a whole number from user input.

    Anything that is not an integer (empty, letters, decimals) reads as 0.
    """
    try:
        return int(str(text).strip())
    except ValueError:
        return 0


def format_settings(settings: BlenderSettings, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format settings as the lines to copy into Blender."""
    rx, ry, rz = camera_rotation_degrees()
    return "\n".join([
        f"Resolution X: {settings.width}",
        f"Resolution Y: {settings.height}",
        f"Orthographic Scale: {settings.scale:.{decimals}f}",
        f"Camera Rotation: X {rx:g}, Y {ry:g}, Z {rz:g}",
    ])


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure the package logger for console output."""
    logger = logging.getLogger("voxel_camera")
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxcam",
        description="Voxel Camera - Blender render settings for pixel-perfect isometric sprites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voxcam --tile-size 32 -x 3 -y 3 -z 1
      Settings for a 3x3 floor one tile high

  voxcam -x 1 -y 1 -z 5 --json
      Settings for a tall column, as JSON

  voxcam -x 4 -y 2 -z 6 --preview frame.png
      Also write a PNG of the framed silhouette

Camera:
  Rotate the orthographic camera 60 degrees about X and 45 about Z,
  then enter the printed resolution and orthographic scale.
        """
    )

    parser.add_argument(
        "-t", "--tile-size",
        type=coerce_int,
        default=DEFAULT_TILE_SIZE,
        help=f"Pixels per tile edge (default: {DEFAULT_TILE_SIZE})"
    )

    parser.add_argument(
        "-x", "--x-tiles",
        type=coerce_int,
        default=1,
        help="Box size along X in tiles (default: 1)"
    )

    parser.add_argument(
        "-y", "--y-tiles",
        type=coerce_int,
        default=1,
        help="Box size along Y in tiles (default: 1)"
    )

    parser.add_argument(
        "-z", "--z-tiles",
        type=coerce_int,
        default=1,
        help="Box size along Z in tiles (default: 1)"
    )

    parser.add_argument(
        "--decimals",
        type=int,
        default=DEFAULT_DECIMALS,
        help=f"Decimal places for the orthographic scale (default: {DEFAULT_DECIMALS})"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print settings as JSON"
    )

    parser.add_argument(
        "--preview",
        help="Write a PNG preview of the framed silhouette"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    dimensions = Dimensions(
        tile_size=args.tile_size,
        x_tiles=args.x_tiles,
        y_tiles=args.y_tiles,
        z_tiles=args.z_tiles
    )

    try:
        logger.debug("Computing settings for %s", dimensions)
        settings = compute_settings(dimensions)

        # Nothing reaches stdout unless every output was produced
        path = save_preview(dimensions, args.preview) if args.preview else None

        if args.json:
            print(json.dumps(settings.to_dict(), indent=2))
        else:
            print(format_settings(settings, args.decimals))

        if path is not None and args.verbose:
            print(f"Preview: {path}")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
