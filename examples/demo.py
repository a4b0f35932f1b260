#!/usr/bin/env python3
"""
Voxel Camera Demo Script

This script demonstrates the framing pipeline by:
1. Computing settings for a handful of typical sprite boxes
2. Showing which boxes frame as landscape and which as portrait
3. Writing a preview PNG for each box

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import time

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_camera import Dimensions, compute_settings, measure_frame
from voxel_camera.preview import save_preview
from voxel_camera.projection import calculate_isometric_angle


DEMO_BOXES = [
    ("floor tile", Dimensions(tile_size=32, x_tiles=1, y_tiles=1, z_tiles=0)),
    ("cube", Dimensions(tile_size=32, x_tiles=1, y_tiles=1, z_tiles=1)),
    ("room", Dimensions(tile_size=32, x_tiles=3, y_tiles=3, z_tiles=1)),
    ("wall", Dimensions(tile_size=32, x_tiles=4, y_tiles=1, z_tiles=2)),
    ("tower", Dimensions(tile_size=32, x_tiles=1, y_tiles=1, z_tiles=5)),
    ("big tower", Dimensions(tile_size=64, x_tiles=2, y_tiles=2, z_tiles=8)),
]


def print_header(title: str):
    """Print a section header."""
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def demo_settings(output_dir: Path):
    """Compute and print settings for each demo box."""
    print_header("Render Settings")
    print(f"{'Box':<12} {'Tiles':<10} {'Tile':>5} {'Width':>6} {'Height':>7} {'Scale':>9}  Frame")

    for name, dims in DEMO_BOXES:
        settings = compute_settings(dims)
        frame = measure_frame(dims)
        orientation = "landscape" if frame.is_landscape else "portrait"
        tiles = f"{dims.x_tiles}x{dims.y_tiles}x{dims.z_tiles}"

        print(f"{name:<12} {tiles:<10} {dims.tile_size:>5} "
              f"{settings.width:>6} {settings.height:>7} {settings.scale:>9.5f}  {orientation}")

        save_preview(dims, output_dir / f"{name.replace(' ', '_')}.png")


def demo_camera():
    """Print the camera angles."""
    print_header("Camera")
    for name, info in calculate_isometric_angle().items():
        print(f"{name}: {info['description']}")
        print(f"  horizontal rotation: {info['horizontal_rotation']:.3f}")
        print(f"  elevation: {info['elevation']:.3f}")


def main():
    """Run all demos."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    start = time.time()
    demo_camera()
    demo_settings(output_dir)

    print(f"\nPreviews written to {output_dir}")
    print(f"Completed in {time.time() - start:.3f}s")


if __name__ == "__main__":
    main()
