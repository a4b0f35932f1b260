"""
Voxel Camera
============

Blender camera settings for pixel-perfect isometric sprite rendering.

Given a tile size in pixels and a box measured in tiles, this package computes
the render resolution and orthographic scale that make the box exactly fill
the frame under the fixed sprite camera (60° tilt, 45° turn).

Key Features:
- Fixed camera transform Rx(60°) · Rz(45°)
- Projected bounding measurement of voxel boxes
- Landscape/portrait orthographic scale derivation
- PNG preview of the framed silhouette
- `voxcam` command-line tool

Example Usage:
    from voxel_camera import Dimensions, compute_settings

    settings = compute_settings(Dimensions(tile_size=32, x_tiles=3, y_tiles=3, z_tiles=1))
    print(settings.width, settings.height, f"{settings.scale:.5f}")
"""

__version__ = "1.0.0"
__author__ = "Voxel Camera Team"

from .matrix import Matrix
from .projection import CAMERA_TRANSFORM, build_camera_transform, camera_rotation_degrees
from .volume import Axis, Volume, build_box, projected_extent
from .settings import BlenderSettings, Dimensions, Frame, compute_settings, measure_frame

__all__ = [
    "Matrix",
    "CAMERA_TRANSFORM",
    "build_camera_transform",
    "camera_rotation_degrees",
    "Axis",
    "Volume",
    "build_box",
    "projected_extent",
    "BlenderSettings",
    "Dimensions",
    "Frame",
    "compute_settings",
    "measure_frame",
]
