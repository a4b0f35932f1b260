"""
Projection Mathematics for the Isometric Render Camera

This module builds the fixed camera transform used to frame voxel volumes
for pixel-perfect isometric sprite rendering.

The camera is tilted 60° about X and turned 45° about Z. Applied to column
vectors on the right:

    P = Rx(60°) · Rz(45°)

Under this camera a single tile's projected diagonal spans exactly one tile
width in pixels once the world is scaled by tile_size / sqrt(2).

Coordinate Systems:
- Model space: Right-handed, Z-up (+X Right, +Y Back, +Z Up), same as Blender
- Image plane: X and Y of the rotated point; Z (depth) is discarded
"""

from typing import Sequence, Tuple
import math

from .matrix import Matrix


CAMERA_TILT_DEGREES = 60.0
CAMERA_ROTATION_DEGREES = 45.0

Vector3 = Tuple[float, float, float]


def rotation_x(degrees: float) -> Matrix:
    """
    Rotation about the X axis.

        | 1    0      0   |
        | 0   cosθ  -sinθ |
        | 0   sinθ   cosθ |
    """
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return Matrix([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c]
    ])


def rotation_z(degrees: float) -> Matrix:
    """
    Rotation about the Z axis.

        | cosθ  -sinθ  0 |
        | sinθ   cosθ  0 |
        |  0      0    1 |
    """
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return Matrix([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0]
    ])


def build_camera_transform(
    tilt: float = CAMERA_TILT_DEGREES,
    rotation: float = CAMERA_ROTATION_DEGREES
) -> Matrix:
    """
    Compose the camera rotation.

    Args:
        tilt: Rotation about X in degrees
        rotation: Rotation about Z in degrees

    Returns:
        3x3 matrix Rx(tilt) · Rz(rotation)
    """
    return rotation_x(tilt) @ rotation_z(rotation)


# Built once at import, never mutated (Matrix is read-only)
CAMERA_TRANSFORM = build_camera_transform()


def project_point(
    point: Sequence[float],
    transform: Matrix = CAMERA_TRANSFORM
) -> Vector3:
    """
    Rotate a model-space point into camera space.

    Args:
        point: (x, y, z) in model space
        transform: 3x3 camera matrix

    Returns:
        (x, y, z) in camera space; x and y lie on the image plane
    """
    rotated = transform @ Matrix.column(point)
    return (rotated.at(0, 0), rotated.at(1, 0), rotated.at(2, 0))


def camera_rotation_degrees() -> Vector3:
    """
    Euler rotation (X, Y, Z) in degrees to enter on the Blender camera.

    Blender applies XYZ Euler rotations to the camera object, which views the
    scene along its own -Z axis; tilting it 60° and turning it 45° gives the
    view that the camera transform models.
    """
    return (CAMERA_TILT_DEGREES, 0.0, CAMERA_ROTATION_DEGREES)


def calculate_isometric_angle() -> dict:
    """
    Calculate and return key angles for the render camera.

    Returns:
        Dictionary with projection angle information
    """
    elevation = 90.0 - CAMERA_TILT_DEGREES  # camera elevation above the ground plane
    true_iso_elevation = math.degrees(math.asin(1 / math.sqrt(3)))  # ~35.264°

    return {
        "camera": {
            "horizontal_rotation": CAMERA_ROTATION_DEGREES,
            "tilt": CAMERA_TILT_DEGREES,
            "elevation": elevation,
            "pixel_ratio": "2:1",
            "description": "Sprite camera, top face projects as a 2:1 diamond"
        },
        "true_isometric": {
            "horizontal_rotation": 45.0,
            "elevation": true_iso_elevation,
            "description": "Engineering isometric, equal foreshortening"
        }
    }
