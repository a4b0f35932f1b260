"""
Voxel Volume Model and Projected Bounding Measurement

This module provides:
- Volume: the 8 corners of an axis-aligned box centred on the origin
- build_box: construct a Volume from full extents
- projected_extent: width or height of a volume's silhouette under the camera

Corner order is a binary enumeration of sign combinations:

    index = 4*bz + 2*by + bx      (bit set = positive half-extent)

so corner 0 is (-x, -y, -z) and corner 4 is (-x, -y, +z), the corner that
differs from corner 0 only along Z. The scale derivation reads those two
corners directly; use corner_index / corner_at rather than literal indices.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator
import numpy as np

from .matrix import Matrix
from .projection import CAMERA_TRANSFORM, Vector3


CORNER_COUNT = 8


class Axis(IntEnum):
    """Component index of a point."""
    X = 0
    Y = 1
    Z = 2


def corner_index(sign_x: int, sign_y: int, sign_z: int) -> int:
    """
    Position of a corner in the enumeration order.

    Args:
        sign_x, sign_y, sign_z: -1 or +1 for each half-extent

    Returns:
        Index in 0..7
    """
    for sign in (sign_x, sign_y, sign_z):
        if sign not in (-1, 1):
            raise ValueError(f"Corner signs must be -1 or +1, got {sign}")
    bx = 1 if sign_x > 0 else 0
    by = 1 if sign_y > 0 else 0
    bz = 1 if sign_z > 0 else 0
    return 4 * bz + 2 * by + bx


# Corner signs in enumeration order, shape (8, 3)
CORNER_SIGNS = np.array([
    [1 if i & 1 else -1, 1 if i & 2 else -1, 1 if i & 4 else -1]
    for i in range(CORNER_COUNT)
], dtype=np.float64)

# Corners read by the scale derivation
BOTTOM_CORNER = corner_index(-1, -1, -1)
TOP_CORNER = corner_index(-1, -1, 1)


@dataclass(frozen=True, eq=False)
class Volume:
    """
    Eight box corners, in model space or after projection.

    Attributes:
        corners: Array of shape (8, 3), one row per corner
    """

    corners: np.ndarray = field(repr=False)

    def __post_init__(self):
        """Validate and freeze the corner array."""
        corners = np.array(self.corners, dtype=np.float64)
        if corners.shape != (CORNER_COUNT, 3):
            raise ValueError(
                f"Volume needs {CORNER_COUNT} corners of 3 components, "
                f"got shape {corners.shape}"
            )
        corners.setflags(write=False)
        object.__setattr__(self, "corners", corners)

    def __len__(self) -> int:
        return CORNER_COUNT

    def __iter__(self) -> Iterator[Vector3]:
        for row in self.corners:
            yield (float(row[0]), float(row[1]), float(row[2]))

    def __getitem__(self, index: int) -> Vector3:
        row = self.corners[index]
        return (float(row[0]), float(row[1]), float(row[2]))

    def corner_at(self, sign_x: int, sign_y: int, sign_z: int) -> Vector3:
        """Get the corner on the given side of each axis."""
        return self[corner_index(sign_x, sign_y, sign_z)]

    def coordinate(self, index: int, axis: Axis) -> float:
        """Get one component of one corner."""
        return float(self.corners[index, int(axis)])

    def project(self, transform: Matrix = CAMERA_TRANSFORM) -> "Volume":
        """
        Apply a 3x3 transform to every corner.

        Each corner is treated as a column vector on the right, so all 8
        are transformed at once as the columns of a 3x8 matrix.
        """
        projected = transform @ Matrix(self.corners.T)
        return Volume(projected.to_array().T)

    def extent(self, axis: Axis) -> float:
        """Spread (max - min) of the corners along an axis."""
        values = self.corners[:, int(axis)]
        return float(values.max() - values.min())


def build_box(x: float, y: float, z: float) -> Volume:
    """
    Build the corners of a box centred on the origin.

    Args:
        x, y, z: Full extents along each axis (not half). Zero and negative
            extents are accepted and give flat or mirrored boxes.

    Returns:
        Volume with corners (±x/2, ±y/2, ±z/2) in enumeration order
    """
    half = np.array([x / 2, y / 2, z / 2], dtype=np.float64)
    return Volume(CORNER_SIGNS * half)


def projected_extent(
    axis: Axis,
    volume: Volume,
    transform: Matrix = CAMERA_TRANSFORM
) -> float:
    """
    Measure a volume's silhouette along one image axis.

    Args:
        axis: Axis.X for width, Axis.Y for height
        volume: Model-space corners
        transform: Camera transform

    Returns:
        max - min of the chosen component over the projected corners
    """
    return volume.project(transform).extent(axis)
