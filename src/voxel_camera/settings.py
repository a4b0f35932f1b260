"""
Blender Camera Settings Derivation

This is the primary interface for framing a voxel volume. It orchestrates:
1. Scaling the tile box into world units (tile_size / sqrt(2) per tile)
2. Projecting the box corners through the camera transform
3. Measuring the projected silhouette
4. Deriving the orthographic scale, depending on whether the silhouette
   is wider than tall (landscape) or taller than wide (portrait)

Example Usage:
    settings = compute_settings(Dimensions(tile_size=32, x_tiles=3, y_tiles=3, z_tiles=1))
    settings.width, settings.height, settings.scale  # 96, 68, 2.82843...
"""

from dataclasses import dataclass, asdict, replace
import logging
import math

from .volume import (
    Axis, Volume, build_box, projected_extent, BOTTOM_CORNER, TOP_CORNER
)


logger = logging.getLogger(__name__)

SQRT_2 = math.sqrt(2)

# World units per tile edge, per pixel of tile size
SIDE_LENGTH_FACTOR = 1 / SQRT_2

# Decimal places kept before rounding pixel sizes
PIXEL_PRECISION = 9


@dataclass
class Dimensions:
    """
    User input for one framing computation.

    Attributes:
        tile_size: Pixels per tile edge
        x_tiles, y_tiles, z_tiles: Box extents in tiles
    """

    tile_size: int = 32
    x_tiles: int = 1
    y_tiles: int = 1
    z_tiles: int = 1

    def replace(self, **changes) -> "Dimensions":
        """Return a copy with the given fields swapped out."""
        return replace(self, **changes)


@dataclass(frozen=True)
class Frame:
    """Projected silhouette size in pixels, before rounding."""

    width: float
    height: float

    @property
    def is_landscape(self) -> bool:
        """True when the silhouette is at least as wide as it is tall."""
        return self.width >= self.height


@dataclass(frozen=True)
class BlenderSettings:
    """
    Render settings to enter in Blender.

    Attributes:
        width: Output resolution X in pixels
        height: Output resolution Y in pixels
        scale: Orthographic scale of the camera
    """

    width: int
    height: int
    scale: float

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return asdict(self)


def side_length(tile_size: float) -> float:
    """World length of one tile edge for the given tile size in pixels."""
    return tile_size * SIDE_LENGTH_FACTOR


def round_pixels(value: float) -> int:
    """
    Round a projected size to the nearest whole pixel, halves up.

    Projection noise below PIXEL_PRECISION decimals is dropped first so an
    extent such as 16.499999999999996 still counts as a half pixel.
    """
    return int(math.floor(round(value, PIXEL_PRECISION) + 0.5))


def scaled_box(dimensions: Dimensions) -> Volume:
    """Model-space box for the dimensions, scaled to world units."""
    side = side_length(dimensions.tile_size)
    return build_box(
        dimensions.x_tiles * side,
        dimensions.y_tiles * side,
        dimensions.z_tiles * side
    )


def measure_frame(dimensions: Dimensions) -> Frame:
    """
    Measure the projected silhouette of the scaled box.

    Args:
        dimensions: Tile size and tile counts

    Returns:
        Frame with unrounded pixel width and height
    """
    volume = scaled_box(dimensions)
    return Frame(
        width=projected_extent(Axis.X, volume),
        height=projected_extent(Axis.Y, volume)
    )


def z_span(projected: Volume) -> float:
    """
    Vertical image span contributed by the box's Z extent.

    Corners 0 and 4 differ only along Z, so the difference of their image
    Y coordinates isolates the depth contribution.
    """
    return (
        projected.coordinate(BOTTOM_CORNER, Axis.Y)
        - projected.coordinate(TOP_CORNER, Axis.Y)
    )


# Z contribution to the projected height of a unit cube
UNIT_HEIGHT_FACTOR = z_span(build_box(1, 1, 1).project())


def landscape_scale(x_tiles: int, y_tiles: int) -> float:
    """
    Orthographic scale for a silhouette at least as wide as tall.

    The top face is a rotated square, so each extra tile along the longer
    horizontal axis widens the footprint by half a diagonal:

        scale = sqrt(2) + (sqrt(2) / 2) * (max(x, y) - 1)
    """
    max_dim = max(x_tiles, y_tiles)
    return SQRT_2 + (SQRT_2 / 2) * (max_dim - 1)


def portrait_scale(z_tiles: int, projected: Volume, height: float) -> float:
    """
    Orthographic scale for a silhouette taller than wide.

    Args:
        z_tiles: Box extent along Z in tiles
        projected: Scaled box after the camera transform
        height: Projected height of that box

    Returns:
        z_tiles * UNIT_HEIGHT_FACTOR / proportion_of_z, or 0.0 when the
        proportion cannot be formed (no height or no Z contribution)
    """
    if height == 0:
        logger.warning("Portrait frame with zero height, scale falls back to 0")
        return 0.0

    proportion_of_z = z_span(projected) / height
    if proportion_of_z == 0:
        logger.warning("Portrait frame with no Z contribution, scale falls back to 0")
        return 0.0

    return (z_tiles * UNIT_HEIGHT_FACTOR) / proportion_of_z


def derive_scale(dimensions: Dimensions, frame: Frame) -> float:
    """
    Pick the scale branch for a measured frame.

    Args:
        dimensions: Tile size and tile counts
        frame: Silhouette measured by measure_frame

    Returns:
        Orthographic scale
    """
    if frame.is_landscape:
        logger.debug("Landscape frame %.3f x %.3f", frame.width, frame.height)
        return landscape_scale(dimensions.x_tiles, dimensions.y_tiles)

    logger.debug("Portrait frame %.3f x %.3f", frame.width, frame.height)
    projected = scaled_box(dimensions).project()
    return portrait_scale(dimensions.z_tiles, projected, frame.height)


def compute_settings(dimensions: Dimensions) -> BlenderSettings:
    """
    Compute the Blender render settings that frame the box exactly.

    Args:
        dimensions: Tile size and tile counts

    Returns:
        BlenderSettings with rounded pixel size and full-precision scale
    """
    frame = measure_frame(dimensions)
    scale = derive_scale(dimensions, frame)
    return BlenderSettings(
        width=round_pixels(frame.width),
        height=round_pixels(frame.height),
        scale=scale
    )
