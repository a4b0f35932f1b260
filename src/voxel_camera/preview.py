"""
Frame Preview Rendering

Draws the projected box silhouette onto an image of exactly the computed
render size, so the framing can be checked before opening Blender: a correct
frame has the silhouette touching the image edges on its long axis.
"""

from pathlib import Path
from typing import List, Tuple, Union
import numpy as np
from PIL import Image, ImageDraw
from scipy.spatial import ConvexHull

from .settings import Dimensions, compute_settings, scaled_box
from .volume import CORNER_COUNT, Axis


RGBA = Tuple[int, int, int, int]

DEFAULT_FILL: RGBA = (100, 150, 220, 255)
DEFAULT_OUTLINE: RGBA = (30, 40, 70, 255)


def _box_edges() -> List[Tuple[int, int]]:
    """Corner index pairs that differ along exactly one axis."""
    edges = []
    for a in range(CORNER_COUNT):
        for bit in (1, 2, 4):
            b = a | bit
            if b != a:
                edges.append((a, b))
    return edges


BOX_EDGES = _box_edges()


def _to_pixels(points: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Map image-plane points onto pixel centres.

    The smallest coordinate lands on pixel 0 and the largest on the last
    pixel of the row/column. Larger image-plane Y is further down.
    """
    mins = points.min(axis=0)
    spans = points.max(axis=0) - mins
    size = np.array([width - 1, height - 1], dtype=np.float64)
    # Zero span (flat silhouette) collapses onto the first row/column
    factors = np.divide(size, spans, out=np.zeros(2), where=spans > 0)
    return np.rint((points - mins) * factors).astype(int)


def render_preview(
    dimensions: Dimensions,
    fill: RGBA = DEFAULT_FILL,
    outline: RGBA = DEFAULT_OUTLINE
) -> Image.Image:
    """
    Render the box silhouette at the computed render size.

    Args:
        dimensions: Tile size and tile counts
        fill: Silhouette colour
        outline: Box edge colour

    Returns:
        Transparent RGBA image of size (width, height)

    Raises:
        ValueError: If the computed frame has no pixels
    """
    settings = compute_settings(dimensions)
    if settings.width <= 0 or settings.height <= 0:
        raise ValueError(
            f"Nothing to preview: frame is {settings.width}x{settings.height} pixels"
        )

    projected = scaled_box(dimensions).project()
    points = projected.corners[:, [int(Axis.X), int(Axis.Y)]]
    pixels = _to_pixels(points, settings.width, settings.height)

    image = Image.new("RGBA", (settings.width, settings.height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    # QJ joggles collinear input (boxes with two zero extents)
    hull = ConvexHull(pixels.astype(np.float64), qhull_options="QJ")
    polygon = [tuple(int(c) for c in pixels[i]) for i in hull.vertices]
    draw.polygon(polygon, fill=fill)

    for a, b in BOX_EDGES:
        start = (int(pixels[a][0]), int(pixels[a][1]))
        end = (int(pixels[b][0]), int(pixels[b][1]))
        draw.line([start, end], fill=outline, width=1)

    return image


def save_preview(
    dimensions: Dimensions,
    output_path: Union[str, Path]
) -> Path:
    """
    Render the preview and write it as PNG.

    Args:
        dimensions: Tile size and tile counts
        output_path: Destination file

    Returns:
        Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    render_preview(dimensions).save(output_path, format="PNG")
    return output_path
