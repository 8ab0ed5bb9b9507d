"""Coordinate mapping from detector space into canvas space.

Detectors report face boxes normalized to the full image and landmark points
normalized to the face box. Both are mapped here into one absolute canvas so
that point sets from different images can be compared directly.
"""

from typing import List, Sequence, Tuple, Union

from ..models.types import AbsoluteBox, AbsolutePoint, CanvasSize, LandmarkSet, NormalizedBox

def map_box(box: NormalizedBox, canvas_size: Union[CanvasSize, Tuple[float, float]]) -> AbsoluteBox:
    """Scale a normalized box to canvas coordinates.

    Args:
        box: Face box with components relative to the image extent.
        canvas_size: (width, height) of the target canvas.

    Returns:
        Box in canvas units. Values outside [0, 1] are scaled like any other
        value; nothing is clamped.
    """
    width, height = canvas_size
    return AbsoluteBox(
        x=box.x * width,
        y=box.y * height,
        width=box.width * width,
        height=box.height * height
    )

def map_points(points: LandmarkSet, box: AbsoluteBox) -> List[AbsolutePoint]:
    """Map box-relative landmark points into the canvas the box lives in.

    Args:
        points: Landmark points normalized within the face box.
        box: The face box, already mapped with map_box.

    Returns:
        Canvas points in the same order as the input.
    """
    return [
        AbsolutePoint(
            x=point.x * box.width + box.x,
            y=point.y * box.height + box.y
        )
        for point in points
    ]

def to_absolute_points(pairs: Sequence[Sequence[float]]) -> List[AbsolutePoint]:
    """Build canvas points from raw [x, y] pairs supplied by a caller."""
    points = []
    for i, pair in enumerate(pairs):
        if len(pair) != 2:
            raise ValueError(f"Point {i} must have exactly 2 coordinates, got {len(pair)}")
        points.append(AbsolutePoint(float(pair[0]), float(pair[1])))
    return points
