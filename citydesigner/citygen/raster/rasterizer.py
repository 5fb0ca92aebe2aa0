"""Integer rasterization of the primitives the city is built from.

Roads are Bresenham lines, parks and fountains are midpoint circles. Both
algorithms only use integer arithmetic, so the same input always gives the
same pixels.
"""
from typing import Iterable, List

import numpy as np

from citydesigner.citygen.dataclass import Point


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Point]:
    """Rasterize the segment from (x0, y0) to (x1, y1).

    Works in every octant. Both endpoints are included, consecutive points are
    8-connected and the result holds ``max(|dx|, |dy|) + 1`` points.

    Args:
        x0: Start x.
        y0: Start y.
        x1: End x.
        y1: End y.

    Returns:
        The points from start to end.
    """
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    points = []
    x, y = x0, y0
    while True:
        points.append(Point(x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
    return points


def _octant_points(cx: int, cy: int, x: int, y: int):
    return (
        Point(cx + x, cy + y),
        Point(cx - x, cy + y),
        Point(cx + x, cy - y),
        Point(cx - x, cy - y),
        Point(cx + y, cy + x),
        Point(cx - y, cy + x),
        Point(cx + y, cy - x),
        Point(cx - y, cy - x),
    )


def midpoint_circle(cx: int, cy: int, radius: int) -> List[Point]:
    """Rasterize the boundary of a circle with the midpoint algorithm.

    One octant is walked with an integer decision parameter and mirrored into
    the other seven. Points shared between octants are kept once. The order is
    the generation order, not an angular one; use :func:`sort_by_angle` when a
    walk around the circumference is needed.

    Args:
        cx: Center x.
        cy: Center y.
        radius: Radius in pixels, ``0`` gives the center point alone.

    Returns:
        The distinct boundary points.

    Raises:
        ValueError: If ``radius`` is negative.
    """
    if radius < 0:
        raise ValueError(f'Circle radius must be non-negative, got {radius}')

    points: List[Point] = []
    seen = set()
    x, y = 0, radius
    d = 1 - radius
    while x <= y:
        for point in _octant_points(cx, cy, x, y):
            if point not in seen:
                seen.add(point)
                points.append(point)
        x += 1
        if d < 0:
            d += 2 * x + 1
        else:
            y -= 1
            d += 2 * (x - y) + 1
    return points


def sort_by_angle(points: Iterable[Point], cx: float, cy: float) -> List[Point]:
    """Order points counter-clockwise (in screen axes) around (cx, cy).

    The sort is stable, starting from the positive x axis.
    """
    points = list(points)
    if not points:
        return points
    coords = np.array([(p.x - cx, p.y - cy) for p in points], dtype=float)
    angles = np.mod(np.arctan2(coords[:, 1], coords[:, 0]), 2 * np.pi)
    order = np.argsort(angles, kind='stable')
    return [points[i] for i in order]
