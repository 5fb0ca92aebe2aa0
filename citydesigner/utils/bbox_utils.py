"""Utility module for bounding box collision tests.

This module provides the axis-aligned box tests used by building placement:
box against box with a clearance, and box against circle by closest point.
"""
from citydesigner.citygen.dataclass import Bounds, CircleRegion


class BboxUtils:
    """Utility class for bounding box operations."""

    @staticmethod
    def bbox_overlap(a: Bounds, b: Bounds, buffer: float = 0.0) -> bool:
        """Check if box ``a`` grown by ``buffer`` touches or overlaps box ``b``.

        Args:
            a: Candidate box.
            b: Existing box.
            buffer: Clearance added around ``a``.

        Returns:
            True if the boxes are closer than ``buffer`` on both axes.
        """
        return a.expanded(buffer).intersects(b)

    @staticmethod
    def circle_overlap(bounds: Bounds, circle: CircleRegion, buffer: float = 0.0) -> bool:
        """Check if a box grown by ``buffer`` comes within ``radius + buffer`` of a circle center.

        The closest point of the grown box to the circle center is found by
        clamping the center onto the box.

        Args:
            bounds: Candidate box.
            circle: Park or fountain.
            buffer: Clearance applied to the box and to the radius.

        Returns:
            True if they collide.
        """
        grown = bounds.expanded(buffer)
        closest_x = max(grown.left, min(circle.center_x, grown.right))
        closest_y = max(grown.top, min(circle.center_y, grown.bottom))

        dx = closest_x - circle.center_x
        dy = closest_y - circle.center_y
        radius_with_buffer = circle.radius + buffer
        return dx * dx + dy * dy < radius_with_buffer * radius_with_buffer

    @staticmethod
    def inside_screen(bounds: Bounds, width: float, height: float, margin: float = 0.0) -> bool:
        """Check that a box stays ``margin`` away from every edge of a width x height screen."""
        return (bounds.left >= margin and bounds.right <= width - margin and
                bounds.top >= margin and bounds.bottom <= height - margin)
