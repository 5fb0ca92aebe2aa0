"""Rasterization package: lines and circles as integer point sets."""
from citydesigner.citygen.raster.rasterizer import (bresenham_line,
                                                    midpoint_circle,
                                                    sort_by_angle)

__all__ = ['bresenham_line', 'midpoint_circle', 'sort_by_angle']
