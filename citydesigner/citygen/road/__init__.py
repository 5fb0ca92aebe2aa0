"""Road generation module for creating road networks.

This module provides functionality to generate road networks in grid, radial and
random patterns, and to manage the resulting roads for collision queries.
"""
from citydesigner.citygen.road.road_generator import RoadGenerator
from citydesigner.citygen.road.road_manager import RoadManager

__all__ = ['RoadGenerator', 'RoadManager']
