"""Road network generation module for the city designer.

Three topologies are supported. GRID lays out evenly spaced horizontal and
vertical roads, RADIAL runs spokes from the screen center crossed by polygonal
rings, RANDOM joins randomly chosen nodes. Every road is a Bresenham line.
"""
import math
import random
from typing import List

from citydesigner.citygen.dataclass import Point, Road, RoadPattern
from citydesigner.citygen.raster import (bresenham_line, midpoint_circle,
                                         sort_by_angle)
from citydesigner.config import CityConfig
from citydesigner.utils.logger import Logger


class RoadGenerator:
    """Builds a road network for one of the supported patterns."""

    def __init__(self, config, rng: random.Random = None):
        """Initialize the road generator.

        Args:
            config: Configuration with the ``citygen.road`` settings.
            rng: Random source used by the RANDOM pattern.
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.margin = self.config['citygen.road.margin']
        self.logger = Logger.get_logger('RoadGenerator')

    def generate_roads(self, city_config: CityConfig) -> List[Road]:
        """Generate roads based on the configured pattern.

        Args:
            city_config: Generation parameters (pattern, layout size, road width, screen).

        Returns:
            The generated roads.
        """
        self.logger.info(f'Generating roads ({city_config.road_pattern.value} pattern)')
        if city_config.road_pattern == RoadPattern.RADIAL:
            roads = self.generate_radial_roads(city_config)
        elif city_config.road_pattern == RoadPattern.RANDOM:
            roads = self.generate_random_roads(city_config)
        else:
            roads = self.generate_grid_roads(city_config)
        self.logger.info(f'Generated {len(roads)} road segments')
        return roads

    def create_road(self, x0: int, y0: int, x1: int, y1: int, width: int) -> Road:
        """Rasterize a straight road between two points."""
        return Road(bresenham_line(x0, y0, x1, y1), width)

    def generate_grid_roads(self, city_config: CityConfig) -> List[Road]:
        """Create a Manhattan grid of ``layout_size`` x ``layout_size`` blocks.

        Horizontal roads are spaced over the screen height and vertical roads
        over the screen width, each axis keeping the road margin at both ends.

        Args:
            city_config: Generation parameters.

        Returns:
            ``layout_size + 1`` horizontal roads followed by as many vertical ones.
        """
        size = city_config.layout_size
        width, height = city_config.screen_width, city_config.screen_height
        margin = self.margin
        x_spacing = (width - 2 * margin) // size
        y_spacing = (height - 2 * margin) // size
        self.logger.debug(f'Creating {size}x{size} grid')

        roads = []
        for i in range(size + 1):
            y = margin + i * y_spacing
            roads.append(self.create_road(margin, y, width - margin, y, city_config.road_width))
        for i in range(size + 1):
            x = margin + i * x_spacing
            roads.append(self.create_road(x, margin, x, height - margin, city_config.road_width))
        return roads

    def generate_radial_roads(self, city_config: CityConfig) -> List[Road]:
        """Create spokes from the screen center and concentric ring roads.

        There are ``layout_size`` spokes and ``layout_size // 2`` rings. A ring
        is approximated by chords joining every ``ring_point_step``-th point of
        its rasterized circle to the next sampled point.

        Args:
            city_config: Generation parameters.

        Returns:
            Spokes first, then the chords ring by ring from the center outward.
        """
        center_x = city_config.screen_width // 2
        center_y = city_config.screen_height // 2
        max_radius = min(city_config.screen_width, city_config.screen_height) // 2 - self.margin
        num_spokes = city_config.layout_size

        roads = []
        for i in range(num_spokes):
            angle = 2.0 * math.pi * i / num_spokes
            end_x = center_x + int(max_radius * math.cos(angle))
            end_y = center_y + int(max_radius * math.sin(angle))
            roads.append(self.create_road(center_x, center_y, end_x, end_y, city_config.road_width))
        self.logger.debug(f'Created {num_spokes} radial spokes')

        num_rings = city_config.layout_size // 2
        for ring in range(1, num_rings + 1):
            radius = max_radius * ring // num_rings
            roads.extend(self.generate_ring_roads(center_x, center_y, radius, city_config.road_width))
        self.logger.debug(f'Created {num_rings} circular rings')
        return roads

    def generate_ring_roads(self, center_x: int, center_y: int, radius: int, width: int) -> List[Road]:
        """Approximate one ring with chords between sampled boundary points."""
        boundary = midpoint_circle(center_x, center_y, radius)
        if self.config['citygen.road.ring_point_order'] == 'angular':
            boundary = sort_by_angle(boundary, center_x, center_y)

        step = self.config['citygen.road.ring_point_step']
        chords = []
        for i in range(0, len(boundary), step):
            start = boundary[i]
            end = boundary[(i + step) % len(boundary)]
            chords.append(self.create_road(start.x, start.y, end.x, end.y, width))
        return chords

    def generate_random_roads(self, city_config: CityConfig) -> List[Road]:
        """Join random pairs of nodes with straight roads.

        The nodes are ``2 * layout_size`` random interior points plus four fixed
        anchors near the screen corners. ``3 * layout_size`` pairs are drawn and
        a pair made of the same node twice is skipped, so fewer roads may come
        out. Roads may cross and the network need not be connected.

        Args:
            city_config: Generation parameters.

        Returns:
            The generated roads.
        """
        width, height = city_config.screen_width, city_config.screen_height
        nodes = [self.random_point(width, height) for _ in range(city_config.layout_size * 2)]

        inset = self.config['citygen.road.random_anchor_inset']
        nodes.extend([
            Point(inset, inset),
            Point(width - inset, inset),
            Point(inset, height - inset),
            Point(width - inset, height - inset),
        ])

        num_roads = city_config.layout_size * 3
        roads = []
        for _ in range(num_roads):
            idx1 = self.rng.randint(0, len(nodes) - 1)
            idx2 = self.rng.randint(0, len(nodes) - 1)
            if idx1 == idx2:
                continue
            start, end = nodes[idx1], nodes[idx2]
            roads.append(self.create_road(start.x, start.y, end.x, end.y, city_config.road_width))
        self.logger.debug(f'Connected {len(roads)} of {num_roads} random node pairs')
        return roads

    def random_point(self, width: int, height: int) -> Point:
        """Draw a point at least the road margin away from every screen edge."""
        return Point(
            self.rng.randint(self.margin, width - self.margin),
            self.rng.randint(self.margin, height - self.margin),
        )
