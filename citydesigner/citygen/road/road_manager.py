"""Road network management module.

This module keeps the generated roads together with a spatial index over their
bounds, so collision queries only scan the points of roads near the query box.
"""
from typing import List

from citydesigner.citygen.dataclass import Bounds, Road
from citydesigner.utils.quadtree import QuadTree


class RoadManager:
    """Manages roads and their spatial lookup."""

    def __init__(self, config, screen_width: int, screen_height: int):
        """Initialize the road manager.

        Args:
            config: Configuration with the quadtree settings.
            screen_width: Width of the working screen.
            screen_height: Height of the working screen.
        """
        self.roads: List[Road] = []
        self.config = config
        self.road_quadtree = QuadTree[Road](
            Bounds(0, 0, screen_width, screen_height),
            self.config['citygen.quadtree.max_objects'],
            self.config['citygen.quadtree.max_levels'],
        )

    def add_road(self, road: Road) -> None:
        """Add a road to the network."""
        self.roads.append(road)
        self.road_quadtree.insert(road.bounds, road)

    def set_roads(self, roads: List[Road]) -> None:
        """Replace the whole network."""
        self.roads = []
        self.road_quadtree.clear()
        for road in roads:
            self.add_road(road)

    def get_nearby_roads(self, bounds: Bounds) -> List[Road]:
        """Get roads whose bounds intersect the specified box."""
        return self.road_quadtree.retrieve_exact(bounds)

    def any_point_within(self, bounds: Bounds) -> bool:
        """Return True if a point of any road lies inside ``bounds`` (inclusive).

        Args:
            bounds: Query box, already expanded by whatever clearance applies.

        Returns:
            Whether the box is hit by a road point.
        """
        for road in self.get_nearby_roads(bounds):
            for point in road.points:
                if bounds.contains_point(point.x, point.y):
                    return True
        return False
