"""Building manager module for managing buildings in the city.

This module provides functionality to add buildings and to check a candidate
footprint against the screen boundary, existing buildings, parks, the fountain
and roads.
"""
from typing import List, Optional

from citydesigner.citygen.dataclass import (Bounds, Building, CityLayout,
                                            PlacementViolation)
from citydesigner.citygen.road.road_manager import RoadManager
from citydesigner.utils.bbox_utils import BboxUtils
from citydesigner.utils.quadtree import QuadTree


class BuildingManager:
    """Building manager class for managing buildings in the city.

    The manager appends to ``layout.buildings`` and indexes every building in a
    quadtree. Parks and the fountain are read from the same layout, roads from
    the road manager.
    """
    def __init__(self, config, layout: CityLayout, road_manager: RoadManager, screen_width: int, screen_height: int):
        """Initialize the building manager.

        Args:
            config: Configuration with the ``citygen.building`` buffers.
            layout: Layout whose buildings, parks and fountain are used.
            road_manager: Road index for the road clearance test.
            screen_width: Width of the working screen.
            screen_height: Height of the working screen.
        """
        self.config = config
        self.layout = layout
        self.road_manager = road_manager
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.screen_margin = self.config['citygen.building.screen_margin']
        self.building_buffer = self.config['citygen.building.building_buffer']
        self.park_buffer = self.config['citygen.building.park_buffer']
        self.fountain_buffer = self.config['citygen.building.fountain_buffer']
        self.road_buffer = self.config['citygen.building.road_buffer']

        self.building_quadtree = QuadTree[Building](
            Bounds(0, 0, screen_width, screen_height),
            self.config['citygen.quadtree.max_objects'],
            self.config['citygen.quadtree.max_levels'])

    @property
    def buildings(self) -> List[Building]:
        return self.layout.buildings

    def check_placement(self, x: float, y: float, width: float, depth: float,
                        ignore: Optional[Building] = None) -> Optional[PlacementViolation]:
        """Check a footprint against every placement rule.

        Rules are tried in the order boundary, building, park, fountain, road and
        the first one broken is reported.

        Args:
            x: Footprint center x.
            y: Footprint center y.
            width: Footprint width.
            depth: Footprint depth.
            ignore: A committed building to leave out of the building test.

        Returns:
            The violated rule, or None if the footprint can be placed.
        """
        bounds = Bounds.from_center(x, y, width, depth)

        if not BboxUtils.inside_screen(bounds, self.screen_width, self.screen_height, self.screen_margin):
            return PlacementViolation.BOUNDARY
        if self.collides_with_buildings(bounds, ignore):
            return PlacementViolation.BUILDING
        if self.collides_with_parks(bounds):
            return PlacementViolation.PARK
        if self.collides_with_fountain(bounds):
            return PlacementViolation.FOUNTAIN
        if self.collides_with_roads(bounds):
            return PlacementViolation.ROAD
        return None

    def collides_with_buildings(self, bounds: Bounds, ignore: Optional[Building] = None) -> bool:
        check_bounds = bounds.expanded(self.building_buffer)
        for building in self.building_quadtree.retrieve(check_bounds):
            if building is ignore:
                continue
            if BboxUtils.bbox_overlap(bounds, building.bounds, self.building_buffer):
                return True
        return False

    def collides_with_parks(self, bounds: Bounds) -> bool:
        return any(
            BboxUtils.circle_overlap(bounds, park, self.park_buffer)
            for park in self.layout.parks if park.points
        )

    def collides_with_fountain(self, bounds: Bounds) -> bool:
        fountain = self.layout.fountain
        if fountain is None or not fountain.points:
            return False
        return BboxUtils.circle_overlap(bounds, fountain, self.fountain_buffer)

    def collides_with_roads(self, bounds: Bounds) -> bool:
        return self.road_manager.any_point_within(bounds.expanded(self.road_buffer))

    def add_building(self, building: Building):
        """Add new building to the layout and the index.

        Args:
            building: Building to add.
        """
        self.layout.buildings.append(building)
        self.building_quadtree.insert(building.bounds, building)

    def rebuild_quadtree(self):
        """Rebuild the index from the layout, e.g. after loading a saved city."""
        self.building_quadtree.clear()
        for building in self.layout.buildings:
            self.building_quadtree.insert(building.bounds, building)
