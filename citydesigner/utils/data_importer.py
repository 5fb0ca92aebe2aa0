"""Module for importing city layouts from JSON save files."""
import os
from typing import Dict, List, Optional

from citydesigner.citygen.dataclass import (Building, BuildingType,
                                            CircleRegion, CityLayout, Point,
                                            Road)
from citydesigner.utils.load_json import load_json
from citydesigner.utils.logger import Logger


class DataImporter:
    """Rebuilds a :class:`CityLayout` from the document written by ``DataExporter``."""

    def __init__(self):
        self.logger = Logger.get_logger('DataImporter')

    def import_layout_data(self, data: Dict) -> CityLayout:
        """Build a layout from a parsed save document.

        Circle centers and radii are derived again from the stored boundary
        points. Roads without points are skipped.

        Args:
            data: The parsed JSON document.

        Returns:
            A generated layout.
        """
        version = data.get('version')
        if version is not None and version != '1.0':
            self.logger.warning(f'Unknown save format version {version}, trying to load anyway')

        layout = CityLayout()
        for building_data in data.get('buildings', []):
            layout.buildings.append(self._parse_building(building_data))

        for road_data in data.get('roads', []):
            points = self._parse_points(road_data.get('points', []))
            if not points:
                continue
            layout.roads.append(Road(points, int(road_data.get('width', 8))))

        for park_data in data.get('parks', []):
            layout.parks.append(CircleRegion.from_points(self._parse_points(park_data)))

        fountain_points = self._parse_points(data.get('fountain', []))
        if fountain_points:
            layout.fountain = CircleRegion.from_points(fountain_points)

        layout.is_generated = True
        self.logger.info(f'Imported {len(layout.buildings)} buildings, {len(layout.roads)} roads, '
                         f'{len(layout.parks)} parks')
        return layout

    def import_from_file(self, file_path: str) -> CityLayout:
        """Load a layout from a JSON file.

        Raises:
            FileNotFoundError: If the file cannot be found.
        """
        self.logger.info(f'Importing city data from {file_path}')
        return self.import_layout_data(load_json(file_path))

    def load_city(self, name: str, save_dir: str = 'saves') -> Optional[CityLayout]:
        """Load ``<save_dir>/<name>.json``.

        Returns:
            The layout, or None if there is no such save.
        """
        file_path = os.path.join(save_dir, f'{name}.json')
        if not os.path.exists(file_path):
            self.logger.warning(f'Save not found: {file_path}')
            return None
        layout = self.import_from_file(file_path)
        self.logger.info(f'City loaded: {name}')
        return layout

    def _parse_building(self, data: Dict) -> Building:
        type_name = data.get('type', BuildingType.LOW_RISE.value)
        try:
            building_type = BuildingType(type_name)
        except ValueError:
            self.logger.warning(f'Unknown building type {type_name!r}, using LOW_RISE')
            building_type = BuildingType.LOW_RISE
        return Building(
            x=float(data['x']),
            y=float(data['y']),
            width=float(data['width']),
            depth=float(data['depth']),
            height=float(data['height']),
            building_type=building_type,
        )

    @staticmethod
    def _parse_points(points_data) -> List[Point]:
        return [Point(int(p['x']), int(p['y'])) for p in points_data]
