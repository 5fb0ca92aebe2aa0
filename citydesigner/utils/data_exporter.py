"""Module for exporting city layouts to JSON.

This module provides functionality to export a layout (roads, parks, fountain and
buildings) to the save file format read back by :mod:`citydesigner.utils.data_importer`.
"""
import json
import os
import time
from typing import Dict, Optional

from citydesigner.citygen.dataclass import CityLayout
from citydesigner.utils.logger import Logger

FORMAT_VERSION = '1.0'


class DataExporter:
    """Manages the export of a city layout to JSON.

    Points are written as integers, building records with their float
    geometry and their type name.
    """
    def __init__(self, layout: CityLayout):
        """Initialize the data exporter with a layout.

        Args:
            layout: The layout to export.
        """
        self.layout = layout
        self.logger = Logger.get_logger('DataExporter')

    def export_road_data(self) -> Dict:
        """Export all road data.

        Returns:
            Dictionary containing the roads with their width and points.
        """
        return {'roads': [road.to_dict() for road in self.layout.roads]}

    def export_building_data(self) -> Dict:
        """Export all building data.

        Returns:
            Dictionary containing building records.
        """
        return {'buildings': [building.to_dict() for building in self.layout.buildings]}

    def export_green_space_data(self) -> Dict:
        """Export parks and the fountain as lists of boundary points.

        Returns:
            Dictionary with ``parks`` (list of point lists) and ``fountain`` (point list).
        """
        fountain = self.layout.fountain.to_list() if self.layout.fountain is not None else []
        return {
            'parks': [park.to_list() for park in self.layout.parks],
            'fountain': fountain,
        }

    def export_layout_data(self) -> Dict:
        """Export the whole layout as one document."""
        data = {
            'version': FORMAT_VERSION,
            'timestamp': str(int(time.time())),
        }
        data.update(self.export_building_data())
        data.update(self.export_road_data())
        data.update(self.export_green_space_data())
        return data

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.export_layout_data(), indent=indent)

    def export_to_json(self, file_path: str):
        """Export the layout to a JSON file, creating parent directories.

        Args:
            file_path: Path of the file to write.
        """
        output_dir = os.path.dirname(file_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(file_path, 'w') as f:
            json.dump(self.export_layout_data(), f, indent=2)
        self.logger.info(f'Exported layout to {file_path}')

    def save_city(self, name: str, save_dir: str = 'saves') -> Optional[str]:
        """Save the layout as ``<save_dir>/<name>.json``.

        Args:
            name: Save name, without extension.
            save_dir: Directory holding the saves.

        Returns:
            The written path, or None if the layout has not been generated.
        """
        if not self.layout.is_generated:
            self.logger.warning('No city to save, generate a city first')
            return None

        file_path = os.path.join(save_dir, f'{name}.json')
        self.export_to_json(file_path)
        self.logger.info(f'City saved: {name} ({len(self.layout.buildings)} buildings, {len(self.layout.roads)} roads)')
        return file_path
