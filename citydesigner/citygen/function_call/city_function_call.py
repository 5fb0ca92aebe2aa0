"""City generation function call module for handling city creation operations.

This module provides a high-level interface for city generation operations including
generating a layout, placing single buildings, adjusting the generation parameters,
saving and loading layouts and rendering a preview.
"""
from typing import Dict, Optional

from citydesigner.citygen.city.city_generator import CityGenerator
from citydesigner.citygen.dataclass import (CityLayout, GenerationReport,
                                            PlacementResult)
from citydesigner.citygen.render.preview import save_preview
from citydesigner.config import CityConfig, Config
from citydesigner.utils.data_exporter import DataExporter
from citydesigner.utils.data_importer import DataImporter
from citydesigner.utils.logger import Logger


class CityFunctionCall:
    """Function call interface for city generation operations."""

    def __init__(self, config: Config, seed: int = None, city_config: CityConfig = None):
        """Initialize the city function call with configuration.

        Args:
            config: Configuration object with the tuning constants.
            seed: Seed for the random number generator.
            city_config: Generation parameters, read from the config when omitted.
        """
        self.config = config
        self.city_generator = CityGenerator(self.config, seed, city_config)
        self.save_dir = self.config.get('citydesigner.save_dir', 'saves')

        self.logger = Logger.get_logger('CityFunctionCall')

    @property
    def city_config(self) -> CityConfig:
        return self.city_generator.city_config

    @property
    def layout(self) -> CityLayout:
        return self.city_generator.layout

    def generate_city(self) -> GenerationReport:
        """Generate a new city with the current parameters.

        Raises:
            ConfigurationError: If the parameters are invalid.
        """
        self.logger.info(f'Generating city with settings:\n{self.city_config.describe()}')
        return self.city_generator.generate()

    def place_building(self, x: float, y: float) -> PlacementResult:
        """Place a standard building centred on (x, y).

        Args:
            x: Center x on the screen.
            y: Center y on the screen.

        Returns:
            Whether the building was placed, and why not otherwise.
        """
        return self.city_generator.place_building(x, y)

    def adjust_setting(self, name: str, direction: int) -> int:
        """Step a numeric generation parameter up or down within its limits.

        Args:
            name: Parameter name, e.g. ``num_buildings`` or ``road_width``.
            direction: Positive to increase, negative to decrease.

        Returns:
            The new value.
        """
        value = self.city_config.adjust(name, direction, self.config['citygen.road.margin'])
        self.logger.info(f'{name}: {value}')
        return value

    def statistics(self) -> Dict:
        """Summarize the current layout.

        Returns:
            Counts of buildings by type, roads, road points and parks.
        """
        counts = self.layout.building_counts()
        return {
            'buildings': len(self.layout.buildings),
            'building_types': {building_type.name: n for building_type, n in counts.items()},
            'roads': len(self.layout.roads),
            'road_points': self.layout.total_road_points,
            'parks': len(self.layout.parks),
            'has_fountain': self.layout.fountain is not None,
        }

    def export_city(self, file_path: str):
        """Export the current layout to a JSON file.

        Args:
            file_path: Path of the file to write.
        """
        DataExporter(self.layout).export_to_json(file_path)

    def save_city(self, name: str) -> Optional[str]:
        """Save the current layout under the save directory.

        Args:
            name: Save name, without extension.

        Returns:
            The written path, or None if no city has been generated yet.
        """
        return DataExporter(self.layout).save_city(name, self.save_dir)

    def load_city(self, name: str) -> bool:
        """Load a saved layout, replacing the current one.

        Args:
            name: Save name, without extension.

        Returns:
            True if the save was found and loaded.
        """
        layout = DataImporter().load_city(name, self.save_dir)
        if layout is None:
            return False
        self.city_generator.load_layout(layout)
        return True

    def import_city(self, file_path: str):
        """Load a layout from any JSON file, replacing the current one."""
        self.city_generator.load_layout(DataImporter().import_from_file(file_path))

    def visualization(self, file_path: str) -> str:
        """Render the current layout to an image file.

        Args:
            file_path: Destination of the preview, e.g. ``city.png``.

        Returns:
            The written path.
        """
        return save_preview(self.layout, self.config, self.city_config.screen_width,
                            self.city_config.screen_height, file_path)
