"""City generator module for generating cities with roads, green spaces and buildings."""
import random
from enum import Enum, auto

from citydesigner.citygen.building.building_generator import BuildingGenerator
from citydesigner.citygen.building.building_manager import BuildingManager
from citydesigner.citygen.dataclass import (CityLayout, GenerationReport,
                                            PlacementResult)
from citydesigner.citygen.greenspace.green_space_generator import \
    GreenSpaceGenerator
from citydesigner.citygen.road.road_generator import RoadGenerator
from citydesigner.citygen.road.road_manager import RoadManager
from citydesigner.config import CityConfig, ConfigurationError
from citydesigner.utils.logger import Logger


class GenerationState(Enum):
    """Enum to track the generation state."""
    GENERATING_ROADS = auto()
    GENERATING_GREEN_SPACE = auto()
    GENERATING_BUILDINGS = auto()
    COMPLETED = auto()


class CityGenerator:
    """Manages the complete city generation process: roads, then parks and fountain, then buildings."""

    def __init__(self, config, seed: int = None, city_config: CityConfig = None):
        """Initialize the city generator with configuration.

        Args:
            config: Configuration object with the tuning constants.
            seed: Seed for the random number generator. Falls back to ``citydesigner.seed``,
                then to system entropy.
            city_config: Generation parameters. Read from the ``city`` section when omitted.
        """
        self.config = config
        self.seed = seed if seed is not None else self.config.get('citydesigner.seed', None)
        self.rng = random.Random(self.seed)

        self.city_config = city_config if city_config is not None else CityConfig.from_config(self.config)
        self.layout = CityLayout()
        self.report = GenerationReport(requested=0)

        self.road_generator = RoadGenerator(self.config, self.rng)
        self.green_space_generator = GreenSpaceGenerator(self.config, self.rng)
        self._init_managers()

        self.generation_state = GenerationState.COMPLETED
        self.logger = Logger.get_logger('CityGenerator')

    def _init_managers(self):
        width, height = self.city_config.screen_width, self.city_config.screen_height
        self.road_manager = RoadManager(self.config, width, height)
        self.building_manager = BuildingManager(self.config, self.layout, self.road_manager, width, height)
        self.building_generator = BuildingGenerator(self.config, self.building_manager, self.rng)

    def validate(self, city_config: CityConfig):
        """Check the parameters and that the screen leaves room inside every margin.

        Raises:
            ConfigurationError: If generation cannot run with these parameters.
        """
        city_config.validate()
        margin = max(
            self.config['citygen.road.margin'],
            self.config['citygen.road.random_anchor_inset'],
            self.config['citygen.greenspace.park_margin'],
            self.config['citygen.building.spawn_margin'],
            self.config['citygen.building.screen_margin'],
        )
        if city_config.screen_width < 2 * margin or city_config.screen_height < 2 * margin:
            raise ConfigurationError(
                f'Screen {city_config.screen_width}x{city_config.screen_height} is too small, '
                f'both sides must be at least {2 * margin}')

    def generate(self, city_config: CityConfig = None) -> GenerationReport:
        """Generate a new city, replacing the current layout.

        Args:
            city_config: Parameters to use from now on. Keeps the current ones when omitted.

        Returns:
            The building generation report.

        Raises:
            ConfigurationError: If the parameters are invalid. The layout is left untouched.
        """
        self.start(city_config)
        while not self.is_generation_complete():
            self.generate_step()
        return self.report

    def start(self, city_config: CityConfig = None):
        """Validate the parameters and clear the layout so that steps can run."""
        city_config = city_config if city_config is not None else self.city_config
        self.validate(city_config)

        self.city_config = city_config
        self.layout.clear()
        self._init_managers()
        self.report = GenerationReport(requested=city_config.num_buildings)
        self.generation_state = GenerationState.GENERATING_ROADS
        self.logger.info('Generating new city')

    def generate_step(self) -> bool:
        """Generate one stage of the city.

        Returns:
            bool: True if generation is complete.
        """
        if self.generation_state == GenerationState.GENERATING_ROADS:
            roads = self.road_generator.generate_roads(self.city_config)
            self.road_manager.set_roads(roads)
            self.layout.roads.extend(roads)
            self.generation_state = GenerationState.GENERATING_GREEN_SPACE
            return False

        elif self.generation_state == GenerationState.GENERATING_GREEN_SPACE:
            self.layout.parks.extend(self.green_space_generator.generate_parks(self.city_config))
            self.layout.fountain = self.green_space_generator.generate_fountain(self.city_config)
            self.generation_state = GenerationState.GENERATING_BUILDINGS
            return False

        elif self.generation_state == GenerationState.GENERATING_BUILDINGS:
            self.report = self.building_generator.generate_buildings(self.city_config)
            self.layout.is_generated = True
            self.generation_state = GenerationState.COMPLETED
            self.logger.info(f'City generation complete: {len(self.layout.roads)} roads, '
                             f'{len(self.layout.parks)} parks, {len(self.layout.buildings)} buildings')
        return True

    def is_generation_complete(self) -> bool:
        """Check if city generation is complete.

        Returns:
            bool: True if generation is complete.
        """
        return self.generation_state == GenerationState.COMPLETED

    def place_building(self, x: float, y: float) -> PlacementResult:
        """Place one standard building at (x, y) if every placement rule allows it."""
        return self.building_generator.place_building(x, y, self.city_config)

    def has_city(self) -> bool:
        return self.layout.is_generated

    def load_layout(self, layout: CityLayout):
        """Replace the current layout with a loaded one and rebuild the spatial indexes.

        Args:
            layout: Layout read from a save file.
        """
        if layout is not self.layout:
            self.layout.clear()
            self.layout.roads.extend(layout.roads)
            self.layout.parks.extend(layout.parks)
            self.layout.fountain = layout.fountain
            self.layout.buildings.extend(layout.buildings)
            self.layout.is_generated = layout.is_generated

        self.road_manager.set_roads(self.layout.roads)
        self.building_manager.rebuild_quadtree()
        self.generation_state = GenerationState.COMPLETED
        self.logger.info(f'Loaded layout with {len(self.layout.roads)} roads and {len(self.layout.buildings)} buildings')

    @property
    def roads(self):
        """Get all roads.

        Returns:
            list: List of roads.
        """
        return self.layout.roads

    @property
    def buildings(self):
        """Get all buildings.

        Returns:
            list: List of buildings.
        """
        return self.layout.buildings
