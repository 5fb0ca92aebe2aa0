"""Building generator module for placing building footprints by rejection sampling."""
import random
from typing import Tuple

from citydesigner.citygen.building.building_manager import BuildingManager
from citydesigner.citygen.dataclass import (Building, BuildingType,
                                            GenerationReport, PlacementResult,
                                            SkylineType)
from citydesigner.config import CityConfig
from citydesigner.utils.logger import Logger


class BuildingGenerator:
    """Building generator class for batch and interactive building placement."""
    def __init__(self, config, building_manager: BuildingManager, rng: random.Random = None):
        """Initialize the building generator.

        Args:
            config: Configuration with the ``citygen.building`` settings.
            building_manager: Manager that validates and stores the buildings.
            rng: Random source for positions, sizes, types and heights.
        """
        self.config = config
        self.building_manager = building_manager
        self.rng = rng if rng is not None else random.Random()

        self.spawn_margin = self.config['citygen.building.spawn_margin']
        self.min_size = self.config['citygen.building.min_size']
        self.max_size = self.config['citygen.building.max_size']
        self.attempts_per_building = self.config['citygen.building.attempts_per_building']
        self.progress_interval = self.config['citygen.building.progress_interval']
        self.interactive_height = self.config['citygen.building.interactive_height']
        self.height_ranges = {
            BuildingType.LOW_RISE: tuple(self.config['citygen.building.heights.low_rise']),
            BuildingType.MID_RISE: tuple(self.config['citygen.building.heights.mid_rise']),
            BuildingType.HIGH_RISE: tuple(self.config['citygen.building.heights.high_rise']),
        }

        self.logger = Logger.get_logger('BuildingGenerator')

    def generate_buildings(self, city_config: CityConfig) -> GenerationReport:
        """Place up to ``num_buildings`` buildings at random valid positions.

        Each attempt draws a center and a footprint, keeps it only if no
        placement rule is broken, and gives it a type and height from the
        skyline. At most ``attempts_per_building * num_buildings`` attempts are
        made; running out of attempts ends generation with fewer buildings.

        Args:
            city_config: Generation parameters.

        Returns:
            Report of requested, placed and attempted buildings.
        """
        requested = city_config.num_buildings
        report = GenerationReport(requested=requested, max_attempts=requested * self.attempts_per_building)
        self.logger.info(f'Generating {requested} buildings ({city_config.skyline_type.value} skyline)')

        while report.placed < requested and report.attempts < report.max_attempts:
            report.attempts += 1
            x = float(self.rng.randint(self.spawn_margin, city_config.screen_width - self.spawn_margin))
            y = float(self.rng.randint(self.spawn_margin, city_config.screen_height - self.spawn_margin))
            width, depth = self.choose_footprint(city_config)

            if self.building_manager.check_placement(x, y, width, depth) is not None:
                continue

            building_type, height = self.choose_type_and_height(city_config.skyline_type)
            self.building_manager.add_building(Building(x, y, width, depth, height, building_type))
            report.placed += 1
            report.counts[building_type] += 1

            if report.placed % self.progress_interval == 0:
                self.logger.info(f'Placed {report.placed}/{requested} buildings')

        breakdown = ', '.join(f'{t.name}: {n}' for t, n in report.counts.items())
        self.logger.info(f'Generated {report.placed} buildings in {report.attempts} attempts ({breakdown})')
        if report.exhausted:
            self.logger.warning(f'Only placed {report.placed}/{requested} buildings after {report.max_attempts} attempts')
        return report

    def place_building(self, x: float, y: float, city_config: CityConfig) -> PlacementResult:
        """Try once to place a standard mid-rise building centred on (x, y).

        Args:
            x: Requested center x.
            y: Requested center y.
            city_config: Parameters holding the standard footprint.

        Returns:
            The placed building, or the rule that prevented placement.
        """
        width = city_config.standard_building_width
        depth = city_config.standard_building_depth
        violation = self.building_manager.check_placement(x, y, width, depth)
        if violation is not None:
            result = PlacementResult(success=False, violation=violation)
            self.logger.info(result.message)
            return result

        building = Building(x, y, width, depth, self.interactive_height, BuildingType.MID_RISE)
        self.building_manager.add_building(building)
        result = PlacementResult(success=True, building=building)
        self.logger.info(f'{result.message} (total {len(self.building_manager.buildings)})')
        return result

    def choose_footprint(self, city_config: CityConfig) -> Tuple[float, float]:
        """Return (width, depth) of the next candidate."""
        if city_config.use_standard_size:
            return city_config.standard_building_width, city_config.standard_building_depth
        return (self.rng.uniform(self.min_size, self.max_size),
                self.rng.uniform(self.min_size, self.max_size))

    def choose_type_and_height(self, skyline_type: SkylineType) -> Tuple[BuildingType, float]:
        """Pick a building type for the skyline, then a height in that type's range.

        Args:
            skyline_type: Skyline of the generation.

        Returns:
            (building type, height)
        """
        if skyline_type == SkylineType.LOW_RISE:
            building_type = BuildingType.LOW_RISE
        elif skyline_type == SkylineType.MID_RISE:
            building_type = BuildingType.MID_RISE
        elif skyline_type == SkylineType.SKYSCRAPER:
            # two in three are high-rise
            building_type = BuildingType.HIGH_RISE if self.rng.randint(0, 2) < 2 else BuildingType.MID_RISE
        else:
            building_type = self.rng.choice(list(BuildingType))

        low, high = self.height_ranges[building_type]
        return building_type, self.rng.uniform(low, high)
