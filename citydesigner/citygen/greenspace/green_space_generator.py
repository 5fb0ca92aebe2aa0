"""Green space generation module: circular parks and the central fountain."""
import random
from typing import List

from citydesigner.citygen.dataclass import CircleRegion
from citydesigner.citygen.raster import midpoint_circle
from citydesigner.config import CityConfig
from citydesigner.utils.logger import Logger


class GreenSpaceGenerator:
    """Places parks at random interior positions and the fountain at the screen center.

    Parks are not checked against roads or against each other.
    """

    def __init__(self, config, rng: random.Random = None):
        """Initialize the green space generator.

        Args:
            config: Configuration with the ``citygen.greenspace`` settings.
            rng: Random source for park centers.
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.park_margin = self.config['citygen.greenspace.park_margin']
        self.logger = Logger.get_logger('GreenSpaceGenerator')

    def generate_parks(self, city_config: CityConfig) -> List[CircleRegion]:
        """Generate ``num_parks`` circular parks.

        Args:
            city_config: Generation parameters (park count and radius, screen).

        Returns:
            The parks, possibly empty.
        """
        if city_config.num_parks == 0:
            self.logger.info('No parks requested')
            return []

        self.logger.info(f'Generating {city_config.num_parks} parks')
        parks = []
        for i in range(city_config.num_parks):
            x = self.rng.randint(self.park_margin, city_config.screen_width - self.park_margin)
            y = self.rng.randint(self.park_margin, city_config.screen_height - self.park_margin)
            parks.append(CircleRegion.from_points(midpoint_circle(x, y, city_config.park_radius)))
            self.logger.debug(f'Park {i + 1} at ({x}, {y}) with radius {city_config.park_radius}')
        return parks

    def generate_fountain(self, city_config: CityConfig) -> CircleRegion:
        """Generate the fountain at the screen center.

        A fountain exists in every layout, whatever the park count.

        Args:
            city_config: Generation parameters (fountain radius, screen).

        Returns:
            The fountain region.
        """
        center_x = city_config.screen_width // 2
        center_y = city_config.screen_height // 2
        self.logger.debug(f'Central fountain at ({center_x}, {center_y}) with radius {city_config.fountain_radius}')
        return CircleRegion.from_points(midpoint_circle(center_x, center_y, city_config.fountain_radius))
