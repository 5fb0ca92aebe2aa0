"""Shared fixtures: a fresh default config and seeded generators."""
import pytest

from citydesigner.citygen.city import CityGenerator
from citydesigner.citygen.dataclass import CityLayout
from citydesigner.citygen.building import BuildingManager
from citydesigner.citygen.road import RoadManager
from citydesigner.config import CityConfig, Config
from citydesigner.utils.logger import Logger

Logger.configure(logging_enabled=True, log_to_console=False, log_to_file=False)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def city_config():
    return CityConfig()


@pytest.fixture
def make_generator(config):
    """Factory for generators whose city parameters are the defaults overridden by keyword."""
    def _make(seed=42, **params):
        return CityGenerator(config, seed=seed, city_config=CityConfig(**params))
    return _make


@pytest.fixture
def empty_scene(config):
    """An empty 800x600 layout with its road and building managers."""
    layout = CityLayout()
    road_manager = RoadManager(config, 800, 600)
    building_manager = BuildingManager(config, layout, road_manager, 800, 600)
    return layout, road_manager, building_manager
