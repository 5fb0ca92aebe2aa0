"""Tests for the orchestrator: validation, lifecycle and interactive placement."""
import pytest

from citydesigner.citygen.city import CityGenerator, GenerationState
from citydesigner.citygen.dataclass import (BuildingType, PlacementViolation,
                                            RoadPattern)
from citydesigner.config import CityConfig, ConfigurationError


def test_generation_fills_layout(make_generator):
    generator = make_generator(seed=9, layout_size=5)
    report = generator.generate()
    layout = generator.layout
    assert layout.is_generated
    assert generator.has_city()
    assert len(layout.roads) == 12
    assert len(layout.parks) == 3
    assert layout.fountain is not None
    assert report.requested == 20
    assert len(layout.buildings) == report.placed


def test_generation_runs_in_steps(make_generator):
    generator = make_generator(num_buildings=5, layout_size=5)
    generator.start()
    assert generator.generation_state == GenerationState.GENERATING_ROADS
    assert generator.generate_step() is False
    assert generator.layout.roads and generator.layout.fountain is None
    assert generator.generate_step() is False
    assert generator.layout.fountain is not None
    assert generator.generate_step() is True
    assert generator.is_generation_complete()


def test_invalid_configuration_raises_before_generation(make_generator):
    generator = make_generator(num_buildings=5, layout_size=5)
    generator.generate()
    roads = list(generator.layout.roads)

    bad = CityConfig(layout_size=5)
    bad.layout_size = 0
    with pytest.raises(ConfigurationError):
        generator.generate(bad)
    # previous layout untouched
    assert generator.layout.roads == roads
    assert generator.layout.is_generated


def test_enum_reassigned_after_construction_is_checked(make_generator):
    generator = make_generator(num_buildings=5, layout_size=5)
    generator.generate()
    roads = list(generator.layout.roads)

    generator.city_config.road_pattern = 'diagonal'
    with pytest.raises(ConfigurationError):
        generator.generate()
    assert generator.layout.roads == roads

    generator.city_config.road_pattern = 'RADIAL'
    generator.city_config.skyline_type = 'low-rise'
    generator.generate()
    assert generator.city_config.road_pattern == RoadPattern.RADIAL
    assert all(b.building_type == BuildingType.LOW_RISE for b in generator.layout.buildings)


def test_screen_too_small_for_margins(config):
    with pytest.raises(ConfigurationError):
        CityGenerator(config, seed=1, city_config=CityConfig(screen_width=150, screen_height=600)).generate()


def test_seed_from_config(config):
    config.set('citydesigner.seed', 77)
    a = CityGenerator(config, city_config=CityConfig(road_pattern=RoadPattern.RANDOM))
    b = CityGenerator(config, city_config=CityConfig(road_pattern=RoadPattern.RANDOM))
    a.generate()
    b.generate()
    assert a.seed == 77
    assert a.layout.buildings == b.layout.buildings
    assert a.layout.roads == b.layout.roads


class TestInteractivePlacement:
    """Grid of 5x5 blocks (140x100 px): (120, 100) sits in the first block, clear of roads."""

    @pytest.fixture
    def generator(self, make_generator):
        generator = make_generator(num_buildings=0, num_parks=0, layout_size=5)
        generator.generate()
        return generator

    def test_place_in_free_block(self, generator):
        result = generator.place_building(120, 100)
        assert result.success
        assert result.violation is None
        assert result.building.building_type == BuildingType.MID_RISE
        assert result.building.height == pytest.approx(0.15)
        assert (result.building.width, result.building.depth) == (35.0, 35.0)
        assert generator.layout.buildings == [result.building]
        assert 'placed' in result.message

    def test_click_inside_existing_building(self, generator):
        generator.place_building(120, 100)
        before = list(generator.layout.buildings)
        result = generator.place_building(125, 105)
        assert not result.success
        assert result.violation == PlacementViolation.BUILDING
        assert result.building is None
        assert generator.layout.buildings == before
        assert result.message == 'Cannot place building: overlaps with existing building'

    def test_click_on_road(self, generator):
        result = generator.place_building(190, 100)
        assert result.violation == PlacementViolation.ROAD
        assert generator.layout.buildings == []

    def test_click_on_fountain(self, generator):
        result = generator.place_building(400, 300)
        assert result.violation == PlacementViolation.FOUNTAIN

    def test_click_near_edge(self, generator):
        result = generator.place_building(20, 300)
        assert result.violation == PlacementViolation.BOUNDARY

    def test_regeneration_clears_placed_buildings(self, generator):
        generator.place_building(120, 100)
        generator.generate()
        assert generator.layout.buildings == []
