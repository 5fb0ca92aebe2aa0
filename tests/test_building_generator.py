"""Tests for placement rules and batch building generation."""
import pytest

from citydesigner.citygen.dataclass import (Building, BuildingType,
                                            CircleRegion, PlacementViolation,
                                            Road, RoadPattern, SkylineType)
from citydesigner.citygen.raster import bresenham_line, midpoint_circle


def building(x, y, width=40, depth=40):
    return Building(x, y, width, depth, 50.0, BuildingType.MID_RISE)


class TestPlacementRules:
    """Each rule checked on an otherwise empty 800x600 scene."""

    def test_empty_scene_accepts_interior_footprint(self, empty_scene):
        _, _, manager = empty_scene
        assert manager.check_placement(400, 300, 40, 40) is None

    @pytest.mark.parametrize('x, y', [(70, 300), (730, 300), (400, 70), (400, 530)])
    def test_boundary_margin(self, empty_scene, x, y):
        _, _, manager = empty_scene
        assert manager.check_placement(x, y, 40, 40) == PlacementViolation.BOUNDARY

    def test_boundary_margin_is_inclusive(self, empty_scene):
        _, _, manager = empty_scene
        assert manager.check_placement(80, 80, 40, 40) is None
        assert manager.check_placement(720, 520, 40, 40) is None

    def test_building_buffer(self, empty_scene):
        _, _, manager = empty_scene
        manager.add_building(building(200, 200))
        # gap of 24 px on x
        assert manager.check_placement(264, 200, 40, 40) == PlacementViolation.BUILDING
        # gap of 26 px on x
        assert manager.check_placement(266, 200, 40, 40) is None
        # far on y only
        assert manager.check_placement(230, 300, 40, 40) is None

    def test_building_ignore(self, empty_scene):
        _, _, manager = empty_scene
        existing = building(200, 200)
        manager.add_building(existing)
        assert manager.check_placement(200, 200, 40, 40, ignore=existing) is None

    def test_park_buffer(self, empty_scene):
        layout, _, manager = empty_scene
        layout.parks.append(CircleRegion.from_points(midpoint_circle(400, 300, 40)))
        assert manager.check_placement(400, 300, 30, 30) == PlacementViolation.PARK
        # box edge 15 + buffer 35 + radius ~40 from the center
        assert manager.check_placement(400 + 15 + 35 + 42 + 35, 300, 30, 30) is None

    def test_fountain_buffer(self, empty_scene):
        layout, _, manager = empty_scene
        layout.fountain = CircleRegion.from_points(midpoint_circle(600, 400, 25))
        assert manager.check_placement(600, 400, 30, 30) == PlacementViolation.FOUNTAIN
        assert manager.check_placement(600, 400 - 15 - 35 - 26 - 35, 30, 30) is None

    def test_road_buffer_is_inclusive(self, empty_scene):
        _, road_manager, manager = empty_scene
        road_manager.add_road(Road(bresenham_line(100, 500, 700, 500), 8))
        # expanded bottom edge reaches y == 500 exactly
        assert manager.check_placement(300, 462.5, 35, 35) == PlacementViolation.ROAD
        assert manager.check_placement(300, 462, 35, 35) is None

    def test_rules_are_checked_in_order(self, empty_scene):
        layout, road_manager, manager = empty_scene
        manager.add_building(building(100, 100))
        layout.fountain = CircleRegion.from_points(midpoint_circle(100, 100, 25))
        road_manager.add_road(Road(bresenham_line(50, 100, 300, 100), 8))
        assert manager.check_placement(65, 100, 40, 40) == PlacementViolation.BOUNDARY
        assert manager.check_placement(110, 110, 40, 40) == PlacementViolation.BUILDING


class TestBatchGeneration:

    def test_committed_buildings_satisfy_every_rule(self, make_generator):
        generator = make_generator(seed=7, num_buildings=40, road_pattern=RoadPattern.GRID, layout_size=5)
        report = generator.generate()
        assert report.placed == len(generator.layout.buildings) > 0
        for b in generator.layout.buildings:
            assert generator.building_manager.check_placement(b.x, b.y, b.width, b.depth, ignore=b) is None

    @pytest.mark.parametrize('pattern', list(RoadPattern))
    def test_every_pattern_keeps_invariants(self, make_generator, pattern):
        generator = make_generator(seed=21, num_buildings=25, road_pattern=pattern)
        generator.generate()
        for b in generator.layout.buildings:
            assert generator.building_manager.check_placement(b.x, b.y, b.width, b.depth, ignore=b) is None

    def test_zero_buildings(self, make_generator):
        generator = make_generator(num_buildings=0)
        report = generator.generate()
        assert generator.layout.buildings == []
        assert report.placed == 0
        assert report.attempts == 0
        assert not report.exhausted
        assert generator.layout.is_generated

    def test_unreachable_configuration_terminates(self, make_generator):
        # blocks of 35x25 px leave no room for a footprint plus road clearance
        generator = make_generator(num_buildings=100, layout_size=20, num_parks=0)
        report = generator.generate()
        assert report.placed == 0
        assert report.attempts == report.max_attempts == 1000
        assert report.exhausted
        assert generator.layout.is_generated

    def test_report_counts_match_layout(self, make_generator):
        generator = make_generator(seed=3, num_buildings=30, layout_size=5)
        report = generator.generate()
        counts = generator.layout.building_counts()
        assert report.counts == counts
        assert sum(counts.values()) == report.placed

    def test_footprint_sizes(self, make_generator):
        generator = make_generator(seed=5, num_buildings=30, layout_size=5)
        generator.generate()
        for b in generator.layout.buildings:
            assert 20 <= b.width <= 60
            assert 20 <= b.depth <= 60
            assert 50 <= b.x <= 750 and 50 <= b.y <= 550

    def test_standard_size(self, make_generator):
        generator = make_generator(seed=5, num_buildings=10, layout_size=5, use_standard_size=True,
                                   standard_building_width=30, standard_building_depth=25)
        generator.generate()
        assert generator.layout.buildings
        assert all((b.width, b.depth) == (30, 25) for b in generator.layout.buildings)

    @pytest.mark.parametrize('skyline, types, low, high', [
        (SkylineType.LOW_RISE, {BuildingType.LOW_RISE}, 10, 30),
        (SkylineType.MID_RISE, {BuildingType.MID_RISE}, 40, 100),
        (SkylineType.SKYSCRAPER, {BuildingType.MID_RISE, BuildingType.HIGH_RISE}, 40, 250),
        (SkylineType.MIXED, set(BuildingType), 10, 250),
    ])
    def test_skyline_policy(self, make_generator, skyline, types, low, high):
        generator = make_generator(seed=13, num_buildings=30, layout_size=5, skyline_type=skyline)
        generator.generate()
        assert generator.layout.buildings
        for b in generator.layout.buildings:
            assert b.building_type in types
            assert low <= b.height <= high

    def test_heights_follow_type(self, make_generator):
        ranges = {
            BuildingType.LOW_RISE: (10, 30),
            BuildingType.MID_RISE: (40, 100),
            BuildingType.HIGH_RISE: (120, 250),
        }
        generator = make_generator(seed=17, num_buildings=40, layout_size=5)
        generator.generate()
        for b in generator.layout.buildings:
            low, high = ranges[b.building_type]
            assert low <= b.height <= high

    def test_skyscraper_policy_favours_high_rise(self, make_generator):
        generator = make_generator(seed=1)
        picks = [generator.building_generator.choose_type_and_height(SkylineType.SKYSCRAPER)[0]
                 for _ in range(3000)]
        share = picks.count(BuildingType.HIGH_RISE) / len(picks)
        assert 0.6 < share < 0.73

    def test_same_seed_same_city(self, make_generator):
        a = make_generator(seed=123, road_pattern=RoadPattern.RANDOM)
        b = make_generator(seed=123, road_pattern=RoadPattern.RANDOM)
        a.generate()
        b.generate()
        assert a.layout.roads == b.layout.roads
        assert a.layout.parks == b.layout.parks
        assert a.layout.buildings == b.layout.buildings

    def test_regeneration_replaces_layout(self, make_generator):
        generator = make_generator(seed=2, num_buildings=10, layout_size=5)
        generator.generate()
        generator.place_building(400, 120)
        generator.generate()
        assert len(generator.layout.buildings) <= 10
        assert len(generator.building_manager.building_quadtree) == len(generator.layout.buildings)
