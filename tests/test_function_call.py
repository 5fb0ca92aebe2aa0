"""Tests for the high level interface and the image preview."""
import pytest
from PIL import Image

from citydesigner.citygen.dataclass import (Building, BuildingType,
                                            CircleRegion, CityLayout, Road)
from citydesigner.citygen.function_call import CityFunctionCall
from citydesigner.citygen.raster import bresenham_line, midpoint_circle
from citydesigner.citygen.render import render_layout
from citydesigner.config import CityConfig


def test_render_colors(config):
    layout = CityLayout(
        roads=[Road(bresenham_line(100, 100, 700, 100), 8)],
        parks=[CircleRegion.from_points(midpoint_circle(200, 400, 40))],
        fountain=CircleRegion.from_points(midpoint_circle(400, 300, 25)),
        buildings=[Building(600, 400, 40, 40, 180.0, BuildingType.HIGH_RISE)],
    )
    image = render_layout(layout, config, 800, 600)

    assert image.size == (800, 600)
    assert image.mode == 'RGB'
    assert image.getpixel((5, 5)) == tuple(config['render.colors.background'])
    assert image.getpixel((400, 100)) == tuple(config['render.colors.road'])
    assert image.getpixel((200, 400)) == tuple(config['render.colors.park'])
    assert image.getpixel((400, 300)) == tuple(config['render.colors.fountain'])
    assert image.getpixel((610, 410)) == tuple(config['render.colors.high_rise'])


def test_visualization_writes_png(config, tmp_path):
    cfc = CityFunctionCall(config, seed=6, city_config=CityConfig(layout_size=5))
    cfc.generate_city()
    path = cfc.visualization(str(tmp_path / 'out' / 'city.png'))
    with Image.open(path) as image:
        assert image.size == (800, 600)


def test_statistics(config):
    cfc = CityFunctionCall(config, seed=6, city_config=CityConfig(layout_size=5, num_parks=2))
    report = cfc.generate_city()
    stats = cfc.statistics()
    assert stats['buildings'] == report.placed
    assert sum(stats['building_types'].values()) == report.placed
    assert stats['roads'] == 12
    assert stats['road_points'] == sum(len(r.points) for r in cfc.layout.roads)
    assert stats['parks'] == 2
    assert stats['has_fountain']


def test_adjust_setting_changes_next_generation(config):
    cfc = CityFunctionCall(config, seed=6, city_config=CityConfig(layout_size=5))
    assert cfc.adjust_setting('layout_size', 1) == 6
    cfc.generate_city()
    assert len(cfc.layout.roads) == 14


def test_layout_adjust_uses_configured_road_margin(config):
    config.set('citygen.road.margin', 100)
    cfc = CityFunctionCall(config, seed=6, city_config=CityConfig(layout_size=5))
    cfc.adjust_setting('layout_size', 1)
    assert cfc.city_config.standard_building_width == pytest.approx(400 / 6 / 2)
    assert cfc.city_config.standard_building_depth == pytest.approx(400 / 6 / 2)


def test_export_and_import_file(config, tmp_path):
    cfc = CityFunctionCall(config, seed=6, city_config=CityConfig(layout_size=5))
    cfc.generate_city()
    target = tmp_path / 'exports' / 'city.json'
    cfc.export_city(str(target))
    assert target.exists()

    other = CityFunctionCall(config, seed=1)
    other.import_city(str(target))
    assert other.layout.buildings == cfc.layout.buildings
    assert other.layout.fountain == cfc.layout.fountain
