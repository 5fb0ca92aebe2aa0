"""Tests for saving and loading layouts as JSON."""
import json

import pytest

from citydesigner.citygen.dataclass import (Building, BuildingType,
                                            CityLayout, Point, RoadPattern)
from citydesigner.citygen.function_call import CityFunctionCall
from citydesigner.config import CityConfig
from citydesigner.utils.data_exporter import DataExporter
from citydesigner.utils.data_importer import DataImporter
from citydesigner.utils.load_json import load_default_json


@pytest.mark.parametrize('pattern', list(RoadPattern))
def test_export_import_restores_layout(make_generator, pattern):
    generator = make_generator(seed=31, road_pattern=pattern, layout_size=6)
    generator.generate()
    saved = generator.layout

    data = json.loads(DataExporter(saved).to_json())
    restored = DataImporter().import_layout_data(data)

    assert restored.roads == saved.roads
    assert restored.parks == saved.parks
    assert restored.fountain == saved.fountain
    assert restored.buildings == saved.buildings
    assert restored.is_generated


def test_generated_buildings_survive_a_second_round_trip(make_generator):
    generator = make_generator(seed=12, layout_size=5)
    generator.generate()
    assert generator.layout.buildings
    assert all(isinstance(b.x, float) and isinstance(b.y, float) for b in generator.layout.buildings)

    first = DataExporter(generator.layout).export_layout_data()
    restored = DataImporter().import_layout_data(json.loads(json.dumps(first)))
    second = DataExporter(restored).export_layout_data()
    assert json.dumps(second['buildings']) == json.dumps(first['buildings'])


def test_document_shape(make_generator):
    generator = make_generator(seed=1, num_buildings=3, layout_size=5)
    generator.generate()
    data = DataExporter(generator.layout).export_layout_data()

    assert data['version'] == '1.0'
    assert data['timestamp'].isdigit()
    assert set(data) == {'version', 'timestamp', 'buildings', 'roads', 'parks', 'fountain'}
    assert set(data['roads'][0]) == {'width', 'points'}
    assert data['roads'][0]['points'][0] == {'x': 50, 'y': 50}
    for record in data['buildings']:
        assert set(record) == {'x', 'y', 'width', 'depth', 'height', 'type'}
        assert record['type'] in {t.value for t in BuildingType}
    assert isinstance(data['parks'][0], list)
    assert isinstance(data['fountain'], list)


def test_refuses_to_save_ungenerated_layout(tmp_path):
    assert DataExporter(CityLayout()).save_city('empty', str(tmp_path)) is None
    assert not (tmp_path / 'empty.json').exists()


def test_unknown_building_type_falls_back_to_low_rise():
    layout = DataImporter().import_layout_data({
        'buildings': [{'x': 100, 'y': 120, 'width': 30, 'depth': 30, 'height': 12, 'type': 'CASTLE'}],
        'roads': [{'width': 8, 'points': []}],
    })
    assert layout.buildings == [Building(100.0, 120.0, 30.0, 30.0, 12.0, BuildingType.LOW_RISE)]
    assert layout.roads == []
    assert layout.fountain is None


def test_packaged_sample_city():
    layout = DataImporter().import_layout_data(load_default_json('sample_city.json'))
    assert len(layout.buildings) == 2
    assert layout.roads[0].points[-1] == Point(104, 100)
    assert layout.parks[0].center == (200.0, 200.0)
    assert layout.fountain.center == (400.0, 300.0)
    assert layout.fountain.radius == pytest.approx(1.0)


def test_save_and_load_through_function_call(config, tmp_path):
    config.set('citydesigner.save_dir', str(tmp_path))
    cfc = CityFunctionCall(config, seed=4, city_config=CityConfig(layout_size=5))

    assert cfc.save_city('nothing_yet') is None

    cfc.generate_city()
    path = cfc.save_city('town')
    assert path == str(tmp_path / 'town.json')
    buildings = list(cfc.layout.buildings)
    roads = list(cfc.layout.roads)

    other = CityFunctionCall(config, seed=5, city_config=CityConfig(layout_size=5))
    assert other.load_city('town')
    assert other.layout.buildings == buildings
    assert other.layout.roads == roads
    assert other.city_generator.has_city()
    assert not other.load_city('missing')


def test_loaded_layout_is_indexed_for_placement(config, tmp_path):
    config.set('citydesigner.save_dir', str(tmp_path))
    cfc = CityFunctionCall(config, seed=4, city_config=CityConfig(layout_size=5, num_buildings=0, num_parks=0))
    cfc.generate_city()
    assert cfc.place_building(120, 100).success
    cfc.save_city('one')

    other = CityFunctionCall(config, seed=4, city_config=CityConfig(layout_size=5, num_buildings=0, num_parks=0))
    other.load_city('one')
    result = other.place_building(122, 102)
    assert not result.success
    assert len(other.layout.buildings) == 1
