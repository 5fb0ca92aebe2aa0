"""Dataclass module for the city generation."""
from citydesigner.citygen.dataclass.dataclass import (Bounds, Building,
                                                      BuildingType,
                                                      CircleRegion, CityLayout,
                                                      GenerationReport,
                                                      PlacementResult,
                                                      PlacementViolation,
                                                      Point, Road, RoadPattern,
                                                      SkylineType,
                                                      TextureTheme)

__all__ = ['Bounds', 'Building', 'BuildingType', 'CircleRegion', 'CityLayout', 'GenerationReport',
           'PlacementResult', 'PlacementViolation', 'Point', 'Road', 'RoadPattern', 'SkylineType', 'TextureTheme']
