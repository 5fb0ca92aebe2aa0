"""Building generation module for placing and validating building footprints."""
from citydesigner.citygen.building.building_generator import BuildingGenerator
from citydesigner.citygen.building.building_manager import BuildingManager

__all__ = ['BuildingGenerator', 'BuildingManager']
