"""City generation module that coordinates road, green space and building generation."""
from citydesigner.citygen.city.city_generator import (CityGenerator,
                                                      GenerationState)

__all__ = ['CityGenerator', 'GenerationState']
