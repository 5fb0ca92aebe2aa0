"""citydesigner package for procedural generation of 2D city layouts.

This package provides tools for generating road networks, parks, a central
fountain and building footprints, placing buildings interactively, saving and
loading layouts and rendering previews.
"""

from citydesigner.config import CityConfig, Config
from citydesigner.utils.logger import Logger
from citydesigner.citygen.city.city_generator import CityGenerator
from citydesigner.citygen.function_call.city_function_call import CityFunctionCall

__all__ = [
    'CityConfig',
    'Config',
    'Logger',
    'CityGenerator',
    'CityFunctionCall',
]
