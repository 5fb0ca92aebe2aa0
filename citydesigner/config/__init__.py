"""Configuration management package.

This package provides functionality for loading and managing the city designer configuration.
It includes the YAML-backed :class:`Config` holding tuning constants and the validated
:class:`CityConfig` holding the parameters of one generation.
"""

from citydesigner.config.city_config import CityConfig, ConfigurationError
from citydesigner.config.config_loader import Config

__all__ = ['CityConfig', 'Config', 'ConfigurationError']
