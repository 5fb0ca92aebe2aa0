"""Green space package: parks and fountains as rasterized circles."""
from citydesigner.citygen.greenspace.green_space_generator import \
    GreenSpaceGenerator

__all__ = ['GreenSpaceGenerator']
