"""User-controlled city generation parameters.

:class:`CityConfig` is the value every generator reads. It is built from the
``city`` section of a :class:`~citydesigner.config.Config` and validated before
any generation starts. It also carries the step/clamp rules of the interactive
controls (more buildings, wider roads, next road pattern, ...).
"""
from dataclasses import asdict, dataclass
from typing import Dict, Tuple, Type, TypeVar

from citydesigner.citygen.dataclass import (RoadPattern, SkylineType,
                                            TextureTheme)
from citydesigner.utils.logger import Logger

E = TypeVar('E')

# field -> (step, minimum, maximum)
CONTROL_LIMITS: Dict[str, Tuple[int, int, int]] = {
    'num_buildings': (2, 1, 100),
    'layout_size': (1, 5, 20),
    'road_width': (2, 2, 20),
    'park_radius': (5, 10, 100),
    'num_parks': (1, 0, 10),
}

FOUNTAIN_RADII = (25, 40)
STANDARD_SIZE_RANGE = (20.0, 60.0)


class ConfigurationError(ValueError):
    """Raised when generation parameters are invalid."""


def _parse_enum(enum_cls: Type[E], value) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace('-', '_')
        if key in enum_cls.__members__:
            return enum_cls[key]
        for member in enum_cls:
            if member.value.lower() == value.strip().lower():
                return member
    names = ', '.join(enum_cls.__members__)
    raise ConfigurationError(f'Invalid {enum_cls.__name__} {value!r}, expected one of: {names}')


@dataclass
class CityConfig:
    """Parameters of one city generation."""
    num_buildings: int = 20
    layout_size: int = 10
    road_pattern: RoadPattern = RoadPattern.GRID
    road_width: int = 8
    skyline_type: SkylineType = SkylineType.MIXED
    texture_theme: TextureTheme = TextureTheme.MODERN
    park_radius: int = 40
    num_parks: int = 3
    fountain_radius: int = 25
    screen_width: int = 800
    screen_height: int = 600
    standard_building_width: float = 35.0
    standard_building_depth: float = 35.0
    use_standard_size: bool = False

    def __post_init__(self):
        self.validate()

    @classmethod
    def from_config(cls, config) -> 'CityConfig':
        """Build the parameters from the ``city`` section of a Config.

        Args:
            config: A :class:`~citydesigner.config.Config`.

        Returns:
            A validated CityConfig.

        Raises:
            ConfigurationError: If a value is invalid.
        """
        section = config.get('city', {}) or {}
        known = {name: value for name, value in section.items() if name in cls.__dataclass_fields__}
        unknown = sorted(set(section) - set(known))
        if unknown:
            Logger.get_logger('CityConfig').warning(f'Ignoring unknown city settings: {", ".join(unknown)}')
        return cls(**known)

    def validate(self):
        """Normalize enum fields given by name, then check every parameter.

        Raises:
            ConfigurationError: On the first invalid value.
        """
        self.road_pattern = _parse_enum(RoadPattern, self.road_pattern)
        self.skyline_type = _parse_enum(SkylineType, self.skyline_type)
        self.texture_theme = _parse_enum(TextureTheme, self.texture_theme)
        if self.layout_size < 1:
            raise ConfigurationError(f'layout_size must be at least 1, got {self.layout_size}')
        for name in ('num_buildings', 'num_parks', 'park_radius', 'fountain_radius'):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f'{name} must not be negative, got {value}')
        for name in ('road_width', 'screen_width', 'screen_height',
                     'standard_building_width', 'standard_building_depth'):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f'{name} must be positive, got {value}')

    def adjust(self, name: str, direction: int, road_margin: int = 50) -> int:
        """Step a numeric control up (direction > 0) or down, within its limits.

        Changing the layout size re-derives the standard building footprint.

        Args:
            name: One of the keys of ``CONTROL_LIMITS``.
            direction: Sign gives the direction of the step.
            road_margin: Grid road margin, used when the layout size changes.

        Returns:
            The new value.
        """
        if name not in CONTROL_LIMITS:
            raise KeyError(f'{name} is not an adjustable setting')
        step, minimum, maximum = CONTROL_LIMITS[name]
        value = getattr(self, name) + (step if direction > 0 else -step)
        value = max(minimum, min(maximum, value))
        setattr(self, name, value)
        if name == 'layout_size':
            self.update_standard_building_size(road_margin)
        return value

    def update_standard_building_size(self, road_margin: int = 50):
        """Fit the standard footprint to half of the narrower grid block spacing."""
        spacing = min(self.screen_width - 2 * road_margin,
                      self.screen_height - 2 * road_margin) / self.layout_size
        low, high = STANDARD_SIZE_RANGE
        size = max(low, min(high, spacing * 0.5))
        self.standard_building_width = size
        self.standard_building_depth = size

    def toggle_fountain_size(self) -> int:
        small, large = FOUNTAIN_RADII
        self.fountain_radius = large if self.fountain_radius == small else small
        return self.fountain_radius

    def toggle_standard_size(self) -> bool:
        self.use_standard_size = not self.use_standard_size
        return self.use_standard_size

    def cycle_road_pattern(self) -> RoadPattern:
        self.road_pattern = _next_member(self.road_pattern)
        return self.road_pattern

    def cycle_skyline_type(self) -> SkylineType:
        self.skyline_type = _next_member(self.skyline_type)
        return self.skyline_type

    def cycle_texture_theme(self) -> TextureTheme:
        self.texture_theme = _next_member(self.texture_theme)
        return self.texture_theme

    def to_dict(self):
        """Convert to a plain dictionary, enums by name."""
        data = asdict(self)
        for name in ('road_pattern', 'skyline_type', 'texture_theme'):
            data[name] = getattr(self, name).name
        return data

    def describe(self) -> str:
        """Multi-line summary of the current settings."""
        building_size = (f'{self.standard_building_width:.0f}x{self.standard_building_depth:.0f} px'
                         if self.use_standard_size else 'Random')
        lines = [
            f'Buildings:      {self.num_buildings}',
            f'Layout Size:    {self.layout_size}x{self.layout_size}',
            f'Building Size:  {building_size}',
            f'Road Pattern:   {self.road_pattern.value}',
            f'Road Width:     {self.road_width} px',
            f'Skyline Type:   {self.skyline_type.value}',
            f'Texture Theme:  {self.texture_theme.value}',
            f'Parks:          {self.num_parks} (radius {self.park_radius})',
            f'Fountain:       radius {self.fountain_radius}',
            f'Screen:         {self.screen_width}x{self.screen_height}',
        ]
        return '\n'.join(lines)


def _next_member(member):
    members = list(type(member))
    return members[(members.index(member) + 1) % len(members)]
