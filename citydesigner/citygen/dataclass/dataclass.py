"""Module for data classes defining the structures exchanged by the city generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np


class RoadPattern(Enum):
    """Road network topologies."""
    GRID = 'Grid'
    RADIAL = 'Radial'
    RANDOM = 'Random'


class SkylineType(Enum):
    """Building height distributions used by batch generation."""
    LOW_RISE = 'Low-Rise'
    MID_RISE = 'Mid-Rise'
    SKYSCRAPER = 'Skyscraper'
    MIXED = 'Mixed'


class TextureTheme(Enum):
    """Facade style handed to the renderer."""
    MODERN = 'Modern'
    CLASSIC = 'Classic'
    INDUSTRIAL = 'Industrial'
    FUTURISTIC = 'Futuristic'


class BuildingType(Enum):
    """Classification of buildings by height."""
    LOW_RISE = 'LOW_RISE'
    MID_RISE = 'MID_RISE'
    HIGH_RISE = 'HIGH_RISE'


class PlacementViolation(Enum):
    """The placement rule a candidate footprint broke."""
    BOUNDARY = 'boundary'
    BUILDING = 'building'
    PARK = 'park'
    FOUNTAIN = 'fountain'
    ROAD = 'road'

    @property
    def message(self) -> str:
        """Human readable reason, as shown to the user after a failed click."""
        return {
            PlacementViolation.BOUNDARY: 'too close to screen edge',
            PlacementViolation.BUILDING: 'overlaps with existing building',
            PlacementViolation.PARK: 'overlaps with park',
            PlacementViolation.FOUNTAIN: 'overlaps with fountain',
            PlacementViolation.ROAD: 'overlaps with road',
        }[self]


@dataclass(frozen=True)
class Point:
    """An integer point in pixel space."""
    x: int
    y: int

    def to_dict(self):
        """Convert the point to dictionary representation."""
        return {
            'x': self.x,
            'y': self.y
        }


@dataclass(frozen=True, eq=True)
class Bounds:
    """An axis-aligned box.

    (x, y) is the corner with the smallest coordinates
    width: extent along x
    height: extent along y
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_center(cls, cx: float, cy: float, width: float, height: float) -> 'Bounds':
        """Build a box centred on (cx, cy)."""
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def expanded(self, margin: float) -> 'Bounds':
        """Return a copy grown by ``margin`` on every side."""
        return Bounds(self.x - margin, self.y - margin, self.width + 2 * margin, self.height + 2 * margin)

    def contains_point(self, px: float, py: float) -> bool:
        """Inclusive point-in-box test."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def intersects(self, other: 'Bounds') -> bool:
        """Checks if two Bounds objects' bounding boxes intersect."""
        return not (self.x + self.width < other.x or
                    self.x > other.x + other.width or
                    self.y + self.height < other.y or
                    self.y > other.y + other.height)

    def to_dict(self):
        """Convert the bounds to dictionary representation."""
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height
        }


@dataclass(frozen=True)
class Road:
    """A rasterized road: an ordered run of points plus a drawing width."""
    points: Tuple[Point, ...]
    width: int

    def __post_init__(self):
        """Freeze the point sequence."""
        object.__setattr__(self, 'points', tuple(self.points))

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def bounds(self) -> Bounds:
        """Tightest box around every point of the road."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def to_dict(self):
        """Convert the road to dictionary representation."""
        return {
            'width': self.width,
            'points': [p.to_dict() for p in self.points]
        }


@dataclass(frozen=True)
class CircleRegion:
    """A circular area (park or fountain) described by its rasterized boundary.

    The center is the centroid of the boundary points and the radius the largest
    distance from that centroid to a boundary point. Both are computed once in
    :meth:`from_points`; collision code and renderers read them from here.
    """
    points: Tuple[Point, ...]
    center_x: float
    center_y: float
    radius: float

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> 'CircleRegion':
        """Derive center and radius from a boundary.

        Args:
            points: Boundary points, typically the output of ``midpoint_circle``.

        Returns:
            The region. An empty boundary gives a zero-radius region at the origin.
        """
        points = tuple(points)
        if not points:
            return cls(points, 0.0, 0.0, 0.0)
        coords = np.array([(p.x, p.y) for p in points], dtype=float)
        center = coords.mean(axis=0)
        radius = float(np.hypot(coords[:, 0] - center[0], coords[:, 1] - center[1]).max())
        return cls(points, float(center[0]), float(center[1]), radius)

    @property
    def center(self) -> Tuple[float, float]:
        return self.center_x, self.center_y

    def contains(self, px: float, py: float) -> bool:
        """Return True if (px, py) lies inside or on the circle."""
        dx = px - self.center_x
        dy = py - self.center_y
        return dx * dx + dy * dy <= self.radius * self.radius

    def to_list(self) -> List[Dict[str, int]]:
        """Serialize as the list of boundary points."""
        return [p.to_dict() for p in self.points]


@dataclass(frozen=True)
class Building:
    """A building footprint centred on (x, y)."""
    x: float
    y: float
    width: float
    depth: float
    height: float
    building_type: BuildingType

    @property
    def bounds(self) -> Bounds:
        """Ground-plane AABB of the footprint."""
        return Bounds.from_center(self.x, self.y, self.width, self.depth)

    def to_dict(self):
        """Convert the building to dictionary representation."""
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'depth': self.depth,
            'height': self.height,
            'type': self.building_type.value
        }


@dataclass
class CityLayout:
    """Everything a generation produces, handed as-is to renderers and savers."""
    roads: List[Road] = field(default_factory=list)
    parks: List[CircleRegion] = field(default_factory=list)
    fountain: Optional[CircleRegion] = None
    buildings: List[Building] = field(default_factory=list)
    is_generated: bool = False

    def clear(self):
        """Reset to the empty, ungenerated state."""
        self.roads.clear()
        self.parks.clear()
        self.fountain = None
        self.buildings.clear()
        self.is_generated = False

    @property
    def total_road_points(self) -> int:
        return sum(len(road.points) for road in self.roads)

    def building_counts(self) -> Dict[BuildingType, int]:
        """Number of buildings per type, every type present."""
        counts = {building_type: 0 for building_type in BuildingType}
        for building in self.buildings:
            counts[building.building_type] += 1
        return counts


@dataclass
class GenerationReport:
    """Outcome of a batch building generation.

    ``placed`` may be lower than ``requested`` when the attempt budget ran out;
    that is a normal, non-fatal result.
    """
    requested: int
    placed: int = 0
    attempts: int = 0
    max_attempts: int = 0
    counts: Dict[BuildingType, int] = field(default_factory=lambda: {t: 0 for t in BuildingType})

    @property
    def exhausted(self) -> bool:
        return self.placed < self.requested


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a single interactive placement."""
    success: bool
    violation: Optional[PlacementViolation] = None
    building: Optional[Building] = None

    @property
    def message(self) -> str:
        if self.success:
            return f'Building placed at ({int(self.building.x)}, {int(self.building.y)})'
        return f'Cannot place building: {self.violation.message}'
