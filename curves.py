# ============================================================================
# FILE: curves.py
# ============================================================================
"""
Curve data structures for the Geometry Editor.

The curve set is closed: Line, Circle and Polyline. Every curve is a frozen
dataclass, so curves behave as values and can be shared freely between a
Drawing and the containers filtered out of it.
"""
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar


class FormatError(ValueError):
    """Raised when stored curve data cannot be turned back into curves"""


def _number(value, name):
    """Return *value* as a float, rejecting anything that is not a JSON number"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise FormatError(f"{name} is too large: {e}") from e
    if not math.isfinite(number):
        raise FormatError(f"{name} must be finite, got {number}")
    return number


def _field(data, name):
    try:
        return data[name]
    except KeyError:
        raise FormatError(f"{data.get('type', 'curve')} record is missing '{name}'") from None


@dataclass(frozen=True)
class Point:
    """A 2D point"""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def coerce(cls, value) -> "Point":
        """Accept a Point or an (x, y) pair"""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def to_list(self) -> List[float]:
        return [self.x, self.y]

    @classmethod
    def from_list(cls, data, name="point") -> "Point":
        if not isinstance(data, (list, tuple)) or len(data) != 2:
            raise FormatError(f"{name} must be an [x, y] pair, got {data!r}")
        return cls(_number(data[0], f"{name}.x"), _number(data[1], f"{name}.y"))


class Curve:
    """Base class for all drawable curves"""

    # Discriminator written to and read from saved files
    type_tag: ClassVar[str] = ""

    def draw(self, context):
        """Render this curve on *context* (a render context, see canvas_manager)"""
        raise NotImplementedError

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Get bounding box of curve as (min_x, min_y, max_x, max_y)"""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Convert curve to dictionary for saving"""
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data):
        """Create curve from dictionary"""
        raise NotImplementedError


@dataclass(frozen=True)
class Line(Curve):
    start: Point
    end: Point

    type_tag: ClassVar[str] = "line"

    def __post_init__(self):
        object.__setattr__(self, 'start', Point.coerce(self.start))
        object.__setattr__(self, 'end', Point.coerce(self.end))

    def draw(self, context):
        context.draw_line([self.start, self.end])

    def bounds(self):
        return (
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            max(self.start.x, self.end.x),
            max(self.start.y, self.end.y)
        )

    def to_dict(self):
        return {
            'type': self.type_tag,
            'start': self.start.to_list(),
            'end': self.end.to_list(),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            Point.from_list(_field(data, 'start'), 'start'),
            Point.from_list(_field(data, 'end'), 'end'),
        )


@dataclass(frozen=True)
class Circle(Curve):
    center: Point
    radius: float

    type_tag: ClassVar[str] = "circle"

    def __post_init__(self):
        object.__setattr__(self, 'center', Point.coerce(self.center))
        object.__setattr__(self, 'radius', float(self.radius))
        if not (math.isfinite(self.radius) and self.radius >= 0):
            raise ValueError(f"circle radius must be finite and non-negative, got {self.radius}")

    def draw(self, context):
        context.draw_ellipse(self.bounds())

    def bounds(self):
        cx, cy, r = self.center.x, self.center.y, self.radius
        return (cx - r, cy - r, cx + r, cy + r)

    def to_dict(self):
        return {
            'type': self.type_tag,
            'center': self.center.to_list(),
            'radius': self.radius,
        }

    @classmethod
    def from_dict(cls, data):
        center = Point.from_list(_field(data, 'center'), 'center')
        radius = _number(_field(data, 'radius'), 'radius')
        if not radius >= 0:
            raise FormatError(f"circle radius must be non-negative, got {radius}")
        return cls(center, radius)


@dataclass(frozen=True)
class Polyline(Curve):
    points: Tuple[Point, ...] = ()

    type_tag: ClassVar[str] = "polyline"

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(Point.coerce(p) for p in self.points))

    def draw(self, context):
        # A single vertex has no segment to draw
        if len(self.points) >= 2:
            context.draw_line(list(self.points))

    def bounds(self):
        if not self.points:
            return None
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self):
        return {
            'type': self.type_tag,
            'points': [p.to_list() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data):
        points = _field(data, 'points')
        if not isinstance(points, list):
            raise FormatError(f"points must be a list, got {points!r}")
        return cls(tuple(Point.from_list(p, f"points[{i}]") for i, p in enumerate(points)))


CURVE_TYPES: Dict[str, Type[Curve]] = {
    cls.type_tag: cls for cls in (Line, Circle, Polyline)
}


def curve_from_dict(data) -> Curve:
    """Rebuild the concrete curve named by the record's 'type' tag"""
    if not isinstance(data, dict):
        raise FormatError(f"curve record must be an object, got {data!r}")
    tag = data.get('type')
    cls = CURVE_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise FormatError(f"unknown curve type {tag!r}")
    return cls.from_dict(data)


T = TypeVar('T', bound=Curve)


class CurveContainer(Generic[T]):
    """Ordered collection holding curves of a single concrete type"""

    def __init__(self, curves: Iterable[T] = ()):
        self._items: List[T] = list(curves)

    @classmethod
    def of_type(cls, curves: Iterable[Curve], kind: Type[T]) -> "CurveContainer[T]":
        """Collect the curves whose type is exactly *kind*, keeping their order"""
        container = cls()
        container.extend(c for c in curves if type(c) is kind)
        return container

    def append(self, curve: T):
        self._items.append(curve)

    def extend(self, curves: Iterable[T]):
        self._items.extend(curves)

    def __len__(self):
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other):
        if isinstance(other, CurveContainer):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self):
        return f"CurveContainer({self._items!r})"
