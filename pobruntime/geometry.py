"""Two-dimensional points, vectors, sizes, axis-aligned boxes and quads."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector:
    """A displacement in two dimensions."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)


@dataclass(frozen=True)
class Point:
    """A position in two dimensions."""

    x: float = 0.0
    y: float = 0.0

    def to_vector(self) -> Vector:
        """The vector from the origin to this point."""
        return Vector(self.x, self.y)

    def translate(self, by: Vector) -> Point:
        """This point moved by a vector."""
        return Point(self.x + by.x, self.y + by.y)

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.translate(other)

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Point = field(default_factory=Point)
    max: Point = field(default_factory=Point)

    @classmethod
    def zero(cls) -> Rect:
        """A box with all coordinates at zero."""
        return cls(Point(), Point())

    @classmethod
    def from_origin_and_size(cls, origin: Point, size: Size) -> Rect:
        """A box starting at ``origin`` that spans ``size``."""
        return cls(origin, Point(origin.x + size.width, origin.y + size.height))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def top_left(self) -> Point:
        return self.min

    def top_right(self) -> Point:
        return Point(self.max.x, self.min.y)

    def bottom_left(self) -> Point:
        return Point(self.min.x, self.max.y)

    def bottom_right(self) -> Point:
        return self.max

    def is_empty(self) -> bool:
        """True if the box has no positive area (NaN coordinates count as empty)."""
        return not (self.max.x > self.min.x and self.max.y > self.min.y)

    def translate(self, by: Vector) -> Rect:
        """This box moved by a vector."""
        return Rect(self.min.translate(by), self.max.translate(by))


@dataclass(frozen=True)
class Quad:
    """Four points, in drawing order."""

    p0: Point = field(default_factory=Point)
    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)
    p3: Point = field(default_factory=Point)

    @classmethod
    def zero(cls) -> Quad:
        """A quad with all points at zero."""
        return cls(Point(), Point(), Point(), Point())

    @classmethod
    def from_size(cls, size: Size) -> Quad:
        """A quad of the given size with its first point at the origin."""
        return cls(
            Point(0.0, 0.0),
            Point(size.width, 0.0),
            Point(size.width, size.height),
            Point(0.0, size.height),
        )

    def translate(self, by: Vector) -> Quad:
        """This quad moved by a vector."""
        return Quad(
            self.p0.translate(by),
            self.p1.translate(by),
            self.p2.translate(by),
            self.p3.translate(by),
        )

    def __iter__(self):
        return iter((self.p0, self.p1, self.p2, self.p3))