# polybounds/geometry/primitives.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .bounding_box import Bbox


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def new(cls, x: float, y: float) -> "Point":
        return cls(float(x), float(y))

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class LineString:
    """
    Ordered sequence of points describing a path.

    No closure or area is implied. May be empty. Any iterable of
    points is accepted and stored as a tuple.
    """
    points: Tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> "LineString":
        return cls(tuple(Point.new(c[0], c[1]) for c in coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def translate(self, dx: float, dy: float) -> "LineString":
        return LineString(tuple(p.translate(dx, dy) for p in self.points))

    def bbox(self) -> Optional["Bbox"]:
        from .bounding_box import bbox

        return bbox(self.points)
