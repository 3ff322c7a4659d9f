# polybounds/geometry/bounding_box.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from ..errors import EmptyGeometryError
from .primitives import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bbox:
    """
    Axis aligned bounding box.

    xmin <= xmax and ymin <= ymax for any box produced by bbox().
    A single point gives a degenerate box with zero width and height.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    def corners(self) -> List[Point]:
        # counter clockwise from the lower left
        return [
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        ]

    def contains(self, pt: Point) -> bool:
        return self.xmin <= pt.x <= self.xmax and self.ymin <= pt.y <= self.ymax

    def translate(self, dx: float, dy: float) -> "Bbox":
        return Bbox(
            xmin=self.xmin + dx,
            xmax=self.xmax + dx,
            ymin=self.ymin + dy,
            ymax=self.ymax + dy,
        )


@runtime_checkable
class BoundingBox(Protocol):
    """
    Any geometry that can report its own bounding box.
    """

    def bbox(self) -> Optional[Bbox]:
        ...


def bbox(points: Iterable[Point]) -> Optional[Bbox]:
    """
    Compute the bounding box of an ordered collection of points.

    - Returns None for an empty input. This is a defined absence,
      not an error.
    - Min and max are tracked per axis, so the extremal x and y
      may come from different points.
    - Single pass seeded from the first point; generators work too.

    NaN coordinates give unspecified results, since the comparisons
    assume a strict ordering. Infinite coordinates are compared like
    any other float.
    """
    it = iter(points)
    first = next(it, None)
    if first is None:
        logger.debug("No bounding box for an empty point collection")
        return None

    xmin = xmax = first.x
    ymin = ymax = first.y
    for pt in it:
        px, py = pt.x, pt.y
        if px < xmin:
            xmin = px
        if px > xmax:
            xmax = px
        if py < ymin:
            ymin = py
        if py > ymax:
            ymax = py

    return Bbox(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def require_bbox(points: Iterable[Point]) -> Bbox:
    """
    Like bbox(), but raise EmptyGeometryError instead of returning None.
    """
    b = bbox(points)
    if b is None:
        raise EmptyGeometryError("Cannot compute bounds from empty point list")
    return b


def bbox_of(geometry) -> Optional[Bbox]:
    """
    Bounding box of a geometry object or a plain iterable of points.
    """
    if isinstance(geometry, BoundingBox):
        return geometry.bbox()
    return bbox(geometry)
