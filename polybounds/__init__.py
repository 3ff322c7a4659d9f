"""
polybounds package init.

Axis aligned bounding boxes for line strings. The value types and the
bbox() reduction live in polybounds.geometry; JSON models in
polybounds.results.
"""

from .errors import EmptyGeometryError, PointsFileError
from .geometry import Bbox, BoundingBox, LineString, Point, bbox, bbox_of, require_bbox

__version__ = "0.1.0"

__all__ = [
    "Point",
    "LineString",
    "Bbox",
    "BoundingBox",
    "bbox",
    "bbox_of",
    "require_bbox",
    "EmptyGeometryError",
    "PointsFileError",
]
