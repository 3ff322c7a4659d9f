# polybounds/geometry/__init__.py

from .primitives import Point, LineString
from .bounding_box import Bbox, BoundingBox, bbox, bbox_of, require_bbox

__all__ = [
    "Point",
    "LineString",
    "Bbox",
    "BoundingBox",
    "bbox",
    "bbox_of",
    "require_bbox",
]
