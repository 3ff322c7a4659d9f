from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geometry import Bbox, LineString, Point


class PointModel(BaseModel):
    # points read from files must be finite
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float

    @classmethod
    def from_point(cls, pt: Point) -> "PointModel":
        return cls(x=pt.x, y=pt.y)

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class LineStringModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    points: List[PointModel]

    @classmethod
    def from_linestring(cls, line: LineString) -> "LineStringModel":
        return cls(points=[PointModel.from_point(p) for p in line])

    def to_linestring(self) -> LineString:
        return LineString([p.to_point() for p in self.points])

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "LineStringModel":
        return cls.model_validate_json(data)


class BboxModel(BaseModel):
    # keep infinite bounds as Infinity rather than null
    model_config = ConfigDict(ser_json_inf_nan="constants")

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @model_validator(mode="after")
    def _validate_ordering(self):
        if self.xmin > self.xmax:
            raise ValueError(f"xmin ({self.xmin}) is greater than xmax ({self.xmax})")
        if self.ymin > self.ymax:
            raise ValueError(f"ymin ({self.ymin}) is greater than ymax ({self.ymax})")
        return self

    @classmethod
    def from_bbox(cls, b: Bbox) -> "BboxModel":
        return cls(xmin=b.xmin, xmax=b.xmax, ymin=b.ymin, ymax=b.ymax)

    def to_bbox(self) -> Bbox:
        return Bbox(xmin=self.xmin, xmax=self.xmax, ymin=self.ymin, ymax=self.ymax)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "BboxModel":
        return cls.model_validate_json(data)


class BboxResult(BaseModel):
    """
    Output of a bbox computation. bbox is None when there were no points.
    """
    model_config = ConfigDict(ser_json_inf_nan="constants")

    count: int = Field(ge=0)
    bbox: Optional[BboxModel] = None

    @classmethod
    def from_linestring(cls, line: LineString) -> "BboxResult":
        b = line.bbox()
        return cls(
            count=len(line),
            bbox=None if b is None else BboxModel.from_bbox(b),
        )

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "BboxResult":
        return cls.model_validate_json(data)
