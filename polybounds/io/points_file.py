# polybounds/io/points_file.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from ..errors import PointsFileError
from ..geometry import LineString, Point
from ..results import LineStringModel, PointModel

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _to_point(item: Any) -> Point:
    if isinstance(item, dict):
        return PointModel.model_validate(item).to_point()
    if isinstance(item, (list, tuple)) and len(item) == 2:
        return PointModel(x=item[0], y=item[1]).to_point()
    raise ValueError(f"not a point: {item!r}")


def parse_points(data: Any) -> LineString:
    """
    Build a LineString from decoded JSON.

    Accepted shapes:
      - [[x, y], ...]
      - [{"x": .., "y": ..}, ...]
      - {"points": [...]}   (LineStringModel)
    """
    if isinstance(data, dict):
        return LineStringModel.model_validate(data).to_linestring()
    if isinstance(data, list):
        pts: List[Point] = [_to_point(item) for item in data]
        return LineString(pts)
    raise ValueError(f"expected a list or an object, got {type(data).__name__}")


def load_linestring(path: PathLike) -> LineString:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise PointsFileError(path, f"cannot read file ({e})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PointsFileError(path, f"invalid JSON ({e})") from e

    try:
        line = parse_points(data)
    except (ValidationError, ValueError) as e:
        raise PointsFileError(path, str(e)) from e

    logger.info("Loaded %d points from %s", len(line), path)
    return line
