# polybounds/errors.py

from __future__ import annotations


class EmptyGeometryError(ValueError):
    """
    Raised by callers that demand a bounding box from zero points.
    """


class PointsFileError(ValueError):
    """
    A points file could not be read or did not hold point data.
    """

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
