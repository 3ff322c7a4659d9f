"""
Unit tests for the pydantic models in polybounds.results
"""

import json
import unittest

from pydantic import ValidationError

from polybounds import Bbox, LineString
from polybounds.results import BboxModel, BboxResult, LineStringModel, PointModel


class TestResults(unittest.TestCase):

    def test_bbox_model_rejects_inverted_box(self):
        with self.assertRaises(ValidationError):
            BboxModel(xmin=2, xmax=1, ymin=0, ymax=0)
        with self.assertRaises(ValidationError):
            BboxModel(xmin=0, xmax=0, ymin=5, ymax=-5)

    def test_bbox_model_conversion(self):
        b = Bbox(xmin=-4., xmax=2., ymin=-3., ymax=4.)
        model = BboxModel.from_bbox(b)
        self.assertEqual(model.to_bbox(), b)
        self.assertEqual(BboxModel.from_json(model.to_json()).to_bbox(), b)

    def test_result_for_empty_linestring(self):
        result = BboxResult.from_linestring(LineString())
        self.assertEqual(result.count, 0)
        self.assertIsNone(result.bbox)
        self.assertIsNone(json.loads(result.to_json())["bbox"])

    def test_result_for_linestring(self):
        line = LineString.from_coords([(1, 1), (2, -2), (-3, -3), (-4, 4)])
        data = json.loads(BboxResult.from_linestring(line).to_json())
        self.assertEqual(data["count"], 4)
        self.assertEqual(
            data["bbox"],
            {"xmin": -4.0, "xmax": 2.0, "ymin": -3.0, "ymax": 4.0},
        )

    def test_linestring_model(self):
        line = LineString.from_coords([(0, 1), (2, 3)])
        model = LineStringModel.from_linestring(line)
        self.assertEqual(LineStringModel.from_json(model.to_json()).to_linestring(), line)


    def test_infinite_bounds_survive_json(self):
        line = LineString.from_coords([(float("inf"), 0), (1, 1)])
        result = BboxResult.from_linestring(line)
        text = result.to_json()
        self.assertIn("Infinity", text)
        self.assertEqual(json.loads(text)["bbox"]["xmax"], float("inf"))
        self.assertEqual(BboxResult.from_json(text).bbox.to_bbox(), line.bbox())

    def test_linestring_model_requires_points(self):
        with self.assertRaises(ValidationError):
            LineStringModel.model_validate({"coords": [[1, 2]]})
        with self.assertRaises(ValidationError):
            LineStringModel.model_validate({})

    def test_point_model_rejects_non_finite(self):
        with self.assertRaises(ValidationError):
            PointModel(x=float("nan"), y=0)

if __name__ == "__main__":
    unittest.main()
