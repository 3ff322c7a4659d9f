from .points_file import load_linestring, parse_points

__all__ = ["load_linestring", "parse_points"]
