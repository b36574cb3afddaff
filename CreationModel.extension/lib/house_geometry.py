# -*- coding: utf-8 -*-
"""Footprint and gable roof geometry for the single-room house.

All lengths are Revit internal units (feet). The footprint is a rectangle
centred on the project origin; walls run counter-clockwise starting with the
south wall. The roof profile lies in the YZ plane at X = 0 and is extruded
along X.

Points are built with ``DB.XYZ`` unless another constructor is passed in
through ``xyz``.
"""
from typing import Any, Callable, List, Optional, Tuple

from pyrevit import DB


def _xyz_factory(xyz: Optional[Callable[..., Any]]) -> Callable[..., Any]:
    return xyz or DB.XYZ


def _require_positive(value: float, name: str) -> float:
    value = float(value)
    if value <= 0:
        raise ValueError("{0} must be positive, got {1}".format(name, value))
    return value


def _require_non_negative(value: float, name: str) -> float:
    value = float(value)
    if value < 0:
        raise ValueError("{0} must not be negative, got {1}".format(name, value))
    return value


def footprint_corners(width_ft: float, depth_ft: float, z: float = 0.0,
                      xyz: Optional[Callable[..., Any]] = None) -> List[Any]:
    """Return the closed corner loop of the footprint.

    Five points, the last one repeating the first:
    (-dx, -dy) -> (dx, -dy) -> (dx, dy) -> (-dx, dy) -> (-dx, -dy).
    """
    make = _xyz_factory(xyz)
    dx = _require_positive(width_ft, "width") / 2.0
    dy = _require_positive(depth_ft, "depth") / 2.0
    return [
        make(-dx, -dy, z),
        make(dx, -dy, z),
        make(dx, dy, z),
        make(-dx, dy, z),
        make(-dx, -dy, z),
    ]


def wall_segments(width_ft: float, depth_ft: float, z: float = 0.0,
                  xyz: Optional[Callable[..., Any]] = None) -> List[Tuple[Any, Any]]:
    """Return four (start, end) pairs: south, east, north, west."""
    corners = footprint_corners(width_ft, depth_ft, z=z, xyz=xyz)
    return [(corners[i], corners[i + 1]) for i in range(4)]


def midpoint(p1: Any, p2: Any, xyz: Optional[Callable[..., Any]] = None) -> Any:
    make = _xyz_factory(xyz)
    return make(
        (p1.X + p2.X) / 2.0,
        (p1.Y + p2.Y) / 2.0,
        (p1.Z + p2.Z) / 2.0,
    )


def roof_extrusion_extents(width_ft: float, wall_width_ft: float) -> Tuple[float, float]:
    """Return (start, end) of the roof extrusion along X.

    The roof covers the footprint plus half a wall thickness on each end so it
    reaches the outer wall faces.
    """
    half = _require_positive(width_ft, "width") / 2.0
    overhang = _require_non_negative(wall_width_ft, "wall width") / 2.0
    return -half - overhang, half + overhang


def gable_profile(depth_ft: float, wall_width_ft: float, elevation_ft: float,
                  ridge_height_ft: float,
                  xyz: Optional[Callable[..., Any]] = None) -> List[Any]:
    """Return eave, ridge, eave points of the gable profile.

    Eaves sit at the outer wall faces on ``elevation_ft``; the ridge is
    ``ridge_height_ft`` above it over the centre line.
    """
    make = _xyz_factory(xyz)
    half = _require_positive(depth_ft, "depth") / 2.0
    overhang = _require_non_negative(wall_width_ft, "wall width") / 2.0
    ridge = _require_positive(ridge_height_ft, "ridge height")
    elevation = float(elevation_ft)
    return [
        make(0.0, -half - overhang, elevation),
        make(0.0, 0.0, elevation + ridge),
        make(0.0, half + overhang, elevation),
    ]


def profile_segments(points: List[Any]) -> List[Tuple[Any, Any]]:
    """Pair consecutive profile points into line segments."""
    return [(points[i], points[i + 1]) for i in range(len(points) - 1)]
