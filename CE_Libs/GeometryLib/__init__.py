"""
GeometryLib - Coordinate geometry for the crop editor

This module provides the geometry types, the fit-to-window view transform
and the helpers that turn selection corners into crop rectangles.
"""

from CE_Libs.GeometryLib.geometry_models import CropRect, Point2, Size2D
from CE_Libs.GeometryLib.view_transform import ViewTransform, compute_view_transform
from CE_Libs.GeometryLib.crop_region import (
    clamp_coordinate,
    clamp_point,
    normalize_corners,
    corners_to_crop_rect,
)

__all__ = [
    "CropRect",
    "Point2",
    "Size2D",
    "ViewTransform",
    "compute_view_transform",
    "clamp_coordinate",
    "clamp_point",
    "normalize_corners",
    "corners_to_crop_rect",
]
