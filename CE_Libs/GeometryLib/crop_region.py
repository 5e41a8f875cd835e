"""
Clamping and normalization of image-space selection corners.

A drag can start or end anywhere, including outside the image and outside
the window, and in any direction. These helpers turn two arbitrary
image-space corners into a CropRect with a top-left origin that lies
entirely inside the image.

Functions:
    clamp_coordinate: Clamp one float coordinate to whole pixels in [0, limit]
    clamp_point: Clamp an image-space point to the image bounds
    normalize_corners: Build a CropRect from two clamped corners
    corners_to_crop_rect: Clamp and normalize in one step
"""

import math
from typing import Tuple

from CE_Libs.constants import DEFAULT_ROUNDING, ROUNDING_POLICIES, ROUNDING_ROUND
from CE_Libs.GeometryLib.geometry_models import CropRect, Point2, Size2D

PixelCorner = Tuple[int, int]


def clamp_coordinate(value: float, limit: int, rounding: str = DEFAULT_ROUNDING) -> int:
    """
    Clamp a coordinate to a whole pixel index in ``[0, limit]``.

    Negative values and NaN become 0; values past ``limit`` become ``limit``.
    Clamping an in-range whole number returns it unchanged, so applying the
    function twice gives the same result as applying it once.

    Args:
        value: Image-space coordinate
        limit: Image dimension along this axis
        rounding: "floor" truncates fractional pixels, "round" rounds them

    Returns:
        An integer in [0, limit]
    """
    if rounding not in ROUNDING_POLICIES:
        raise ValueError(f"Unsupported rounding policy: {rounding}")

    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= limit:
        return limit

    if rounding == ROUNDING_ROUND:
        pixel = int(round(value))
    else:
        pixel = int(math.floor(value))
    return min(limit, pixel)


def clamp_point(point: Point2, image_size: Size2D, rounding: str = DEFAULT_ROUNDING) -> PixelCorner:
    return (
        clamp_coordinate(point.x, image_size.width, rounding),
        clamp_coordinate(point.y, image_size.height, rounding),
    )


def _unsigned_difference(a: int, b: int) -> int:
    # Subtract in whichever order stays non-negative.
    if a >= b:
        return a - b
    return b - a


def normalize_corners(a: PixelCorner, b: PixelCorner) -> CropRect:
    """
    Build a top-left-origin rectangle from two opposite pixel corners.

    The corners may be given in any order; swapping them yields the same
    rectangle.
    """
    return CropRect(
        x=min(a[0], b[0]),
        y=min(a[1], b[1]),
        width=_unsigned_difference(a[0], b[0]),
        height=_unsigned_difference(a[1], b[1]),
    )


def corners_to_crop_rect(
    a: Point2,
    b: Point2,
    image_size: Size2D,
    rounding: str = DEFAULT_ROUNDING,
) -> CropRect:
    """Clamp two image-space corners to the image and normalize them."""
    return normalize_corners(
        clamp_point(a, image_size, rounding),
        clamp_point(b, image_size, rounding),
    )
