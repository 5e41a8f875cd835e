"""
Unit tests for crop_region module.

Tests clamping of image-space coordinates and normalization of two
arbitrary corners into a top-left-origin CropRect.
"""

import math

import pytest

from CE_Libs.GeometryLib.crop_region import (
    clamp_coordinate,
    clamp_point,
    corners_to_crop_rect,
    normalize_corners,
)
from CE_Libs.GeometryLib.geometry_models import CropRect, Point2, Size2D


class TestClampCoordinate:
    """Tests for clamp_coordinate function."""

    @pytest.mark.parametrize("value", [-0.1, -152.6, -math.inf, math.nan])
    def test_negative_and_nan_become_zero(self, value):
        assert clamp_coordinate(value, 800) == 0

    @pytest.mark.parametrize("value", [800.0, 800.5, 12345.0, math.inf])
    def test_past_limit_caps_to_limit(self, value):
        assert clamp_coordinate(value, 800) == 800

    def test_floor_truncates_fraction(self):
        assert clamp_coordinate(67.9, 600) == 67

    def test_round_policy_rounds_fraction(self):
        assert clamp_coordinate(67.5, 600, "round") == 68
        assert clamp_coordinate(67.4, 600, "round") == 67

    def test_round_policy_never_exceeds_limit(self):
        assert clamp_coordinate(599.7, 600, "round") == 600

    @pytest.mark.parametrize("value", [0, 1, 399, 800])
    def test_in_bounds_integer_is_unchanged(self, value):
        """Clamping an in-bounds whole coordinate should be a no-op."""
        assert clamp_coordinate(float(value), 800) == value

    @pytest.mark.parametrize("value", [-5.0, 0.3, 67.4, 799.99, 900.0, math.nan])
    @pytest.mark.parametrize("rounding", ["floor", "round"])
    def test_idempotent(self, value, rounding):
        """Clamping twice should equal clamping once."""
        once = clamp_coordinate(value, 800, rounding)
        assert clamp_coordinate(float(once), 800, rounding) == once

    def test_unknown_policy_raises(self):
        with pytest.raises(ValueError):
            clamp_coordinate(1.0, 10, "ceil")


class TestClampPoint:
    def test_clamps_each_axis_independently(self):
        corner = clamp_point(Point2(-52.6, 67.4), Size2D(800, 600))
        assert corner == (0, 67)

    def test_uses_axis_specific_limits(self):
        corner = clamp_point(Point2(1000.0, 1000.0), Size2D(800, 600))
        assert corner == (800, 600)


class TestNormalizeCorners:
    """Tests for normalize_corners function."""

    def test_top_left_to_bottom_right(self):
        assert normalize_corners((10, 20), (110, 70)) == CropRect(10, 20, 100, 50)

    def test_bottom_right_to_top_left(self):
        assert normalize_corners((110, 70), (10, 20)) == CropRect(10, 20, 100, 50)

    def test_mixed_directions(self):
        """A drag up-and-right should still give a top-left origin."""
        assert normalize_corners((10, 70), (110, 20)) == CropRect(10, 20, 100, 50)

    @pytest.mark.parametrize(
        "a,b",
        [
            ((0, 0), (800, 600)),
            ((5, 500), (300, 2)),
            ((7, 7), (7, 7)),
            ((0, 67), (0, 0)),
        ],
    )
    def test_symmetric(self, a, b):
        """Swapping the corners should give the same rectangle."""
        assert normalize_corners(a, b) == normalize_corners(b, a)

    def test_same_corner_is_empty(self):
        rect = normalize_corners((7, 7), (7, 7))
        assert rect.is_empty
        assert rect == CropRect(7, 7, 0, 0)


class TestCornersToCropRect:
    def test_result_stays_inside_image(self):
        size = Size2D(800, 600)
        rect = corners_to_crop_rect(Point2(-100.0, 550.5), Point2(900.0, 20.0), size)

        assert rect == CropRect(0, 20, 800, 530)
        assert rect.fits_within(size)

    def test_fully_outside_on_one_side_is_empty(self):
        rect = corners_to_crop_rect(Point2(-152.6, -52.6), Point2(-52.6, 67.4), Size2D(800, 600))

        assert rect == CropRect(0, 0, 0, 67)
        assert rect.is_empty


class TestCropRect:
    def test_box(self):
        assert CropRect(200, 150, 200, 150).box == (200, 150, 400, 300)

    def test_rejects_negative_components(self):
        with pytest.raises(ValueError):
            CropRect(-1, 0, 10, 10)

    def test_fits_within(self):
        assert CropRect(0, 0, 800, 600).fits_within(Size2D(800, 600))
        assert not CropRect(1, 0, 800, 600).fits_within(Size2D(800, 600))
