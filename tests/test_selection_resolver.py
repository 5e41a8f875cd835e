"""
Unit tests for resolve_pending_selection.

Tests the full path from two window-space corners to a crop outcome.
"""

import pytest

from CE_Libs.GeometryLib.geometry_models import CropRect, Point2, Size2D
from CE_Libs.GeometryLib.view_transform import ViewTransform, compute_view_transform
from CE_Libs.SelectionLib.selection_models import PendingSelection
from CE_Libs.SelectionLib.selection_resolver import resolve_pending_selection

IMAGE_SIZE = Size2D(800, 600)


def _pending(ax, ay, bx, by):
    return PendingSelection(Point2(float(ax), float(ay)), Point2(float(bx), float(by)))


class TestResolvePendingSelection:
    """Tests for resolve_pending_selection function."""

    def test_drag_in_fitted_view(self, scenario_transform):
        """(50,50)->(150,120) in the 400x300 view maps to image pixels (84,89)-(294,236)."""
        result = resolve_pending_selection(_pending(50, 50, 150, 120), scenario_transform, IMAGE_SIZE)

        assert result.status == "crop"
        assert result.should_crop
        assert result.rect == CropRect(84, 89, 210, 147)

    def test_drag_left_of_image_is_noop(self, scenario_transform):
        """Both corners left of the image clamp to x=0, giving zero width."""
        result = resolve_pending_selection(_pending(5, 50, 8, 120), scenario_transform, IMAGE_SIZE)

        assert result.status == "noop"
        assert not result.should_crop
        assert result.rect == CropRect(0, 89, 0, 147)

    def test_identity_view(self):
        """(200,150)->(400,300) with an identity view crops exactly those pixels."""
        result = resolve_pending_selection(_pending(200, 150, 400, 300), ViewTransform.identity(), IMAGE_SIZE)

        assert result.status == "crop"
        assert result.rect == CropRect(200, 150, 200, 150)

    def test_click_without_drag_is_noop(self, scenario_transform):
        result = resolve_pending_selection(_pending(120, 80, 120, 80), scenario_transform, IMAGE_SIZE)

        assert result.status == "noop"
        assert result.rect.is_empty

    @pytest.mark.parametrize(
        "p,q",
        [
            ((50, 50), (150, 120)),
            ((-30, 400), (390, -10)),
            ((0, 0), (400, 300)),
            ((199.5, 10.25), (17.75, 280.0)),
        ],
    )
    def test_corner_order_does_not_matter(self, scenario_transform, p, q):
        forward = resolve_pending_selection(_pending(*p, *q), scenario_transform, IMAGE_SIZE)
        backward = resolve_pending_selection(_pending(*q, *p), scenario_transform, IMAGE_SIZE)

        assert forward == backward

    def test_drag_beyond_window_covers_whole_image(self, scenario_transform):
        result = resolve_pending_selection(_pending(-500, -500, 5000, 5000), scenario_transform, IMAGE_SIZE)

        assert result.rect == CropRect(0, 0, 800, 600)

    def test_collapsed_window_defers(self):
        """A window resized to zero width mid-drag should defer, not crash."""
        transform = compute_view_transform(Size2D(0, 300), IMAGE_SIZE, 0.95)

        result = resolve_pending_selection(_pending(50, 50, 150, 120), transform, IMAGE_SIZE)

        assert result.status == "deferred"
        assert result.rect is None

    def test_round_policy(self, scenario_transform):
        result = resolve_pending_selection(
            _pending(50, 50, 150, 120), scenario_transform, IMAGE_SIZE, rounding="round"
        )

        # 84.2 -> 84, 89.47 -> 89, 294.7 -> 295, 236.8 -> 237
        assert result.rect == CropRect(84, 89, 211, 148)
