"""
Turn a completed drag into a crop request.

Functions:
    resolve_pending_selection: Map window-space corners to a CropRect
"""

import logging

from CE_Libs.constants import DEFAULT_ROUNDING, OUTCOME_CROP, OUTCOME_DEFERRED, OUTCOME_NOOP
from CE_Libs.errors import NonInvertibleError
from CE_Libs.GeometryLib.crop_region import corners_to_crop_rect
from CE_Libs.GeometryLib.geometry_models import Size2D
from CE_Libs.GeometryLib.view_transform import ViewTransform
from CE_Libs.SelectionLib.selection_models import PendingSelection, SelectionResolution

logger = logging.getLogger(__name__)


def resolve_pending_selection(
    pending: PendingSelection,
    transform: ViewTransform,
    image_size: Size2D,
    rounding: str = DEFAULT_ROUNDING,
) -> SelectionResolution:
    """
    Resolve a pending selection against the current view.

    Both corners are mapped back into image space, clamped to the image and
    normalized into a top-left-origin rectangle.

    A transform that cannot be inverted (the window was resized to zero
    mid-drag) drops the selection with a "deferred" outcome. It is not
    retried: the corners were captured against a view that no longer
    exists, so the user repeats the gesture.

    Args:
        pending: The two window-space corners of the drag
        transform: The view transform of the current frame
        image_size: Size of the image being cropped
        rounding: Pixel rounding policy for fractional corners

    Returns:
        A SelectionResolution with status "crop", "noop" or "deferred"
    """
    try:
        a = transform.inverse(pending.anchor)
        b = transform.inverse(pending.corner)
    except NonInvertibleError as e:
        logger.warning(f"Dropping selection, view is not invertible: {e}")
        return SelectionResolution(OUTCOME_DEFERRED)

    rect = corners_to_crop_rect(a, b, image_size, rounding)

    if rect.is_empty:
        logger.debug(f"Zero-area selection {rect}, nothing to crop")
        return SelectionResolution(OUTCOME_NOOP, rect)

    return SelectionResolution(OUTCOME_CROP, rect)
