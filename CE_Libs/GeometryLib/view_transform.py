"""
Fit-to-window view transform.

The editor always shows the whole image, scaled uniformly to fit the window
and centered in it. That mapping is a similarity transform with no rotation
or shear: a single scale factor followed by a translation.

Classes:
    ViewTransform: Image space to window space mapping and its inverse

Functions:
    compute_view_transform: Build the transform for a window and image size
"""

from dataclasses import dataclass
import logging
import math
from typing import Tuple

from CE_Libs.constants import DEFAULT_FIT_MARGIN
from CE_Libs.errors import InvalidImageSizeError, NonInvertibleError
from CE_Libs.GeometryLib.geometry_models import Point2, Size2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewTransform:
    """
    Uniform scale followed by a translation.

    Attributes:
        scale: Window pixels per image pixel
        tx: Window x coordinate of the image's left edge
        ty: Window y coordinate of the image's top edge
    """
    scale: float
    tx: float
    ty: float

    @classmethod
    def identity(cls) -> "ViewTransform":
        return cls(scale=1.0, tx=0.0, ty=0.0)

    @classmethod
    def compute(
        cls,
        window_size: Size2D,
        image_size: Size2D,
        fit_margin: float = DEFAULT_FIT_MARGIN,
    ) -> "ViewTransform":
        return compute_view_transform(window_size, image_size, fit_margin)

    @property
    def is_invertible(self) -> bool:
        return math.isfinite(self.scale) and self.scale > 0.0

    def forward(self, point: Point2) -> Point2:
        """Map an image-space point to window space."""
        return Point2(point.x * self.scale + self.tx, point.y * self.scale + self.ty)

    def inverse(self, point: Point2) -> Point2:
        """
        Map a window-space point back to image space.

        Raises:
            NonInvertibleError: If the scale is zero or not finite
        """
        if not self.is_invertible:
            raise NonInvertibleError(self.scale)
        return Point2((point.x - self.tx) / self.scale, (point.y - self.ty) / self.scale)

    def forward_size(self, size: Size2D) -> Tuple[float, float]:
        """Displayed (width, height) of an image of the given size."""
        return (size.width * self.scale, size.height * self.scale)


def compute_view_transform(
    window_size: Size2D,
    image_size: Size2D,
    fit_margin: float = DEFAULT_FIT_MARGIN,
) -> ViewTransform:
    """
    Compute the transform that fits an image inside a window and centers it.

    The scale is the smaller of the two axis ratios times ``fit_margin``,
    so the image keeps its aspect ratio and leaves a small border. The
    translation puts the image center on the window center.

    A window with a zero dimension produces a zero scale. That is not an
    error here; the resulting transform simply reports itself as not
    invertible and callers skip inversion for that frame.

    Args:
        window_size: Current window size in window pixels
        image_size: Source image size in image pixels
        fit_margin: Fraction of the fitted size to use (0 < margin <= 1)

    Returns:
        The ViewTransform for this frame

    Raises:
        InvalidImageSizeError: If the image has a zero dimension
    """
    if image_size.is_empty:
        raise InvalidImageSizeError(image_size.width, image_size.height)

    window_w = float(window_size.width)
    window_h = float(window_size.height)
    image_w = float(image_size.width)
    image_h = float(image_size.height)

    scale = min(window_w / image_w, window_h / image_h) * fit_margin
    tx = window_w / 2.0 - image_w * scale / 2.0
    ty = window_h / 2.0 - image_h * scale / 2.0

    if window_size.is_empty:
        logger.debug(f"Window size {window_w:g}x{window_h:g} collapsed, transform not invertible")

    return ViewTransform(scale=scale, tx=tx, ty=ty)
