"""
Exception types raised by the Coral Editor core.

Classes:
    CoralEditorError: Base class for all editor errors
    InvalidImageSizeError: The image has zero width or height (fatal)
    NonInvertibleError: The view transform cannot be inverted (transient)
"""


class CoralEditorError(Exception):
    """Base class for Coral Editor errors."""


class InvalidImageSizeError(CoralEditorError, ValueError):
    """Raised when an image has no drawable area."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class NonInvertibleError(CoralEditorError, ArithmeticError):
    """Raised when mapping a window point back to the image is impossible.

    Happens when the window collapses to zero width or height, which makes
    the fit scale zero, or when the scale is not a finite number.
    """

    def __init__(self, scale: float) -> None:
        super().__init__(f"View transform with scale {scale!r} is not invertible")
        self.scale = scale
