"""
Geometry data models for Coral Editor.

Window space and image space share the same point type. Which space a
point lives in is implied by where it came from; convert between the two
only through a ViewTransform.

Classes:
    Point2: A floating-point 2D position
    Size2D: Pixel dimensions of an image or window
    CropRect: Integer crop region with a top-left origin
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point2:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Size2D:
    """Width and height in whole pixels."""
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size components must be >= 0, got {self.width}x{self.height}")

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class CropRect:
    """
    Crop region in image pixels.

    Attributes:
        x: Left edge (inclusive)
        y: Top edge (inclusive)
        width: Number of columns
        height: Number of rows
    """
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"CropRect components must be >= 0, got {self}")

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> Size2D:
        return Size2D(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow-style (left, upper, right, lower) box."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def fits_within(self, size: Size2D) -> bool:
        return self.x + self.width <= size.width and self.y + self.height <= size.height
