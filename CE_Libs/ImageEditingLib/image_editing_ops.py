"""
Core image operations for Coral Editor.

This module provides the collaborators around the crop engine: loading the
source image, applying a crop rectangle, saving the result and converting
pixels for display.

Functions:
    load_image: Read an image from a file or stdin as RGBA
    image_size: Size2D of a PIL image
    crop_image: Copy a CropRect out of an image into a new buffer
    save_image: Save an image to disk
    image_to_array: RGBA numpy array of an image
"""

from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union
import logging
import sys

import numpy as np
from PIL import Image

from CE_Libs.constants import DEFAULT_OUTPUT_FORMAT, IMAGE_MODE, STDIN_SOURCE
from CE_Libs.errors import InvalidImageSizeError
from CE_Libs.GeometryLib.geometry_models import CropRect, Size2D
from CE_Libs.ImageEditingLib.image_models import ImageRecord

logger = logging.getLogger(__name__)


def load_image(source: Union[str, Path], stdin: Optional[BinaryIO] = None) -> ImageRecord:
    """
    Load an image and convert it to RGBA.

    Args:
        source: Path to an image file, or "-" to read encoded bytes from stdin
        stdin: Binary stream used for "-" (defaults to sys.stdin.buffer)

    Returns:
        An ImageRecord whose original and current images are the same pixels

    Raises:
        OSError: If the file cannot be read
        PIL.UnidentifiedImageError: If the data is not a supported image
        InvalidImageSizeError: If the image has zero width or height
    """
    if str(source) == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
        with Image.open(BytesIO(data)) as img:
            image = img.convert(IMAGE_MODE)
        path = None
    else:
        path = Path(source)
        with Image.open(path) as img:
            image = img.convert(IMAGE_MODE)

    size = image_size(image)
    if size.is_empty:
        raise InvalidImageSizeError(size.width, size.height)

    logger.info(f"Loaded {path if path is not None else 'stdin'} ({size.width}x{size.height})")
    return ImageRecord(path=path, original=image, current=image.copy())


def image_size(image: Any) -> Size2D:
    width, height = image.size
    return Size2D(int(width), int(height))


def crop_image(image: Any, rect: CropRect) -> Any:
    """
    Copy a rectangular region of an image into a new image.

    The source image is left untouched, so callers can swap the result in
    only once it exists.

    Args:
        image: A PIL Image
        rect: Region to extract; must be non-empty and inside the image

    Returns:
        A new PIL Image of exactly rect.width x rect.height

    Raises:
        ValueError: If the rectangle is empty or extends past the image
    """
    if rect.is_empty:
        raise ValueError(f"Cannot crop an empty region: {rect}")

    size = image_size(image)
    if not rect.fits_within(size):
        raise ValueError(f"Crop region {rect} exceeds image size {size.width}x{size.height}")

    cropped = image.crop(rect.box)
    cropped.load()
    return cropped


def save_image(image: Any, output_path: Union[str, Path], save_format: str = DEFAULT_OUTPUT_FORMAT) -> Path:
    """
    Save an image, creating the parent directory if needed.

    Args:
        image: A PIL Image
        output_path: Destination file path
        save_format: Format name passed to Pillow

    Returns:
        The path written

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(output_path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    # JPEG has no alpha channel
    if save_format.upper() in ("JPEG", "JPG") and image.mode != "RGB":
        image = image.convert("RGB")

    image.save(path, format=save_format)
    logger.info(f"Saved image to {path}")
    return path


def image_to_array(image: Any) -> np.ndarray:
    """Return a contiguous height x width x 4 uint8 array of the image."""
    if image.mode != IMAGE_MODE:
        image = image.convert(IMAGE_MODE)
    return np.ascontiguousarray(np.asarray(image, dtype=np.uint8))
