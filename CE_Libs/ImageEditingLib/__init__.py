"""
ImageEditingLib - Image loading, cropping and saving

This module provides the image operations used around the crop engine.
The editor window lives in crop_editor_window and is imported on demand
so the rest of the package works without a display.
"""

from CE_Libs.ImageEditingLib.image_models import ImageRecord
from CE_Libs.ImageEditingLib.image_editing_ops import (
    load_image,
    image_size,
    crop_image,
    save_image,
    image_to_array,
)

__all__ = [
    "ImageRecord",
    "load_image",
    "image_size",
    "crop_image",
    "save_image",
    "image_to_array",
]
