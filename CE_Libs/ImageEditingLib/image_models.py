"""
Image editing data models for Coral Editor.

Classes:
    ImageRecord: The loaded image, its source path and the current edit
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from CE_Libs.GeometryLib.geometry_models import Size2D


@dataclass
class ImageRecord:
    """
    Container for the image being edited.

    Attributes:
        path: Source file, or None when the image came from stdin
        original: The image as loaded
        current: The image after all crops so far
    """
    path: Optional[Path]
    original: 'Image.Image'
    current: 'Image.Image'

    @property
    def size(self) -> Size2D:
        return Size2D(*self.current.size)

    @property
    def source_name(self) -> str:
        return self.path.name if self.path is not None else "<stdin>"
