"""
Pytest configuration and shared fixtures for Coral Editor tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image

from CE_Libs.editor_config import EditorConfig
from CE_Libs.GeometryLib.geometry_models import Size2D
from CE_Libs.GeometryLib.view_transform import compute_view_transform
from CE_Libs.ImageEditingLib.image_models import ImageRecord


@pytest.fixture
def sample_image():
    """
    Provide an 800x600 RGBA image with a few marker pixels.

    Returns:
        PIL Image, mostly gray, with red at (84, 89) and blue at (200, 150)
    """
    image = Image.new("RGBA", (800, 600), (128, 128, 128, 255))
    image.putpixel((84, 89), (255, 0, 0, 255))
    image.putpixel((200, 150), (0, 0, 255, 255))
    return image


@pytest.fixture
def image_record(sample_image):
    return ImageRecord(path=None, original=sample_image, current=sample_image.copy())


@pytest.fixture
def editor_config(tmp_path):
    """Config that saves into a temporary directory."""
    return EditorConfig(output_path=str(tmp_path / "out.png"))


@pytest.fixture
def scenario_transform():
    """The 800x600 image shown in a 400x300 window with a 0.95 margin."""
    return compute_view_transform(Size2D(400, 300), Size2D(800, 600), 0.95)
