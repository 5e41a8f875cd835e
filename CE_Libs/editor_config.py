"""
Editor configuration for Coral Editor.

The core never reads ambient settings; the host builds one EditorConfig and
passes it to the crop session and the editor window.

Classes:
    EditorConfig: Fit margin, pixel rounding, exit behavior and render options
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from PIL import Image

from CE_Libs.constants import (
    BACKGROUND_COLOR,
    DEFAULT_FIT_MARGIN,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_ROUNDING,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MAX_FIT_MARGIN,
    MIN_FIT_MARGIN,
    ROUNDING_POLICIES,
    SELECTION_OUTLINE_COLOR,
    SELECTION_OUTLINE_WIDTH,
)


@dataclass
class EditorConfig:
    """Configuration for a crop editing session.

    Attributes:
        fit_margin: Fraction of the fitted size the image occupies (0 < m <= 1)
        pixel_rounding: How fractional corners snap to pixels ("floor" or "round")
        escape_exits: Escape with no active selection closes the editor
        save_on_exit: Save the current image when closing via Escape
        output_path: Where the image is saved on exit
        save_format: Image format passed to Pillow when saving
        window_width: Initial window width in pixels
        window_height: Initial window height in pixels
        background_color: Window background (Qt color string)
        outline_color: Selection outline color (Qt color string)
        outline_width: Selection outline width in window pixels
    """
    fit_margin: float = DEFAULT_FIT_MARGIN
    pixel_rounding: str = DEFAULT_ROUNDING
    escape_exits: bool = True
    save_on_exit: bool = True
    output_path: str = DEFAULT_OUTPUT_PATH
    save_format: str = DEFAULT_OUTPUT_FORMAT
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    background_color: str = BACKGROUND_COLOR
    outline_color: str = SELECTION_OUTLINE_COLOR
    outline_width: float = SELECTION_OUTLINE_WIDTH

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check that all values are usable.

        Raises:
            ValueError: If any value is out of range
        """
        margin = float(self.fit_margin)
        if not (MIN_FIT_MARGIN < margin <= MAX_FIT_MARGIN):
            raise ValueError(f"fit_margin must be in (0, 1], got {self.fit_margin}")

        if self.pixel_rounding not in ROUNDING_POLICIES:
            raise ValueError(
                f"pixel_rounding must be one of {', '.join(ROUNDING_POLICIES)}, "
                f"got {self.pixel_rounding!r}"
            )

        if not str(self.output_path).strip():
            raise ValueError("output_path cannot be empty")

        Image.init()
        if self.pillow_format not in Image.SAVE:
            raise ValueError(f"Unsupported save_format: {self.save_format!r}")

        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(
                f"Window size must be positive, got {self.window_width}x{self.window_height}"
            )

        if self.outline_width <= 0:
            raise ValueError(f"outline_width must be > 0, got {self.outline_width}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    @property
    def pillow_format(self) -> str:
        """Format name as Pillow expects it."""
        # PIL uses "JPEG" not "JPG"
        save_format = self.save_format.upper()
        if save_format == "JPG":
            save_format = "JPEG"
        return save_format
