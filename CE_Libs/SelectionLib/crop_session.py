"""
Per-frame crop session.

CropSession is the explicit owned state of one editing session: the image,
the drag state, the last pointer position and the current view transform.
The window feeds it one FrameInput per tick and reacts to the FrameOutput;
the render path reads a RenderState snapshot and never writes back.

Classes:
    FrameInput: Optional window size, button event and pointer position
    FrameOutput: What happened during a tick
    RenderState: What the renderer needs to draw one frame
    CropSession: Owns the editing state and processes ticks
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import logging

from CE_Libs.constants import BUTTON_ESCAPE
from CE_Libs.editor_config import EditorConfig
from CE_Libs.GeometryLib.geometry_models import Point2, Size2D
from CE_Libs.GeometryLib.view_transform import ViewTransform, compute_view_transform
from CE_Libs.ImageEditingLib.image_editing_ops import crop_image, save_image
from CE_Libs.ImageEditingLib.image_models import ImageRecord
from CE_Libs.SelectionLib.selection_engine import SelectionEngine
from CE_Libs.SelectionLib.selection_models import (
    ButtonEvent,
    CancelEvent,
    DragState,
    SelectionEvent,
    SelectionResolution,
)
from CE_Libs.SelectionLib.selection_resolver import resolve_pending_selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameInput:
    """Events delivered to the session in one tick; each may be absent."""
    window_size: Optional[Size2D] = None
    button: Optional[SelectionEvent] = None
    pointer: Optional[Point2] = None


@dataclass(frozen=True)
class FrameOutput:
    """
    Result of one tick.

    Attributes:
        resolution: Outcome of a drag completed this tick, if any
        image_changed: The image buffer was replaced by a crop
        should_close: The host should close the editor
        saved_path: Where the image was saved before closing, if it was
    """
    resolution: Optional[SelectionResolution] = None
    image_changed: bool = False
    should_close: bool = False
    saved_path: Optional[Path] = None


@dataclass(frozen=True)
class RenderState:
    transform: ViewTransform
    image_size: Size2D
    selection: Optional[Tuple[Point2, Point2]]


class CropSession:
    """
    Drives the selection engine and applies crops to the owned image.

    Within a tick the window size is applied first, then the button event,
    then the pointer position, so a button always sees the pointer position
    observed before it.
    """

    def __init__(self, record: ImageRecord, config: Optional[EditorConfig] = None) -> None:
        self.record = record
        self.config = config if config is not None else EditorConfig()

        self.engine = SelectionEngine()
        self.last_pointer: Optional[Point2] = None
        self.window_size = Size2D(self.config.window_width, self.config.window_height)
        self.transform = compute_view_transform(self.window_size, record.size, self.config.fit_margin)
        self.crop_count = 0

    @property
    def image(self):
        return self.record.current

    @property
    def state(self) -> DragState:
        return self.engine.state

    @property
    def is_selecting(self) -> bool:
        return self.engine.is_armed

    def tick(self, frame: FrameInput) -> FrameOutput:
        """
        Process one frame of input.

        Args:
            frame: Window size, button and pointer updates for this frame

        Returns:
            FrameOutput describing crops and exit requests
        """
        if frame.window_size is not None:
            self.set_window_size(frame.window_size)

        output = FrameOutput()
        if frame.button is not None:
            output = self._handle_button(frame.button)

        if frame.pointer is not None:
            self.last_pointer = frame.pointer

        return output

    def set_window_size(self, window_size: Size2D) -> None:
        self.window_size = window_size
        self.transform = compute_view_transform(window_size, self.record.size, self.config.fit_margin)

    def cancel(self) -> FrameOutput:
        return self.tick(FrameInput(button=CancelEvent()))

    def render_state(self) -> RenderState:
        return RenderState(
            transform=self.transform,
            image_size=self.record.size,
            selection=self.engine.corners(self.last_pointer),
        )

    def _handle_button(self, event: SelectionEvent) -> FrameOutput:
        if isinstance(event, ButtonEvent) and event.button == BUTTON_ESCAPE:
            if event.pressed:
                return FrameOutput()
            return self._handle_escape()

        pending = self.engine.handle_event(event, self.last_pointer)
        if pending is None:
            return FrameOutput()

        resolution = resolve_pending_selection(
            pending,
            self.transform,
            self.record.size,
            self.config.pixel_rounding,
        )
        if not resolution.should_crop:
            return FrameOutput(resolution=resolution)

        self.apply_crop(resolution)
        return FrameOutput(resolution=resolution, image_changed=True)

    def _handle_escape(self) -> FrameOutput:
        if self.engine.is_armed:
            self.engine.cancel()
            return FrameOutput()

        if not self.config.escape_exits:
            return FrameOutput()

        saved_path = None
        if self.config.save_on_exit:
            logger.info("Saving image...")
            saved_path = save_image(self.image, self.config.output_path, self.config.pillow_format)
        return FrameOutput(should_close=True, saved_path=saved_path)

    def apply_crop(self, resolution: SelectionResolution) -> None:
        """Replace the current image with the cropped region."""
        rect = resolution.rect
        logger.info(f"Crop: origin=({rect.x}, {rect.y}) size=({rect.width}, {rect.height})")

        # The old buffer is dropped only after the new one exists
        cropped = crop_image(self.record.current, rect)
        self.record.current = cropped
        self.crop_count += 1

        self.transform = compute_view_transform(self.window_size, self.record.size, self.config.fit_margin)
