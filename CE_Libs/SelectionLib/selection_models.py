"""
Selection data models for Coral Editor.

The drag gesture is tracked as a tagged state: either nothing is happening
(Idle) or the left button is down and the first corner is known (Armed).
The second corner is never stored; it is read from the host's last pointer
position at the moment the button is released.

Classes:
    Idle: No drag in progress
    Armed: Left button held, anchor captured in window space
    ButtonEvent: A button press or release
    CancelEvent: Explicit abort of the current drag
    PendingSelection: Two window-space corners of a completed drag
    SelectionStep: Result of feeding one event to the engine
    SelectionResolution: Outcome of mapping a pending selection to a crop

Type Aliases:
    DragState: Idle or Armed
    SelectionEvent: ButtonEvent or CancelEvent
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from CE_Libs.GeometryLib.geometry_models import CropRect, Point2

ButtonType = Literal["left", "right", "middle", "escape"]
OutcomeType = Literal["crop", "noop", "deferred"]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Armed:
    anchor: Point2


DragState = Union[Idle, Armed]


@dataclass(frozen=True)
class ButtonEvent:
    button: ButtonType
    pressed: bool


@dataclass(frozen=True)
class CancelEvent:
    pass


SelectionEvent = Union[ButtonEvent, CancelEvent]


@dataclass(frozen=True)
class PendingSelection:
    """Raw corners of a finished drag, both in window space."""
    anchor: Point2
    corner: Point2


@dataclass(frozen=True)
class SelectionStep:
    state: DragState
    pending: Optional[PendingSelection] = None


@dataclass(frozen=True)
class SelectionResolution:
    """
    Outcome of resolving a pending selection.

    Attributes:
        status: "crop" when ``rect`` should be applied, "noop" for a
            zero-area selection, "deferred" when the view could not be
            inverted and the selection was dropped
        rect: The crop rectangle (None when deferred)
    """
    status: OutcomeType
    rect: Optional[CropRect] = None

    @property
    def should_crop(self) -> bool:
        return self.status == "crop"
