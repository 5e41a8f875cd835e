"""
Drag-selection state machine.

Every function here is pure: it takes the current DragState plus the event
and returns a new SelectionStep. The host owns the state between frames and
tracks the last observed pointer position separately.

Functions:
    handle_event: Advance the drag state by one event
    selection_corners: Live corners for drawing the selection outline
"""

import logging
from typing import Optional, Tuple

from CE_Libs.constants import BUTTON_LEFT
from CE_Libs.GeometryLib.geometry_models import Point2
from CE_Libs.SelectionLib.selection_models import (
    Armed,
    ButtonEvent,
    CancelEvent,
    DragState,
    Idle,
    PendingSelection,
    SelectionEvent,
    SelectionStep,
)

logger = logging.getLogger(__name__)


def handle_event(
    state: DragState,
    event: SelectionEvent,
    last_pointer: Optional[Point2],
) -> SelectionStep:
    """
    Feed one input event to the selection state machine.

    - Left press arms the engine at the last pointer position, replacing any
      stale anchor. Without a known pointer position the press is ignored.
    - Left release while armed emits the anchor and the last pointer
      position as a PendingSelection and returns to Idle. A release while
      idle is ignored.
    - A CancelEvent drops the anchor without emitting anything.
    - Every other event leaves the state unchanged.

    Args:
        state: Current drag state
        event: The event to process
        last_pointer: Most recent window-space pointer position, if any

    Returns:
        The new state and, for a completed drag, the pending selection
    """
    if isinstance(event, CancelEvent):
        if isinstance(state, Armed):
            logger.debug("Selection cancelled")
        return SelectionStep(Idle())

    if not isinstance(event, ButtonEvent) or event.button != BUTTON_LEFT:
        return SelectionStep(state)

    if event.pressed:
        if last_pointer is None:
            logger.debug("Ignoring press before any pointer position was seen")
            return SelectionStep(state)
        logger.debug(f"Selection anchored at ({last_pointer.x:.1f}, {last_pointer.y:.1f})")
        return SelectionStep(Armed(anchor=last_pointer))

    if not isinstance(state, Armed):
        return SelectionStep(state)

    if last_pointer is None:
        return SelectionStep(Idle())

    pending = PendingSelection(anchor=state.anchor, corner=last_pointer)
    return SelectionStep(Idle(), pending)


def selection_corners(
    state: DragState,
    last_pointer: Optional[Point2],
) -> Optional[Tuple[Point2, Point2]]:
    """Return (anchor, live corner) while a drag is in progress."""
    if isinstance(state, Armed) and last_pointer is not None:
        return (state.anchor, last_pointer)
    return None


class SelectionEngine:
    """
    Convenience wrapper that keeps the drag state between calls.

    The methods delegate to the pure functions above; use those directly
    when the state lives elsewhere.
    """

    def __init__(self) -> None:
        self.state: DragState = Idle()

    @property
    def is_armed(self) -> bool:
        return isinstance(self.state, Armed)

    def handle_event(
        self,
        event: SelectionEvent,
        last_pointer: Optional[Point2],
    ) -> Optional[PendingSelection]:
        step = handle_event(self.state, event, last_pointer)
        self.state = step.state
        return step.pending

    def cancel(self) -> None:
        self.state = handle_event(self.state, CancelEvent(), None).state

    def corners(self, last_pointer: Optional[Point2]) -> Optional[Tuple[Point2, Point2]]:
        return selection_corners(self.state, last_pointer)
