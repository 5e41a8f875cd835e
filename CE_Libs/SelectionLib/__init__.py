"""
SelectionLib - Drag selection and crop session

This module provides the selection state machine, the resolution of a
finished drag into a crop rectangle, and the per-frame session that ties
them to the image being edited.
"""

from CE_Libs.SelectionLib.selection_models import (
    Armed,
    ButtonEvent,
    CancelEvent,
    Idle,
    PendingSelection,
    SelectionResolution,
    SelectionStep,
)
from CE_Libs.SelectionLib.selection_engine import SelectionEngine, handle_event, selection_corners
from CE_Libs.SelectionLib.selection_resolver import resolve_pending_selection
from CE_Libs.SelectionLib.crop_session import CropSession, FrameInput, FrameOutput, RenderState

__all__ = [
    "Armed",
    "ButtonEvent",
    "CancelEvent",
    "Idle",
    "PendingSelection",
    "SelectionResolution",
    "SelectionStep",
    "SelectionEngine",
    "handle_event",
    "selection_corners",
    "resolve_pending_selection",
    "CropSession",
    "FrameInput",
    "FrameOutput",
    "RenderState",
]
