"""Core queue picker components: popup state machines and the controller."""

from queue_picker.tui.core.mode_picker import ModePickerState, handle_mode_picker_input
from queue_picker.tui.core.popup import PopupResult
from queue_picker.tui.core.protocols import LifecycleHost
from queue_picker.tui.core.queue_controller import QueueController
from queue_picker.tui.core.queue_editor import (
    QueueEditorState,
    create_queue_editor_state,
    handle_queue_editor_input,
)


__all__ = [
    # Controller
    "QueueController",
    "LifecycleHost",
    # Popup state machines
    "ModePickerState",
    "handle_mode_picker_input",
    "QueueEditorState",
    "create_queue_editor_state",
    "handle_queue_editor_input",
    "PopupResult",
]
