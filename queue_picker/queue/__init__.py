"""Message queue: data types and the ordered store."""

from queue_picker.queue.buffer import (
    MessageQueue,
    move_adjacent,
    render_status_lines,
    truncate_to_width,
)
from queue_picker.queue.types import (
    FOLLOW_UP,
    STEER,
    BufferedMessage,
    DeliveryTag,
    InputAction,
    InputSource,
    ModePickerAction,
    ModePickerCancel,
    ModePickerSelect,
    PickerMode,
    QueueEditorAction,
    QueueEditorCancel,
    QueueEditorSave,
    next_id,
    toggle_mode,
)


__all__ = [
    "FOLLOW_UP",
    "STEER",
    "BufferedMessage",
    "DeliveryTag",
    "InputAction",
    "InputSource",
    "MessageQueue",
    "ModePickerAction",
    "ModePickerCancel",
    "ModePickerSelect",
    "PickerMode",
    "QueueEditorAction",
    "QueueEditorCancel",
    "QueueEditorSave",
    "move_adjacent",
    "next_id",
    "render_status_lines",
    "toggle_mode",
    "truncate_to_width",
]
