"""Delivery mode picker state machine.

Shown once per submission while the agent is busy. The picker only resolves
a mode for the pending text; it never changes the text itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from queue_picker.queue.types import (
    FOLLOW_UP,
    STEER,
    ModePickerAction,
    ModePickerCancel,
    ModePickerSelect,
    PickerMode,
    toggle_mode,
)
from queue_picker.tui.core.keys import KeyToken, matches


@dataclass
class ModePickerState:
    message_text: str
    selected: PickerMode = STEER


def handle_mode_picker_input(
    state: ModePickerState, token: KeyToken
) -> ModePickerAction | None:
    """Apply one key to the picker.

    Returns an action when the user selects or cancels, otherwise updates
    ``state.selected`` (or ignores the key) and returns None.
    """
    if matches(token, "tab", "up", "down"):
        state.selected = toggle_mode(state.selected)
        return None
    if matches(token, "left"):
        state.selected = STEER
        return None
    if matches(token, "right"):
        state.selected = FOLLOW_UP
        return None
    if matches(token, "enter"):
        return ModePickerSelect(state.selected)
    if matches(token, "escape"):
        return ModePickerCancel()
    return None
