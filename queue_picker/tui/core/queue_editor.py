"""Queue editor state machine.

The editor works on a private clone of the queue. Nothing it does is visible
to the live queue until the session ends with a save; a cancel discards the
clone.

The editor has two sub-states:

- ``list``: navigate, reorder (j/k), retag (tab), delete (d), start an
  inline edit (e), save (enter) or cancel (escape).
- ``edit``: the text widget owns the keyboard. Submitting non-blank text
  writes it to the selected entry; a blank submit or escape keeps the old text.
  Either way the editor returns to ``list``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from queue_picker.queue.buffer import move_adjacent
from queue_picker.queue.types import (
    BufferedMessage,
    QueueEditorAction,
    QueueEditorCancel,
    QueueEditorSave,
    toggle_mode,
)
from queue_picker.tui.core.keys import (
    DELETE_KEYS,
    EDIT_KEYS,
    MOVE_DOWN_KEYS,
    MOVE_UP_KEYS,
    KeyToken,
    matches,
)


EditorMode = Literal["list", "edit"]


@dataclass
class QueueEditorState:
    items: list[BufferedMessage]
    selected: int = 0
    mode: EditorMode = "list"
    opened_empty: bool = False

    @property
    def selected_item(self) -> BufferedMessage | None:
        if not self.items:
            return None
        return self.items[self.selected]

    def clamp_selection(self) -> None:
        self.selected = min(max(0, self.selected), max(0, len(self.items) - 1))


def create_queue_editor_state(items: list[BufferedMessage]) -> QueueEditorState:
    """Create editor state over a clone of ``items``."""
    return QueueEditorState(
        items=[item.clone() for item in items],
        opened_empty=not items,
    )


def open_inline_edit(state: QueueEditorState) -> str | None:
    """Switch to edit mode.

    Returns:
        The selected entry's text to seed the text widget with, or None if
        there is nothing to edit.
    """
    item = state.selected_item
    if item is None:
        return None
    state.mode = "edit"
    return item.text


def submit_inline_edit(state: QueueEditorState, value: str) -> None:
    """Finish an inline edit with the text widget's value."""
    if state.mode != "edit":
        return
    updated = value.strip()
    item = state.selected_item
    if item is not None and updated:
        item.text = updated
    state.mode = "list"


def cancel_inline_edit(state: QueueEditorState) -> None:
    state.mode = "list"


def handle_queue_editor_input(
    state: QueueEditorState, token: KeyToken
) -> QueueEditorAction | None:
    """Apply one key to the editor.

    Returns QueueEditorSave / QueueEditorCancel when the session ends,
    otherwise mutates ``state`` and returns None. Unknown keys are ignored.
    In edit mode only escape is handled here; text keys belong to the text
    widget.
    """
    if state.mode == "edit":
        if matches(token, "escape"):
            cancel_inline_edit(state)
        return None

    if not state.items:
        if matches(token, "enter"):
            return QueueEditorSave(items=[])
        if matches(token, "escape"):
            # Nothing was there to begin with, so report a (no-op) save.
            if state.opened_empty:
                return QueueEditorSave(items=[])
            return QueueEditorCancel()
        return None

    if matches(token, *MOVE_UP_KEYS):
        state.selected = move_adjacent(state.items, state.selected, "up")
        return None
    if matches(token, *MOVE_DOWN_KEYS):
        state.selected = move_adjacent(state.items, state.selected, "down")
        return None
    if matches(token, "up"):
        state.selected = max(0, state.selected - 1)
        return None
    if matches(token, "down"):
        state.selected = min(len(state.items) - 1, state.selected + 1)
        return None
    if matches(token, "tab"):
        item = state.items[state.selected]
        item.mode = toggle_mode(item.mode)
        return None
    if matches(token, *EDIT_KEYS):
        open_inline_edit(state)
        return None
    if matches(token, *DELETE_KEYS):
        del state.items[state.selected]
        state.clamp_selection()
        return None
    if matches(token, "enter"):
        return QueueEditorSave(items=list(state.items))
    if matches(token, "escape"):
        return QueueEditorCancel()
    return None
