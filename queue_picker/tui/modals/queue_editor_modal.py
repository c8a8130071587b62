"""Queue editor modal."""

from __future__ import annotations

import logging
from typing import ClassVar

from rich.text import Text
from textual import events, on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Rule, Static

from queue_picker.queue.buffer import truncate_to_width
from queue_picker.queue.types import STEER, BufferedMessage, QueueEditorAction
from queue_picker.theme import QUEUE_PICKER_THEME
from queue_picker.tui.core.keys import KeyPress, KeyToken
from queue_picker.tui.core.queue_editor import (
    QueueEditorState,
    handle_queue_editor_input,
    submit_inline_edit,
)


logger = logging.getLogger(__name__)

LIST_HELP = (
    "↑↓ nav · j/k move · tab mode · e edit · d/del remove · enter save · esc close"
)
EDIT_HELP = "enter save · esc cancel edit · tip: append extra context at the end"


def _mode_tag(message: BufferedMessage, *, short: bool) -> Text:
    if message.mode == STEER:
        return Text(
            "STEER " if short else "⚡ STEER",
            style=f"bold {QUEUE_PICKER_THEME.warning}",
        )
    return Text(
        "FOLLOW" if short else "📋 FOLLOW-UP",
        style=f"bold {QUEUE_PICKER_THEME.success}",
    )


def count_label(count: int) -> str:
    return f"{count} queued {'message' if count == 1 else 'messages'}"


def render_queue_editor_body(state: QueueEditorState, width: int) -> Text:
    """Render the list, the inline edit header, or the empty notice."""
    accent = QUEUE_PICKER_THEME.accent
    width = max(20, width)

    if not state.items:
        return Text("Queue is empty", style="dim")

    if state.mode == "edit":
        item = state.items[state.selected]
        body = Text()
        body.append("✎ Edit message", style=f"bold {accent}")
        body.append(f" #{state.selected + 1}  ", style="dim")
        body.append_text(_mode_tag(item, short=False))
        return body

    body = Text()
    # prefix, index, tag and spacing take up to 16 cells
    text_width = max(1, width - 16)
    for index, item in enumerate(state.items):
        selected = index == state.selected
        if index:
            body.append("\n")
        body.append("  ")
        body.append("▸" if selected else "·", style=accent if selected else "dim")
        body.append(f" {index + 1:>2}. ", style="dim")
        body.append_text(_mode_tag(item, short=True))
        body.append("  ")
        body.append(
            truncate_to_width(item.text, text_width),
            style=f"bold {accent}" if selected else "dim",
        )
    return body


class QueueEditorModal(ModalScreen[QueueEditorAction]):
    """Lets the user reorder, retag, edit and delete queued messages.

    The screen owns a QueueEditorState (a clone of the queue). It dismisses
    with QueueEditorSave or QueueEditorCancel; the caller applies the result.

    List keys are fed to the state machine from ``on_key``. In edit mode a
    text Input takes focus and handles typing, cursor movement and paste;
    only escape is intercepted.
    """

    AUTO_FOCUS = None

    BINDINGS: ClassVar = [
        Binding("tab", "key_token('tab')", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    QueueEditorModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }

    QueueEditorModal > #queue_editor_dialog {
        width: 90%;
        max-width: 110;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        border: round $primary;
        background: $surface 90%;
    }

    QueueEditorModal #queue_editor_title {
        text-style: bold;
        color: $accent;
    }

    QueueEditorModal #queue_editor_count {
        color: $secondary;
    }

    QueueEditorModal #queue_editor_body {
        height: auto;
        padding: 1 0;
    }

    QueueEditorModal #queue_editor_input {
        display: none;
        border: round $accent;
    }

    QueueEditorModal #queue_editor_help {
        color: $secondary;
    }
    """

    def __init__(self, state: QueueEditorState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self._resolved = False

    def compose(self) -> ComposeResult:
        with Container(id="queue_editor_dialog"):
            yield Label("📋 Queue Editor", id="queue_editor_title")
            yield Static(count_label(len(self.state.items)), id="queue_editor_count")
            yield Rule()
            yield Static("", id="queue_editor_body")
            yield Input(id="queue_editor_input")
            yield Rule()
            yield Static("", id="queue_editor_help", markup=False)

    def on_mount(self) -> None:
        self._refresh_view()

    def on_resize(self) -> None:
        self._refresh_view()

    @property
    def edit_input(self) -> Input:
        return self.query_one("#queue_editor_input", Input)

    def on_key(self, event: events.Key) -> None:
        if self.state.mode == "edit":
            # Everything but escape belongs to the Input and its bindings.
            if event.key == "escape":
                event.stop()
                event.prevent_default()
                self.feed("escape")
            return
        event.stop()
        event.prevent_default()
        self.feed(KeyPress(event.key, event.character))

    def action_key_token(self, key: str) -> None:
        self.feed(key)

    @on(Input.Submitted, "#queue_editor_input")
    def _on_edit_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self._resolved:
            return
        submit_inline_edit(self.state, event.value)
        self._refresh_view()

    def feed(self, token: KeyToken) -> None:
        """Apply a key to the editor and dismiss on save/cancel."""
        if self._resolved:
            return
        was_editing = self.state.mode == "edit"
        action = handle_queue_editor_input(self.state, token)
        if action is not None:
            self._resolve(action)
            return
        if not was_editing and self.state.mode == "edit":
            self._start_inline_edit()
        self._refresh_view()

    def _start_inline_edit(self) -> None:
        item = self.state.selected_item
        edit_input = self.edit_input
        edit_input.value = item.text if item is not None else ""
        edit_input.cursor_position = len(edit_input.value)
        edit_input.display = True
        edit_input.focus()

    def _resolve(self, action: QueueEditorAction) -> None:
        if self._resolved:
            logger.warning("Queue editor already resolved; ignoring %r", action)
            return
        self._resolved = True
        self.dismiss(action)

    def _body_width(self) -> int:
        try:
            width = self.query_one("#queue_editor_body", Static).size.width
        except NoMatches:
            width = 0
        return width or 80  # Fallback before the first layout

    def _refresh_view(self) -> None:
        editing = self.state.mode == "edit"
        if not editing and self.edit_input.display:
            self.edit_input.display = False
            self.set_focus(None)

        self.query_one("#queue_editor_count", Static).update(
            count_label(len(self.state.items))
        )
        self.query_one("#queue_editor_body", Static).update(
            render_queue_editor_body(self.state, self._body_width())
        )
        help_text = EDIT_HELP if editing else LIST_HELP
        self.query_one("#queue_editor_help", Static).update(help_text)
