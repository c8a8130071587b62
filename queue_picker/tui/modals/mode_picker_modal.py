"""Delivery mode picker modal."""

from __future__ import annotations

import logging
from typing import ClassVar

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Label, Rule, Static

from queue_picker.queue.buffer import truncate_to_width
from queue_picker.queue.types import FOLLOW_UP, STEER, ModePickerAction
from queue_picker.theme import QUEUE_PICKER_THEME
from queue_picker.tui.core.keys import KeyPress, KeyToken
from queue_picker.tui.core.mode_picker import ModePickerState, handle_mode_picker_input


logger = logging.getLogger(__name__)

MODE_PICKER_HELP = "tab/↑↓ switch · enter send · esc cancel"


def render_mode_options(state: ModePickerState) -> Text:
    """Render the two delivery options with the selected one highlighted."""
    accent = QUEUE_PICKER_THEME.accent
    options = [
        (STEER, "⚡ STEER", "Interrupt and redirect now", QUEUE_PICKER_THEME.warning),
        (FOLLOW_UP, "📋 FOLLOW-UP", "Run after current task", QUEUE_PICKER_THEME.success),
    ]

    text = Text()
    for index, (mode, label, description, color) in enumerate(options):
        selected = state.selected == mode
        if index:
            text.append("\n")
        text.append("  ")
        text.append("▸" if selected else "·", style=accent if selected else "dim")
        text.append(" ")
        text.append(label, style=f"bold {accent if selected else color}")
        text.append(f"  {description}", style="dim")
    return text


class ModePickerModal(ModalScreen[ModePickerAction]):
    """Asks whether a message sent while the agent is busy steers or follows up.

    Keys are fed to the picker state machine; the screen dismisses with the
    first terminal action it produces.
    """

    # Tab would otherwise move focus instead of reaching the picker.
    BINDINGS: ClassVar = [
        Binding("tab", "key_token('tab')", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    ModePickerModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }

    ModePickerModal > #mode_picker_dialog {
        width: 64;
        height: auto;
        padding: 1 2;
        border: round $primary;
        background: $surface 90%;
    }

    ModePickerModal #mode_picker_title {
        text-style: bold;
        color: $accent;
    }

    ModePickerModal #mode_picker_message {
        color: $secondary;
        padding: 0 0 1 0;
    }

    ModePickerModal #mode_picker_help {
        color: $secondary;
    }
    """

    def __init__(self, state: ModePickerState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self._resolved = False

    def compose(self) -> ComposeResult:
        with Container(id="mode_picker_dialog"):
            yield Label("↳ Deliver queued message as", id="mode_picker_title")
            yield Static(
                truncate_to_width(self.state.message_text, 56),
                id="mode_picker_message",
                markup=False,
            )
            yield Rule()
            yield Static(render_mode_options(self.state), id="mode_picker_options")
            yield Rule()
            yield Static(MODE_PICKER_HELP, id="mode_picker_help", markup=False)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.feed(KeyPress(event.key, event.character))

    def action_key_token(self, key: str) -> None:
        self.feed(key)

    def feed(self, token: KeyToken) -> None:
        """Apply a key to the picker and dismiss on select/cancel."""
        if self._resolved:
            return
        action = handle_mode_picker_input(self.state, token)
        self.query_one("#mode_picker_options", Static).update(
            render_mode_options(self.state)
        )
        if action is not None:
            self._resolve(action)

    def _resolve(self, action: ModePickerAction) -> None:
        if self._resolved:
            logger.warning("Mode picker already resolved; ignoring %r", action)
            return
        self._resolved = True
        self.dismiss(action)
