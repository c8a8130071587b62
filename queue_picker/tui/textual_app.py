"""QueuePickerApp - Textual host for the delivery queue.

Widget Hierarchy:
    QueuePickerApp
    ├── VerticalScroll(#main_display)  ← transcript and help
    ├── QueueStatus(#queue_status)     ← queued messages, hidden when empty
    ├── WorkingStatusLine
    ├── Input(#input_field)
    └── Footer

The app is the lifecycle host for QueueController: it forwards submissions
and backend lifecycle events to the controller, and implements the
dispatch, status, notification and popup callbacks the controller uses.

Popups suspend the code that opened them, so submissions and the queue
editor run in workers; the app's own message pump keeps running and can
deliver backend events while a popup is open.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import ClassVar

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Footer, Input, Static

from queue_picker.queue.types import (
    BufferedMessage,
    DeliveryTag,
    InputAction,
    InputSource,
    ModePickerAction,
    QueueEditorAction,
)
from queue_picker.shared.slash_commands import parse_slash_command
from queue_picker.stores.settings import QueuePickerSettings
from queue_picker.terminal_compat import is_limited_terminal
from queue_picker.theme import QUEUE_PICKER_THEME
from queue_picker.tui.core.commands import show_help
from queue_picker.tui.core.mode_picker import ModePickerState
from queue_picker.tui.core.popup import PopupResult
from queue_picker.tui.core.queue_controller import QueueController
from queue_picker.tui.core.queue_editor import QueueEditorState
from queue_picker.tui.core.simulated_backend import SimulatedBackend
from queue_picker.tui.messages import AgentFinished, AgentStarted, AgentSteered
from queue_picker.tui.modals import ModePickerModal, QueueEditorModal
from queue_picker.tui.widgets import QueueStatus, WorkingStatusLine


logger = logging.getLogger(__name__)

_TAG_LABELS = {
    DeliveryTag.DEFAULT: "send",
    DeliveryTag.STEER: "steer",
    DeliveryTag.FOLLOW_UP: "follow-up",
}


class QueuePickerApp(App):
    """Chat-style TUI that queues or steers messages while the agent works."""

    TITLE = "Queue Picker"

    BINDINGS: ClassVar = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    CSS = """
    #main_display {
        height: 1fr;
        padding: 0 1;
    }

    #main_display > .user-message {
        color: $primary;
    }

    #main_display > .agent-message {
        color: $secondary;
    }

    #queue_status {
        padding: 0 1;
    }

    #input_field {
        border: round $primary 60%;
    }
    """

    def __init__(
        self,
        *,
        settings: QueuePickerSettings | None = None,
        busy_seconds: float = 10.0,
        limited_terminal: bool | None = None,
        **kwargs,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Picker settings. Loaded from disk if None.
            busy_seconds: How long the simulated backend works per message.
            limited_terminal: Skip the mode picker. Detected from the
                environment if None.
        """
        super().__init__(**kwargs)
        self.register_theme(QUEUE_PICKER_THEME)
        self.theme = QUEUE_PICKER_THEME.name

        self.settings = settings or QueuePickerSettings.load()
        if limited_terminal is None:
            limited_terminal = is_limited_terminal()
        self.controller = QueueController(
            self, settings=self.settings, limited_terminal=limited_terminal
        )
        self.backend = SimulatedBackend(
            busy_seconds=busy_seconds,
            set_timer=self.set_timer,
            post_message=self.post_message,
        )
        self.deliveries: list[tuple[str, DeliveryTag, bool]] = []

    def compose(self) -> ComposeResult:
        yield VerticalScroll(id="main_display")
        yield QueueStatus(hint=self.settings.status_hint, id="queue_status")
        yield WorkingStatusLine()
        yield Input(placeholder="Message the agent (/help for commands)", id="input_field")
        yield Footer()

    def on_mount(self) -> None:
        self.controller.on_session_start()
        self.input_field.focus()

    # ---- Widget accessors ----

    @property
    def input_field(self) -> Input:
        return self.query_one("#input_field", Input)

    @property
    def main_display(self) -> VerticalScroll:
        return self.query_one("#main_display", VerticalScroll)

    # ---- LifecycleHost ----

    @property
    def has_ui(self) -> bool:
        return True

    def dispatch(self, text: str, *, deliver_as: DeliveryTag, busy: bool) -> None:
        self.deliveries.append((text, deliver_as, busy))
        self._write(f"→ [{_TAG_LABELS[deliver_as]}] {text}", classes="user-message")
        self.backend.deliver(text, deliver_as)

    def update_queue_status(self, messages: Sequence[BufferedMessage]) -> None:
        self.query_one(QueueStatus).update_messages(messages)
        self.query_one(WorkingStatusLine).set_queued(len(messages))

    def notify(self, message: str, *, markup: bool = False, **kwargs) -> None:
        # Message text is user input; brackets must not be read as markup.
        super().notify(message, markup=markup, **kwargs)

    def set_input_text(self, text: str) -> None:
        self.input_field.value = text
        self.input_field.cursor_position = len(text)
        self.input_field.focus()

    async def pick_mode(self, state: ModePickerState) -> ModePickerAction:
        result: PopupResult[ModePickerAction] = PopupResult("mode picker")
        self.push_screen(ModePickerModal(state), result.resolve)
        return await result.wait()

    async def edit_queue(self, state: QueueEditorState) -> QueueEditorAction:
        result: PopupResult[QueueEditorAction] = PopupResult("queue editor")
        self.push_screen(QueueEditorModal(state), result.resolve)
        return await result.wait()

    # ---- Input handling ----

    @on(Input.Submitted, "#input_field")
    def _on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value
        event.input.value = ""
        if not text.strip():
            return
        self.run_worker(self.handle_submission(text), group="submission")

    async def handle_submission(
        self, text: str, source: InputSource = InputSource.INTERACTIVE
    ) -> None:
        """Route a submission through the controller, then the default path."""
        action = await self.controller.handle_input(text, source)
        if action is InputAction.HANDLED:
            return
        self._submit_default(text)

    def _submit_default(self, text: str) -> None:
        parsed = parse_slash_command(text)
        if parsed is not None and self._run_command(*parsed):
            return
        self.dispatch(text, deliver_as=DeliveryTag.DEFAULT, busy=self.backend.is_running)

    def _run_command(self, command: str, argument: str) -> bool:
        """Run a known slash command. Returns False for unknown commands."""
        if command == "help":
            show_help(self.main_display, self.settings)
        elif command == self.settings.editor_command.lower():
            self.action_open_queue_editor()
        elif command == "clear":
            self.controller.clear_queue()
        elif command == "new":
            self.backend.stop()
            self.main_display.remove_children()
            self.query_one(WorkingStatusLine).set_running(False)
            # Clear the queue first so going idle has nothing to flush.
            self.controller.on_session_switch()
            self.controller.on_agent_end()
            self.notify("Started a new session")
        elif command == "exit":
            self.exit()
        else:
            return False
        return True

    def on_key(self, event: Key) -> None:
        if event.key == self.settings.editor_shortcut:
            event.stop()
            self.action_open_queue_editor()

    def action_open_queue_editor(self) -> None:
        # A popup is already open; the editor waits for it to close.
        if isinstance(self.screen, ModalScreen):
            return
        self.run_worker(self.controller.open_queue_editor(), group="queue_editor")

    # ---- Backend lifecycle ----

    @on(AgentStarted)
    def _on_agent_started(self, event: AgentStarted) -> None:
        self.controller.on_agent_start()
        self.query_one(WorkingStatusLine).set_running(True)

    @on(AgentSteered)
    def _on_agent_steered(self, event: AgentSteered) -> None:
        self._write(f"↺ redirected: {event.content}", classes="agent-message")

    @on(AgentFinished)
    def _on_agent_finished(self, event: AgentFinished) -> None:
        self._write(f"✓ done: {event.content}", classes="agent-message")
        self.query_one(WorkingStatusLine).set_running(False)
        self.controller.on_agent_end()

    # ---- Internal helpers ----

    def _write(self, text: str, *, classes: str) -> None:
        display = self.main_display
        display.mount(Static(text, classes=classes, markup=False))
        display.scroll_end(animate=False)
