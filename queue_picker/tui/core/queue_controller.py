"""QueueController - decides when queued messages are delivered.

The controller is session scoped. It owns the message queue, tracks whether
the backend is busy, remembers the last mode chosen in the picker and guards
against flushing while the queue editor is open.

Delivery rules, in order of precedence:

1. Slash commands skip the picker and go through normal submission.
2. Limited terminals skip the picker and go through normal submission.
3. While idle, submissions go through normal submission.
4. While busy, the mode picker decides: cancel restores the text, steer is
   dispatched immediately, follow-up is queued (and flushed at once if the
   backend went idle while the picker was open).
5. busy -> idle flushes the head of the queue, unless the editor is open.
   Any flush marks the backend busy again, so one idle transition sends at
   most one queued message.
6. An editor save replaces the queue. Idle: flush the head. Busy: pull the
   first steer-tagged entry out of order and dispatch it as an interrupt.
7. An editor cancel changes nothing.

Everything runs on the event loop; the only suspension points are the
awaited popups, so backend state is re-read after each one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from queue_picker.queue.buffer import MessageQueue
from queue_picker.queue.types import (
    FOLLOW_UP,
    STEER,
    BufferedMessage,
    DeliveryTag,
    InputAction,
    InputSource,
    ModePickerCancel,
    PickerMode,
    QueueEditorCancel,
)
from queue_picker.shared.slash_commands import should_bypass_picker
from queue_picker.stores.settings import QueuePickerSettings
from queue_picker.tui.core.mode_picker import ModePickerState
from queue_picker.tui.core.queue_editor import create_queue_editor_state


if TYPE_CHECKING:
    from queue_picker.tui.core.protocols import LifecycleHost

logger = logging.getLogger(__name__)


class QueueController:
    def __init__(
        self,
        host: LifecycleHost,
        *,
        settings: QueuePickerSettings | None = None,
        limited_terminal: bool = False,
    ) -> None:
        """Initialize the controller.

        Args:
            host: Application callbacks for dispatch and UI side effects.
            settings: Picker settings. Defaults are used if None.
            limited_terminal: If True, never show the mode picker.
        """
        self._host = host
        self._settings = settings or QueuePickerSettings()
        self._limited_terminal = limited_terminal

        self._queue = MessageQueue()
        self._busy = False
        self._editing = False
        self._last_mode: PickerMode = self._settings.default_mode

    # ---- Properties ----

    @property
    def queued_messages(self) -> list[BufferedMessage]:
        return self._queue.snapshot()

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def last_mode(self) -> PickerMode:
        return self._last_mode

    # ---- Lifecycle events ----

    def on_session_start(self) -> None:
        """Reset per-session state: remembered mode, queue and its display."""
        self._last_mode = self._settings.default_mode
        self._queue.clear()
        self._refresh_status()

    def on_session_switch(self) -> None:
        self.on_session_start()

    def on_agent_start(self) -> None:
        self._busy = True

    def on_agent_end(self) -> None:
        """Backend went idle: deliver the next queued message."""
        self._busy = False
        if self._editing:
            logger.debug("Agent finished while queue editor is open; not flushing")
            return
        self._flush_next()

    # ---- Submissions ----

    async def handle_input(
        self, text: str, source: InputSource = InputSource.INTERACTIVE
    ) -> InputAction:
        """Intercept a submission.

        Returns:
            InputAction.CONTINUE if the host should submit ``text`` the normal
            way, InputAction.HANDLED if the controller took care of it.
        """
        # Programmatic submissions include our own dispatches.
        if source is not InputSource.INTERACTIVE:
            return InputAction.CONTINUE
        if not text.strip():
            return InputAction.CONTINUE
        if should_bypass_picker(text):
            return InputAction.CONTINUE
        if self._limited_terminal:
            return InputAction.CONTINUE
        if not self._busy:
            return InputAction.CONTINUE
        if not self._host.has_ui:
            return InputAction.CONTINUE

        state = ModePickerState(message_text=text, selected=self._last_mode)
        action = await self._host.pick_mode(state)

        if isinstance(action, ModePickerCancel):
            self._host.set_input_text(text)
            return InputAction.HANDLED

        self._last_mode = action.mode
        if action.mode == STEER:
            self._steer(text)
            return InputAction.HANDLED

        self._queue.append(BufferedMessage(text=text, mode=FOLLOW_UP))
        logger.debug("Queued follow-up (%d pending)", len(self._queue))
        self._refresh_status()
        self._host.notify(f"Queued follow-up: {text}")

        # The backend may have finished while the picker was open.
        if not self._busy and not self._editing:
            self._flush_next()
        return InputAction.HANDLED

    # ---- Queue editor ----

    async def open_queue_editor(self) -> None:
        """Open the queue editor and apply its result.

        Shared by the keyboard shortcut and the slash command.
        """
        if not self._queue:
            self._host.notify("No queued messages")
            return
        if self._editing or not self._host.has_ui:
            return

        state = create_queue_editor_state(self._queue.snapshot())
        self._editing = True
        try:
            action = await self._host.edit_queue(state)
        finally:
            self._editing = False

        if isinstance(action, QueueEditorCancel):
            logger.debug("Queue edit cancelled")
            return
        self.commit_queue(action.items)

    def commit_queue(self, items: list[BufferedMessage]) -> None:
        """Replace the queue with an editor's result and re-evaluate delivery."""
        had_items = bool(self._queue)
        self._queue.replace_all(items)
        self._refresh_status()
        if had_items and not items:
            self._host.notify("Queue cleared")

        if not self._busy:
            self._flush_next()
            return

        message = self._queue.pop_first_steer()
        if message is None:
            return
        logger.debug("Priority pull of steer-tagged message %s", message.id)
        self._refresh_status()
        self._steer(message.text)

    def clear_queue(self) -> None:
        if not self._queue:
            self._host.notify("No queued messages")
            return
        self._queue.clear()
        self._refresh_status()
        self._host.notify("Queue cleared")

    # ---- Internal helpers ----

    def _steer(self, text: str) -> None:
        self._dispatch(text, DeliveryTag.STEER)
        self._host.notify(f"Steering: {text}")

    def _flush_next(self) -> BufferedMessage | None:
        message = self._queue.pop_front()
        if message is None:
            return None
        self._refresh_status()
        self._dispatch(message.text, DeliveryTag.DEFAULT)
        # The backend is running this message now, whether or not it has
        # reported agent_start yet.
        self._busy = True
        self._host.notify(f"Sending queued: {message.text}")
        return message

    def _dispatch(self, text: str, deliver_as: DeliveryTag) -> None:
        logger.debug("Dispatching as %s (busy=%s)", deliver_as.value, self._busy)
        self._host.dispatch(text, deliver_as=deliver_as, busy=self._busy)

    def _refresh_status(self) -> None:
        self._host.update_queue_status(self._queue.snapshot())
