from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from queue_picker.queue.types import (
    BufferedMessage,
    DeliveryTag,
    ModePickerAction,
    QueueEditorAction,
)


if TYPE_CHECKING:
    from queue_picker.tui.core.mode_picker import ModePickerState
    from queue_picker.tui.core.queue_editor import QueueEditorState


class LifecycleHost(Protocol):
    """What the queue controller needs from the application hosting it."""

    @property
    def has_ui(self) -> bool:
        """Whether popups can be shown (False in headless runs)."""
        ...

    def dispatch(self, text: str, *, deliver_as: DeliveryTag, busy: bool) -> None:
        """Hand a message to the backend.

        Args:
            text: Message text, unmodified.
            deliver_as: Delivery tag. DEFAULT is a normal idle submission.
            busy: Whether the backend is running a task at dispatch time.
        """
        ...

    def update_queue_status(self, messages: Sequence[BufferedMessage]) -> None:
        """Show the queued messages, or clear the display when empty."""
        ...

    def notify(self, message: str) -> None:
        """Show a transient informational notification."""
        ...

    def set_input_text(self, text: str) -> None:
        """Put ``text`` back into the user's input field."""
        ...

    async def pick_mode(self, state: ModePickerState) -> ModePickerAction:
        """Show the mode picker and wait until it is resolved."""
        ...

    async def edit_queue(self, state: QueueEditorState) -> QueueEditorAction:
        """Show the queue editor and wait until it is resolved."""
        ...
