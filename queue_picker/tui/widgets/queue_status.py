from __future__ import annotations

from collections.abc import Sequence

from textual.widgets import Static

from queue_picker.queue.buffer import render_status_lines
from queue_picker.queue.types import BufferedMessage


class QueueStatus(Static):
    """Persistent list of queued messages shown above the input.

    Hidden while the queue is empty.
    """

    DEFAULT_CSS = """
    QueueStatus {
        height: auto;
        max-height: 8;
        background: $background;
        color: $secondary;
        display: none;
    }
    QueueStatus.visible {
        display: block;
    }
    """

    def __init__(self, hint: str | None = None, **kwargs) -> None:
        super().__init__("", markup=False, **kwargs)
        self._hint = hint
        self._messages: list[BufferedMessage] = []

    @property
    def lines(self) -> list[str] | None:
        return render_status_lines(self._messages, self._available_width(), self._hint)

    def update_messages(self, messages: Sequence[BufferedMessage]) -> None:
        """Show ``messages``; an empty sequence clears and hides the display."""
        # Copy the text and mode now: the queue may change before the next render.
        self._messages = [message.clone() for message in messages]
        self._update_text()

    def on_resize(self) -> None:
        self._update_text()

    def _available_width(self) -> int:
        return self.size.width or 80

    def _update_text(self) -> None:
        lines = self.lines
        if lines is None:
            self.remove_class("visible")
            self.update("")
            return
        self.add_class("visible")
        self.update("\n".join(lines))
