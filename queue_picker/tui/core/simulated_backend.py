"""Stand-in agent runtime for the queue picker TUI.

Each message keeps the backend busy for ``busy_seconds``. A steer delivery
while busy redirects the running task and restarts its clock. Any other
delivery while busy waits in the backend's own inbox.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from textual.message import Message
from textual.timer import Timer

from queue_picker.queue.types import DeliveryTag
from queue_picker.tui.messages import AgentFinished, AgentStarted, AgentSteered


logger = logging.getLogger(__name__)


class SimulatedBackend:
    def __init__(
        self,
        *,
        busy_seconds: float,
        set_timer: Callable[[float, Callable[[], Any]], Timer],
        post_message: Callable[[Message], Any],
    ) -> None:
        self._busy_seconds = busy_seconds
        self._set_timer = set_timer
        self._post_message = post_message
        self._timer: Timer | None = None
        self._current: str | None = None
        self._inbox: deque[str] = deque()

    @property
    def is_running(self) -> bool:
        return self._current is not None

    @property
    def current_task(self) -> str | None:
        return self._current

    def deliver(self, text: str, deliver_as: DeliveryTag) -> None:
        if not self.is_running:
            self._start(text)
            return
        if deliver_as is DeliveryTag.STEER:
            logger.debug("Steer received while running; restarting task clock")
            self._current = text
            self._restart_timer()
            self._post_message(AgentSteered(text))
            return
        self._inbox.append(text)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._current = None
        self._inbox.clear()

    # ----- Internal helpers -----

    def _start(self, text: str) -> None:
        self._current = text
        self._restart_timer()
        self._post_message(AgentStarted(text))

    def _restart_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
        self._timer = self._set_timer(self._busy_seconds, self._finish)

    def _finish(self) -> None:
        finished = self._current or ""
        self._timer = None
        self._current = None
        self._post_message(AgentFinished(finished))
        if self._inbox:
            self._start(self._inbox.popleft())
