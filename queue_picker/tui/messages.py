"""Message definitions for backend -> app communication.

SimulatedBackend posts these to the app, which forwards the lifecycle
changes to the QueueController and the status lines.
"""

from __future__ import annotations

from textual.message import Message


class AgentStarted(Message):
    """The backend started working on a message (idle -> busy)."""

    def __init__(self, content: str) -> None:
        super().__init__()
        self.content = content


class AgentSteered(Message):
    """A steer message redirected the task that was already running."""

    def __init__(self, content: str) -> None:
        super().__init__()
        self.content = content


class AgentFinished(Message):
    """The backend finished its task (busy -> idle)."""

    def __init__(self, content: str) -> None:
        super().__init__()
        self.content = content
