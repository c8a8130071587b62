"""Data types shared by the queue store, the popups and the controller."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


PickerMode = Literal["steer", "follow_up"]

STEER: PickerMode = "steer"
FOLLOW_UP: PickerMode = "follow_up"

_id_counter = itertools.count()


def next_id() -> str:
    """Return a message id that is unique for the lifetime of the process."""
    return f"qp-{int(time.time() * 1000)}-{next(_id_counter)}"


def toggle_mode(mode: PickerMode) -> PickerMode:
    return FOLLOW_UP if mode == STEER else STEER


@dataclass
class BufferedMessage:
    """A submission waiting in the queue.

    ``text`` and ``mode`` may be edited while the message sits in the queue;
    ``id`` is assigned once and never changes.
    """

    text: str
    mode: PickerMode = FOLLOW_UP
    id: str = field(default_factory=next_id)

    def clone(self) -> BufferedMessage:
        return BufferedMessage(text=self.text, mode=self.mode, id=self.id)


class DeliveryTag(Enum):
    """How a dispatched message should be handed to the backend."""

    DEFAULT = "default"
    STEER = "steer"
    FOLLOW_UP = "follow_up"


class InputAction(Enum):
    """Result of intercepting a submission.

    CONTINUE hands the text back to the host's normal submission path,
    HANDLED means the controller consumed it.
    """

    CONTINUE = "continue"
    HANDLED = "handled"


class InputSource(Enum):
    INTERACTIVE = "interactive"
    PROGRAMMATIC = "programmatic"


# ---------------------------------------------------------------------------
# Popup actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ModePickerSelect:
    mode: PickerMode


@dataclass(frozen=True, slots=True)
class ModePickerCancel:
    pass


@dataclass(frozen=True, slots=True)
class QueueEditorSave:
    items: list[BufferedMessage]


@dataclass(frozen=True, slots=True)
class QueueEditorCancel:
    pass


ModePickerAction = ModePickerSelect | ModePickerCancel
QueueEditorAction = QueueEditorSave | QueueEditorCancel
