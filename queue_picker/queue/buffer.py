"""Message queue store.

The queue holds follow-up (and temporarily steer-tagged) messages that have
not been delivered yet. It is a plain ordered container: it knows nothing
about the backend, the popups or when to flush.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Literal

from rich.text import Text

from queue_picker.queue.types import STEER, BufferedMessage


Direction = Literal["up", "down"]


def move_adjacent(items: list, index: int, direction: Direction) -> int:
    """Swap ``items[index]`` with its neighbour in ``direction``.

    Returns the index the item ended up at. At a boundary (or for an index
    outside the list) nothing moves and ``index`` is returned unchanged.
    """
    if not 0 <= index < len(items):
        return index
    target = index - 1 if direction == "up" else index + 1
    if not 0 <= target < len(items):
        return index
    items[index], items[target] = items[target], items[index]
    return target


class MessageQueue:
    """Ordered, mutable collection of buffered messages.

    Insertion order is delivery order. Message ids are unique within a queue;
    callers keep it that way (new messages get fresh ids, edits keep theirs).
    No operation raises.
    """

    def __init__(self, items: Iterable[BufferedMessage] = ()) -> None:
        self._items: list[BufferedMessage] = []
        self.replace_all(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BufferedMessage]:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def snapshot(self) -> list[BufferedMessage]:
        """Return the current entries (shared objects, new list)."""
        return list(self._items)

    def append(self, message: BufferedMessage) -> None:
        """Add ``message`` at the tail. Its id must not already be queued."""
        self._items.append(message)

    def pop_front(self) -> BufferedMessage | None:
        """Remove and return the head, or None when the queue is empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    def pop_first(
        self, predicate: Callable[[BufferedMessage], bool]
    ) -> BufferedMessage | None:
        """Remove and return the earliest entry matching ``predicate``.

        Returns None and leaves the queue untouched if nothing matches.
        """
        for index, item in enumerate(self._items):
            if predicate(item):
                return self._items.pop(index)
        return None

    def pop_first_steer(self) -> BufferedMessage | None:
        return self.pop_first(lambda message: message.mode == STEER)

    def move_adjacent(self, index: int, direction: Direction) -> int:
        return move_adjacent(self._items, index, direction)

    def replace_all(self, items: Iterable[BufferedMessage]) -> None:
        """Substitute the whole contents in one step.

        ``items`` come from this queue (possibly cloned, reordered or
        filtered), so their ids are already unique.
        """
        self._items = list(items)

    def clear(self) -> None:
        self._items = []


# ---------------------------------------------------------------------------
# Status display
# ---------------------------------------------------------------------------

STEER_LABEL = "⚡ Steer"
FOLLOW_UP_LABEL = "📋 Follow-up"


def mode_label(message: BufferedMessage) -> str:
    return STEER_LABEL if message.mode == STEER else FOLLOW_UP_LABEL


def truncate_to_width(text: str, width: int) -> str:
    """Truncate ``text`` to ``width`` terminal cells, ending with an ellipsis."""
    line = Text(text.replace("\r", " ").replace("\n", " "), no_wrap=True)
    line.truncate(max(1, width), overflow="ellipsis")
    return line.plain


def render_status_lines(
    messages: Iterable[BufferedMessage],
    width: int,
    hint: str | None = None,
) -> list[str] | None:
    """Build the status display for the queue.

    Args:
        messages: Queue entries in delivery order
        width: Available width in terminal cells
        hint: Optional trailing help line

    Returns:
        One line per entry (plus the hint), or None when there is nothing
        queued and the display should be cleared.
    """
    entries = list(messages)
    if not entries:
        return None

    safe_width = max(1, width)
    lines = [
        truncate_to_width(f"  {mode_label(message)}: {message.text}", safe_width)
        for message in entries
    ]
    if hint:
        lines.append(truncate_to_width(f"  ↳ {hint}", safe_width))
    return lines
