"""Single-resolution completion signal for popups."""

from __future__ import annotations

import asyncio
import logging
from typing import Generic, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class PopupResult(Generic[T]):
    """Future-backed result of a popup session.

    The popup's input handler calls ``resolve`` with its terminal action; the
    code that opened the popup awaits ``wait``. Only the first ``resolve``
    takes effect.
    """

    def __init__(self, name: str = "popup") -> None:
        self._name = name
        self._future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def resolve(self, value: T) -> bool:
        """Resolve with ``value``.

        Returns:
            True if this call resolved the popup, False if it was already
            resolved (the value is dropped).
        """
        if self._future.done():
            logger.warning(
                "%s resolved more than once; ignoring %r", self._name, value
            )
            return False
        self._future.set_result(value)
        return True

    async def wait(self) -> T:
        return await asyncio.shield(self._future)
