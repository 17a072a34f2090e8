"""Sequential iteration with a delay after each element.

Runs an action over a sequence one element at a time and waits between
elements for as long as a caller-supplied delay policy asks. The wait is
an ``asyncio.sleep``, so other tasks keep running and cancelling the
surrounding task stops the iteration at the wait.

Example:
    >>> import asyncio
    >>> from httpext.executor import execute_with_delay
    >>>
    >>> seen = []
    >>> asyncio.run(execute_with_delay([10, 20, 30], seen.append, lambda i, x: None))
    >>> seen
    [10, 20, 30]
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import timedelta
from typing import Generic, TypeVar, Union

from httpext.core.exceptions import ExecutorBusyError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Action = Union[Callable[[T], object], Callable[[T], Awaitable[object]]]
DelayPolicy = Callable[[int, T], Union[float, timedelta, None]]


def _to_seconds(delay: float | timedelta) -> float:
    if isinstance(delay, timedelta):
        return delay.total_seconds()
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise TypeError(f"delay must be seconds, a timedelta or None, not {type(delay).__name__}")
    return float(delay)


async def execute_with_delay(
    elements: Iterable[T],
    action: Action[T],
    delay: DelayPolicy[T],
) -> None:
    """Do ``action`` on each element, waiting after each one.

    For each element, in order: run ``action(element)``, then ask
    ``delay(index, element)`` how long to wait. ``None`` means continue
    immediately, a number is seconds and a ``timedelta`` is converted.
    The wait also happens after the last element.

    Errors raised by ``action`` or ``delay`` propagate unchanged and stop
    the iteration. Cancellation during a wait raises
    ``asyncio.CancelledError`` before the next action runs.

    Args:
        elements: Elements to process, consumed once
        action: Called per element; an awaitable result is awaited
        delay: Maps (index, element) to an optional wait

    Raises:
        TypeError: If ``delay`` returns something other than a number,
            a ``timedelta`` or ``None``

    Example:
        >>> import asyncio
        >>> from datetime import timedelta
        >>> from httpext.executor import execute_with_delay
        >>> out = []
        >>> asyncio.run(execute_with_delay(
        ...     "ab", out.append, lambda i, c: timedelta(milliseconds=1)
        ... ))
        >>> out
        ['a', 'b']
    """
    for index, element in enumerate(elements):
        result = action(element)
        if inspect.isawaitable(result):
            await result

        wait = delay(index, element)
        if wait is None:
            continue

        seconds = _to_seconds(wait)
        logger.debug(f"Waiting {seconds:.3f}s after element {index}")
        await asyncio.sleep(seconds)


class DelayedSequentialExecutor(Generic[T]):
    """Reusable binding of an action and a delay policy.

    An instance never iterates concurrently with itself: starting a second
    ``run`` while one is in progress raises ExecutorBusyError.

    Example:
        >>> import asyncio
        >>> from httpext.executor import DelayedSequentialExecutor
        >>> out = []
        >>> executor = DelayedSequentialExecutor(out.append, lambda i, x: None)
        >>> asyncio.run(executor.run([1, 2]))
        >>> out
        [1, 2]
    """

    def __init__(self, action: Action[T], delay: DelayPolicy[T]) -> None:
        self.action = action
        self.delay = delay
        self._running = False

    @property
    def running(self) -> bool:
        """Whether a run is in progress."""
        return self._running

    async def run(self, elements: Iterable[T]) -> None:
        """Run the bound action over ``elements``.

        Raises:
            ExecutorBusyError: If this executor is already running
        """
        if self._running:
            raise ExecutorBusyError("executor is already running")

        self._running = True
        try:
            await execute_with_delay(elements, self.action, self.delay)
        finally:
            self._running = False


__all__ = [
    "Action",
    "DelayPolicy",
    "DelayedSequentialExecutor",
    "execute_with_delay",
]
