"""Deferred, ordered delivery of external callbacks.

Every input event is handled inside a batch: controllers mutate their own state
immediately, but the callbacks they trigger are queued and only delivered once
the outermost batch closes. Within a batch, callbacks run grouped by stage
(selection commit, then position change, then focus change, then raw event
passthrough) and in emission order inside a stage.
"""

import contextlib
import logging
from collections.abc import Iterator
from enum import IntEnum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Delivery order of callbacks fired by the same input event."""

    COMMIT = 0
    POSITION = 1
    FOCUS = 2
    PASSTHROUGH = 3


class CallbackQueue:
    """Collects callbacks during an event and delivers them after it settles."""

    def __init__(self) -> None:
        self._pending: list[tuple[Stage, int, Callable[..., Any], tuple[Any, ...]]] = []
        self._depth = 0
        self._sequence = 0

    @property
    def in_batch(self) -> bool:
        return self._depth > 0

    @contextlib.contextmanager
    def batch(self) -> Iterator[None]:
        """Defer callback delivery until the outermost batch exits."""
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            if self._depth == 0:
                self.flush()

    def emit(self, stage: Stage, callback: Optional[Callable[..., Any]], *args: Any) -> None:
        """Queue a callback, or call it right away when no batch is open.

        Args:
            stage: Delivery stage of the callback
            callback: Callable to invoke; None is ignored
            *args: Positional arguments for the callback
        """
        if callback is None:
            return
        if not self.in_batch:
            self._deliver(callback, args)
            return
        self._pending.append((stage, self._sequence, callback, args))
        self._sequence += 1

    def flush(self) -> None:
        """Deliver every queued callback in stage order."""
        pending = sorted(self._pending, key=lambda item: (item[0], item[1]))
        self._pending = []
        self._sequence = 0
        for _stage, _seq, callback, args in pending:
            self._deliver(callback, args)

    def _deliver(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        try:
            callback(*args)
        except Exception as e:
            logger.error(f"Error in datepicker callback {callback!r}: {e}")
