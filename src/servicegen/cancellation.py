from __future__ import annotations

import threading


class CancellationToken:
    """Cooperative cancellation signal for a generation run.

    The host may call ``cancel`` from any thread; the generator observes the
    request at its next group boundary.
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()


__all__ = ["CancellationToken"]
