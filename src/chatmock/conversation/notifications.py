"""Short-lived user notifications (toasts).

Hides how dismissal is scheduled: a toast stays visible for a fixed
delay, and showing a new toast cancels the pending dismissal of the
previous one.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

TOAST_TIMEOUT = 3.0  # Seconds before a toast is dismissed


class ToastKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    """A transient message shown to the user."""

    message: str
    kind: ToastKind = ToastKind.SUCCESS


ToastListener = Callable[[Toast | None], None]


class ToastNotifier:
    """Holds the current toast and its dismissal timer."""

    def __init__(self, timeout: float = TOAST_TIMEOUT) -> None:
        self._timeout = timeout
        self._current: Toast | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._listeners: list[ToastListener] = []

    @property
    def current(self) -> Toast | None:
        return self._current

    @property
    def timeout(self) -> float:
        return self._timeout

    def subscribe(self, listener: ToastListener) -> None:
        """Register a callable receiving the toast (or None on dismissal)."""
        self._listeners.append(listener)

    def show(self, toast: Toast) -> None:
        """Display a toast, replacing any pending one.

        Must be called from the running event loop.
        """
        self._cancel_pending()
        self._current = toast
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._timeout, self.dismiss)
        self._emit()

    def dismiss(self) -> None:
        """Hide the current toast immediately."""
        self._cancel_pending()
        if self._current is None:
            return
        self._current = None
        self._emit()

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _emit(self) -> None:
        for listener in self._listeners:
            listener(self._current)
