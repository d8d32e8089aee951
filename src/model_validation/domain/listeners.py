"""ListenerRegistry — named, synchronous notifications for models."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Maps event names (``"change"``, ``"error"``, ...) to listeners.

    Listeners run in registration order, synchronously, inside
    :meth:`trigger`.  A failing listener is logged and its exception
    propagates to the caller of :meth:`trigger`.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    # ── Registration ─────────────────────────────────────────────

    def on(self, event: str, listener: Callable[..., Any]) -> None:
        """Register *listener* for *event*; registering twice is a no-op."""
        listeners = self._listeners.setdefault(event, [])
        if listener not in listeners:
            listeners.append(listener)

    def off(
        self, event: str | None = None, listener: Callable[..., Any] | None = None
    ) -> None:
        """Remove listeners.

        With no arguments every listener is removed; with only *event* all
        listeners for that event; with both just that listener.
        """
        if event is None:
            self._listeners.clear()
            return
        if listener is None:
            self._listeners.pop(event, None)
            return
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    # ── Dispatching ──────────────────────────────────────────────

    def trigger(self, event: str, *args: Any) -> None:
        """Call every listener registered for *event* with ``*args``."""
        for listener in list(self._listeners.get(event, ())):
            try:
                listener(*args)
            except Exception:
                logger.exception(
                    "Error executing listener %s for event '%s'",
                    getattr(listener, "__qualname__", type(listener).__name__),
                    event,
                )
                raise

    # ── Introspection ────────────────────────────────────────────

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        """Return the listeners registered for *event*."""
        return list(self._listeners.get(event, ()))
