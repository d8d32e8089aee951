"""AttributeModel — mutable key-value model with change notifications."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .listeners import ListenerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable


class AttributeModel:
    """
    Holds attribute values and announces changes.

    ``set()`` stores the new values first and then, when anything actually
    changed:

    1. calls the ``_attributes_changed(changed)`` hook,
    2. triggers ``"change:<attr>"`` with ``(model, value)`` per attribute,
    3. triggers ``"change"`` with ``(model, changed)``.

    Attributes passed to the constructor are stored without notifications.

    Usage::

        person = AttributeModel(first_name="Dave")
        person.on("change", lambda model, changed: print(changed))
        person.set(last_name="Smith")
    """

    def __init__(
        self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> None:
        self._attributes: dict[str, Any] = {**(attributes or {}), **kwargs}
        self._changed: dict[str, Any] = {}
        self._events = ListenerRegistry()

    # ── Attributes ───────────────────────────────────────────────

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of the current values."""
        return MappingProxyType(self._attributes)

    @property
    def changed_attributes(self) -> Mapping[str, Any]:
        """Attributes changed by the most recent mutation."""
        return MappingProxyType(self._changed)

    def get(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def has(self, name: str) -> bool:
        """True if *name* holds a value other than ``None``."""
        return self._attributes.get(name) is not None

    def set(
        self, values: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> AttributeModel:
        """Store *values* and notify about the ones that changed."""
        incoming: dict[str, Any] = {**(values or {}), **kwargs}
        changed = {
            name: value
            for name, value in incoming.items()
            if name not in self._attributes or self._attributes[name] != value
        }
        self._attributes.update(incoming)
        self._notify(changed)
        return self

    def unset(self, name: str) -> AttributeModel:
        """Remove *name*; listeners see it change to ``None``."""
        if name in self._attributes:
            del self._attributes[name]
            self._notify({name: None})
        return self

    # ── Events ───────────────────────────────────────────────────

    def on(self, event: str, listener: Callable[..., Any]) -> None:
        self._events.on(event, listener)

    def off(
        self, event: str | None = None, listener: Callable[..., Any] | None = None
    ) -> None:
        self._events.off(event, listener)

    def trigger(self, event: str, *args: Any) -> None:
        self._events.trigger(event, *args)

    # ── Hooks ────────────────────────────────────────────────────

    def _attributes_changed(self, changed: Mapping[str, Any]) -> None:
        """Called with the changed attributes before change events fire."""

    def _notify(self, changed: dict[str, Any]) -> None:
        self._changed = changed
        if not changed:
            return
        self._attributes_changed(MappingProxyType(changed))
        for name, value in changed.items():
            self.trigger(f"change:{name}", self, value)
        self.trigger("change", self, MappingProxyType(changed))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"
