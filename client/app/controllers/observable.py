"""Minimal change-notification base for controllers that back a UI."""

from typing import Any, Callable, FrozenSet, List

StateListener = Callable[[FrozenSet[str]], None]


class ObservableState:
    """Holds ``_<name>`` attributes and tells listeners which names changed."""

    def __init__(self):
        self._listeners: List[StateListener] = []

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _update(self, **changes: Any) -> None:
        if not changes:
            return
        for name, value in changes.items():
            setattr(self, f"_{name}", value)
        changed = frozenset(changes)
        for listener in list(self._listeners):
            listener(changed)
