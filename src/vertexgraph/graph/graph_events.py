from __future__ import annotations

from typing import Any, Callable, Dict, List

VERTEX_HASHED = "vertexHashed"

VERTEX_ADDED = "vertexAdded"
VERTEX_REMOVED = "vertexRemoved"
VERTEX_REPLACED = "vertexReplaced"
METADATA_CHANGED = "metadataChanged"

DiffEvent = Dict[str, Any]
DiffListener = Callable[[DiffEvent], None]


class EventEmitter:
    """
    Synchronous observer registry.

    Listeners are invoked in registration order at the moment an event
    is emitted; there is no deferred delivery.
    """

    def __init__(self, events: tuple[str, ...]) -> None:
        self._listeners: Dict[str, List[Callable[..., None]]] = {
            name: [] for name in events
        }

    def on(self, event: str, listener: Callable[..., None]) -> None:
        self._check(event)
        self._listeners[event].append(listener)

    def off(self, event: str, listener: Callable[..., None]) -> None:
        self._check(event)
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))

    def emit(self, event: str, *args: Any) -> None:
        self._check(event)
        for listener in list(self._listeners[event]):
            listener(*args)

    def _check(self, event: str) -> None:
        if event not in self._listeners:
            raise ValueError(f"unknown event '{event}'")


# ------------------------------------------------------------------
# Diff events (single-key tagged records)
# ------------------------------------------------------------------


def vertex_added(vertex: Any) -> DiffEvent:
    return {VERTEX_ADDED: vertex}


def vertex_removed(vertex: Any) -> DiffEvent:
    return {VERTEX_REMOVED: vertex}


def vertex_replaced(before: Any, after: Any) -> DiffEvent:
    return {VERTEX_REPLACED: {"from": before, "to": after}}


def metadata_changed(before: Any, after: Any) -> DiffEvent:
    return {METADATA_CHANGED: {"from": before, "to": after}}
