from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from vertexgraph.graph.graph_events import (
    DiffEvent,
    DiffListener,
    metadata_changed,
    vertex_added,
    vertex_removed,
    vertex_replaced,
)

if TYPE_CHECKING:
    from vertexgraph.graph.graph import Graph


class GraphDiffer:
    """
    Structural diff between two graph snapshots.

    Events describe how to turn the *base* graph into the *current* one
    and are produced in three passes:

    1. base vertices, in insertion order: removed or replaced
    2. current vertices, in insertion order: added
    3. metadata change, if any
    """

    def __init__(self, current: "Graph", base: "Graph") -> None:
        self.current = current
        self.base = base

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, listener: Optional[DiffListener] = None) -> List[DiffEvent]:
        events: List[DiffEvent] = []

        for event in self._iter_events():
            events.append(event)
            if listener is not None:
                listener(event)

        logging.getLogger("vertexgraph.diff").info(
            "diff computed: events=%s base_vertices=%s current_vertices=%s",
            len(events),
            self.base.vertex_count(),
            self.current.vertex_count(),
        )
        return events

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _iter_events(self):
        current, base = self.current, self.base

        for vertex_id, before in base.items():
            if vertex_id not in current:
                yield vertex_removed(before)
                continue
            after = current.get(vertex_id)
            if after != before:
                yield vertex_replaced(before, after)

        for vertex_id, after in current.items():
            if vertex_id not in base:
                yield vertex_added(after)

        if self.current.metadata != self.base.metadata:
            yield metadata_changed(self.base.metadata, self.current.metadata)
