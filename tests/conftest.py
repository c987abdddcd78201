from __future__ import annotations

from typing import Any, Dict, List

import pytest

from vertexgraph.config.settings import GraphConfig
from vertexgraph.graph.graph import Graph


class EventLog:
    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def listener(self, event: Dict[str, Any]) -> None:
        self.events.append(event)


@pytest.fixture()
def graph() -> Graph:
    return Graph()


@pytest.fixture()
def simple_hash_fn():
    def _hash(vertex: Dict[str, Any]) -> str:
        return "_" + vertex["id"]

    return _hash


@pytest.fixture()
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture()
def snapshot_graph() -> Graph:
    """
    a -> b, with b and c replaced after insertion and c excluded from
    snapshots by its final value.
    """
    g = Graph(
        GraphConfig(
            hash_fn=lambda vertex: "_" + vertex["val"],
            serializable_fn=lambda vertex: vertex["val"] != "dont_serialize",
        )
    )
    a = {"id": "a", "val": "a"}
    b1 = {"id": "b", "val": "b1"}
    b2 = {"id": "b", "val": "b2"}
    c1 = {"id": "c", "val": "c"}
    c2 = {"id": "c", "val": "dont_serialize"}

    g.put(a)
    g.put(b1)
    g.create_edge(a, b1)
    g.replace(b2)
    g.put(c1)
    g.replace(c2)
    return g
