from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable

from vertexgraph.errors import MissingId


def read_property(record: Any, key: str, default: Any = None) -> Any:
    """
    Reads a named property from a mapping or an attribute-style object.

    Only identity and property lookups go through here; hashing and
    snapshots still expect JSON-like vertices.
    """
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def read_id(record: Any, key: str) -> Hashable:
    """
    Default identity function: the value of ``key``, which must be set.
    """
    value = read_property(record, key)
    if value is None:
        raise MissingId(f"object has no '{key}' property")
    return value
