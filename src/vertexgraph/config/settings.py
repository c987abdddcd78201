from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional

from vertexgraph.config.defaults import default_id_key

IdFn = Callable[[Any], Hashable]
HashFn = Callable[[Any], str]
StripFn = Callable[[Any], Any]
SerializableFn = Callable[[Any], bool]


# ---------------------------------------------------------------------
# Mutable graph
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Strategy functions controlling identity, hashing and serialization
    of a mutable graph.

    - id_fn takes precedence over id_key and must raise MissingId itself
    - hash_fn defaults to the canonical SHA-1 hasher
    - strip_fn is applied before hashing and serialization
    - serializable_fn excludes vertices (and their edges) from snapshots

    The default hash_fn only digests JSON-like values. Attribute-style
    vertices need a strip_fn (or hash_fn) that maps them to one, and a
    value-based __eq__ for diffs to report only real replacements.
    """

    id_key: str = field(default_factory=default_id_key)
    id_fn: Optional[IdFn] = None
    hash_fn: Optional[HashFn] = None
    strip_fn: Optional[StripFn] = None
    serializable_fn: Optional[SerializableFn] = None


# ---------------------------------------------------------------------
# Persistent graph
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PersistentGraphConfig:
    """
    Identity strategy for a persistent graph.
    """

    id_key: str = field(default_factory=default_id_key)
    id_fn: Optional[IdFn] = None
