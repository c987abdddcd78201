from __future__ import annotations

import hashlib
from typing import Any

from vertexgraph.hashing.canonical import canonical_json


def sha1_hash(value: Any) -> str:
    """
    Stable content hash of a JSON-like value.

    Equal values hash equally regardless of key order.
    """
    payload = canonical_json(value)
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()
