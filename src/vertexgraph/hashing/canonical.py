from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

# JavaScript switches to exponent notation from here on
_EXPONENT_THRESHOLD = 1e21


def _number(value: float) -> Any:
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        # shortest round-trip digits, zero padded
        return int(Decimal(repr(value)))
    return value


def _json_key(key: Any) -> str:
    """
    The object key text JSON writes for ``key``.

    ``1`` becomes ``"1"``, ``True`` becomes ``"true"`` and ``None``
    becomes ``"null"``; other key types raise ``TypeError``.
    """
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int)):
        return json.dumps(key)
    if isinstance(key, float):
        normalized = _number(key)
        return "null" if normalized is None else json.dumps(normalized)
    raise TypeError(
        f"keys must be str, int, float, bool or None, not {type(key).__name__}"
    )


def normalize(value: Any) -> Any:
    """
    Rebuilds a JSON-like value with every mapping's keys sorted.

    Keys are converted to the text JSON writes for them before sorting,
    so mappings may mix key types. Integral floats become ints and
    non-finite floats become ``None``, as ``JSON.stringify`` writes them.
    Sequences keep their order; other scalars pass through unchanged.
    """
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    if isinstance(value, Mapping):
        keyed = sorted(
            ((_json_key(key), item) for key, item in value.items()),
            key=lambda pair: pair[0],
        )
        return {key: normalize(item) for key, item in keyed}
    if isinstance(value, float):
        return _number(value)
    return value


def canonical_json(value: Any) -> str:
    """
    Deterministic compact JSON text of the normalized value.
    """
    return json.dumps(
        normalize(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
