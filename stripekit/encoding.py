"""
Form encoding for Stripe request parameters.

Stripe takes `application/x-www-form-urlencoded` bodies and query strings
with bracket notation for nested values:

    {"metadata": {"order": "42"}, "images": ["a", "b"], "active": True}
    -> metadata[order]=42&images[0]=a&images[1]=b&active=true

Conventions used across the whole client:
- Space is percent-encoded as %20, never "+".
- Lists always use indexed suffixes (key[0], key[1], ...), at any depth.
- Booleans are the literals "true" / "false".
- An empty nested map or list is sent as "key=" so Stripe unsets the field.
- None is treated as an absent key and emits nothing.
- Floats are written positionally, never in exponent notation.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Union
from urllib.parse import quote

from .exceptions import UnsupportedValueKind

Scalar = Union[str, int, float, bool]
Encodable = Union[Scalar, list["Encodable"], tuple["Encodable", ...], Mapping[str, "Encodable"]]

_KEY_SAFE = "[]"


def encode(params: Mapping[str, Encodable]) -> str:
    """Encode a parameter map into a form-urlencoded string.

    Args:
        params: Mapping of wire-level (snake_case) keys to encodable values

    Returns:
        "&"-joined key=value pairs, or "" for an empty map

    Raises:
        UnsupportedValueKind: If any value is outside str/int/float/bool,
            list/tuple or mapping, or the structure is circular
    """
    return "&".join(
        f"{quote(key, safe=_KEY_SAFE)}={quote(value, safe='')}"
        for key, value in encode_pairs(params)
    )


def encode_pairs(params: Mapping[str, Encodable]) -> list[tuple[str, str]]:
    """Flatten a parameter map into bracket-notation (key, value) pairs.

    Pairs are returned in insertion order and are not percent-encoded.
    """
    if not isinstance(params, Mapping):
        raise UnsupportedValueKind("", params, "top-level parameters must be a mapping")

    pairs: list[tuple[str, str]] = []
    _flatten_map(params, None, pairs, set())
    return pairs


def _flatten_map(
    mapping: Mapping, prefix: str | None, pairs: list[tuple[str, str]], seen: set[int]
) -> None:
    if id(mapping) in seen:
        raise UnsupportedValueKind(prefix or "", mapping, "circular reference")
    seen.add(id(mapping))

    for key, value in mapping.items():
        if not isinstance(key, str) or not key:
            raise UnsupportedValueKind(
                prefix or "", key, f"map keys must be non-empty strings, got {key!r}"
            )
        path = key if prefix is None else f"{prefix}[{key}]"
        _flatten_value(value, path, pairs, seen)

    seen.discard(id(mapping))


def _flatten_value(
    value: Encodable, path: str, pairs: list[tuple[str, str]], seen: set[int]
) -> None:
    if value is None:
        return

    if isinstance(value, Enum):
        _flatten_value(value.value, path, pairs, seen)
        return

    # bool is a subclass of int, so it must be matched first
    if isinstance(value, bool):
        pairs.append((path, "true" if value else "false"))
    elif isinstance(value, str):
        pairs.append((path, value))
    elif isinstance(value, int):
        pairs.append((path, str(int(value))))
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedValueKind(path, value, f"non-finite float {value!r}")
        pairs.append((path, _format_float(value)))
    elif isinstance(value, Mapping):
        if not value:
            pairs.append((path, ""))
        else:
            _flatten_map(value, path, pairs, seen)
    elif isinstance(value, (list, tuple)):
        if not value:
            pairs.append((path, ""))
            return
        if id(value) in seen:
            raise UnsupportedValueKind(path, value, "circular reference")
        seen.add(id(value))
        for index, item in enumerate(value):
            _flatten_value(item, f"{path}[{index}]", pairs, seen)
        seen.discard(id(value))
    else:
        raise UnsupportedValueKind(path, value)


def _format_float(value: float) -> str:
    # shortest round-tripping digits, written positionally (1e-05 -> 0.00001)
    return format(Decimal(repr(float(value))), "f")
