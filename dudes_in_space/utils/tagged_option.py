"""Encoding of optional values as maps carrying an explicit state tag."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

T = TypeVar("T")

TAG = "tagged_option_state"
SOME = "Some"
NONE = "None"


def serialize(value: Optional[T], encode: Callable[[T], Mapping[str, Any]]) -> Dict[str, Any]:
    """Encode an optional value; present values must encode to a mapping."""
    if value is None:
        return {TAG: NONE}
    encoded = encode(value)
    if not isinstance(encoded, Mapping):
        raise TypeError("a tagged option can only hold a value that encodes to a mapping")
    return {TAG: SOME, **encoded}


def deserialize(data: Any, decode: Callable[[Dict[str, Any]], T]) -> Optional[T]:
    """Decode a value written by :func:`serialize`."""
    if not isinstance(data, Mapping):
        raise ValueError("expected a mapping for a tagged option")
    if TAG not in data:
        raise ValueError(f"missing field `{TAG}`")
    state = data[TAG]
    if state == NONE:
        return None
    if state == SOME:
        return decode({k: v for k, v in data.items() if k != TAG})
    raise ValueError(f"unknown variant `{state}`, expected `{SOME}` or `{NONE}`")