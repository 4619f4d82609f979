"""
Lodown -- Transformation

map(sequence, func)  -> [func(element, index, sequence), ...]
pluck(sequence, key) -> [element[key], ...]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lodown.callbacks import adapt
from lodown.iteration import traverse
from lodown.types import is_sequence


def map(sequence: Any, func: Callable[..., Any]) -> list[Any]:
    """
    Apply func to every element, in order, exactly once each.
    Returns a new list; the input is left alone.
    """
    call = adapt(func, "map")
    result: list[Any] = []
    traverse(sequence, lambda element, index, collection: result.append(call(element, index, collection)))
    return result


def pluck(sequence: Any, key: Any) -> list[Any]:
    """Project one named field out of a sequence of records. Absent fields give None."""
    return map(sequence, lambda element: _field(element, key))


def _field(record: Any, key: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    if is_sequence(record):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(record):
            return record[key]
        return None
    if isinstance(key, str):
        return getattr(record, key, None)
    return None
