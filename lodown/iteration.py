"""
Lodown -- Iteration & Slicing

identity, each, entries, first, last.

each() is the traversal every builder in the library is made of
(filter, map, reduce, extend). It dispatches on type_of():
  array   -> by ascending index, action(element, index, collection)
  object  -> by key, action(value, key, collection)
  other   -> no calls

Callers that already know the shape can skip the dispatch with
each_sequence() / each_mapping().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

from lodown.callbacks import adapt
from lodown.types import ARRAY, MISSING, NUMBER, OBJECT, Action, type_of

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def identity(value: Any) -> Any:
    """Return value unchanged."""
    return value


def entries(collection: Any) -> Iterator[tuple[Any, Any]]:
    """
    Yield (element, index_or_key) pairs in traversal order.
    Yields nothing for values that are not collections.
    """
    walker = _WALKERS.get(type_of(collection))
    if walker is None:
        return iter(())
    return walker(collection)


def each(collection: Any, action: Action) -> None:
    """
    Call action(element, index_or_key, collection) for every element.
    Returns None; results are observed through the action's side effects.
    """
    traverse(collection, adapt(action, "each"))


def traverse(collection: Any, call: Callable[[Any, Any, Any], Any]) -> None:
    """
    each() without callback adaptation: call always receives
    (element, index_or_key, collection). The builders in this package
    walk through here with their own three-argument closures.
    """
    tag = type_of(collection)
    walker = _WALKERS.get(tag)
    if walker is None:
        logger.debug("each: nothing to iterate in %s", tag)
        return
    for element, key in walker(collection):
        call(element, key, collection)


def each_sequence(sequence: Sequence[Any], action: Action) -> None:
    """each() for a value known to be a sequence."""
    call = adapt(action, "each_sequence")
    for element, index in _walk_sequence(sequence):
        call(element, index, sequence)


def each_mapping(mapping: Mapping[Any, Any], action: Action) -> None:
    """each() for a value known to be a mapping."""
    call = adapt(action, "each_mapping")
    for value, key in _walk_mapping(mapping):
        call(value, key, mapping)


def first(sequence: Any, count: Any = MISSING) -> Any:
    """
    Leading elements of a sequence.

    Syntax: first(sequence[, count])

    - sequence not an array          -> []
    - count a number below 1 (or NaN) -> []
    - count omitted or not a number  -> sequence[0] itself, not wrapped
      (None when the sequence is empty)
    - count >= len(sequence)         -> copy of the whole sequence
    - otherwise                      -> new list of the first int(count) elements
    """
    return _take(sequence, count, "first", lambda seq: seq[0], lambda seq, n: seq[:n])


def last(sequence: Any, count: Any = MISSING) -> Any:
    """Mirror of first(), taken from the tail."""
    return _take(sequence, count, "last", lambda seq: seq[-1], lambda seq, n: seq[len(seq) - n :])


# ---------------------------------------------------------------------------
# Walkers
# ---------------------------------------------------------------------------


def _walk_sequence(sequence: Sequence[Any]) -> Iterator[tuple[Any, int]]:
    # len() is re-read every step: elements appended by the action are visited
    index = 0
    while index < len(sequence):
        yield sequence[index], index
        index += 1


def _walk_mapping(mapping: Mapping[Any, Any]) -> Iterator[tuple[Any, Any]]:
    # Walk a snapshot of the keys so the action may assign into the mapping;
    # keys deleted mid-walk are skipped.
    for key in list(mapping):
        if key in mapping:
            yield mapping[key], key


def _walk_object(collection: Any) -> Iterator[tuple[Any, Any]]:
    if isinstance(collection, Mapping):
        return _walk_mapping(collection)
    attrs = getattr(collection, "__dict__", None)
    if isinstance(attrs, dict):
        return _walk_mapping(attrs)
    return iter(())


_WALKERS: dict[str, Callable[[Any], Iterator[tuple[Any, Any]]]] = {
    ARRAY: _walk_sequence,
    OBJECT: _walk_object,
}


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------


def _take(
    sequence: Any,
    count: Any,
    operation: str,
    single: Callable[[Any], Any],
    head: Callable[[Any, int], Any],
) -> Any:
    tag = type_of(sequence)
    if tag != ARRAY:
        logger.debug("%s: expected array, got %s", operation, tag)
        return []

    n = _as_count(count)
    if n is None:
        return single(sequence) if len(sequence) else None
    if not n >= 1:
        return []
    if n >= len(sequence):
        return list(sequence)
    return list(head(sequence, int(n)))


def _as_count(value: Any) -> int | float | None:
    """Real-valued count, or None when value is not a usable number."""
    if type_of(value) != NUMBER or isinstance(value, complex):
        return None
    if isinstance(value, int):
        return value
    return float(value)
