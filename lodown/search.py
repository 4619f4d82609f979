"""
Lodown -- Search & Filtering

index_of, contains, filter, reject, partition, unique.

Composition:
  filter    = each + test
  reject    = filter + negated test
  partition = [filter, reject]   (test runs twice per element)
  unique    = filter + index_of
  contains  = index_of != -1

None of these mutate their input. Comparisons use strict_equals:
no coercion, no deep equality.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lodown.callbacks import adapt
from lodown.iteration import traverse
from lodown.types import Predicate, is_sequence, strict_equals, type_of

logger = logging.getLogger(__name__)


def index_of(sequence: Any, value: Any) -> int:
    """Lowest index holding value, else -1. Stops at the first match."""
    if not is_sequence(sequence):
        logger.debug("index_of: expected array, got %s", type_of(sequence))
        return -1
    for index, element in enumerate(sequence):
        if strict_equals(element, value):
            return index
    return -1


def contains(sequence: Any, value: Any) -> bool:
    return index_of(sequence, value) != -1


def filter(sequence: Any, test: Predicate) -> list[Any]:
    """New list of the elements for which test(element, index, sequence) is truthy."""
    return _select(sequence, adapt(test, "filter"))


def reject(sequence: Any, test: Predicate) -> list[Any]:
    """Logical inverse of filter: the elements that fail test."""
    call = adapt(test, "reject")
    return _select(sequence, lambda element, index, collection: not call(element, index, collection))


def partition(sequence: Any, test: Predicate) -> list[list[Any]]:
    """
    [passing, failing] as a two-element list.

    Built from filter and reject, so test is evaluated twice per element
    and any side effects it has happen twice.
    """
    return [filter(sequence, test), reject(sequence, test)]


def unique(sequence: Any) -> list[Any]:
    """First occurrence of each distinct value, in original order."""
    return _select(sequence, lambda element, index, collection: index_of(collection, element) == index)


def _select(sequence: Any, call: Callable[[Any, Any, Any], Any]) -> list[Any]:
    result: list[Any] = []

    def keep(element: Any, index: Any, collection: Any) -> None:
        if call(element, index, collection):
            result.append(element)

    traverse(sequence, keep)
    return result
