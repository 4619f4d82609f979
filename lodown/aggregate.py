"""
Lodown -- Quantifiers & Aggregation

every, some, reduce.

every/some walk arrays by index and mappings by key, short-circuiting on
the first element that decides the answer. Values that are not
collections answer False for both.
"""

from __future__ import annotations

import logging
from typing import Any

from lodown.callbacks import adapt, truthy
from lodown.iteration import entries, traverse
from lodown.types import COLLECTION_TAGS, MISSING, Predicate, Reducer, type_of

logger = logging.getLogger(__name__)


def every(collection: Any, test: Predicate | None = None) -> bool:
    """
    True if test(element, index_or_key, collection) is truthy for every element.
    Returns False at the first failure. Empty collections pass.
    Without a test, each element's own truthiness is used.
    """
    call = adapt(test if test is not None else truthy, "every")
    if not _is_collection(collection, "every"):
        return False
    for element, key in entries(collection):
        if not call(element, key, collection):
            return False
    return True


def some(collection: Any, test: Predicate | None = None) -> bool:
    """
    True if test(element, index_or_key, collection) is truthy for any element.
    Returns True at the first pass. Empty collections fail.
    Without a test, each element's own truthiness is used.
    """
    call = adapt(test if test is not None else truthy, "some")
    if not _is_collection(collection, "some"):
        return False
    for element, key in entries(collection):
        if call(element, key, collection):
            return True
    return False


def reduce(sequence: Any, func: Reducer, seed: Any = MISSING) -> Any:
    """
    Fold sequence into one value with func(accumulator, element, index).

    Syntax: reduce(sequence, func[, seed])

    Without a seed the first element starts the accumulator and folding
    begins at the second. Any explicit seed, None included, is used as the
    starting accumulator. An empty sequence gives back the seed, or None
    when there is no seed.
    """
    call = adapt(func, "reduce")
    started = seed is not MISSING
    accumulator = seed

    def fold(element: Any, index: Any, collection: Any) -> None:
        nonlocal started, accumulator
        if not started:
            started = True
            accumulator = element
            return
        accumulator = call(accumulator, element, index)

    traverse(sequence, fold)
    return accumulator if started else None


def _is_collection(value: Any, operation: str) -> bool:
    tag = type_of(value)
    if tag not in COLLECTION_TAGS:
        logger.debug("%s: expected array or object, got %s", operation, tag)
        return False
    return True
