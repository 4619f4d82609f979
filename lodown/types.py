"""
Lodown -- Shared Types

Type tags, the MISSING sentinel, and the classification helpers every other
module dispatches on. These are the contracts that bind the library together.

Tags:
  undefined   MISSING (argument not supplied)
  null        None
  boolean     bool
  number      any numbers.Number that is not a bool
  string      str
  array       any non-text Sequence (list, tuple, range, ...)
  object      any Mapping, and any other value that is not callable
  function    any other callable
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Mapping, Sequence
from typing import Any

# ---------------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------------


class _Missing:
    """Marker for "argument not supplied". Distinct from None."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# ---------------------------------------------------------------------------
# Tag registry
# ---------------------------------------------------------------------------

UNDEFINED = "undefined"
NULL = "null"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"
FUNCTION = "function"

TYPE_TAGS: set[str] = {UNDEFINED, NULL, BOOLEAN, NUMBER, STRING, ARRAY, OBJECT, FUNCTION}

# Tags compared by value in strict_equals; everything else compares by identity
PRIMITIVE_TAGS: set[str] = {BOOLEAN, NUMBER, STRING}

# Tags each/every/some know how to walk
COLLECTION_TAGS: set[str] = {ARRAY, OBJECT}

_TEXT_TYPES = (str, bytes, bytearray)

# Callback signatures. Callers may accept fewer arguments; see lodown.callbacks.
Predicate = Callable[..., Any]  # (element, index_or_key, collection) -> truthy
Action = Callable[..., Any]  # (element, index_or_key, collection) -> ignored
Reducer = Callable[..., Any]  # (accumulator, element, index) -> accumulator


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_sequence(value: Any) -> bool:
    """True for ordered, indexable containers that are not text."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def type_of(value: Any = MISSING) -> str:
    """
    Classify a value into one of TYPE_TAGS.

    Sequences and mappings are told apart from each other and from None,
    which lets first/last/each/every/some branch on shape rather than
    on concrete class.
    """
    if value is MISSING:
        return UNDEFINED
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, numbers.Number):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if is_sequence(value):
        return ARRAY
    if is_mapping(value):
        return OBJECT
    if callable(value):
        return FUNCTION
    return OBJECT


def strict_equals(a: Any, b: Any) -> bool:
    """
    Equality without coercion.

    Values with different tags are never equal (1 vs True, 1 vs "1").
    Booleans, numbers and strings compare by value, so 1 == 1.0 and NaN
    never matches. Everything else compares by identity; two equal lists
    are still different values.
    """
    tag = type_of(a)
    if tag != type_of(b):
        return False
    if tag in PRIMITIVE_TAGS:
        return bool(a == b)
    return a is b
