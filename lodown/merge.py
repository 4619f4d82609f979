"""
Lodown -- Merge

extend(target, *sources): copy every key/value pair of each source onto
target, left to right, later sources winning. The only operation in the
library that mutates an argument; it returns that same target.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from lodown.errors import ExtendTargetError
from lodown.iteration import traverse


def extend(target: MutableMapping[Any, Any], *sources: Any) -> MutableMapping[Any, Any]:
    if not isinstance(target, MutableMapping):
        raise ExtendTargetError(f"extend() target must be a mutable mapping, got {type(target).__name__}")

    def assign(value: Any, key: Any, collection: Any) -> None:
        target[key] = value

    traverse(sources, lambda source, index, collection: traverse(source, assign))
    return target
