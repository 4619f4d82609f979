"""
Lodown -- Callback Invocation

Every operation calls its callback with the full argument list
(element, index_or_key, collection). Python callables reject extra
positional arguments, so each callback is adapted once per operation:
its positional arity is read from its signature and the call is trimmed
to fit. `lambda n: n > 3` receives only the element; a callable taking
*args receives everything.

Builtin types used as callbacks (bool, int, str, float, ...) always
receive the element alone. Their second positional parameter, where one
exists, is a base or an encoding, never an index.

Nothing is cached: arity is read per operation call, so no callback (or
what it closes over) outlives the call that received it.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from lodown.errors import CallbackError

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def truthy(element: Any) -> bool:
    """Default predicate for every/some: the element's own truthiness."""
    return bool(element)


def arity(func: Callable[..., Any]) -> int | None:
    """
    Number of positional arguments func accepts.
    None means unbounded (*args) or unknown (no introspectable signature).
    """
    if isinstance(func, type) and func.__module__ == "builtins":
        return 1

    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        if isinstance(func, type):
            return 1
        logger.debug("No signature for %r; passing all arguments", func)
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL:
            count += 1
    return count


def adapt(func: Any, operation: str) -> Callable[..., Any]:
    """
    Wrap func so it can be called with the full argument list.

    Raises CallbackError if func is not callable. Exceptions raised by
    func itself pass through untouched.
    """
    if not callable(func):
        raise CallbackError(f"{operation}() expects a callable, got {type(func).__name__}")

    n = arity(func)
    if n is None:
        return func

    def call(*args: Any) -> Any:
        return func(*args[:n])

    return call
