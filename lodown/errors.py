"""
Lodown -- Exceptions

Malformed collections never raise; they degrade to empty results.
These cover the few arguments that cannot degrade.
"""

from __future__ import annotations


class LodownError(Exception):
    """Base class for errors raised by lodown itself."""
    pass


class CallbackError(LodownError, TypeError):
    """A predicate, action or reducer argument is not callable."""
    pass


class ExtendTargetError(LodownError, TypeError):
    """extend() was given a target that cannot accept item assignment."""
    pass
