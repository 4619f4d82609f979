"""
Lodown test configuration.

Shared fixtures: the customer records used across the suites, and a spy
factory for counting callback invocations.
"""

from __future__ import annotations

import copy
import functools
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def customers() -> list[dict[str, Any]]:
    """Eight customer records: index 0-7, the first four and the last are female."""
    return json.loads((FIXTURES / "customers.json").read_text())


@pytest.fixture
def customers_copy(customers) -> list[dict[str, Any]]:
    """Deep copy for before/after comparisons."""
    return copy.deepcopy(customers)


@pytest.fixture
def spy() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Wrap a function and record every call's arguments in `.calls`.

    functools.wraps exposes the wrapped signature, so the library sees the
    same arity it would see for the bare function.
    """

    def make(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any) -> Any:
            wrapper.calls.append(args)
            return func(*args)

        wrapper.calls = []
        return wrapper

    return make
