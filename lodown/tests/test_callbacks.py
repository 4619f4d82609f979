"""
Lodown Callbacks -- arity-aware invocation.

Callbacks are called with (element, index_or_key, collection) trimmed to the
positional parameters they accept.
"""

import functools

import pytest

from lodown.callbacks import adapt, arity, truthy
from lodown.errors import CallbackError, LodownError


class TestArity:
    def test_counts_positional_parameters(self):
        assert arity(lambda: None) == 0
        assert arity(lambda a: a) == 1
        assert arity(lambda a, b, c: a) == 3

    def test_defaults_still_count(self):
        assert arity(lambda a, b=1: a) == 2

    def test_var_positional_is_unbounded(self):
        assert arity(lambda *args: args) is None
        assert arity(lambda a, *rest: a) is None

    def test_keyword_only_not_counted(self):
        assert arity(lambda a, *, flag=False: a) == 1

    def test_bound_method(self):
        class Checker:
            def check(self, element, index):
                return True

        assert arity(Checker().check) == 2

    def test_partial(self):
        def three(a, b, c):
            return a

        assert arity(functools.partial(three, 1)) == 2

    def test_unhashable_callable(self):
        class Unhashable:
            __hash__ = None

            def __call__(self, element):
                return element

        assert arity(Unhashable()) == 1


class TestAdapt:
    def test_trims_extra_arguments(self):
        call = adapt(lambda n: n * 2, "test")
        assert call(4, 0, [4]) == 8

    def test_passes_everything_to_var_positional(self):
        call = adapt(lambda *args: args, "test")
        assert call(1, 2, 3) == (1, 2, 3)

    def test_non_callable_raises(self):
        with pytest.raises(CallbackError, match="filter"):
            adapt(42, "filter")

    def test_callback_error_hierarchy(self):
        assert issubclass(CallbackError, LodownError)
        assert issubclass(CallbackError, TypeError)

    def test_exceptions_from_callback_are_untouched(self):
        error = RuntimeError("original")

        def fail(n):
            raise error

        with pytest.raises(RuntimeError) as info:
            adapt(fail, "test")(1, 0, [1])
        assert info.value is error


class TestTruthy:
    @pytest.mark.parametrize("value", [1, "a", [0], {"k": None}, True])
    def test_truthy_values(self, value):
        assert truthy(value) is True

    @pytest.mark.parametrize("value", [0, "", [], {}, None, False])
    def test_falsy_values(self, value):
        assert truthy(value) is False


class TestBuiltinTypes:
    @pytest.mark.parametrize("func", [bool, int, str, float, list, tuple])
    def test_builtin_types_take_the_element_only(self, func):
        assert arity(func) == 1

    def test_user_class_uses_its_signature(self):
        class Pair:
            def __init__(self, element, index):
                self.element = element
                self.index = index

        assert arity(Pair) == 2

    def test_adapted_builtin_type_ignores_index_and_collection(self):
        assert adapt(int, "map")("7", 0, ["7"]) == 7
        assert adapt(str, "map")(1, 0, [1]) == "1"
