"""Lodown Merge -- extend copies sources onto its target in place."""

from collections import OrderedDict

import pytest

from lodown import ExtendTargetError, extend


class TestExtend:
    def test_copies_every_property(self):
        obj1 = {"a": "b", "c": "d"}
        obj2 = {"b": "c", "d": "e"}
        obj3 = {"c": "d", "e": "f"}
        assert extend(obj1, obj2, obj3) == {"a": "b", "b": "c", "c": "d", "d": "e", "e": "f"}

    def test_mutates_and_returns_target(self):
        obj1 = {"a": "b", "c": "d"}
        result = extend(obj1, {"b": "c"}, {"c": "x"})
        assert result is obj1
        assert obj1 == {"a": "b", "c": "x", "b": "c"}

    def test_later_sources_win(self):
        assert extend({}, {"k": 1}, {"k": 2}, {"k": 3}) == {"k": 3}

    def test_sources_untouched(self):
        source = {"a": 1}
        extend({"a": 0}, source)
        assert source == {"a": 1}

    def test_no_sources(self):
        target = {"a": 1}
        assert extend(target) is target
        assert target == {"a": 1}

    def test_non_collection_sources_contribute_nothing(self):
        assert extend({"a": 1}, None, 5, "str") == {"a": 1}

    def test_other_mutable_mappings(self):
        target = OrderedDict(a=1)
        extend(target, {"b": 2})
        assert list(target.items()) == [("a", 1), ("b", 2)]

    @pytest.mark.parametrize("target", [None, "text", (1, 2), 3])
    def test_bad_target_raises(self, target):
        with pytest.raises(ExtendTargetError):
            extend(target, {"a": 1})

    def test_bad_target_is_a_type_error(self):
        with pytest.raises(TypeError):
            extend(None, {})
