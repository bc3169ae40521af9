"""Tests for value predicates."""

from __future__ import annotations

import abc
import math
from collections import OrderedDict
from fractions import Fraction

import pytest

from matchcase import (
    has_multiple_items,
    has_one_item,
    has_only_keys,
    is_array,
    is_boolean,
    is_constructable,
    is_equal,
    is_function,
    is_missing,
    is_non_empty_array,
    is_non_empty_string,
    is_non_negative_integer,
    is_none,
    is_number,
    is_object,
    is_positive_integer,
    is_present,
    is_string,
    is_true,
)

NAN = float("nan")

UNARY_PREDICATES = [
    is_none,
    is_missing,
    is_present,
    is_boolean,
    is_array,
    is_object,
    is_string,
    is_number,
    is_function,
    is_non_empty_string,
    is_non_empty_array,
    is_true,
    is_positive_integer,
    is_non_negative_integer,
    has_one_item,
    has_multiple_items,
    is_constructable,
]

AWKWARD_VALUES = [
    None,
    0,
    -0.0,
    "",
    [],
    (),
    {},
    set(),
    NAN,
    math.inf,
    b"",
    10**400,
    1j,
    object(),
    {"a": [{"b": ({"c": [None, NAN]},)}]},
    [[[[[]]]]],
    lambda v: v,
    type,
    abc.ABC,
]


class TestTotality:
    @pytest.mark.parametrize("predicate", UNARY_PREDICATES, ids=lambda p: p.__name__)
    @pytest.mark.parametrize("value", AWKWARD_VALUES, ids=repr)
    def test_returns_bool_without_raising(self, predicate, value) -> None:
        assert type(predicate(value)) is bool

    @pytest.mark.parametrize("value", AWKWARD_VALUES, ids=repr)
    def test_binary_predicates_return_bool(self, value) -> None:
        assert type(is_equal(value, value)) is bool
        assert type(is_equal(value, 0)) is bool
        assert type(has_only_keys(value, ["a"])) is bool
        assert type(has_only_keys({"a": 1}, value)) is bool


class TestPresence:
    def test_none_is_missing(self) -> None:
        assert is_none(None) is True
        assert is_missing(None) is True
        assert is_present(None) is False

    @pytest.mark.parametrize("value", [0, "", [], {}, False, NAN])
    def test_falsy_values_are_present(self, value) -> None:
        assert is_missing(value) is False
        assert is_present(value) is True


class TestBoolean:
    def test_bools(self) -> None:
        assert is_boolean(True) is True
        assert is_boolean(False) is True

    def test_ints_are_not_bools(self) -> None:
        assert is_boolean(1) is False
        assert is_boolean(0) is False

    def test_is_true_only_for_true(self) -> None:
        assert is_true(True) is True
        assert is_true(False) is False
        assert is_true(1) is False
        assert is_true("true") is False


class TestShape:
    @pytest.mark.parametrize("value", [[], [1], (), (1, 2), range(3)])
    def test_arrays(self, value) -> None:
        assert is_array(value) is True
        assert is_object(value) is False

    @pytest.mark.parametrize("value", ["abc", b"abc", bytearray(b"x"), {}, None, 3])
    def test_non_arrays(self, value) -> None:
        assert is_array(value) is False

    @pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(a=1)])
    def test_objects(self, value) -> None:
        assert is_object(value) is True

    @pytest.mark.parametrize("value", [None, [], "x", 1, object()])
    def test_non_objects(self, value) -> None:
        assert is_object(value) is False

    def test_strings(self) -> None:
        assert is_string("") is True
        assert is_string("x") is True
        assert is_string(b"x") is False
        assert is_string(None) is False

    def test_non_empty_string(self) -> None:
        assert is_non_empty_string("a") is True
        assert is_non_empty_string("") is False
        assert is_non_empty_string(["a"]) is False

    def test_non_empty_array(self) -> None:
        assert is_non_empty_array([0]) is True
        assert is_non_empty_array([]) is False
        assert is_non_empty_array("a") is False

    def test_item_counts(self) -> None:
        assert has_one_item([1]) is True
        assert has_one_item([1, 2]) is False
        assert has_one_item([]) is False
        assert has_multiple_items([1, 2]) is True
        assert has_multiple_items([1]) is False
        assert has_multiple_items("ab") is False


class TestNumber:
    @pytest.mark.parametrize("value", [0, -1, 2.5, math.inf, Fraction(1, 3), 10**400, 1j])
    def test_numbers(self, value) -> None:
        assert is_number(value) is True

    @pytest.mark.parametrize("value", [NAN, True, False, "1", None, [1]])
    def test_non_numbers(self, value) -> None:
        assert is_number(value) is False

    @pytest.mark.parametrize("value", [1, 3.0, 10**400, Fraction(4, 2)])
    def test_positive_integers(self, value) -> None:
        assert is_positive_integer(value) is True
        assert is_non_negative_integer(value) is True

    @pytest.mark.parametrize("value", [0, -3, 1.5, math.inf, NAN, True, "3", 1j])
    def test_not_positive_integers(self, value) -> None:
        assert is_positive_integer(value) is False

    def test_zero_is_non_negative(self) -> None:
        assert is_non_negative_integer(0) is True
        assert is_non_negative_integer(-0.0) is True
        assert is_non_negative_integer(-1) is False
        assert is_non_negative_integer(False) is False


class TestCallables:
    def test_functions(self) -> None:
        assert is_function(len) is True
        assert is_function(lambda: None) is True
        assert is_function(int) is True

    def test_non_functions(self) -> None:
        assert is_function(None) is False
        assert is_function("len") is False

    def test_classes_are_constructable(self) -> None:
        class Point:
            pass

        assert is_constructable(Point) is True
        assert is_constructable(dict) is True

    def test_abstract_classes_are_not_constructable(self) -> None:
        class Shape(abc.ABC):
            @abc.abstractmethod
            def area(self) -> float: ...

        assert is_constructable(Shape) is False

    def test_plain_callables_are_not_constructable(self) -> None:
        assert is_constructable(len) is False
        assert is_constructable(lambda: None) is False
        assert is_constructable(object()) is False

    def test_construction_is_never_attempted(self) -> None:
        class Explodes:
            def __init__(self) -> None:
                raise AssertionError("constructed")

        assert is_constructable(Explodes) is True


class TestHasOnlyKeys:
    def test_exact_key_set(self) -> None:
        assert has_only_keys({"a": 1, "b": 2}, ["b", "a"]) is True

    def test_extra_key_in_record(self) -> None:
        assert has_only_keys({"a": 1, "b": 2}, ["a"]) is False

    def test_extra_key_in_keys(self) -> None:
        assert has_only_keys({"a": 1}, ["a", "b"]) is False

    def test_empty(self) -> None:
        assert has_only_keys({}, []) is True

    def test_keys_as_set(self) -> None:
        assert has_only_keys({"a": 1}, {"a"}) is True

    def test_duplicate_keys_compare_as_set(self) -> None:
        assert has_only_keys({"a": 1}, ["a", "a"]) is True

    def test_non_record(self) -> None:
        assert has_only_keys(["a"], ["a"]) is False

    def test_keys_must_be_a_collection(self) -> None:
        assert has_only_keys({"a": 1}, "a") is False

    def test_unhashable_keys(self) -> None:
        assert has_only_keys({"a": 1}, [["a"]]) is False


class TestIsEqual:
    def test_identity(self) -> None:
        items = [1, 2]
        assert is_equal(items, items) is True

    def test_containers_compare_by_identity(self) -> None:
        assert is_equal([1, 2], [1, 2]) is False
        assert is_equal({}, {}) is False

    def test_numbers_compare_by_value(self) -> None:
        assert is_equal(10**20, 10**20) is True
        assert is_equal(1, 1.0) is True
        assert is_equal(1, 2) is False

    def test_nan_never_equal(self) -> None:
        assert is_equal(NAN, float("nan")) is False

    def test_bools_are_not_numbers(self) -> None:
        assert is_equal(True, 1) is False
        assert is_equal(0, False) is False
        assert is_equal(True, True) is True

    def test_text(self) -> None:
        assert is_equal("ab", "".join(["a", "b"])) is True
        assert is_equal("1", 1) is False
        assert is_equal(b"a", "a") is False
        assert is_equal(b"a", b"a") is True

    def test_none(self) -> None:
        assert is_equal(None, None) is True
        assert is_equal(None, 0) is False
