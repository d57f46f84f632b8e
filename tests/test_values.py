import math

import pytest
from jsarray import UNDEFINED, JsArray
from jsarray.values import (
	relative_index,
	same_value_zero,
	strict_equals,
	to_integer_or_infinity,
	to_js_string,
	to_number,
)

_shared = object()


@pytest.mark.parametrize(
	("a", "b", "expected"),
	[
		(1, 1.0, True),
		(0.0, -0.0, True),
		(math.nan, math.nan, False),
		(True, 1, False),
		(True, True, True),
		("a", "a", True),
		("1", 1, False),
		(None, UNDEFINED, False),
		(None, None, True),
		(UNDEFINED, UNDEFINED, True),
		(_shared, _shared, True),
		([1], [1], False),
	],
)
def test_strict_equals(a: object, b: object, expected: bool):
	assert strict_equals(a, b) is expected


def test_same_value_zero_treats_nan_as_equal():
	assert same_value_zero(math.nan, float("nan"))
	assert same_value_zero(0.0, -0.0)
	assert not same_value_zero(math.nan, 0)


@pytest.mark.parametrize(
	("value", "expected"),
	[
		(1, "1"),
		(1.0, "1"),
		(-0.0, "0"),
		(1.5, "1.5"),
		(-2.25, "-2.25"),
		(0.1, "0.1"),
		(0.000001, "0.000001"),
		(1e-7, "1e-7"),
		(1.23e-18, "1.23e-18"),
		(1e20, "100000000000000000000"),
		(1e21, "1e+21"),
		(math.nan, "NaN"),
		(math.inf, "Infinity"),
		(-math.inf, "-Infinity"),
		(True, "true"),
		(False, "false"),
		(None, "null"),
		(UNDEFINED, "undefined"),
		("text", "text"),
		([1, None, 2, UNDEFINED], "1,,2,"),
		([[1, 2], 3], "1,2,3"),
		(10**20, "100000000000000000000"),
		(10**21, "1e+21"),
		(-(10**22), "-1e+22"),
		(12345 * 10**30, "1.2345e+34"),
		(10**400, "Infinity"),
		({}, "[object Object]"),
		({"a": 1}, "[object Object]"),
		(object(), "[object Object]"),
	],
)
def test_to_js_string(value: object, expected: str):
	assert to_js_string(value) == expected


def test_to_js_string_of_sparse_array():
	assert to_js_string(JsArray.sparse(3, {0: "a", 2: "c"})) == "a,,c"


@pytest.mark.parametrize(
	("value", "expected"),
	[
		(None, 0.0),
		(True, 1.0),
		("  42 ", 42.0),
		("", 0.0),
		("0x10", 16.0),
		("-Infinity", -math.inf),
	],
)
def test_to_number(value: object, expected: float):
	assert to_number(value) == expected


@pytest.mark.parametrize("value", [UNDEFINED, "abc", "inf", "1_000", object()])
def test_to_number_gives_nan_for_junk(value: object):
	assert math.isnan(to_number(value))


@pytest.mark.parametrize(
	("value", "expected"),
	[
		(3, 3),
		("3", 3),
		(2.9, 2),
		(-2.9, -2),
		(math.nan, 0),
		("abc", 0),
		(None, 0),
		(True, 1),
		(math.inf, math.inf),
	],
)
def test_to_integer_or_infinity(value: object, expected: float):
	assert to_integer_or_infinity(value) == expected


@pytest.mark.parametrize(
	("value", "length", "expected"),
	[
		(0, 4, 0),
		(2, 4, 2),
		(-1, 4, 3),
		(-10, 4, 0),
		(10, 4, 4),
		(-math.inf, 4, 0),
		(math.inf, 4, 4),
	],
)
def test_relative_index(value: object, length: int, expected: int):
	assert relative_index(value, length) == expected


def test_relative_index_default_applies_to_undefined_only():
	assert relative_index(UNDEFINED, 4, default=4) == 4
	assert relative_index(None, 4, default=4) == 0
