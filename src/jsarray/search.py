"""Search methods: find, findIndex, findLast, findLastIndex, includes, indexOf.

Unlike the iteration methods, the find family and `includes` visit holes
(they read back as UNDEFINED). `index_of` skips them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from jsarray._core import UNDEFINED, ArrayInput, ArrayLike, Undefined, as_array
from jsarray.callbacks import bind_callback
from jsarray.narrate import narrate
from jsarray.values import relative_index, same_value_zero, strict_equals

T = TypeVar("T")


def _find_from(
	operation: str,
	arr: ArrayLike[T],
	predicate: Callable[..., Any],
	this_arg: Any,
	indices: range,
) -> tuple[int, T | Undefined]:
	fn = bind_callback(predicate, this_arg)
	target = arr.unwrap()
	for k in indices:
		value = arr.get(k)
		if fn(value, k, target):
			narrate(operation, "%r matches at index %d", value, k, index=k)
			return k, value
		narrate(operation, "%r does not match", value, index=k)
	narrate(operation, "no match")
	return -1, UNDEFINED


def find(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> T | Undefined:
	"""The first element satisfying `predicate`, or UNDEFINED."""
	arr = as_array(array)
	return _find_from("find", arr, predicate, this_arg, range(arr.length))[1]


def find_index(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> int:
	arr = as_array(array)
	return _find_from("findIndex", arr, predicate, this_arg, range(arr.length))[0]


def find_last(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> T | Undefined:
	arr = as_array(array)
	indices = range(arr.length - 1, -1, -1)
	return _find_from("findLast", arr, predicate, this_arg, indices)[1]


def find_last_index(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> int:
	arr = as_array(array)
	indices = range(arr.length - 1, -1, -1)
	return _find_from("findLastIndex", arr, predicate, this_arg, indices)[0]


def includes(array: ArrayInput[T], value: Any, from_index: Any = 0) -> bool:
	"""Membership under SameValueZero: NaN is found, and holes count as UNDEFINED.

	A negative `from_index` counts back from the end of the array.
	"""
	arr = as_array(array)
	length = arr.length
	if length == 0:
		return False
	for k in range(relative_index(from_index, length), length):
		if same_value_zero(arr.get(k), value):
			narrate("includes", "found %r at index %d", value, k, index=k)
			return True
	narrate("includes", "%r not found", value)
	return False


def index_of(array: ArrayInput[T], value: Any, from_index: Any = 0) -> int:
	"""Position of `value` under strict equality, so NaN is never found."""
	arr = as_array(array)
	length = arr.length
	for k in range(relative_index(from_index, length), length):
		if arr.has(k) and strict_equals(arr.get(k), value):
			narrate("indexOf", "found %r at index %d", value, k, index=k)
			return k
	narrate("indexOf", "%r not found", value)
	return -1


__all__ = [
	"find",
	"find_index",
	"find_last",
	"find_last_index",
	"includes",
	"index_of",
]
