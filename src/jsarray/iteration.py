"""Iteration methods: forEach, map, filter, reduce, reduceRight, every, some.

None of these mutate the array they are given. All of them capture the
length once up front and skip holes, re-checking presence at every index so
a callback that deletes ahead of the cursor is honoured.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeVar, override

from jsarray._core import UNDEFINED, ArrayInput, ArrayLike, as_array
from jsarray.callbacks import bind_callback
from jsarray.errors import ReduceOfEmptyArrayError
from jsarray.narrate import narrate

T = TypeVar("T")
R = TypeVar("R")


class _Missing:
	__slots__: tuple[str, ...] = ()

	@override
	def __repr__(self) -> str:
		return "<missing>"


# Distinguishes "no initial value" from an explicit UNDEFINED or None
MISSING: Final = _Missing()


def for_each(
	array: ArrayInput[T],
	callback: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> None:
	arr = as_array(array)
	fn = bind_callback(callback, this_arg)
	target = arr.unwrap()
	length = arr.length
	for k in range(length):
		if not arr.has(k):
			narrate("forEach", "index %d is a hole, skipped", k, index=k)
			continue
		value = arr.get(k)
		narrate("forEach", "callback(%r, %d)", value, k, index=k)
		fn(value, k, target)


def map_(
	array: ArrayInput[T],
	callback: Callable[..., R],
	this_arg: Any = UNDEFINED,
) -> Any:
	"""Array.prototype.map. Holes in the input stay holes in the result."""
	arr = as_array(array)
	fn = bind_callback(callback, this_arg)
	target = arr.unwrap()
	length = arr.length
	result = arr.empty_like(length)
	for k in range(length):
		if not arr.has(k):
			narrate("map", "index %d is a hole, left empty", k, index=k)
			continue
		value = arr.get(k)
		mapped = fn(value, k, target)
		narrate("map", "%r -> %r", value, mapped, index=k)
		result.set(k, mapped)
	return result.unwrap()


def filter_(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> Any:
	arr = as_array(array)
	fn = bind_callback(predicate, this_arg)
	target = arr.unwrap()
	length = arr.length
	result = arr.empty_like()
	kept = 0
	for k in range(length):
		if not arr.has(k):
			continue
		value = arr.get(k)
		if fn(value, k, target):
			narrate("filter", "keep %r", value, index=k)
			result.set(kept, value)
			kept += 1
		else:
			narrate("filter", "drop %r", value, index=k)
	return result.unwrap()


def _fold(
	operation: str,
	arr: ArrayLike[Any],
	callback: Callable[..., Any],
	initial: Any,
	indices: range,
) -> Any:
	fn = bind_callback(callback)
	target = arr.unwrap()
	order = iter(indices)
	if initial is MISSING:
		for k in order:
			if arr.has(k):
				accumulator = arr.get(k)
				narrate(operation, "no initial value, seeded with %r", accumulator, index=k)
				break
		else:
			raise ReduceOfEmptyArrayError()
	else:
		accumulator = initial
		narrate(operation, "seeded with initial value %r", initial)
	for k in order:
		if not arr.has(k):
			continue
		value = arr.get(k)
		result = fn(accumulator, value, k, target)
		narrate(operation, "callback(%r, %r) -> %r", accumulator, value, result, index=k)
		accumulator = result
	return accumulator


def reduce(
	array: ArrayInput[T],
	callback: Callable[..., Any],
	initial: Any = MISSING,
) -> Any:
	"""Array.prototype.reduce.

	Without `initial` the first present element seeds the accumulator and the
	fold starts right after it; an array with nothing to seed from raises
	ReduceOfEmptyArrayError. `initial=None` and `initial=UNDEFINED` are real
	initial values.
	"""
	arr = as_array(array)
	return _fold("reduce", arr, callback, initial, range(arr.length))


def reduce_right(
	array: ArrayInput[T],
	callback: Callable[..., Any],
	initial: Any = MISSING,
) -> Any:
	arr = as_array(array)
	return _fold("reduceRight", arr, callback, initial, range(arr.length - 1, -1, -1))


def every(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> bool:
	arr = as_array(array)
	fn = bind_callback(predicate, this_arg)
	target = arr.unwrap()
	for k in range(arr.length):
		if not arr.has(k):
			continue
		value = arr.get(k)
		if not fn(value, k, target):
			narrate("every", "%r fails, stopping", value, index=k)
			return False
		narrate("every", "%r passes", value, index=k)
	return True


def some(
	array: ArrayInput[T],
	predicate: Callable[..., Any],
	this_arg: Any = UNDEFINED,
) -> bool:
	arr = as_array(array)
	fn = bind_callback(predicate, this_arg)
	target = arr.unwrap()
	for k in range(arr.length):
		if not arr.has(k):
			continue
		value = arr.get(k)
		if fn(value, k, target):
			narrate("some", "%r matches, stopping", value, index=k)
			return True
		narrate("some", "%r does not match", value, index=k)
	return False


__all__ = [
	"MISSING",
	"every",
	"filter_",
	"for_each",
	"map_",
	"reduce",
	"reduce_right",
	"some",
]
