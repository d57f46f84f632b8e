"""In-place mutators: push, pop, shift, unshift, fill.

All of them change the array handed in, JsArray or plain list, and never a
copy. Slots are moved with the same has/get/set/delete steps the JS engine
uses, so holes travel as holes.
"""

from __future__ import annotations

from typing import Any, TypeVar

from jsarray._core import UNDEFINED, ArrayInput, ArrayLike, Undefined, as_array
from jsarray.narrate import narrate
from jsarray.values import relative_index

T = TypeVar("T")


def _move(arr: ArrayLike[Any], source: int, dest: int, operation: str) -> None:
	if arr.has(source):
		arr.set(dest, arr.get(source))
		narrate(operation, "move index %d -> %d", source, dest, index=dest)
	else:
		arr.delete(dest)
		narrate(operation, "index %d is a hole, clear index %d", source, dest, index=dest)


def push(array: ArrayInput[T], *items: T) -> int:
	"""Append `items` in order and return the new length."""
	arr = as_array(array)
	length = arr.length
	for offset, item in enumerate(items):
		arr.set(length + offset, item)
		narrate("push", "store %r at index %d", item, length + offset, index=length + offset)
	return arr.length


def pop(array: ArrayInput[T]) -> T | Undefined:
	"""Remove and return the last element; UNDEFINED (and no change) when empty."""
	arr = as_array(array)
	length = arr.length
	if length == 0:
		narrate("pop", "array is empty")
		return UNDEFINED
	last = length - 1
	element = arr.get(last)
	arr.delete(last)
	arr.length = last
	narrate("pop", "removed %r, length is now %d", element, last, index=last)
	return element


def shift(array: ArrayInput[T]) -> T | Undefined:
	"""Remove and return the first element, moving the rest down one slot."""
	arr = as_array(array)
	length = arr.length
	if length == 0:
		narrate("shift", "array is empty")
		return UNDEFINED
	first = arr.get(0)
	for k in range(1, length):
		_move(arr, k, k - 1, "shift")
	arr.delete(length - 1)
	arr.length = length - 1
	narrate("shift", "removed %r, length is now %d", first, length - 1, index=0)
	return first


def unshift(array: ArrayInput[T], *items: T) -> int:
	"""Insert `items` at the front, in argument order, and return the new length."""
	arr = as_array(array)
	length = arr.length
	count = len(items)
	if count:
		# Walk from the end so nothing is overwritten before it has moved
		for k in range(length - 1, -1, -1):
			_move(arr, k, k + count, "unshift")
		for offset, item in enumerate(items):
			arr.set(offset, item)
			narrate("unshift", "store %r at index %d", item, offset, index=offset)
		# A trailing hole moved past the old end never extends the array by itself
		arr.length = length + count
	return arr.length


def fill(
	array: ArrayInput[T],
	value: Any,
	start: Any = 0,
	end: Any = UNDEFINED,
) -> Any:
	"""Overwrite every index in [start, end) with `value`; returns the array.

	`start` and `end` are coerced to integers (None is 0, NaN and junk strings
	are 0), negative values count back from the end, and both are clamped to
	[0, length]. The length never changes.
	"""
	arr = as_array(array)
	length = arr.length
	first = relative_index(start, length)
	final = relative_index(end, length, default=length)
	narrate("fill", "fill [%d, %d) of %d with %r", first, final, length, value)
	for k in range(first, final):
		arr.set(k, value)
	return arr.unwrap()


__all__ = ["fill", "pop", "push", "shift", "unshift"]
