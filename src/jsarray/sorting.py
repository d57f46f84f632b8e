"""Array.prototype.sort.

Two algorithms are available:

- "stable" (default): Python's sort driven by the comparator. Equal keys keep
  their relative order, as ECMAScript has required since ES2019.
- "exchange": the textbook exchange sort. For each position it scans the
  remainder and swaps any element that orders before it, so the position
  ends up holding its minimum. O(n^2) comparisons and NOT stable: two equal
  keys can swap places.

Either way, UNDEFINED values go after every other value, and holes go last.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, TypeVar

from jsarray._core import UNDEFINED, ArrayInput, as_array
from jsarray.config import SortAlgorithm, check_sort_algorithm, sort_algorithm
from jsarray.errors import NotCallableError
from jsarray.narrate import narrate
from jsarray.values import to_js_string, to_number

T = TypeVar("T")

Comparator = Callable[[Any, Any], Any]

logger = logging.getLogger(__name__)


def _code_units(text: str) -> bytes:
	# Big-endian UTF-16 bytes order the same way as UTF-16 code units
	return text.encode("utf-16-be", "surrogatepass")


def compare_default(a: Any, b: Any) -> int:
	"""The comparator used when none is given: compare String(a) and String(b).

	Strings are ordered by UTF-16 code unit, as JS does, so `[10, 9, 1]` sorts
	to `[1, 10, 9]`.
	"""
	x = _code_units(to_js_string(a))
	y = _code_units(to_js_string(b))
	if x < y:
		return -1
	if x > y:
		return 1
	return 0


def _wrap_comparator(comparator: Comparator) -> Callable[[Any, Any], int]:
	def compare(a: Any, b: Any) -> int:
		result = to_number(comparator(a, b))
		if math.isnan(result) or result == 0:
			return 0
		return -1 if result < 0 else 1

	return compare


def _exchange_sort(values: list[Any], compare: Callable[[Any, Any], int]) -> None:
	n = len(values)
	for i in range(n):
		for j in range(i + 1, n):
			if compare(values[i], values[j]) > 0:
				narrate("sort", "swap %r and %r", values[i], values[j], index=i)
				values[i], values[j] = values[j], values[i]


def sort(
	array: ArrayInput[T],
	comparator: Comparator | None = None,
	*,
	algorithm: SortAlgorithm | None = None,
) -> Any:
	"""Sort `array` in place and return it.

	`comparator(a, b)` should return a negative number when `a` goes first,
	a positive one when `b` does, and 0 otherwise; NaN and non-numeric results
	count as 0. Without a comparator elements are ordered by their JS string
	form. `algorithm` overrides the JSARRAY_SORT setting.
	"""
	if comparator is not None and not callable(comparator):
		raise NotCallableError(comparator)
	arr = as_array(array)
	chosen = sort_algorithm() if algorithm is None else check_sort_algorithm(algorithm)
	compare = compare_default if comparator is None else _wrap_comparator(comparator)

	length = arr.length
	values: list[Any] = []
	undefined_count = 0
	for k in range(length):
		if not arr.has(k):
			continue
		value = arr.get(k)
		if value is UNDEFINED:
			undefined_count += 1
		else:
			values.append(value)
	holes = length - len(values) - undefined_count
	narrate(
		"sort",
		"%s sort of %d values (%d undefined, %d holes)",
		chosen,
		len(values),
		undefined_count,
		holes,
	)
	logger.debug("sorting %d values with the %s algorithm", len(values), chosen)

	if chosen == "exchange":
		_exchange_sort(values, compare)
	else:
		values = sorted(values, key=cmp_to_key(compare))

	k = 0
	for value in values:
		arr.set(k, value)
		k += 1
	for _ in range(undefined_count):
		arr.set(k, UNDEFINED)
		k += 1
	for index in range(k, length):
		arr.delete(index)
	narrate("sort", "result %r", arr.unwrap())
	return arr.unwrap()


__all__ = ["Comparator", "compare_default", "sort"]
