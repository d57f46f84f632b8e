"""JavaScript value semantics for Python values.

Python values map onto JS types as follows:

- None           -> null
- UNDEFINED      -> undefined
- bool           -> boolean
- int, float     -> number
- str            -> string
- anything else  -> object (compared by identity)
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from jsarray._core import HOLE, UNDEFINED, JsArray


def is_number(value: object) -> bool:
	return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nan(value: object) -> bool:
	return isinstance(value, float) and math.isnan(value)


def strict_equals(a: object, b: object) -> bool:
	"""JS `a === b`. NaN is never equal to itself; objects compare by identity."""
	if is_number(a) and is_number(b):
		return a == b
	if isinstance(a, bool) and isinstance(b, bool):
		return a is b
	if isinstance(a, str) and isinstance(b, str):
		return a == b
	return a is b


def same_value_zero(a: object, b: object) -> bool:
	"""Strict equality, except NaN equals NaN (+0 and -0 stay equal)."""
	if _is_nan(a) and _is_nan(b):
		return True
	return strict_equals(a, b)


def _number_to_string(value: float) -> str:
	# Number::toString: shortest round-trip digits, placed by the JS rules
	if math.isnan(value):
		return "NaN"
	if value == 0:
		return "0"
	if math.isinf(value):
		return "Infinity" if value > 0 else "-Infinity"
	sign = "-" if value < 0 else ""
	_, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
	digits = "".join(str(d) for d in digit_tuple)
	k = len(digits)
	n = int(exponent) + k
	if k <= n <= 21:
		body = digits + "0" * (n - k)
	elif 0 < n <= 21:
		body = f"{digits[:n]}.{digits[n:]}"
	elif -6 < n <= 0:
		body = f"0.{'0' * -n}{digits}"
	else:
		e = n - 1
		mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
		body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
	return sign + body


def to_js_string(value: Any) -> str:
	"""JS `String(value)`, used by the default sort order."""
	if isinstance(value, str):
		return value
	if value is None:
		return "null"
	if value is UNDEFINED:
		return "undefined"
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, int):
		if abs(value) < 10**21:
			return str(value)
		# Past 1e21 Number::toString switches to exponent form
		try:
			return _number_to_string(float(value))
		except OverflowError:
			return "Infinity" if value > 0 else "-Infinity"
	if isinstance(value, float):
		return _number_to_string(value)
	if isinstance(value, (list, JsArray)):
		# Array.prototype.join: null, undefined and holes become ""
		items = value.to_list(hole=None) if isinstance(value, JsArray) else value
		return ",".join(
			"" if item is None or item is UNDEFINED or item is HOLE else to_js_string(item)
			for item in items
		)
	return "[object Object]"


def to_number(value: Any) -> float:
	"""JS `Number(value)`. Unconvertible values give NaN instead of raising."""
	if value is None:
		return 0.0
	if value is UNDEFINED:
		return math.nan
	if isinstance(value, bool):
		return 1.0 if value else 0.0
	if isinstance(value, (int, float)):
		return float(value)
	if isinstance(value, str):
		text = value.strip()
		if not text:
			return 0.0
		if text in ("Infinity", "+Infinity"):
			return math.inf
		if text == "-Infinity":
			return -math.inf
		lowered = text.lower()
		if lowered.startswith(("0x", "0o", "0b")):
			try:
				return float(int(text, 0))
			except ValueError:
				return math.nan
		if "inf" in lowered or "nan" in lowered or "_" in text:
			return math.nan
		try:
			return float(text)
		except ValueError:
			return math.nan
	try:
		return float(value)
	except (TypeError, ValueError):
		return math.nan


def to_integer_or_infinity(value: Any) -> int | float:
	"""ToIntegerOrInfinity: NaN becomes 0, finite values truncate toward zero."""
	if isinstance(value, int) and not isinstance(value, bool):
		return value
	number = to_number(value)
	if math.isnan(number):
		return 0
	if math.isinf(number):
		return number
	return math.trunc(number)


def relative_index(value: Any, length: int, default: int = 0) -> int:
	"""Resolve a start/end/fromIndex argument against `length`.

	UNDEFINED takes `default`; negative values count back from the end; the
	result is clamped to [0, length].
	"""
	if value is UNDEFINED:
		return default
	relative = to_integer_or_infinity(value)
	if relative < 0:
		return int(max(length + relative, 0))
	return int(min(relative, length))


__all__ = [
	"is_number",
	"relative_index",
	"same_value_zero",
	"strict_equals",
	"to_integer_or_infinity",
	"to_js_string",
	"to_number",
]
