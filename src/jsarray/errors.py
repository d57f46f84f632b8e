from __future__ import annotations


class JsArrayError(Exception):
	"""Base class for errors raised by jsarray operations."""


class ReduceOfEmptyArrayError(JsArrayError, TypeError):
	"""Raised when folding an array with no present elements and no initial value."""

	def __init__(self, message: str = "Reduce of empty array with no initial value"):
		super().__init__(message)


class NotCallableError(JsArrayError, TypeError):
	"""Raised when a callback or comparator is not callable."""

	value: object

	def __init__(self, value: object) -> None:
		super().__init__(f"{value!r} is not a function")
		self.value = value


class InvalidArrayLengthError(JsArrayError, ValueError):
	"""Raised when an array length is set to a negative or non-integer value."""


__all__ = [
	"InvalidArrayLengthError",
	"JsArrayError",
	"NotCallableError",
	"ReduceOfEmptyArrayError",
]
