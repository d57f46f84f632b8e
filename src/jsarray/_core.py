"""Core containers: the sparse JsArray, the list adapter and the JS sentinels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final, Generic, TypeAlias, TypeVar, final, override

from jsarray.errors import InvalidArrayLengthError

T = TypeVar("T")


@final
class Undefined:
	"""JS `undefined`.

	Distinct from `None`, which plays the role of JS `null`. Returned wherever
	an operation has no value to give back (popping an empty array, a `find`
	with no match, reading a hole).
	"""

	__slots__: tuple[str, ...] = ()
	_instance: Undefined | None = None

	def __new__(cls) -> Undefined:
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __bool__(self) -> bool:
		return False

	@override
	def __repr__(self) -> str:
		return "undefined"

	def __reduce__(self) -> str:
		return "UNDEFINED"


@final
class Hole:
	"""Tombstone stored in an empty slot of a sparse JsArray."""

	__slots__: tuple[str, ...] = ()
	_instance: Hole | None = None

	def __new__(cls) -> Hole:
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __bool__(self) -> bool:
		return False

	@override
	def __repr__(self) -> str:
		return "<empty>"

	def __reduce__(self) -> str:
		return "HOLE"


# Singleton instances for convenience
UNDEFINED: Final = Undefined()
HOLE: Final = Hole()


def _check_length(value: object) -> int:
	if isinstance(value, bool) or not isinstance(value, int) or value < 0:
		raise InvalidArrayLengthError(f"Invalid array length: {value!r}")
	return value


def _check_index(index: object) -> int:
	if isinstance(index, bool) or not isinstance(index, int):
		raise TypeError(f"array indices must be integers, not {type(index).__name__}")
	if index < 0:
		raise IndexError(f"array index out of range: {index}")
	return index


class ArrayLike(ABC, Generic[T]):
	"""The slot-level protocol every operation is written against.

	Mirrors the abstract operations of an ECMAScript array object: a settable
	`length` plus HasProperty / Get / Set / DeletePropertyOrThrow per index.
	"""

	__slots__: tuple[str, ...] = ()

	@property
	@abstractmethod
	def length(self) -> int: ...

	@length.setter
	@abstractmethod
	def length(self, value: int) -> None: ...

	@abstractmethod
	def has(self, index: int) -> bool:
		"""Whether `index` holds an element (False for holes and out of range)."""

	@abstractmethod
	def get(self, index: int) -> T | Undefined: ...

	@abstractmethod
	def set(self, index: int, value: T) -> None: ...

	@abstractmethod
	def delete(self, index: int) -> None: ...

	@abstractmethod
	def empty_like(self, length: int = 0) -> ArrayLike[Any]:
		"""A fresh, unrelated sequence of the same kind with `length` slots."""

	@abstractmethod
	def unwrap(self) -> Any:
		"""The object handed back to callers (the JsArray itself, or the list)."""


# Anything the operations accept: a JsArray, a ListView, or a plain list
ArrayInput: TypeAlias = "ArrayLike[T] | list[T]"


class JsArray(ArrayLike[T]):
	"""A sparse, JS-style array.

	Each slot holds either an element or the HOLE tombstone. Holes count
	toward `length` but are absent for `has()`, and read back as UNDEFINED.
	"""

	__slots__: tuple[str, ...] = ("_slots",)
	_slots: list[T | Hole]

	def __init__(self, items: Iterable[T] = ()) -> None:
		self._slots = list(items)

	@classmethod
	def of(cls, *items: T) -> JsArray[T]:
		return cls(items)

	@classmethod
	def sparse(cls, length: int, entries: Mapping[int, T] | None = None) -> JsArray[T]:
		"""Build an array of `length` holes, filling only the given indices.

		`JsArray.sparse(3, {0: "a", 2: "c"})` is the JS literal `["a", , "c"]`.
		"""
		arr: JsArray[T] = cls()
		arr.length = length
		for index, value in (entries or {}).items():
			arr.set(index, value)
		return arr

	# -------------------------------------------------------------------------
	# Slot protocol
	# -------------------------------------------------------------------------

	@property
	@override
	def length(self) -> int:
		return len(self._slots)

	@length.setter
	@override
	def length(self, value: int) -> None:
		value = _check_length(value)
		current = len(self._slots)
		if value < current:
			del self._slots[value:]
		else:
			self._slots.extend([HOLE] * (value - current))

	@override
	def has(self, index: int) -> bool:
		return 0 <= index < len(self._slots) and self._slots[index] is not HOLE

	@override
	def get(self, index: int) -> T | Undefined:
		if not self.has(index):
			return UNDEFINED
		return self._slots[index]  # pyright: ignore[reportReturnType]

	@override
	def set(self, index: int, value: T) -> None:
		index = _check_index(index)
		if index >= len(self._slots):
			self.length = index + 1
		self._slots[index] = value

	@override
	def delete(self, index: int) -> None:
		if 0 <= index < len(self._slots):
			self._slots[index] = HOLE

	@override
	def empty_like(self, length: int = 0) -> JsArray[Any]:
		return JsArray.sparse(length)

	@override
	def unwrap(self) -> JsArray[T]:
		return self

	# -------------------------------------------------------------------------
	# Python protocol
	# -------------------------------------------------------------------------

	def __len__(self) -> int:
		return len(self._slots)

	def __getitem__(self, index: int) -> T | Undefined:
		return self.get(_check_index(index))

	def __setitem__(self, index: int, value: T) -> None:
		self.set(index, value)

	def __delitem__(self, index: int) -> None:
		self.delete(_check_index(index))

	def __iter__(self) -> Iterator[T | Undefined]:
		# Same as the JS array iterator: holes come out as undefined
		for index in range(len(self._slots)):
			yield self.get(index)

	@override
	def __eq__(self, other: object) -> bool:
		if isinstance(other, JsArray):
			return self._slots == other._slots  # pyright: ignore[reportUnknownMemberType]
		if isinstance(other, list):
			return HOLE not in self._slots and self._slots == other
		return NotImplemented

	__hash__ = None  # pyright: ignore[reportAssignmentType]

	@override
	def __repr__(self) -> str:
		parts: list[str] = []
		run = 0
		for slot in self._slots:
			if slot is HOLE:
				run += 1
				continue
			if run:
				parts.append(_holes_repr(run))
				run = 0
			parts.append(repr(slot))
		if run:
			parts.append(_holes_repr(run))
		return f"JsArray([{', '.join(parts)}])"

	def to_list(self, hole: Any = UNDEFINED) -> list[T | Any]:
		"""Dense copy of the array, with `hole` standing in for empty slots."""
		return [hole if slot is HOLE else slot for slot in self._slots]

	def copy(self) -> JsArray[T]:
		clone: JsArray[T] = JsArray()
		clone._slots = list(self._slots)
		return clone


def _holes_repr(count: int) -> str:
	return f"<{count} empty item{'s' if count > 1 else ''}>"


class ListView(ArrayLike[T]):
	"""Write-through adapter over a caller-owned Python list.

	Lists cannot be sparse: every index below `length` is present, growing the
	length pads with UNDEFINED, and deleting a slot stores UNDEFINED.
	"""

	__slots__: tuple[str, ...] = ("items",)
	items: list[T]

	def __init__(self, items: list[T]) -> None:
		self.items = items

	@property
	@override
	def length(self) -> int:
		return len(self.items)

	@length.setter
	@override
	def length(self, value: int) -> None:
		value = _check_length(value)
		current = len(self.items)
		if value < current:
			del self.items[value:]
		else:
			self.items.extend([UNDEFINED] * (value - current))  # pyright: ignore[reportArgumentType]

	@override
	def has(self, index: int) -> bool:
		return 0 <= index < len(self.items)

	@override
	def get(self, index: int) -> T | Undefined:
		if not self.has(index):
			return UNDEFINED
		return self.items[index]

	@override
	def set(self, index: int, value: T) -> None:
		index = _check_index(index)
		if index >= len(self.items):
			self.length = index + 1
		self.items[index] = value

	@override
	def delete(self, index: int) -> None:
		if self.has(index):
			self.items[index] = UNDEFINED  # pyright: ignore[reportArgumentType]

	@override
	def empty_like(self, length: int = 0) -> ListView[Any]:
		return ListView([UNDEFINED] * length)

	@override
	def unwrap(self) -> list[T]:
		return self.items

	@override
	def __repr__(self) -> str:
		return f"ListView({self.items!r})"


def as_array(value: ArrayLike[T] | list[T]) -> ArrayLike[T]:
	"""Wrap `value` in the slot protocol. Lists are adapted in place, never copied."""
	if isinstance(value, ArrayLike):
		return value  # pyright: ignore[reportUnknownVariableType]
	if isinstance(value, list):
		return ListView(value)  # pyright: ignore[reportUnknownArgumentType]
	raise TypeError(f"expected a JsArray or a list, got {type(value).__name__}")


__all__ = [
	"HOLE",
	"UNDEFINED",
	"ArrayInput",
	"ArrayLike",
	"Hole",
	"JsArray",
	"ListView",
	"Undefined",
	"as_array",
]
