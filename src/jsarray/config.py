from __future__ import annotations

import os
from typing import Literal, cast

SortAlgorithm = Literal["stable", "exchange"]

ENV_JSARRAY_SORT = "JSARRAY_SORT"
ENV_JSARRAY_NARRATE = "JSARRAY_NARRATE"

SORT_ALGORITHMS: tuple[SortAlgorithm, ...] = ("stable", "exchange")
DEFAULT_SORT_ALGORITHM: SortAlgorithm = "stable"


def sort_algorithm() -> SortAlgorithm:
	"""The algorithm `sort()` uses when none is passed explicitly."""
	raw = os.environ.get(ENV_JSARRAY_SORT)
	if not raw:
		return DEFAULT_SORT_ALGORITHM
	return check_sort_algorithm(raw.strip().lower())


def check_sort_algorithm(value: str) -> SortAlgorithm:
	if value not in SORT_ALGORITHMS:
		raise ValueError(
			f"Unknown sort algorithm {value!r}, expected one of {', '.join(SORT_ALGORITHMS)}"
		)
	return cast(SortAlgorithm, value)


def narration_enabled() -> bool:
	value = os.environ.get(ENV_JSARRAY_NARRATE)
	if value is None:
		return False
	return value not in {"", "0", "false", "False"}


__all__ = [
	"DEFAULT_SORT_ALGORITHM",
	"ENV_JSARRAY_NARRATE",
	"ENV_JSARRAY_SORT",
	"SORT_ALGORITHMS",
	"SortAlgorithm",
	"check_sort_algorithm",
	"narration_enabled",
	"sort_algorithm",
]
