from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from jsarray._core import UNDEFINED
from jsarray.errors import NotCallableError


def _is_builtin(fn: Callable[..., Any]) -> bool:
	if isinstance(fn, type) and fn.__module__ == "builtins":
		return True
	return inspect.isbuiltin(fn) or inspect.ismethoddescriptor(fn)


def positional_arity(fn: Callable[..., Any]) -> int | None:
	"""How many positional arguments `fn` accepts. None means any number.

	Builtin types (`str`, `int`, `bool`, ...) and callables without an
	introspectable signature are assumed to take exactly one argument, so they
	work as plain converters.
	"""
	if isinstance(fn, type) and fn.__module__ == "builtins":
		return 1
	try:
		sig = inspect.signature(fn)
	except (TypeError, ValueError):
		return 1
	count = 0
	for param in sig.parameters.values():
		if param.kind is inspect.Parameter.VAR_POSITIONAL:
			return None
		if param.kind in (
			inspect.Parameter.POSITIONAL_ONLY,
			inspect.Parameter.POSITIONAL_OR_KEYWORD,
		):
			count += 1
	return count


def bind_callback(fn: Any, this_arg: Any = UNDEFINED) -> Callable[..., Any]:
	"""Adapt a user callback to the (element, index, array) calling convention.

	JS callbacks silently ignore extra arguments; Python ones don't, so the
	returned callable drops whatever `fn` cannot accept. An explicit
	`this_arg` (None included) is passed ahead of the element, the way a
	method receives `self`. Builtins such as `str`, `abs` or `str.upper`, and
	callables taking no arguments, have no receiver slot and never get it.
	"""
	if not callable(fn):
		raise NotCallableError(fn)
	arity = positional_arity(fn)
	if this_arg is not UNDEFINED and arity != 0 and not _is_builtin(fn):
		if arity is None:
			return lambda *args: fn(this_arg, *args)  # pyright: ignore[reportUnknownLambdaType]
		rest = arity - 1

		def call_with_receiver(*args: Any) -> Any:
			return fn(this_arg, *args[:rest])

		return call_with_receiver
	if arity is None:
		return fn

	def call(*args: Any) -> Any:
		return fn(*args[:arity])

	return call


__all__ = ["bind_callback", "positional_arity"]
