"""Narrated dry runs.

Every operation describes what it does, step by step, through `narrate()`.
Steps are collected by the active `DryRun` and, when JSARRAY_NARRATE is set,
logged at DEBUG on this module's logger:

	with DryRun() as run:
		reduce([1, 2, 3], lambda acc, x: acc + x)
	Console().print(run)
"""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Literal

from rich.table import Table

from jsarray.config import narration_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Step:
	operation: str
	index: int | None
	message: str


@dataclass
class DryRun:
	"""Records the narration of every operation run inside its `with` block."""

	title: str = "dry run"
	steps: list[Step] = field(default_factory=list)
	_token: Token[DryRun | None] | None = field(default=None, init=False, repr=False, compare=False)

	def __enter__(self) -> DryRun:
		if self._token is not None:
			raise RuntimeError(f"DryRun {self.title!r} is already active")
		self._token = DRY_RUN.set(self)
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None = None,
		exc_val: BaseException | None = None,
		exc_tb: TracebackType | None = None,
	) -> Literal[False]:
		if self._token is not None:
			DRY_RUN.reset(self._token)
			self._token = None
		return False

	def record(self, step: Step) -> None:
		self.steps.append(step)

	def operations(self) -> list[str]:
		"""Names of the operations that ran, in first-seen order."""
		seen: dict[str, None] = {}
		for step in self.steps:
			seen.setdefault(step.operation, None)
		return list(seen)

	def messages(self, operation: str | None = None) -> list[str]:
		return [
			step.message
			for step in self.steps
			if operation is None or step.operation == operation
		]

	def clear(self) -> None:
		self.steps.clear()

	def render(self) -> Table:
		table = Table(title=self.title)
		table.add_column("#", justify="right", style="dim")
		table.add_column("operation", style="cyan")
		table.add_column("index", justify="right")
		table.add_column("step")
		for number, step in enumerate(self.steps, start=1):
			table.add_row(
				str(number),
				step.operation,
				"" if step.index is None else str(step.index),
				step.message,
			)
		return table

	def __rich__(self) -> Table:
		return self.render()


DRY_RUN: ContextVar[DryRun | None] = ContextVar("jsarray_dry_run", default=None)


def narrate(operation: str, message: str, *args: Any, index: int | None = None) -> None:
	"""Describe one step of `operation`. `message` is %-formatted lazily."""
	run = DRY_RUN.get()
	logging_on = logger.isEnabledFor(logging.DEBUG) and narration_enabled()
	if run is None and not logging_on:
		return
	text = message % args if args else message
	if run is not None:
		run.record(Step(operation, index, text))
	if logging_on:
		logger.debug("%s: %s", operation, text)


__all__ = ["DRY_RUN", "DryRun", "Step", "narrate"]
