import io
import logging

import pytest
from jsarray import ENV_JSARRAY_NARRATE, DryRun, JsArray, Step, map_, push, reduce, sort
from jsarray.narrate import DRY_RUN, narrate
from rich.console import Console


def test_dry_run_records_reduce():
	with DryRun() as run:
		assert reduce([1, 2, 3], lambda acc, x: acc + x) == 6
	assert run.operations() == ["reduce"]
	assert run.messages("reduce") == [
		"no initial value, seeded with 1",
		"callback(1, 2) -> 3",
		"callback(3, 3) -> 6",
	]
	assert [step.index for step in run.steps] == [0, 1, 2]


def test_dry_run_records_holes():
	with DryRun() as run:
		map_(JsArray.sparse(2, {0: "a"}), str.upper)
	assert run.steps == [
		Step("map", 0, "'a' -> 'A'"),
		Step("map", 1, "index 1 is a hole, left empty"),
	]


def test_dry_run_collects_several_operations():
	with DryRun() as run:
		items = [2, 1]
		push(items, 0)
		sort(items, algorithm="exchange")
	assert run.operations() == ["push", "sort"]
	assert "swap 2 and 1" in run.messages("sort")


def test_dry_run_stops_recording_on_exit():
	with DryRun() as run:
		push([], 1)
	count = len(run.steps)
	push([], 2)
	assert len(run.steps) == count
	assert DRY_RUN.get() is None


def test_dry_run_is_reset_after_errors():
	with pytest.raises(ZeroDivisionError):
		with DryRun():
			map_([0], lambda x: 1 / x)
	assert DRY_RUN.get() is None


def test_nested_dry_runs_restore_the_outer_one():
	with DryRun() as outer:
		with DryRun() as inner:
			narrate("test", "inner")
		narrate("test", "outer")
	assert inner.messages() == ["inner"]
	assert outer.messages() == ["outer"]


def test_clear():
	with DryRun() as run:
		narrate("test", "step %d", 1)
	run.clear()
	assert run.steps == []


def test_render_with_rich():
	with DryRun(title="reduce demo") as run:
		reduce([1, 2], lambda acc, x: acc + x)
	console = Console(file=io.StringIO(), width=120, color_system=None)
	console.print(run)
	output = console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
	assert "reduce demo" in output
	assert "seeded with 1" in output
	assert "callback(1, 2) -> 3" in output


def test_render_builds_one_row_per_step():
	with DryRun() as run:
		push([], 1, 2)
	assert run.render().row_count == 2


def test_narration_logs_when_enabled(
	monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
	monkeypatch.setenv(ENV_JSARRAY_NARRATE, "1")
	with caplog.at_level(logging.DEBUG, logger="jsarray.narrate"):
		push([], 1)
	messages = [rec.getMessage() for rec in caplog.records if rec.name == "jsarray.narrate"]
	assert messages == ["push: store 1 at index 0"]


def test_narration_is_silent_by_default(caplog: pytest.LogCaptureFixture):
	with caplog.at_level(logging.DEBUG, logger="jsarray.narrate"):
		push([], 1)
	assert not [rec for rec in caplog.records if rec.name == "jsarray.narrate"]


def test_dry_run_has_no_token_parameter():
	with pytest.raises(TypeError):
		DryRun(_token=None)  # pyright: ignore[reportCallIssue]
	assert "_token" not in repr(DryRun())


def test_dry_run_cannot_be_entered_twice():
	run = DryRun(title="once")
	with run:
		with pytest.raises(RuntimeError, match="'once' is already active"):
			with run:
				pass
		narrate("test", "still recording")
	assert run.messages() == ["still recording"]
	assert DRY_RUN.get() is None
	with run:
		narrate("test", "again")
	assert run.messages() == ["still recording", "again"]


def test_environment_is_not_read_without_debug_logging(
	monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
	def fail() -> bool:
		raise AssertionError("environment read while DEBUG is off")

	monkeypatch.setattr("jsarray.narrate.narration_enabled", fail)
	with caplog.at_level(logging.INFO, logger="jsarray.narrate"):
		push([], 1)
		narrate("test", "dropped")
