import pytest
from jsarray.config import ENV_JSARRAY_NARRATE, ENV_JSARRAY_SORT


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.delenv(ENV_JSARRAY_SORT, raising=False)
	monkeypatch.delenv(ENV_JSARRAY_NARRATE, raising=False)
