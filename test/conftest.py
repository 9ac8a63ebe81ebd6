import pytest

from sortscope.output import set_debug


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("SORTSCOPE_DEBUG", raising=False)
    yield
    set_debug(False)
