from __future__ import annotations

import pytest

from btmenu.config import get_settings

from fakes import FakeRunner


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BTMENU_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
