from pathlib import Path

import pytest

from core.config import AppSettings

BASE_URL = "https://aoc.test"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Every test runs in an empty cwd with no AOC_* variables."""

    for name in (
        "AOC_SESSION",
        "AOC_BASE_URL",
        "AOC_USER_AGENT",
        "AOC_HTTP_TIMEOUT_SECONDS",
        "AOC_WORKSPACE_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, session="test_cookie", base_url=BASE_URL)


@pytest.fixture
def anonymous_settings() -> AppSettings:
    return AppSettings(_env_file=None, base_url=BASE_URL)
