import pytest

from scrawn.config import load_config


@pytest.fixture(autouse=True)
def clear_scrawn_env(monkeypatch, tmp_path):
    for key in [
        "SCRAWN_DEBUG",
        "SCRAWN_LOG_LEVEL",
        "SCRAWN_PRETTY_INDENT",
    ]:
        monkeypatch.delenv(key, raising=False)
    # Isolate from any pyproject.toml above the test run directory.
    monkeypatch.chdir(tmp_path)
    load_config.cache_clear()
    yield
    load_config.cache_clear()
