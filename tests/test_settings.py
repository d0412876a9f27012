from __future__ import annotations

from config.settings import get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("EMPLOYEES_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    s = get_settings()
    assert s.data_file == "employees.txt"
    assert s.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("EMPLOYEES_FILE", str(tmp_path / "staff.txt"))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()
    s = get_settings()
    assert s.data_file == str(tmp_path / "staff.txt")
    assert s.log_level == "debug"


def test_settings_are_cached(monkeypatch):
    monkeypatch.setenv("EMPLOYEES_FILE", "first.txt")
    first = get_settings()
    monkeypatch.setenv("EMPLOYEES_FILE", "second.txt")
    assert get_settings() is first
