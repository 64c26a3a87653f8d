"""Tests for environment-driven configuration."""

from pathlib import Path

from oracle_cmdref.config import get_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("ORACLE_CMDREF_LOG_LEVEL", raising=False)
    cfg = get_config()
    assert cfg.catalog_path is None
    assert cfg.search_limit == 10
    assert cfg.log_level == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ORACLE_CMDREF_CATALOG_PATH", str(tmp_path / "cat.json"))
    monkeypatch.setenv("ORACLE_CMDREF_SEARCH_LIMIT", "25")
    monkeypatch.setenv("ORACLE_CMDREF_LOG_LEVEL", "debug")
    cfg = get_config()
    assert cfg.catalog_path == Path(tmp_path / "cat.json")
    assert cfg.search_limit == 25
    assert cfg.log_level == "DEBUG"


def test_tolerant_parsing(monkeypatch):
    monkeypatch.setenv("ORACLE_CMDREF_SEARCH_LIMIT", "lots")
    monkeypatch.setenv("ORACLE_CMDREF_LOG_LEVEL", "chatty")
    cfg = get_config()
    assert cfg.search_limit == 10
    assert cfg.log_level == "WARNING"


def test_search_limit_clamped(monkeypatch):
    monkeypatch.setenv("ORACLE_CMDREF_SEARCH_LIMIT", "0")
    assert get_config().search_limit == 1
    monkeypatch.setenv("ORACLE_CMDREF_SEARCH_LIMIT", "500")
    assert get_config().search_limit == 50
