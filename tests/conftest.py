"""Shared fixtures for oracle-cmdref tests."""

import pytest

from oracle_cmdref.knowledge.catalog import Catalog, Entry, EntryKind, clear_cache, load


@pytest.fixture(autouse=True)
def _bundled_catalog(monkeypatch):
    """Every test starts from the bundled catalog and a cold cache."""
    monkeypatch.delenv("ORACLE_CMDREF_CATALOG_PATH", raising=False)
    monkeypatch.delenv("ORACLE_CMDREF_SEARCH_LIMIT", raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def catalog() -> Catalog:
    return load()


@pytest.fixture()
def small_catalog() -> Catalog:
    return Catalog(
        entries=(
            Entry("Create User Profile", ("Database", "Users"), "CREATE PROFILE <profile_name> LIMIT;", EntryKind.SQL),
            Entry("Drop User", ("Database", "Users"), "DROP USER <username> CASCADE;", EntryKind.SQL),
            Entry("Create User", ("Database", "Users"), "CREATE USER <username>;", EntryKind.SQL),
            Entry("Restart Listener", ("Database",), "lsnrctl stop\nlsnrctl start"),
            Entry("Create User", ("Linux",), "useradd <username>"),
        )
    )
