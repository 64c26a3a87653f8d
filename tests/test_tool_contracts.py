"""Contract tests for MCP tool response structures."""

import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from oracle_cmdref.server import mcp


async def _call(name: str, arguments: dict) -> dict:
    async with Client(mcp) as client:
        result = await client.call_tool(name, arguments)
    assert result is not None
    assert len(result.content) > 0
    text = result.content[0].text
    assert text.startswith("{")
    return json.loads(text)


# ── cmdref_browse_catalog ────────────────────────────────


@pytest.mark.asyncio
async def test_browse_root_contract() -> None:
    payload = await _call("cmdref_browse_catalog", {})
    data = payload["data"]

    assert payload["ok"] is True
    assert payload.get("error") is None
    assert data["source"] == "catalog"
    assert data["action"] == "browse"
    assert data["summary"]["count"] == 5
    assert data["summary"]["total_entries"] >= 1
    assert data["entries"][0]["name"] == "Oracle Database"


@pytest.mark.asyncio
async def test_browse_path_contract() -> None:
    payload = await _call("cmdref_browse_catalog", {"path": ["Oracle Database", "Partitioning"]})
    data = payload["data"]

    assert payload["ok"] is True
    assert [item["title"] for item in data["entries"]] == ["Create Partitioned Table", "Add Partition"]
    assert data["entries"][1]["placeholders"] == ["partition_name", "table_name", "upper_bound"]


@pytest.mark.asyncio
async def test_browse_category_not_found_contract() -> None:
    payload = await _call("cmdref_browse_catalog", {"path": ["Oracle Solaris"]})

    assert payload["ok"] is False
    assert payload["error"]["code"] == "category_not_found"
    details = payload["error"]["details"]
    assert details["input"]["path"] == ["Oracle Solaris"]
    assert "Oracle Database" in details["available_categories"]


@pytest.mark.asyncio
async def test_browse_subcategory_not_found_contract() -> None:
    payload = await _call("cmdref_browse_catalog", {"path": ["Oracle Linux", "Firmware"]})

    assert payload["ok"] is False
    assert payload["error"]["code"] == "subcategory_not_found"
    assert "Services" in payload["error"]["details"]["available_subcategories"]


@pytest.mark.asyncio
async def test_browse_invalid_path_contract() -> None:
    payload = await _call("cmdref_browse_catalog", {"path": ["Oracle Linux", ""]})

    assert payload["ok"] is False
    assert payload["error"]["code"] == "invalid_argument"


# ── cmdref_search_entries ────────────────────────────────


@pytest.mark.asyncio
async def test_search_contract() -> None:
    payload = await _call("cmdref_search_entries", {"query": "PARTITION", "limit": 5})
    data = payload["data"]

    assert payload["ok"] is True
    assert data["action"] == "search"
    assert data["summary"]["count"] == 2
    assert [item["title"] for item in data["entries"]] == ["Create Partitioned Table", "Add Partition"]
    assert "suggestions" not in data["summary"]


@pytest.mark.asyncio
async def test_search_limit_contract() -> None:
    payload = await _call("cmdref_search_entries", {"limit": 3})
    summary = payload["data"]["summary"]

    assert summary["count"] == 3
    assert summary["total_matches"] > 3


@pytest.mark.asyncio
async def test_search_no_results_contract() -> None:
    payload = await _call("cmdref_search_entries", {"query": "restart the listener service", "limit": 5})
    data = payload["data"]

    assert payload["ok"] is True
    assert data["entries"] == []
    assert data["summary"]["count"] == 0
    assert data["summary"]["suggestions"][0]["title"] == "Restart Service"
    assert "Oracle Linux" in data["summary"]["available_categories"]


# ── cmdref_render_entry ──────────────────────────────────


@pytest.mark.asyncio
async def test_render_contract() -> None:
    payload = await _call(
        "cmdref_render_entry",
        {
            "entry_id": "oracle-database/connection/connect-with-easy-connect",
            "values": {"hostname": "db01", "port": "1521", "sid": "ORCL"},
        },
    )
    data = payload["data"]

    assert payload["ok"] is True
    assert data["action"] == "render"
    assert data["entries"][0]["text"] == "sqlplus <username>/<password>@db01:1521/<service_name>"
    assert data["summary"]["missing"] == ["password", "service_name", "username"]
    assert data["summary"]["ignored"] == ["sid"]


@pytest.mark.asyncio
async def test_render_not_found_contract() -> None:
    payload = await _call("cmdref_render_entry", {"entry_id": "no/such/entry"})

    assert payload["ok"] is False
    assert payload["error"]["code"] == "entry_not_found"
    assert payload["error"]["details"]["input"]["entry_id"] == "no/such/entry"


@pytest.mark.asyncio
async def test_render_empty_id_rejected() -> None:
    with pytest.raises(ToolError):
        await _call("cmdref_render_entry", {"entry_id": "   "})


# ── Unloadable catalog ───────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("name", "arguments"),
    [
        ("cmdref_browse_catalog", {}),
        ("cmdref_search_entries", {"query": "listener"}),
        ("cmdref_render_entry", {"entry_id": "oracle-linux/services/restart-service"}),
    ],
)
async def test_missing_catalog_returns_error_envelope(name, arguments, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ORACLE_CMDREF_CATALOG_PATH", str(tmp_path / "missing.json"))
    payload = await _call(name, arguments)

    assert payload["ok"] is False
    assert payload.get("data") is None
    assert payload["error"]["code"] == "catalog_error"
    assert "not found" in payload["error"]["message"]
