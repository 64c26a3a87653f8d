"""Catalog Render Tool - Substitute placeholder values into a template."""

from typing import Any

from fastmcp import FastMCP

from oracle_cmdref.contracts import build_catalog_data, build_error_from_exception, build_ok
from oracle_cmdref.errors import CmdrefError
from oracle_cmdref.knowledge.catalog import get_catalog
from oracle_cmdref.knowledge.query import get_entry
from oracle_cmdref.knowledge.render import missing_placeholders, render
from oracle_cmdref.utils import EntryId, PlaceholderValues


def register(mcp: FastMCP) -> None:
    """Register cmdref_render_entry tool with the MCP server."""

    @mcp.tool()
    def cmdref_render_entry(
        entry_id: EntryId,
        values: PlaceholderValues = None,
    ) -> dict[str, Any]:
        """Render an entry's template with placeholder values (ready to copy).

        Placeholders without a value stay verbatim (e.g. <password>) and are
        listed in summary.missing. Keys that match no placeholder are ignored.

        Related tools:
        - cmdref_browse_catalog / cmdref_search_entries: Find entry ids
        """
        try:
            entry = get_entry(get_catalog(), entry_id)
        except CmdrefError as exc:
            return build_error_from_exception(exc, {"input": {"entry_id": entry_id}})

        provided = values or {}
        return build_ok(
            build_catalog_data(
                action="render",
                entries=[
                    {
                        "id": entry.entry_id,
                        "title": entry.title,
                        "kind": entry.kind.value,
                        "text": render(entry, provided),
                    }
                ],
                summary={
                    "count": 1,
                    "missing": missing_placeholders(entry, provided),
                    "ignored": sorted(k for k in provided if k not in entry.placeholders),
                },
            )
        )
