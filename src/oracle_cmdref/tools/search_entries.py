"""Catalog Search Tool - Find entries by title text."""

from typing import Any

from fastmcp import FastMCP

from oracle_cmdref.contracts import build_catalog_data, build_error_from_exception, build_ok
from oracle_cmdref.errors import CatalogError
from oracle_cmdref.knowledge.catalog import get_catalog
from oracle_cmdref.knowledge.query import search, suggest
from oracle_cmdref.utils import SearchLimit, SearchText


def register(mcp: FastMCP) -> None:
    """Register cmdref_search_entries tool with the MCP server."""

    @mcp.tool()
    def cmdref_search_entries(
        query: SearchText = None,
        limit: SearchLimit = 10,
    ) -> dict[str, Any]:
        """Search the Oracle command reference by title (like grep).

        Exact title matches come first, then titles containing the text,
        in catalog order. When nothing matches, keyword suggestions are
        returned in the summary.

        Related tools:
        - cmdref_browse_catalog: List entries by category path
        - cmdref_render_entry: Fill placeholders of an entry's template
        """
        try:
            catalog = get_catalog()
        except CatalogError as exc:
            return build_error_from_exception(exc)

        results = search(catalog, query)
        matches = [
            {
                "id": entry.entry_id,
                "title": entry.title,
                "category_path": list(entry.category_path),
                "kind": entry.kind.value,
                "template": entry.template,
            }
            for entry in results[:limit]
        ]

        payload: dict[str, Any] = build_catalog_data(
            action="search",
            entries=matches,
            summary={
                "count": len(matches),
                "total_matches": len(results),
            },
        )

        if not matches:
            payload["summary"]["suggestions"] = [s.to_dict() for s in suggest(catalog, query, limit)]
            payload["summary"]["available_categories"] = [cat.name for cat in catalog.categories]

        return build_ok(payload)
