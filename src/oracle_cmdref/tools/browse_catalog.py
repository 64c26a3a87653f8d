"""Catalog Browse Tool - Navigate categories and list their entries."""

from typing import Any

from fastmcp import FastMCP
from pydantic import Field

from oracle_cmdref.contracts import build_catalog_data, build_error, build_error_from_exception, build_ok
from oracle_cmdref.errors import CatalogError, InvalidArgument
from oracle_cmdref.knowledge.catalog import Catalog, get_catalog
from oracle_cmdref.knowledge.query import by_category, list_categories


def register(mcp: FastMCP) -> None:
    """Register cmdref_browse_catalog tool with the MCP server."""

    @mcp.tool()
    def cmdref_browse_catalog(
        path: list[str] | None = Field(
            None,
            description=(
                "Category path, root first. Examples:\n"
                "- None or []: List all categories\n"
                "- ['Oracle Database']: All Oracle Database entries\n"
                "- ['Oracle Database', 'Partitioning']: Partitioning entries\n"
                "- ['OCI CLI Commands', 'Object Storage']: Object Storage entries"
            ),
        ),
    ) -> dict[str, Any]:
        """Browse the Oracle command reference by category (like ls).

        Navigation levels:
        - No path: All categories with subcategories and entry counts
        - Category or category + subcategory: Entries under that path

        Related tools:
        - cmdref_search_entries: Find entries by title text
        - cmdref_render_entry: Fill placeholders of an entry's template
        """
        try:
            catalog = get_catalog()
        except CatalogError as exc:
            return build_error_from_exception(exc)

        if not path:
            return build_ok(_browse_root(catalog))

        try:
            return _browse_path(catalog, path)
        except InvalidArgument as exc:
            return build_error_from_exception(exc, {"input": {"path": path}})


def _browse_root(catalog: Catalog) -> dict[str, Any]:
    """Level 0: Return overview of all categories."""
    categories = list_categories(catalog)
    return build_catalog_data(
        action="browse",
        entries=[cat.to_dict() for cat in categories],
        summary={
            "count": len(categories),
            "total_entries": len(catalog),
        },
    )


def _browse_path(catalog: Catalog, path: list[str]) -> dict[str, Any]:
    """Level 1/2: Return entries under a category path."""
    entries = by_category(catalog, path)

    if not entries:
        category = catalog.find_category(path[0])
        if category is None:
            return build_error(
                "category_not_found",
                f"Category '{path[0]}' not found.",
                {
                    "input": {"path": path},
                    "available_categories": [cat.name for cat in catalog.categories],
                },
            )
        return build_error(
            "subcategory_not_found",
            f"No entries under '{' > '.join(path)}'.",
            {
                "input": {"path": path},
                "available_subcategories": [sub.name for sub in category.subcategories],
            },
        )

    return build_ok(
        build_catalog_data(
            action="browse",
            entries=[
                {
                    "id": entry.entry_id,
                    "title": entry.title,
                    "category_path": list(entry.category_path),
                    "kind": entry.kind.value,
                    "placeholders": sorted(entry.placeholders),
                }
                for entry in entries
            ],
            summary={"count": len(entries), "path": path},
        )
    )
