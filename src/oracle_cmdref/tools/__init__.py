"""oracle-cmdref MCP tool implementations."""

from . import browse_catalog, render_entry, search_entries

__all__ = [
    "browse_catalog",
    "render_entry",
    "search_entries",
]
