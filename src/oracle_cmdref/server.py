"""oracle-cmdref MCP Server - Oracle command reference exposed over MCP."""

import logging

from fastmcp import FastMCP

from oracle_cmdref.tools import browse_catalog, render_entry, search_entries

mcp = FastMCP(
    "Oracle Command Reference",
    instructions=(
        "Curated reference of Oracle Database, OCI CLI, Oracle Linux, Oracle VM "
        "and Enterprise Manager commands. Browse by category, search titles, and "
        "render templates with placeholder values. Nothing is executed."
    ),
)

logger = logging.getLogger("oracle-cmdref.server")

browse_catalog.register(mcp)
search_entries.register(mcp)
render_entry.register(mcp)


def run_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the MCP server until interrupted."""
    run_kwargs: dict = {"transport": transport, "show_banner": False}
    if transport in ("http", "sse"):
        run_kwargs["host"] = host
        run_kwargs["port"] = port

    # Suppress noisy uvicorn shutdown messages
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info("Starting MCP server (transport=%s)", transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass
