"""Command line interface for the Oracle command reference.

Exit codes: 0 on success (an empty result is a success), 1 when a requested
entry does not exist or the catalog cannot be loaded, 2 on malformed
arguments.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from oracle_cmdref import __version__
from oracle_cmdref.config import get_config
from oracle_cmdref.errors import CatalogError, InvalidArgument, NotFound
from oracle_cmdref.knowledge.catalog import Catalog, CatalogFormatter, get_catalog, load
from oracle_cmdref.knowledge.query import by_category, get_entry, list_categories, search, suggest
from oracle_cmdref.knowledge.render import missing_placeholders, render
from oracle_cmdref.utils import parse_assignments

logger = logging.getLogger("oracle-cmdref.cli")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def configure_logging(level: str | int) -> None:
    """Send log records to stderr so stdout stays copy-pasteable."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oracle-cmdref",
        description="Oracle command reference - look up, search and render command templates",
    )
    parser.add_argument("--version", "-v", action="version", version=f"oracle-cmdref {__version__}")
    parser.add_argument("--verbose", action="store_true", help="log catalog loading details")
    parser.add_argument(
        "--catalog",
        metavar="PATH",
        help="catalog JSON file for query commands (serve reads ORACLE_CMDREF_CATALOG_PATH)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "markdown"],
        default="text",
        help="output format; markdown wraps rendered templates with entry details (default: text)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    lookup_p = sub.add_parser("lookup", help="list entries under a category")
    lookup_p.add_argument("category")
    lookup_p.add_argument("subcategory", nargs="?")

    search_p = sub.add_parser("search", help="search entry titles")
    search_p.add_argument("text", nargs="?", default="")

    render_p = sub.add_parser("render", help="render an entry template")
    render_p.add_argument("entry_id")
    render_p.add_argument("assignments", nargs="*", metavar="key=value")

    show_p = sub.add_parser("show", help="show a single entry")
    show_p.add_argument("entry_id")

    sub.add_parser("categories", help="list categories")

    serve_p = sub.add_parser("serve", help="run the MCP server")
    serve_p.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    serve_p.add_argument("--host", default="127.0.0.1", help="Host for http/sse (default: 127.0.0.1)")
    serve_p.add_argument("--port", type=int, default=8000, help="Port for http/sse (default: 8000)")

    return parser


def _emit(args: argparse.Namespace, text: str, payload: Any) -> None:
    if args.format == "json":
        print(json.dumps(payload, indent=2))
    else:
        print(text)


def _entries_text(entries: Sequence[Any]) -> str:
    return "\n\n".join(CatalogFormatter.format_entry(entry) for entry in entries)


def cmd_lookup(catalog: Catalog, args: argparse.Namespace) -> int:
    path = [args.category] + ([args.subcategory] if args.subcategory is not None else [])
    entries = by_category(catalog, path)
    heading = " > ".join(path)
    if entries:
        text = CatalogFormatter.format_entry_list(heading, entries) + "\n\n" + _entries_text(entries)
    else:
        logger.info("No entries under %s", heading)
        text = CatalogFormatter.format_with_error(
            f"No entries under '{heading}'.",
            CatalogFormatter.format_root(list_categories(catalog)),
        )
    _emit(args, text, [entry.to_dict() for entry in entries])
    return EXIT_OK


def cmd_search(catalog: Catalog, args: argparse.Namespace) -> int:
    entries = search(catalog, args.text)
    if entries:
        _emit(args, _entries_text(entries), [entry.to_dict() for entry in entries])
        return EXIT_OK

    suggestions = suggest(catalog, args.text, get_config().search_limit)
    text = CatalogFormatter.format_with_error(
        f"No entry titles match '{args.text}'.",
        CatalogFormatter.format_entry_list("Did you mean", [s.entry for s in suggestions]),
    )
    _emit(args, text, {"entries": [], "suggestions": [s.to_dict() for s in suggestions]})
    return EXIT_OK


def cmd_render(catalog: Catalog, args: argparse.Namespace) -> int:
    values = parse_assignments(args.assignments)
    entry = get_entry(catalog, args.entry_id)
    text = render(entry, values)

    missing = missing_placeholders(entry, values)
    if missing:
        logger.warning("Unresolved placeholders in '%s': %s", entry.entry_id, ", ".join(missing))

    body = CatalogFormatter.format_entry(entry, text) if args.format == "markdown" else text
    _emit(args, body, {"id": entry.entry_id, "text": text, "missing": missing})
    return EXIT_OK


def cmd_show(catalog: Catalog, args: argparse.Namespace) -> int:
    entry = get_entry(catalog, args.entry_id)
    _emit(args, CatalogFormatter.format_entry(entry), entry.to_dict())
    return EXIT_OK


def cmd_categories(catalog: Catalog, args: argparse.Namespace) -> int:
    categories = list_categories(catalog)
    _emit(args, CatalogFormatter.format_root(categories), [cat.to_dict() for cat in categories])
    return EXIT_OK


COMMANDS = {
    "lookup": cmd_lookup,
    "search": cmd_search,
    "render": cmd_render,
    "show": cmd_show,
    "categories": cmd_categories,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the oracle-cmdref command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.INFO if args.verbose else get_config().log_level)

    if args.command == "serve":
        from oracle_cmdref.server import run_server

        run_server(transport=args.transport, host=args.host, port=args.port)
        return EXIT_OK

    try:
        catalog = load(args.catalog) if args.catalog else get_catalog()
        return COMMANDS[args.command](catalog, args)
    except InvalidArgument as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except NotFound as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except CatalogError as exc:
        logger.error("Catalog unavailable: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
