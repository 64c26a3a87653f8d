"""Markdown formatter for catalog categories and entries.

Formatting Goals:
- Clear structure with headers
- Templates in fenced code blocks tagged by snippet kind
- Placeholders listed so a reader knows what to fill in
"""

from __future__ import annotations

from typing import Sequence

from oracle_cmdref.knowledge.catalog.models import Category, Entry, EntryKind

_FENCE_LANG = {
    EntryKind.SQL: "sql",
    EntryKind.PLSQL: "sql",
    EntryKind.SHELL: "bash",
}


class CatalogFormatter:
    """Format catalog content as markdown for terminal or LLM consumption."""

    @staticmethod
    def format_with_error(error_msg: str, fallback_content: str) -> str:
        """Prepend an error notice to content from the parent level."""
        return f"Error: {error_msg}\n\n{fallback_content}"

    @staticmethod
    def format_root(categories: Sequence[Category]) -> str:
        """Format the categories overview."""
        parts = []
        total_entries = sum(cat.entry_count for cat in categories)

        parts.append("## Oracle Command Reference")
        parts.append("")
        parts.append(f"Total: {len(categories)} categories, {total_entries} entries")
        parts.append("")

        for cat in categories:
            description = cat.description
            if len(description) > 60:
                description = description[:57] + "..."
            parts.append(f"- {cat.name} ({cat.entry_count}): {description}")
            for sub in cat.subcategories:
                parts.append(f"  - {sub.name} ({sub.entry_count})")

        return "\n".join(parts)

    @staticmethod
    def format_entry_list(heading: str, entries: Sequence[Entry]) -> str:
        """Format a list of entries as id/title bullets."""
        parts = [f"## {heading} ({len(entries)} entries)", ""]
        if not entries:
            parts.append("(no entries)")
        for entry in entries:
            parts.append(f"- {entry.title} [{entry.entry_id}]")
        return "\n".join(parts)

    @staticmethod
    def format_entry(entry: Entry, text: str | None = None) -> str:
        """Format a single entry with its (optionally rendered) template.

        Args:
            entry: Entry to format
            text: Rendered template text; defaults to the raw template
        """
        body = entry.template if text is None else text
        parts = [f"### {entry.title}", ""]
        parts.append(f"Path: {' > '.join(entry.category_path)}")
        parts.append(f"ID: {entry.entry_id}")
        if entry.description:
            parts.append("")
            parts.append(entry.description)
        parts.append("")
        parts.append(f"```{_FENCE_LANG[entry.kind]}")
        parts.append(body.rstrip("\n"))
        parts.append("```")
        if entry.placeholders:
            parts.append("")
            parts.append(f"Placeholders: {', '.join(sorted(entry.placeholders))}")
        return "\n".join(parts)
