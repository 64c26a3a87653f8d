"""Lookup, search and suggestion over the catalog.

Every function here is a pure read of an immutable Catalog and is safe to
call from any number of concurrent readers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from oracle_cmdref.errors import InvalidArgument, NotFound
from oracle_cmdref.knowledge.catalog.models import Catalog, Category, Entry
from oracle_cmdref.knowledge.search.keyword_matcher import calculate_relevance_score, tokenize
from oracle_cmdref.utils import normalize_input


@dataclass(frozen=True)
class Suggestion:
    """Keyword-ranked entry with its relevance score and 1-based rank."""

    entry: Entry
    score: int
    rank: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.entry.entry_id,
            "title": self.entry.title,
            "category_path": list(self.entry.category_path),
            "score": self.score,
            "rank": self.rank,
        }


def _normalize_path(path: Sequence[str]) -> list[str]:
    if isinstance(path, str):
        raise InvalidArgument("category path must be a sequence of names, not a string")

    normalized = []
    for segment in path:
        if not isinstance(segment, str):
            raise InvalidArgument(f"category path segment must be a string: {segment!r}")
        name = normalize_input(segment, lowercase=True)
        if not name:
            raise InvalidArgument("category path segments must not be empty")
        normalized.append(name)
    return normalized


def by_category(catalog: Catalog, path: Sequence[str]) -> list[Entry]:
    """Return entries whose category path starts with ``path``.

    Category names compare case-insensitively with whitespace collapsed.
    An empty path applies no filter and returns the full catalog.

    Raises:
        InvalidArgument: If a path segment is empty or not a string

    Example:
        >>> by_category(catalog, ["Oracle Database", "Partitioning"])
        [Entry(title='Create Partitioned Table', ...), Entry(title='Add Partition', ...)]
    """
    wanted = _normalize_path(path)
    depth = len(wanted)

    results = []
    for entry in catalog.entries:
        if len(entry.category_path) < depth:
            continue
        prefix = [normalize_input(name, lowercase=True) for name in entry.category_path[:depth]]
        if prefix == wanted:
            results.append(entry)
    return results


def search(catalog: Catalog, query: str | None) -> list[Entry]:
    """Case-insensitive substring search over entry titles.

    Exact title matches come first, then the remaining substring matches;
    both groups keep catalog order. An empty query returns the full catalog.
    """
    needle = normalize_input(query, lowercase=True)
    if not needle:
        return list(catalog.entries)

    exact: list[Entry] = []
    partial: list[Entry] = []
    for entry in catalog.entries:
        title = normalize_input(entry.title, lowercase=True)
        if title == needle:
            exact.append(entry)
        elif needle in title:
            partial.append(entry)
    return exact + partial


def get_entry(catalog: Catalog, identifier: str | None) -> Entry:
    """Resolve an entry by id, or by its exact title when that is unique.

    Raises:
        InvalidArgument: If ``identifier`` is empty
        NotFound: If no entry matches, or the title matches several entries
    """
    ident = normalize_input(identifier)
    if not ident:
        raise InvalidArgument("entry identifier must not be empty")

    lowered = ident.lower()
    for entry in catalog.entries:
        if entry.entry_id == lowered:
            return entry

    by_title = [e for e in catalog.entries if normalize_input(e.title, lowercase=True) == lowered]
    if len(by_title) == 1:
        return by_title[0]
    if len(by_title) > 1:
        ids = ", ".join(e.entry_id for e in by_title)
        raise NotFound(f"Title '{ident}' is ambiguous; use one of: {ids}")
    raise NotFound(f"Entry '{ident}' not found.")


def list_categories(catalog: Catalog) -> list[Category]:
    """Return the top-level categories in catalog order."""
    return list(catalog.categories)


def suggest(catalog: Catalog, query: str | None, limit: int = 10) -> list[Suggestion]:
    """Rank entries by keyword relevance to ``query``.

    Words are matched against the title, category names and description,
    with partial (prefix/substring) matching. Ties keep catalog order.
    """
    query_words = tokenize(normalize_input(query))
    if not query_words or limit < 1:
        return []

    scored: list[tuple[int, int, Entry]] = []
    for position, entry in enumerate(catalog.entries):
        keyword_words = tokenize(" ".join([entry.title, *entry.category_path, entry.description]))
        score = calculate_relevance_score(keyword_words, query_words)
        if score > 0:
            scored.append((score, position, entry))

    scored.sort(key=lambda item: (-item[0], item[1]))
    return [
        Suggestion(entry=entry, score=score, rank=rank)
        for rank, (score, _, entry) in enumerate(scored[:limit], start=1)
    ]
