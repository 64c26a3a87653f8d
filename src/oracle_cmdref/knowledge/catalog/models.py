"""Immutable data model for the command reference catalog.

The catalog is a two-level tree of categories (category -> subcategory)
whose leaves are entries. It is assembled once by the loader and never
mutated afterwards, so a single instance can be shared by any number of
readers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from oracle_cmdref.knowledge.render.placeholders import extract_placeholders

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse non-alphanumeric runs to hyphens."""
    return _SLUG_PATTERN.sub("-", text.lower()).strip("-")


class EntryKind(Enum):
    """Snippet language tag. Informational only, used for code fences."""

    SQL = "sql"
    SHELL = "shell"
    PLSQL = "plsql"


@dataclass(frozen=True)
class Entry:
    """One documented command.

    Attributes:
        title: Short human-readable label (e.g. "Add Partition")
        category_path: Category names from root to leaf,
            e.g. ("Oracle Database", "Partitioning")
        template: Literal command or snippet text, possibly multi-line
        kind: Snippet language tag
        description: Optional one-line note shown with the entry
        placeholders: Token names found in ``template`` (derived)
        entry_id: Stable slug of path and title (derived)
    """

    title: str
    category_path: tuple[str, ...]
    template: str
    kind: EntryKind = EntryKind.SHELL
    description: str = ""
    placeholders: frozenset[str] = field(init=False)
    entry_id: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("entry title must not be empty")
        if not self.template or not self.template.strip():
            raise ValueError(f"entry '{self.title}' has an empty template")
        if not self.category_path:
            raise ValueError(f"entry '{self.title}' has an empty category path")

        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "category_path", tuple(self.category_path))
        object.__setattr__(self, "placeholders", extract_placeholders(self.template))
        slug_parts = [slugify(name) for name in self.category_path] + [slugify(self.title)]
        if not all(slug_parts):
            raise ValueError(
                f"entry '{self.title}' in {list(self.category_path)} needs a letter or digit "
                "in every category name and in its title"
            )
        object.__setattr__(self, "entry_id", "/".join(slug_parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to a JSON-friendly dictionary."""
        return {
            "id": self.entry_id,
            "title": self.title,
            "category_path": list(self.category_path),
            "kind": self.kind.value,
            "description": self.description,
            "template": self.template,
            "placeholders": sorted(self.placeholders),
        }


@dataclass(frozen=True)
class Category:
    """A named grouping of entries, nesting at most one level."""

    name: str
    description: str = ""
    subcategories: tuple[Category, ...] = ()
    entry_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "entry_count": self.entry_count,
            "subcategories": [sub.to_dict() for sub in self.subcategories],
        }


@dataclass(frozen=True)
class Catalog:
    """Ordered, read-only collection of every entry.

    Entries keep the order in which the catalog data lists them; lookups
    and searches report results in that order.
    """

    entries: tuple[Entry, ...]
    categories: tuple[Category, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "categories", tuple(self.categories))

        seen: set[str] = set()
        for entry in self.entries:
            if entry.entry_id in seen:
                raise ValueError(f"duplicate entry id: {entry.entry_id}")
            seen.add(entry.entry_id)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def find_category(self, name: str) -> Category | None:
        """Return the top-level category matching ``name`` case-insensitively."""
        wanted = name.strip().lower()
        for category in self.categories:
            if category.name.lower() == wanted:
                return category
        return None
