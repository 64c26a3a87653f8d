"""Data loading layer for the command reference catalog.

This module loads the catalog from JSON with caching so the catalog is
built once per process.

Responsibilities:
- Read catalog.json (bundled resource, or a file named by configuration)
- Validate the raw structure with pydantic
- Assemble immutable Entry/Category/Catalog objects in document order
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from oracle_cmdref.config import get_config
from oracle_cmdref.errors import CatalogError
from oracle_cmdref.knowledge.catalog.models import Catalog, Category, Entry, EntryKind
from oracle_cmdref.knowledge.config import CATALOG_PATH, CATALOG_SCHEMA_VERSION

logger = logging.getLogger("oracle-cmdref.loader")


class RawEntry(BaseModel):
    """Entry as authored in catalog.json."""

    title: str = Field(min_length=1)
    kind: EntryKind = EntryKind.SHELL
    template: str = Field(min_length=1)
    description: str = ""

    @field_validator("title", "template")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class RawSubcategory(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    entries: list[RawEntry] = Field(default_factory=list)


class RawCategory(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    entries: list[RawEntry] = Field(default_factory=list)
    subcategories: list[RawSubcategory] = Field(default_factory=list)


class RawCatalog(BaseModel):
    version: int = CATALOG_SCHEMA_VERSION
    categories: list[RawCategory] = Field(min_length=1)

    @field_validator("version")
    @classmethod
    def _known_version(cls, value: int) -> int:
        if value != CATALOG_SCHEMA_VERSION:
            raise ValueError(f"unsupported catalog version {value}")
        return value


def _make_entry(raw: RawEntry, path: tuple[str, ...]) -> Entry:
    return Entry(
        title=raw.title.strip(),
        category_path=path,
        template=raw.template,
        kind=raw.kind,
        description=raw.description.strip(),
    )


def build_catalog(data: dict[str, Any]) -> Catalog:
    """Assemble a Catalog from already-parsed JSON data.

    Raises:
        CatalogError: If the data does not match the catalog schema or
            produces duplicate entry ids
    """
    try:
        raw = RawCatalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"malformed catalog data: {exc}") from exc

    entries: list[Entry] = []
    categories: list[Category] = []
    try:
        for raw_cat in raw.categories:
            cat_entries = [_make_entry(e, (raw_cat.name,)) for e in raw_cat.entries]
            entries.extend(cat_entries)
            total = len(cat_entries)

            subcategories: list[Category] = []
            for raw_sub in raw_cat.subcategories:
                sub_entries = [_make_entry(e, (raw_cat.name, raw_sub.name)) for e in raw_sub.entries]
                entries.extend(sub_entries)
                total += len(sub_entries)
                subcategories.append(
                    Category(
                        name=raw_sub.name,
                        description=raw_sub.description,
                        entry_count=len(sub_entries),
                    )
                )

            categories.append(
                Category(
                    name=raw_cat.name,
                    description=raw_cat.description,
                    subcategories=tuple(subcategories),
                    entry_count=total,
                )
            )
        return Catalog(entries=tuple(entries), categories=tuple(categories))
    except ValueError as exc:
        raise CatalogError(str(exc)) from exc


def load(path: Path | str | None = None) -> Catalog:
    """Load and assemble a catalog from a JSON file.

    Args:
        path: Catalog file. Defaults to ``ORACLE_CMDREF_CATALOG_PATH`` when
            set, otherwise the bundled catalog.json

    Raises:
        CatalogError: If the file is missing, is not valid JSON, or does not
            match the catalog schema

    Example:
        >>> catalog = load()
        >>> catalog.entries[0].category_path[0]
        'Oracle Database'
    """
    if path is None:
        path = get_config().catalog_path or CATALOG_PATH
    catalog_path = Path(path)

    if not catalog_path.exists():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {catalog_path}: {exc}") from exc

    catalog = build_catalog(data)
    logger.info(
        "Loaded %d entries in %d categories from %s",
        len(catalog.entries),
        len(catalog.categories),
        catalog_path,
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first use."""
    return load()


def clear_cache() -> None:
    """Drop the cached catalog.

    Useful for testing or after pointing the configuration at another file.
    """
    get_catalog.cache_clear()
