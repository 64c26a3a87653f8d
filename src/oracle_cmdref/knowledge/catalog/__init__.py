"""Command Reference Catalog.

Components:
    - loader: Load and validate catalog.json into an immutable Catalog
    - CatalogFormatter: Format categories and entries as markdown

Data Models:
    - Catalog, Category, Entry, EntryKind
"""

from oracle_cmdref.knowledge.catalog.formatter import CatalogFormatter
from oracle_cmdref.knowledge.catalog.loader import build_catalog, clear_cache, get_catalog, load
from oracle_cmdref.knowledge.catalog.models import Catalog, Category, Entry, EntryKind, slugify

__all__ = [
    # Core components
    "CatalogFormatter",
    "build_catalog",
    "clear_cache",
    "get_catalog",
    "load",
    # Data models
    "Catalog",
    "Category",
    "Entry",
    "EntryKind",
    "slugify",
]
