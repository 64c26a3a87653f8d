"""Query interfaces over the command reference catalog."""

from oracle_cmdref.knowledge.query.lookup import (
    Suggestion,
    by_category,
    get_entry,
    list_categories,
    search,
    suggest,
)

__all__ = [
    "Suggestion",
    "by_category",
    "get_entry",
    "list_categories",
    "search",
    "suggest",
]
