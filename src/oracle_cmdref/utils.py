"""Validation models and utilities for oracle-cmdref tools and CLI."""

from typing import Annotated, Iterable, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator

from oracle_cmdref.errors import InvalidArgument

# Search limits
DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 50


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally lowercase."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.lower() if lowercase else normalized


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


def parse_assignments(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` strings into a dict.

    The first ``=`` splits key from value, so values may contain ``=``.
    A later pair overrides an earlier one with the same key.

    Raises:
        InvalidArgument: If a pair has no ``=`` or an empty key
    """
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidArgument(f"expected key=value, got '{pair}'")
        values[key] = value
    return values


# Title search text (empty returns the full catalog)
SearchText = Annotated[
    Optional[str],
    Field(
        default=None,
        description=(
            "Text to find in entry titles. Examples: 'partition', 'create user', "
            "'listener'. Case-insensitive. Empty lists every entry."
        ),
    ),
]

# Search limit
SearchLimit = Annotated[
    int,
    Field(
        default=DEFAULT_SEARCH_LIMIT,
        ge=1,
        le=MAX_SEARCH_LIMIT,
        description=f"Maximum number of results (1-{MAX_SEARCH_LIMIT}).",
    ),
]

EntryId = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description=(
            "Entry id from browse/search results (e.g. "
            "'oracle-database/connection/connect-with-easy-connect') or an exact entry title"
        ),
    ),
]

PlaceholderValues = Annotated[
    Optional[dict[str, str]],
    Field(
        default=None,
        description="Placeholder values, e.g. {'hostname': 'db01', 'port': '1521'}",
    ),
]
