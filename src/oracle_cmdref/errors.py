"""Exception types raised by the catalog library."""

from __future__ import annotations


class CmdrefError(Exception):
    """Base class for all oracle-cmdref errors."""

    code = "cmdref_error"


class InvalidArgument(CmdrefError):
    """Caller supplied a malformed category path or an empty identifier."""

    code = "invalid_argument"


class NotFound(CmdrefError):
    """Hard-fail lookup found no matching entry."""

    code = "entry_not_found"


class CatalogError(CmdrefError):
    """Catalog data is malformed and cannot be assembled."""

    code = "catalog_error"
