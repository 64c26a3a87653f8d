"""Placeholder extraction and substitution for command templates.

Templates mark substitution points with angle-bracket tokens, for example::

    sqlplus <username>/<password>@<hostname>:<port>/<service_name>

A token name starts with a letter or underscore followed by letters, digits
or underscores. Shell heredocs (``<<EOF``) and the SQL ``<>`` operator never
form a token.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from oracle_cmdref.knowledge.catalog.models import Entry

PLACEHOLDER_PATTERN = re.compile(r"<([A-Za-z_][A-Za-z0-9_]*)>")


def extract_placeholders(template: str) -> frozenset[str]:
    """Return the set of placeholder names found in a template."""
    return frozenset(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(template))


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute placeholder tokens in ``template`` with ``values``.

    Substitution is a single pass over the original text: replacement values
    are inserted literally and never expanded again. Tokens without a value
    are left verbatim, and keys that match no token are ignored.
    """
    if not values:
        return template

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def render(entry: Entry, values: Mapping[str, str] | None = None) -> str:
    """Render an entry's template with the given placeholder values.

    Never fails on missing values: the template is best-effort and any
    unresolved ``<name>`` token stays in the output.

    Example:
        >>> render(entry, {"hostname": "db01", "port": "1521"})
        'sqlplus scott/<password>@db01:1521/<service_name>'
    """
    return render_template(entry.template, values or {})


def missing_placeholders(entry: Entry, values: Mapping[str, str] | None = None) -> list[str]:
    """Return the sorted placeholder names left unresolved by ``values``."""
    provided = values or {}
    return sorted(name for name in entry.placeholders if name not in provided)
