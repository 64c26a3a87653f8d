"""Placeholder rendering for catalog entries."""

from oracle_cmdref.knowledge.render.placeholders import (
    PLACEHOLDER_PATTERN,
    extract_placeholders,
    missing_placeholders,
    render,
    render_template,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "extract_placeholders",
    "missing_placeholders",
    "render",
    "render_template",
]
