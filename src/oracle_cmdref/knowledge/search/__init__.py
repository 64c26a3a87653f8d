"""Keyword scoring used for search suggestions."""

from oracle_cmdref.knowledge.search.keyword_matcher import (
    calculate_relevance_score,
    find_partial_matches,
    tokenize,
    word_match_quality,
)

__all__ = [
    "calculate_relevance_score",
    "find_partial_matches",
    "tokenize",
    "word_match_quality",
]
