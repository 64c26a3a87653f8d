"""Keyword relevance scoring for catalog suggestions.

Plain title search is a substring match and returns nothing for queries
such as "tablespace size" or "restart listener". The functions here rank
entries by word overlap instead, with prefix/substring partial matching so
that shortened words like "tab" or "listen" still find something useful.
"""

from __future__ import annotations

import re
from typing import Set, Tuple

_WORD_PATTERN = re.compile(r"[a-z0-9]+")

# Partial match qualities
PREFIX_QUALITY = 0.8
SUBSTRING_QUALITY = 0.6
MIN_PREFIX_LEN = 3


def tokenize(text: str) -> Set[str]:
    """Split text into a set of lowercase alphanumeric words."""
    return set(_WORD_PATTERN.findall(text.lower()))


def word_match_quality(query_word: str, keyword_word: str) -> float:
    """Calculate match quality between two words.

    - Exact match: 1.0
    - Prefix match (both words 3+ chars): 0.8
    - Substring match (query word longer than 1 char): 0.6
    - No match: 0.0

    Examples:
        >>> word_match_quality("tab", "tablespace")
        0.8
        >>> word_match_quality("space", "tablespace")
        0.6
        >>> word_match_quality("db", "database")
        0.0
    """
    if query_word == keyword_word:
        return 1.0

    if len(query_word) >= MIN_PREFIX_LEN and len(keyword_word) >= MIN_PREFIX_LEN:
        if keyword_word.startswith(query_word) or query_word.startswith(keyword_word):
            return PREFIX_QUALITY

    # single characters would match nearly everything
    if len(query_word) > 1:
        if query_word in keyword_word or keyword_word in query_word:
            return SUBSTRING_QUALITY

    return 0.0


def find_partial_matches(
    unmatched_query_words: Set[str],
    unmatched_keyword_words: Set[str],
) -> Tuple[Set[Tuple[str, str]], float]:
    """Pair each unmatched query word with its best partial keyword match.

    Returns:
        Tuple of (pairs, avg_quality) where pairs holds
        (query_word, keyword_word) tuples with quality >= 0.6
    """
    pairs = set()
    qualities = []

    for q_word in sorted(unmatched_query_words):
        best_match = None
        best_quality = 0.0
        for k_word in sorted(unmatched_keyword_words):
            quality = word_match_quality(q_word, k_word)
            if quality > best_quality:
                best_quality = quality
                best_match = k_word

        if best_match and best_quality >= SUBSTRING_QUALITY:
            pairs.add((q_word, best_match))
            qualities.append(best_quality)

    avg_quality = sum(qualities) / len(qualities) if qualities else 0.0
    return pairs, avg_quality


def calculate_relevance_score(keyword_words: Set[str], query_words: Set[str]) -> int:
    """Score how well ``query_words`` cover ``keyword_words``.

    Score breakdown:
        - Query coverage: 0-1000 points (share of query words found)
        - Keyword precision: 0-100 points (share of keyword words used)
        - Match count: tie-breaker, exact matches count double

    Returns 0 when no query word matches at all.
    """
    if not keyword_words or not query_words:
        return 0

    exact = keyword_words & query_words
    partial, partial_quality = find_partial_matches(query_words - exact, keyword_words - exact)
    if not exact and not partial:
        return 0

    match_value = len(exact) + len(partial) * partial_quality
    query_coverage = match_value / len(query_words)
    keyword_precision = (len(exact) + len(partial) * 0.5) / len(keyword_words)
    match_count = len(exact) * 2 + len(partial)

    return int(query_coverage * 1000 + keyword_precision * 100 + match_count)
