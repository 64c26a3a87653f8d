"""Oracle command reference knowledge base.

Subpackages:
    - catalog: data model, loader and markdown formatter
    - query: category lookup, title search, keyword suggestions
    - render: placeholder extraction and substitution
    - search: keyword relevance scoring
"""
