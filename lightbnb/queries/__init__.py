"""
SQL construction for queries whose shape depends on caller input.
"""

from lightbnb.queries.property_search import (
    DEFAULT_LIMIT,
    SEARCH_FILTERS,
    PropertySearchQueryBuilder,
    SearchFilter,
    build_property_search_query,
    resolve_limit
)

__all__ = [
    "DEFAULT_LIMIT",
    "SEARCH_FILTERS",
    "PropertySearchQueryBuilder",
    "SearchFilter",
    "build_property_search_query",
    "resolve_limit",
]
