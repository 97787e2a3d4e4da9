"""Data models for knowledge search."""

from knowledge_search.data.models import (
    Article,
    Catalog,
    CatalogError,
    Match,
    NoMatch,
    NoQuery,
    SelectionResult,
)

__all__ = [
    "Article",
    "Catalog",
    "CatalogError",
    "Match",
    "NoMatch",
    "NoQuery",
    "SelectionResult",
]
