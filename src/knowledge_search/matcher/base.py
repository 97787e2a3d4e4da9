"""Protocol for article matching."""

from collections.abc import Sequence
from typing import Protocol

from knowledge_search.data import Article


class ArticleMatcher(Protocol):
    """Interface for selecting the articles that satisfy a normalized query."""

    def match(self, query: str, catalog: Sequence[Article]) -> list[Article]:
        """Return the matching articles in catalog order.

        Args:
            query: Normalized (trimmed, lowercased) query.
            catalog: Articles to filter.

        Returns:
            Catalog-order-preserving subsequence of matching articles.
        """
        ...
