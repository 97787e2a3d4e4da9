"""Case-insensitive substring matcher.

An article matches a normalized query ``q`` when ``q`` occurs in the
lowercased title, summary or body, or in at least one lowercased tag.
Tags are matched by substring, not by equality, so ``"bill"`` matches the
tag ``"billing"``.
"""

from collections.abc import Sequence

from knowledge_search.data import Article


def article_matches(article: Article, query: str) -> bool:
    """Whether ``query`` is a substring of any searchable field of ``article``.

    Args:
        article: Article to test.
        query: Normalized query. Matching lowercases the article fields only.
    """
    return (
        query in article.title.lower()
        or query in article.summary.lower()
        or query in article.body.lower()
        or any(query in tag.lower() for tag in article.tags)
    )


def match_articles(query: str, catalog: Sequence[Article]) -> list[Article]:
    """Return the articles of ``catalog`` that match ``query``, in catalog order.

    An empty query matches every article.
    """
    return [article for article in catalog if article_matches(article, query)]


class SubstringMatcher:
    """Default matcher: pass/fail substring membership, no scoring."""

    def match(self, query: str, catalog: Sequence[Article]) -> list[Article]:
        """Return the matching articles in catalog order.

        Args:
            query: Normalized query.
            catalog: Articles to filter.

        Returns:
            List of matching articles.
        """
        return match_articles(query, catalog)
