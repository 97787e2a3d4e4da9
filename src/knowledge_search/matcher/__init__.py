"""Article matching module."""

from knowledge_search.matcher.base import ArticleMatcher
from knowledge_search.matcher.substring import SubstringMatcher, article_matches, match_articles

__all__ = [
    "ArticleMatcher",
    "SubstringMatcher",
    "article_matches",
    "match_articles",
]
