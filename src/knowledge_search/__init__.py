"""Knowledge Search: type-ahead lookup over a fixed knowledge-base catalog."""

from knowledge_search.catalog import SAMPLE_ARTICLES, load_catalog, parse_catalog, sample_catalog
from knowledge_search.config import KnowledgeSearchConfig, create_from_config, load_config
from knowledge_search.data import (
    Article,
    Catalog,
    CatalogError,
    Match,
    NoMatch,
    NoQuery,
    SelectionResult,
)
from knowledge_search.matcher import ArticleMatcher, SubstringMatcher, article_matches, match_articles
from knowledge_search.query import normalize_query
from knowledge_search.query_logger import QueryLogger
from knowledge_search.render import render_article, render_result
from knowledge_search.resolver import RandomSource, pick_index, resolve
from knowledge_search.session import SearchSession

__all__ = [
    # Models
    "Article",
    "Catalog",
    "Match",
    "NoMatch",
    "NoQuery",
    "SelectionResult",
    # Errors
    "CatalogError",
    # Catalog
    "SAMPLE_ARTICLES",
    "load_catalog",
    "parse_catalog",
    "sample_catalog",
    # Functions
    "article_matches",
    "match_articles",
    "normalize_query",
    "pick_index",
    "render_article",
    "render_result",
    "resolve",
    # Protocols
    "ArticleMatcher",
    "RandomSource",
    # Matchers
    "SubstringMatcher",
    # Driver
    "SearchSession",
    # Logging
    "QueryLogger",
    # Config
    "KnowledgeSearchConfig",
    "create_from_config",
    "load_config",
]
