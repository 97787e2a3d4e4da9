"""Catalog provisioning: built-in sample data and file loading."""

from knowledge_search.catalog.loader import ArticleRecord, load_catalog, parse_catalog
from knowledge_search.catalog.sample import SAMPLE_ARTICLES, sample_catalog

__all__ = [
    "ArticleRecord",
    "SAMPLE_ARTICLES",
    "load_catalog",
    "parse_catalog",
    "sample_catalog",
]
