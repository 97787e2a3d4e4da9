"""Configuration module for knowledge search."""

from knowledge_search.config.factory import create_catalog, create_from_config, create_random_source
from knowledge_search.config.loader import get_default_config_path, load_config
from knowledge_search.config.models import (
    BuiltinCatalogConfig,
    CatalogConfig,
    FileCatalogConfig,
    KnowledgeSearchConfig,
    LoggingConfig,
    ResolverConfig,
)

__all__ = [
    "BuiltinCatalogConfig",
    "CatalogConfig",
    "FileCatalogConfig",
    "KnowledgeSearchConfig",
    "LoggingConfig",
    "ResolverConfig",
    "create_catalog",
    "create_from_config",
    "create_random_source",
    "get_default_config_path",
    "load_config",
]
