"""Factory functions to create components from configuration."""

import random
from pathlib import Path

from knowledge_search.catalog import load_catalog, sample_catalog
from knowledge_search.config.models import (
    BuiltinCatalogConfig,
    FileCatalogConfig,
    KnowledgeSearchConfig,
    ResolverConfig,
)
from knowledge_search.data import Catalog
from knowledge_search.query_logger import QueryLogger
from knowledge_search.resolver import RandomSource
from knowledge_search.session import SearchSession


def create_catalog(config: BuiltinCatalogConfig | FileCatalogConfig) -> Catalog:
    """Create a catalog from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, BuiltinCatalogConfig):
        return sample_catalog()
    if isinstance(config, FileCatalogConfig):
        return load_catalog(Path(config.path))
    msg = f"Unknown catalog config type: {type(config)}"
    raise ValueError(msg)


def create_random_source(config: ResolverConfig) -> RandomSource:
    """Create a uniform random source, seeded when the config has a seed."""
    return random.Random(config.seed).random


def create_from_config(
    config: KnowledgeSearchConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    catalog_override: Catalog | None = None,
) -> tuple[SearchSession, QueryLogger | None]:
    """Create a ready-to-use search session from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        catalog_override: Use this catalog instead of the configured one.

    Returns:
        Tuple of (session, query_logger).
        query_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    query_logger: QueryLogger | None = None
    if log_enabled:
        query_logger = QueryLogger(log_dir=log_dir, enabled=True)

    catalog = catalog_override if catalog_override is not None else create_catalog(config.catalog)
    session = SearchSession(
        catalog,
        create_random_source(config.resolver),
        stable_selection=config.resolver.stable_selection,
        query_logger=query_logger,
    )
    return (session, query_logger)
