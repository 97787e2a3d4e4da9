"""Catalog loading from YAML or JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from knowledge_search.data import Article, Catalog, CatalogError

logger = logging.getLogger(__name__)


class ArticleRecord(BaseModel):
    """Validated on-disk representation of an article."""

    id: str = Field(min_length=1)
    title: str
    summary: str = ""
    body: str = ""
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}

    def to_article(self) -> Article:
        return Article(
            id=self.id,
            title=self.title,
            summary=self.summary,
            body=self.body,
            tags=tuple(self.tags),
        )


def _extract_records(raw: Any) -> list[Any]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("articles", [])
    if not isinstance(raw, list):
        msg = f"Catalog must be a list of articles or a mapping with 'articles', got {type(raw).__name__}"
        raise CatalogError(msg)
    return raw


def parse_catalog(raw: Any) -> Catalog:
    """Build a catalog from already-parsed YAML/JSON data.

    Args:
        raw: A list of article mappings, or a mapping with an ``articles`` list.

    Returns:
        Validated Catalog.

    Raises:
        CatalogError: If the data is malformed or ids are not unique.
    """
    articles: list[Article] = []
    for position, item in enumerate(_extract_records(raw)):
        try:
            record = ArticleRecord.model_validate(item)
        except ValidationError as e:
            msg = f"Invalid article at position {position}: {e}"
            raise CatalogError(msg) from e
        articles.append(record.to_article())
    return Catalog(tuple(articles))


def load_catalog(path: Path | str) -> Catalog:
    """Load a catalog from a YAML file (JSON files are valid YAML).

    Args:
        path: Path to the catalog file.

    Returns:
        Validated Catalog.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        CatalogError: If the file contents are invalid.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Could not parse catalog file {path}: {e}"
            raise CatalogError(msg) from e

    catalog = parse_catalog(raw)
    logger.info(f"Loaded {len(catalog)} articles from {path}")
    return catalog
