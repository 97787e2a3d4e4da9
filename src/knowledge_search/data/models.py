"""Core data models for knowledge search."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload


class CatalogError(ValueError):
    """Raised when catalog data violates the catalog invariants."""


@dataclass(frozen=True)
class Article:
    """A knowledge-base article."""

    id: str
    title: str
    summary: str = ""
    body: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of tags but store an immutable tuple
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))


@dataclass(frozen=True)
class Catalog(Sequence[Article]):
    """An immutable, ordered collection of articles with unique ids.

    Args:
        articles: Articles in display order.

    Raises:
        CatalogError: If two articles share an id.
    """

    articles: tuple[Article, ...] = ()
    _index: dict[str, Article] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.articles, tuple):
            object.__setattr__(self, "articles", tuple(self.articles))

        index: dict[str, Article] = {}
        duplicates: list[str] = []
        for article in self.articles:
            if article.id in index:
                duplicates.append(article.id)
                continue
            index[article.id] = article
        if duplicates:
            msg = f"Duplicate article ids in catalog: {', '.join(sorted(set(duplicates)))}"
            raise CatalogError(msg)
        object.__setattr__(self, "_index", index)

    @overload
    def __getitem__(self, index: int) -> Article: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Article, ...]: ...

    def __getitem__(self, index: int | slice) -> Article | tuple[Article, ...]:
        return self.articles[index]

    def __len__(self) -> int:
        return len(self.articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self.articles)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, Article) and self._index.get(value.id) == value

    def get(self, article_id: str) -> Article | None:
        """Look up an article by id, or None if absent."""
        return self._index.get(article_id)

    @property
    def ids(self) -> list[str]:
        """Article ids in catalog order."""
        return [a.id for a in self.articles]


# ============================================================
# Selection results
# ============================================================


@dataclass(frozen=True)
class NoQuery:
    """The query was empty after normalization."""

    query: str = ""


@dataclass(frozen=True)
class NoMatch:
    """The query was non-empty but no article matched it."""

    query: str
    match_count: int = 0


@dataclass(frozen=True)
class Match:
    """One article drawn from the matching subsequence."""

    article: Article
    query: str = ""
    match_count: int = 1  # size of the subsequence the article was drawn from


SelectionResult = NoQuery | NoMatch | Match
