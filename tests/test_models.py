"""Tests for data models."""

import dataclasses

import pytest

from knowledge_search.data import Article, Catalog, CatalogError, Match, NoMatch, NoQuery


def test_article_minimal() -> None:
    article = Article(id="KB-1", title="Title")
    assert article.id == "KB-1"
    assert article.title == "Title"
    assert article.summary == ""
    assert article.body == ""
    assert article.tags == ()


def test_article_tags_stored_as_tuple() -> None:
    article = Article(id="KB-1", title="Title", tags=["a", "b"])  # type: ignore[arg-type]
    assert article.tags == ("a", "b")


def test_article_allows_duplicate_tags() -> None:
    article = Article(id="KB-1", title="Title", tags=("a", "a"))
    assert article.tags == ("a", "a")


def test_article_is_frozen() -> None:
    article = Article(id="KB-1", title="Title")
    with pytest.raises(dataclasses.FrozenInstanceError):
        article.title = "Other"  # type: ignore[misc]


# -- Catalog tests --


def test_catalog_preserves_order() -> None:
    a = Article(id="b", title="B")
    b = Article(id="a", title="A")
    catalog = Catalog((a, b))
    assert list(catalog) == [a, b]
    assert catalog[0] == a
    assert catalog[-1] == b
    assert len(catalog) == 2
    assert catalog.ids == ["b", "a"]


def test_catalog_accepts_list() -> None:
    catalog = Catalog([Article(id="x", title="X")])  # type: ignore[arg-type]
    assert isinstance(catalog.articles, tuple)


def test_catalog_get() -> None:
    article = Article(id="KB-1", title="Title")
    catalog = Catalog((article,))
    assert catalog.get("KB-1") is article
    assert catalog.get("missing") is None


def test_catalog_contains() -> None:
    article = Article(id="KB-1", title="Title")
    catalog = Catalog((article,))
    assert article in catalog
    assert Article(id="KB-1", title="Different") not in catalog
    assert "KB-1" not in catalog


def test_catalog_rejects_duplicate_ids() -> None:
    with pytest.raises(CatalogError, match="KB-1"):
        Catalog((Article(id="KB-1", title="A"), Article(id="KB-1", title="B")))


def test_catalog_error_is_value_error() -> None:
    assert issubclass(CatalogError, ValueError)


def test_empty_catalog() -> None:
    catalog = Catalog()
    assert len(catalog) == 0
    assert list(catalog) == []


def test_catalog_slice() -> None:
    articles = tuple(Article(id=str(i), title=str(i)) for i in range(3))
    catalog = Catalog(articles)
    assert catalog[1:] == articles[1:]


# -- Selection result tests --


def test_no_query_defaults() -> None:
    assert NoQuery().query == ""


def test_no_match_carries_query() -> None:
    result = NoMatch(query="zzz")
    assert result.query == "zzz"
    assert result.match_count == 0


def test_match_carries_article() -> None:
    article = Article(id="KB-1", title="Title")
    result = Match(article=article, query="title", match_count=3)
    assert result.article is article
    assert result.match_count == 3


def test_results_are_values() -> None:
    article = Article(id="KB-1", title="Title")
    assert Match(article=article, query="t") == Match(article=article, query="t")
    assert NoQuery() == NoQuery()
