"""Tests for SearchSession."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from knowledge_search.catalog import sample_catalog
from knowledge_search.data import Article, Catalog, Match, NoMatch, NoQuery
from knowledge_search.query_logger import QueryLogger
from knowledge_search.session import SearchSession


def _sequence(*values: float):
    """Random source returning the given values in order."""
    it: Iterator[float] = iter(values)
    return lambda: next(it)


class TestSearchSession:
    """Tests for the re-roll and stable selection policies."""

    @pytest.fixture
    def catalog(self) -> Catalog:
        return sample_catalog()

    def test_initial_state(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence())
        assert session.query == ""
        assert session.generation == 0
        assert isinstance(session.current, NoQuery)
        assert session.catalog is catalog
        assert not session.stable_selection

    def test_update_sets_current(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.0))
        result = session.update("refund")
        assert isinstance(result, Match)
        assert session.current is result
        assert session.query == "refund"
        assert session.generation == 1

    def test_outcomes_follow_query(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.0))
        assert isinstance(session.update("   "), NoQuery)
        assert isinstance(session.update("zzz"), NoMatch)
        assert isinstance(session.update("crm"), Match)
        assert isinstance(session.update(""), NoQuery)

    def test_rerolls_on_every_update_by_default(self, catalog: Catalog) -> None:
        # Same match set both times, but the article is drawn again
        session = SearchSession(catalog, _sequence(0.0, 0.9))
        first = session.update("e")
        second = session.update("e ")
        assert isinstance(first, Match)
        assert isinstance(second, Match)
        assert first.article.id == "KB-1001"
        assert second.article.id == "KB-1004"

    def test_stable_selection_keeps_matching_article(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.9), stable_selection=True)
        first = session.update("e")
        second = session.update("em")
        assert isinstance(first, Match)
        assert isinstance(second, Match)
        assert first.article.id == "KB-1004"
        assert second.article.id == "KB-1004"

    def test_stable_selection_redraws_when_article_drops_out(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.9, 0.0), stable_selection=True)
        session.update("e")
        result = session.update("refund")
        assert isinstance(result, Match)
        assert result.article.id == "KB-1002"

    def test_stable_selection_after_no_query(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.9, 0.0), stable_selection=True)
        session.update("e")
        session.update("")
        result = session.update("e")
        assert isinstance(result, Match)
        assert result.article.id == "KB-1001"

    def test_replace_catalog_reresolves(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.0, 0.0))
        session.update("refund")
        new_catalog = Catalog((Article(id="KB-9", title="Refund exceptions"),))
        result = session.replace_catalog(new_catalog)
        assert session.catalog is new_catalog
        assert isinstance(result, Match)
        assert result.article.id == "KB-9"
        assert session.generation == 2

    def test_replace_catalog_with_empty(self, catalog: Catalog) -> None:
        session = SearchSession(catalog, _sequence(0.0))
        session.update("refund")
        assert isinstance(session.replace_catalog(Catalog()), NoMatch)


class TestGenerations:
    """Only the newest evaluation may become current."""

    def test_stale_result_dropped(self) -> None:
        session = SearchSession(sample_catalog(), _sequence())
        old = session.begin("ref")
        new = session.begin("refund")
        assert not session.accept(old, NoMatch(query="ref"))
        assert isinstance(session.current, NoQuery)
        assert session.accept(new, NoMatch(query="refund"))
        assert session.current == NoMatch(query="refund")

    def test_generation_increments(self) -> None:
        session = SearchSession(sample_catalog(), _sequence(0.0, 0.0))
        session.update("e")
        session.update("e")
        assert session.generation == 2


class TestSessionLogging:
    """Tests for QueryLogger integration."""

    def test_logs_each_evaluation(self, tmp_path: Path) -> None:
        query_logger = QueryLogger(log_dir=tmp_path)
        session = SearchSession(sample_catalog(), _sequence(0.0), query_logger=query_logger)
        session.update("")
        session.update("zzz")
        session.update("Refund")
        path = session.close()

        assert path is not None
        data = json.loads(path.read_text())
        assert data["catalog_size"] == 4
        outcomes = [e["outcome"] for e in data["evaluations"]]
        assert outcomes == ["no_query", "no_match", "match"]
        assert data["evaluations"][2]["article_id"] == "KB-1002"
        assert data["evaluations"][2]["raw_query"] == "Refund"
        assert data["evaluations"][2]["query"] == "refund"

    def test_close_without_logger(self) -> None:
        session = SearchSession(sample_catalog(), _sequence())
        assert session.close() is None
