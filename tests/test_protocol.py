"""Tests for protocol compliance."""

from collections.abc import Sequence

from knowledge_search.data import Article, Catalog, Match
from knowledge_search.matcher import SubstringMatcher
from knowledge_search.session import SearchSession


def test_substring_matcher_matches_protocol() -> None:
    """Verify SubstringMatcher structurally matches the ArticleMatcher protocol."""
    matcher = SubstringMatcher()
    assert hasattr(matcher, "match")
    assert callable(matcher.match)


class ReversedMatcher:
    """A minimal implementation to verify protocol requirements."""

    def match(self, query: str, catalog: Sequence[Article]) -> list[Article]:
        return [a for a in reversed(catalog) if query in a.title.lower()]


def test_custom_matcher_plugs_into_session() -> None:
    """Any class with the right method signature satisfies the protocol."""
    catalog = Catalog((Article(id="a", title="Alpha"), Article(id="b", title="Alphabet")))
    session = SearchSession(catalog, lambda: 0.0, matcher=ReversedMatcher())
    result = session.update("alpha")
    assert isinstance(result, Match)
    assert result.article.id == "b"


def test_catalog_is_a_sequence() -> None:
    assert isinstance(Catalog(), Sequence)
