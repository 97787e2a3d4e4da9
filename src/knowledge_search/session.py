"""Interactive search session: the driver that re-resolves on every change."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from knowledge_search.data import Catalog, Match, NoQuery, SelectionResult
from knowledge_search.matcher.base import ArticleMatcher
from knowledge_search.query_logger import QueryLogger
from knowledge_search.resolver import RandomSource, resolve

logger = logging.getLogger(__name__)


class SearchSession:
    """Owns the current query and re-runs the resolver whenever it changes.

    Every evaluation gets a generation number. Only the result of the most
    recent generation is accepted as current, so a result computed for a
    superseded query is dropped even if it arrives late.

    By default every evaluation draws a fresh article, even when the matching
    set is unchanged. With ``stable_selection=True`` the displayed article is
    kept as long as it still matches.

    Args:
        catalog: Articles to search.
        random_source: Uniform float generator in ``[0, 1)``.
        stable_selection: Keep the current article while it still matches.
        matcher: Matching strategy passed through to the resolver.
        query_logger: Optional QueryLogger recording each evaluation.
    """

    def __init__(
        self,
        catalog: Catalog,
        random_source: RandomSource,
        *,
        stable_selection: bool = False,
        matcher: ArticleMatcher | None = None,
        query_logger: QueryLogger | None = None,
    ) -> None:
        self._catalog = catalog
        self._random_source = random_source
        self._stable_selection = stable_selection
        self._matcher = matcher
        self._query_logger = query_logger
        self._query = ""
        self._generation = 0
        self._current: SelectionResult = NoQuery()

        if self._query_logger:
            self._query_logger.start_session(catalog)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def query(self) -> str:
        """The raw query of the latest evaluation."""
        return self._query

    @property
    def current(self) -> SelectionResult:
        """The result currently on display."""
        return self._current

    @property
    def generation(self) -> int:
        """Number of the latest evaluation (0 before the first)."""
        return self._generation

    @property
    def stable_selection(self) -> bool:
        return self._stable_selection

    def begin(self, raw_query: str) -> int:
        """Register a new query and return its generation number."""
        self._generation += 1
        self._query = raw_query
        return self._generation

    def accept(self, generation: int, result: SelectionResult) -> bool:
        """Make ``result`` current if it belongs to the latest generation.

        Returns:
            True if the result was accepted, False if it was stale.
        """
        if generation != self._generation:
            logger.debug(f"Dropping stale result for generation {generation}")
            return False
        self._current = result
        return True

    def update(self, raw_query: str) -> SelectionResult:
        """Resolve a new raw query and make the result current.

        Args:
            raw_query: Query exactly as typed.

        Returns:
            The new current selection result.
        """
        generation = self.begin(raw_query)
        result = self._evaluate(generation, raw_query)
        self.accept(generation, result)
        return self._current

    def replace_catalog(self, catalog: Catalog) -> SelectionResult:
        """Swap in a new catalog and re-resolve the current query against it."""
        logger.info(f"Catalog replaced: {len(self._catalog)} -> {len(catalog)} articles")
        self._catalog = catalog
        return self.update(self._query)

    def close(self) -> Path | None:
        """Finish the session log, returning the written path if any."""
        if self._query_logger:
            return self._query_logger.finish_session()
        return None

    def _evaluate(self, generation: int, raw_query: str) -> SelectionResult:
        pinned = None
        if self._stable_selection and isinstance(self._current, Match):
            pinned = self._current.article

        t0 = time.monotonic()
        result = resolve(
            self._catalog,
            raw_query,
            self._random_source,
            pinned=pinned,
            matcher=self._matcher,
        )
        duration = time.monotonic() - t0

        if self._query_logger:
            self._query_logger.log_evaluation(generation, raw_query, result, duration)
        return result
