"""Query resolution: normalize, match, and select a single article.

The resolver is a pure function of its inputs. Randomness is injected as a
zero-argument callable returning a float in ``[0, 1)``, so callers decide
whether selection is seeded, stubbed, or truly random.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from knowledge_search.data import Article, Match, NoMatch, NoQuery, SelectionResult
from knowledge_search.matcher.base import ArticleMatcher
from knowledge_search.matcher.substring import SubstringMatcher
from knowledge_search.query.normalizer import normalize_query

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

_DEFAULT_MATCHER = SubstringMatcher()


def pick_index(random_source: RandomSource, size: int) -> int:
    """Map a uniform draw in ``[0, 1)`` onto an index in ``[0, size)``.

    Draws outside the unit interval are clamped to the first or last index.

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        msg = f"Cannot pick from an empty sequence (size={size})"
        raise ValueError(msg)
    index = math.floor(random_source() * size)
    return min(max(index, 0), size - 1)


def resolve(
    catalog: Sequence[Article],
    raw_query: str,
    random_source: RandomSource,
    *,
    pinned: Article | None = None,
    matcher: ArticleMatcher | None = None,
) -> SelectionResult:
    """Resolve a raw query against a catalog to a single selection result.

    Decision procedure:
        1. Normalize the query. Empty → ``NoQuery``.
        2. Match it against the catalog. No matches → ``NoMatch``.
        3. Draw one matching article uniformly at random → ``Match``.

    Args:
        catalog: Articles to search, in display order.
        raw_query: Query exactly as typed.
        random_source: Uniform float generator in ``[0, 1)``.
        pinned: Previously displayed article. When given and still present
            (by id) in the matching subsequence, it is returned without
            drawing. Leave as None for the default re-roll behavior.
        matcher: Matching strategy. Defaults to ``SubstringMatcher``.

    Returns:
        ``NoQuery``, ``NoMatch`` or ``Match``.
    """
    query = normalize_query(raw_query)
    if not query:
        return NoQuery()

    matches = (matcher or _DEFAULT_MATCHER).match(query, catalog)
    if not matches:
        logger.debug(f"No match for query {query!r}")
        return NoMatch(query=query)

    if pinned is not None:
        for article in matches:
            if article.id == pinned.id:
                logger.debug(f"Keeping pinned article {article.id} for query {query!r}")
                return Match(article=article, query=query, match_count=len(matches))

    article = matches[pick_index(random_source, len(matches))]
    logger.debug(f"Selected {article.id} from {len(matches)} matches for query {query!r}")
    return Match(article=article, query=query, match_count=len(matches))
