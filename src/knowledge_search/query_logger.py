"""Query logger for recording search session evaluations to JSON files."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from knowledge_search.data import Article, Match, NoMatch, NoQuery, SelectionResult


class EvaluationRecord(BaseModel):
    """Record of a single resolver evaluation."""

    generation: int
    raw_query: str
    query: str
    outcome: str
    article_id: str | None = None
    match_count: int = 0
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete search session."""

    session_id: str
    catalog_size: int
    catalog_ids: list[str] = []
    started_at: str
    completed_at: str | None = None
    evaluations: list[EvaluationRecord] = []


def _outcome(result: SelectionResult) -> str:
    if isinstance(result, NoQuery):
        return "no_query"
    if isinstance(result, NoMatch):
        return "no_match"
    return "match"


class QueryLogger:
    """Accumulates evaluation records and writes one JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    @property
    def record(self) -> SessionRecord | None:
        """The session currently being recorded, if any."""
        return self._record

    def start_session(self, catalog: Sequence[Article]) -> None:
        """Initialize a new session record.

        Args:
            catalog: The catalog the session searches.
        """
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            catalog_size=len(catalog),
            catalog_ids=[a.id for a in catalog],
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_evaluation(
        self,
        generation: int,
        raw_query: str,
        result: SelectionResult,
        duration_seconds: float,
    ) -> None:
        """Append an evaluation record to the current session.

        Args:
            generation: Evaluation number assigned by the session.
            raw_query: Query exactly as typed.
            result: Selection result produced for the query.
            duration_seconds: Wall-clock time of the evaluation.
        """
        if not self._enabled or self._record is None:
            return

        self._record.evaluations.append(
            EvaluationRecord(
                generation=generation,
                raw_query=raw_query,
                query=result.query,
                outcome=_outcome(result),
                article_id=result.article.id if isinstance(result, Match) else None,
                match_count=0 if isinstance(result, NoQuery) else result.match_count,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 6),
            )
        )

    def finish_session(self) -> Path | None:
        """Write the session record to a JSON file.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json (colons → dashes, no microseconds/tz)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
