"""Read-side collaborator for report generation.

Each list call returns the full snapshot for one event. The SQL
implementation opens its own session per call so the report's parallel reads
never share an ``AsyncSession``.
"""

import uuid
from typing import Protocol

import structlog
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.analytics.errors import UpstreamReadFailure
from app.events.models import Alert, Event, Feedback, Issue, SentimentRecord
from app.models.base import ensure_utc

logger = structlog.get_logger()


class ReportRepository(Protocol):
    async def find_event(self, event_id: uuid.UUID) -> Event | None: ...

    async def list_feedback(self, event_id: uuid.UUID) -> list[Feedback]: ...

    async def list_alerts(self, event_id: uuid.UUID) -> list[Alert]: ...

    async def list_issues(self, event_id: uuid.UUID) -> list[Issue]: ...

    async def list_sentiment_records(self, event_id: uuid.UUID, timeframe: str) -> list[SentimentRecord]: ...


def _tz_fix(rows: list, *fields: str) -> list:
    for row in rows:
        for field in fields:
            setattr(row, field, ensure_utc(getattr(row, field)))
    return rows


class SqlReportRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def _fetch(self, source: str, event_id: uuid.UUID, stmt: Select) -> list:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("upstream_read_failed", source=source, event_id=str(event_id), error=str(exc))
            raise UpstreamReadFailure(source, exc) from exc

    async def find_event(self, event_id: uuid.UUID) -> Event | None:
        rows = await self._fetch("events", event_id, select(Event).where(Event.id == event_id))
        if not rows:
            return None
        return _tz_fix(rows, "start_date", "end_date")[0]

    async def list_feedback(self, event_id: uuid.UUID) -> list[Feedback]:
        rows = await self._fetch(
            "feedback", event_id,
            select(Feedback).where(Feedback.event_id == event_id).order_by(Feedback.created_at.asc()),
        )
        return _tz_fix(rows, "created_at")

    async def list_alerts(self, event_id: uuid.UUID) -> list[Alert]:
        rows = await self._fetch(
            "alerts", event_id,
            select(Alert).where(Alert.event_id == event_id).order_by(Alert.created_at.asc()),
        )
        return _tz_fix(rows, "created_at", "resolved_at")

    async def list_issues(self, event_id: uuid.UUID) -> list[Issue]:
        rows = await self._fetch(
            "issues", event_id,
            select(Issue).where(Issue.event_id == event_id).order_by(Issue.created_at.asc()),
        )
        return _tz_fix(rows, "created_at", "resolved_at")

    async def list_sentiment_records(self, event_id: uuid.UUID, timeframe: str) -> list[SentimentRecord]:
        rows = await self._fetch(
            f"sentiment_records[{timeframe}]", event_id,
            select(SentimentRecord)
            .where(SentimentRecord.event_id == event_id, SentimentRecord.timeframe == timeframe)
            .order_by(SentimentRecord.timestamp.asc()),
        )
        return _tz_fix(rows, "timestamp")
