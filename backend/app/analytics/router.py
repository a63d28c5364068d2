from datetime import datetime, timedelta, timezone
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.analytics.availability import check_availability
from app.analytics.errors import EventNotFound, NotYetAvailable, UpstreamReadFailure
from app.analytics.report import generate_report
from app.analytics.repository import ReportRepository, SqlReportRepository
from app.analytics.schemas import (
    PostEventReport,
    ReportAvailability,
    ReportInsights,
    ReportRecommendations,
)
from app.config import settings
from app.database import get_session_factory
from app.dependencies import get_owned_event
from app.events.models import Event

logger = structlog.get_logger()

router = APIRouter(prefix="/analytics", tags=["analytics"])

EXPORT_FORMATS = ("json",)


def get_report_repository(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> ReportRepository:
    return SqlReportRepository(session_factory)


async def _build_report(event: Event, force: bool, repository: ReportRepository) -> dict:
    try:
        return await generate_report(
            repository,
            event.id,
            force=force,
            near_end_window=timedelta(hours=settings.REPORT_NEAR_END_HOURS),
        )
    except EventNotFound as exc:
        logger.warning("post_event_report_event_missing", event_id=str(event.id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except NotYetAvailable as exc:
        logger.info("post_event_report_not_available", event_id=str(event.id), days_remaining=exc.days_remaining)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except UpstreamReadFailure as exc:
        logger.error("post_event_report_failed", event_id=str(event.id), source=exc.source, error=str(exc.cause))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message) from exc


@router.get("/post-event/{event_id}", response_model=PostEventReport)
async def post_event_report(
    force: bool = Query(False),
    event: Event = Depends(get_owned_event),
    repository: ReportRepository = Depends(get_report_repository),
):
    return await _build_report(event, force, repository)


@router.get("/post-event/{event_id}/availability", response_model=ReportAvailability)
async def report_availability(event: Event = Depends(get_owned_event)):
    availability = check_availability(
        event.end_date,
        datetime.now(timezone.utc),
        window=timedelta(hours=settings.REPORT_NEAR_END_HOURS),
    )
    return ReportAvailability(
        available=availability.available,
        event_ended=availability.event_ended,
        near_end=availability.near_end,
        days_remaining=availability.days_remaining,
        end_date=availability.end_date,
    )


@router.get("/post-event/{event_id}/insights", response_model=ReportInsights)
async def report_insights(
    force: bool = Query(False),
    event: Event = Depends(get_owned_event),
    repository: ReportRepository = Depends(get_report_repository),
):
    report = await _build_report(event, force, repository)
    return {"event": report["event"], "insights": report["insights"]}


@router.get("/post-event/{event_id}/recommendations", response_model=ReportRecommendations)
async def report_recommendations(
    force: bool = Query(False),
    event: Event = Depends(get_owned_event),
    repository: ReportRepository = Depends(get_report_repository),
):
    report = await _build_report(event, force, repository)
    return {"event": report["event"], "recommendations": report["recommendations"]}


@router.get("/post-event/{event_id}/export", response_model=PostEventReport)
async def export_report(
    format: str = Query("json"),
    force: bool = Query(False),
    event: Event = Depends(get_owned_event),
    repository: ReportRepository = Depends(get_report_repository),
):
    report = await _build_report(event, force, repository)
    if format not in EXPORT_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Export format '{format}' is not supported yet. Please use 'json' format.",
        )
    return report
