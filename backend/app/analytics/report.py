"""Post-event report generation.

``generate_report`` gates on availability, fans the four source aggregations
out in parallel, and hands their results to ``assemble_report``. Assembly is
a pure function of the event and the aggregates, so two runs over unchanged
records differ only in ``report_generated_at``.
"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone

from app.analytics.alerts import analyze_alerts
from app.analytics.availability import NEAR_END_WINDOW, check_availability
from app.analytics.errors import EventNotFound, NotYetAvailable
from app.analytics.feedback import analyze_feedback
from app.analytics.insights import generate_insights
from app.analytics.issues import analyze_issues
from app.analytics.recommendations import generate_recommendations
from app.analytics.repository import ReportRepository
from app.analytics.sentiment import analyze_sentiment_trends
from app.analytics.summary import generate_executive_summary
from app.events.models import Event


def event_summary(event: Event) -> dict:
    return {
        "id": str(event.id),
        "name": event.name,
        "description": event.description,
        "start_date": event.start_date,
        "end_date": event.end_date,
        "location": event.location,
    }


def assemble_report(
    event: Event,
    feedback: dict,
    alerts: dict,
    issues: dict,
    sentiment: dict,
    generated_at: datetime,
    event_ended: bool,
) -> dict:
    return {
        "event": event_summary(event),
        "report_generated_at": generated_at,
        "event_status": "completed" if event_ended else "active",
        "summary": generate_executive_summary(feedback, alerts, issues),
        "feedback": feedback,
        "alerts": alerts,
        "issues": issues,
        "sentiment": sentiment,
        "insights": generate_insights(event, feedback, alerts, issues, sentiment),
        "recommendations": generate_recommendations(feedback, alerts, issues, sentiment),
    }


async def _feedback_section(repository: ReportRepository, event_id: uuid.UUID) -> dict:
    return analyze_feedback(await repository.list_feedback(event_id))


async def _alerts_section(repository: ReportRepository, event_id: uuid.UUID) -> dict:
    return analyze_alerts(await repository.list_alerts(event_id))


async def _issues_section(repository: ReportRepository, event_id: uuid.UUID) -> dict:
    return analyze_issues(await repository.list_issues(event_id))


async def _sentiment_section(repository: ReportRepository, event: Event) -> dict:
    hourly = await repository.list_sentiment_records(event.id, "hour")
    daily = await repository.list_sentiment_records(event.id, "day")
    return analyze_sentiment_trends(event.start_date, event.end_date, hourly, daily)


async def generate_report(
    repository: ReportRepository,
    event_id: uuid.UUID,
    force: bool = False,
    now: datetime | None = None,
    near_end_window: timedelta = NEAR_END_WINDOW,
) -> dict:
    """Build the full post-event report for ``event_id``.

    Raises EventNotFound if the event does not exist and NotYetAvailable if
    the event is still running (unless ``force``). A failure in any of the
    parallel reads propagates as-is after the other reads are
    cancelled; there is no partial report.
    """
    event = await repository.find_event(event_id)
    if event is None:
        raise EventNotFound(event_id)

    now = now or datetime.now(timezone.utc)
    availability = check_availability(event.end_date, now, force=force, window=near_end_window)
    if not availability.allowed:
        raise NotYetAvailable(event_id, availability.end_date, availability.days_remaining)

    tasks = [
        asyncio.create_task(_feedback_section(repository, event.id)),
        asyncio.create_task(_alerts_section(repository, event.id)),
        asyncio.create_task(_issues_section(repository, event.id)),
        asyncio.create_task(_sentiment_section(repository, event)),
    ]
    try:
        feedback, alerts, issues, sentiment = await asyncio.gather(*tasks)
    finally:
        # Cancel and drain whatever is still reading after a failure
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    return assemble_report(
        event, feedback, alerts, issues, sentiment,
        generated_at=now,
        event_ended=availability.event_ended,
    )
