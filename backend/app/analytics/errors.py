"""Failure kinds surfaced by post-event report generation."""

from datetime import datetime


class AnalyticsError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EventNotFound(AnalyticsError):
    def __init__(self, event_id):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class NotYetAvailable(AnalyticsError):
    """The event is still running and not close enough to its end; retry later or force."""

    def __init__(self, event_id, end_date: datetime, days_remaining: int):
        super().__init__(
            "Cannot generate post-event report for an active event that is not near conclusion "
            f"(ends in {days_remaining} day{'s' if days_remaining != 1 else ''})"
        )
        self.event_id = event_id
        self.end_date = end_date
        self.days_remaining = days_remaining


class UpstreamReadFailure(AnalyticsError):
    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Failed to read {source}: {cause}")
        self.source = source
        self.cause = cause
