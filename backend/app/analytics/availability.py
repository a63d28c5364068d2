import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.models.base import ensure_utc

NEAR_END_WINDOW = timedelta(hours=24)


@dataclass(frozen=True)
class Availability:
    event_ended: bool
    near_end: bool
    forced: bool
    days_remaining: int
    end_date: datetime

    @property
    def available(self) -> bool:
        """Whether a report may be generated without forcing."""
        return self.event_ended or self.near_end

    @property
    def allowed(self) -> bool:
        return self.available or self.forced


def check_availability(
    end_date: datetime,
    now: datetime,
    force: bool = False,
    window: timedelta = NEAR_END_WINDOW,
) -> Availability:
    """Post-event reports open once the event has ended or is within ``window`` of ending."""
    end_date = ensure_utc(end_date)
    now = ensure_utc(now)

    event_ended = now > end_date
    near_end = abs(now - end_date) < window
    days_remaining = 0 if event_ended else math.ceil((end_date - now) / timedelta(days=1))

    return Availability(
        event_ended=event_ended,
        near_end=near_end,
        forced=force,
        days_remaining=days_remaining,
        end_date=end_date,
    )
