"""Clock Schemas - response bodies for the clock and health routes.

Invariants:
    - TimezoneInfo mirrors ReferenceTimezone without exposing the tzinfo object
"""

from datetime import date, datetime

from pydantic import BaseModel

from eventclock.core.domain_types import ReferenceTimezone, TimezoneNamespace


class TimezoneInfo(BaseModel):
    key: str
    namespace: TimezoneNamespace
    is_fallback: bool

    @classmethod
    def from_reference(cls, reference: ReferenceTimezone) -> "TimezoneInfo":
        return cls(
            key=reference.key,
            namespace=reference.namespace,
            is_fallback=reference.is_fallback,
        )


class ClockSnapshot(BaseModel):
    """Current time as seen by the event clock."""
    utc_now: datetime
    event_now: datetime
    event_today: date
    timezone: TimezoneInfo


class ConvertedInstant(BaseModel):
    instant: datetime
    event_local: datetime
