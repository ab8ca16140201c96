"""Clock Routes - read the event clock and convert instants over HTTP.

Invariants:
    - GET /clock/ reads utc_now once and derives event_now/event_today from it
    - GET /clock/convert treats an ISO instant without offset as UTC
    - Unparseable instants raise InvalidInstantError (400 via the domain error handler)
"""

from fastapi import APIRouter, Depends, Query

from eventclock.clock import TimeNormalizer, default_normalizer
from eventclock.core.convert import normalize_instant, parse_instant
from eventclock.schemas.clock import ClockSnapshot, ConvertedInstant, TimezoneInfo

router = APIRouter(prefix="/api/v1/clock", tags=["clock"])


@router.get("/", response_model=ClockSnapshot)
async def read_clock(normalizer: TimeNormalizer = Depends(default_normalizer)):
    """Current UTC instant, event-local time and date, and the zone in use."""
    now = normalizer.utc_now()
    event_now = normalizer.to_event_local(now)
    return ClockSnapshot(
        utc_now=now,
        event_now=event_now,
        event_today=event_now.date(),
        timezone=TimezoneInfo.from_reference(normalizer.reference_timezone),
    )


@router.get("/convert", response_model=ConvertedInstant)
async def convert_instant(
    instant: str = Query(..., description="ISO 8601 instant; no offset means UTC"),
    normalizer: TimeNormalizer = Depends(default_normalizer),
):
    """Convert an instant to the event wall clock."""
    value = parse_instant(instant)
    return ConvertedInstant(
        instant=normalize_instant(value),
        event_local=normalizer.to_event_local(value),
    )
