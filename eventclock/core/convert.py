"""Instant Conversion - absolute instants to reference-zone wall-clock values.

Invariants:
    - normalize_instant() is the only place zone tagging is decided
    - Naive input is force-interpreted as UTC with the same field values
    - Aware input is converted to UTC (same instant, never re-labelled)
    - to_wall_clock() output is naive and deterministic for a given instant and zone
    - Offset rules come from the zone itself (seasonal shifts honoured when present)
    - Instants whose shifted value leaves the datetime range clamp to
      datetime.min / datetime.max instead of raising

Design Decisions:
    - Normalization at the conversion boundary: stored event fields carry no
      zone, so rejecting them would push the same fix into every caller
    - Naive output: downstream code compares against stored wall-clock fields
    - parse_instant() owns text input so callers outside Python (HTTP) get
      the same naive-means-UTC rule
"""

from datetime import datetime, timezone, tzinfo

from eventclock.core.domain_types import AbsoluteInstant, LocalWallClock
from eventclock.core.errors import InvalidInstantError


def _clamped(value: datetime) -> datetime:
    """Range edge nearest to value (naive)."""
    return datetime.max if value.year == datetime.max.year else datetime.min


def parse_instant(text: str) -> datetime:
    """Parse ISO 8601 text; a trailing Z means UTC, no offset stays naive."""
    raw = text.strip()
    if raw[-1:] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidInstantError(text, reason=f"Not an ISO 8601 instant: {text!r}") from exc


def normalize_instant(value: datetime) -> AbsoluteInstant:
    """Return value as a UTC-aware instant.

    A naive datetime is taken as UTC as-is. A datetime whose tzinfo reports
    no offset is treated the same way. Anything that is not a datetime
    raises InvalidInstantError.
    """
    if not isinstance(value, datetime):
        raise InvalidInstantError(value)
    if value.tzinfo is None or value.utcoffset() is None:
        return AbsoluteInstant(value.replace(tzinfo=timezone.utc))
    try:
        return AbsoluteInstant(value.astimezone(timezone.utc))
    except OverflowError:
        return AbsoluteInstant(_clamped(value).replace(tzinfo=timezone.utc))


def to_wall_clock(value: datetime, zone: tzinfo) -> LocalWallClock:
    """Convert an instant to the naive wall clock an observer in zone would see."""
    instant = normalize_instant(value)
    try:
        return LocalWallClock(instant.astimezone(zone).replace(tzinfo=None))
    except OverflowError:
        return LocalWallClock(_clamped(instant))
