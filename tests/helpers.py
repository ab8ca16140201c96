"""Shared fakes for timezone lookups and fixed clocks."""

from datetime import datetime, timedelta, timezone, tzinfo

from eventclock.core.domain_types import TimezoneCandidate
from eventclock.core.errors import TimezoneNotFoundError

# South Africa Standard Time has no seasonal shift, so a fixed offset is exact.
SAST = timezone(timedelta(hours=2), "SAST")


class FakeZoneFinder:
    """Finder backed by a dict; records every candidate it is asked for."""

    def __init__(self, zones: dict[str, tzinfo] | None = None):
        self.zones = zones or {}
        self.calls: list[TimezoneCandidate] = []

    def __call__(self, candidate: TimezoneCandidate) -> tzinfo:
        self.calls.append(candidate)
        zone = self.zones.get(candidate.key)
        if zone is None:
            raise TimezoneNotFoundError(candidate.key, "not in fake database")
        return zone


def fixed_clock(instant: datetime):
    """Clock callable that always returns the same instant."""
    return lambda: instant
