"""Domain Types - rich types for instants, wall-clock values, and timezone resolution.

Invariants:
    - AbsoluteInstant is always UTC-aware; LocalWallClock is always naive
    - ReferenceTimezone and TimezoneCandidate are frozen (never mutated after creation)
    - Identifier namespaces encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for instants: zero runtime cost, callers
      keep plain datetime values
    - ZoneLookup as a result value: a failed lookup is data, not control flow
"""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import NewType

from eventclock.core.errors import TimezoneNotFoundError


# ─── Time Value Types ────────────────────────────────────────────

AbsoluteInstant = NewType("AbsoluteInstant", datetime)   # tzinfo is UTC
LocalWallClock = NewType("LocalWallClock", datetime)     # naive, reference zone
LocalDate = NewType("LocalDate", date)


# ─── Enums ───────────────────────────────────────────────────────

class TimezoneNamespace(str, Enum):
    """Naming convention a timezone identifier belongs to."""
    WINDOWS = "windows"
    IANA = "iana"
    UTC = "utc"


# ─── Resolution Types ────────────────────────────────────────────

@dataclass(frozen=True)
class TimezoneCandidate:
    """One entry of the fallback chain."""
    key: str
    namespace: TimezoneNamespace


@dataclass(frozen=True)
class ZoneLookup:
    """Outcome of looking up one candidate in the host database."""
    candidate: TimezoneCandidate
    zone: tzinfo | None = None
    error: TimezoneNotFoundError | None = None

    @property
    def ok(self) -> bool:
        return self.zone is not None


@dataclass(frozen=True)
class ReferenceTimezone:
    """The resolved, process-wide timezone used for all event wall-clock values."""
    zone: tzinfo
    key: str
    namespace: TimezoneNamespace

    @property
    def is_fallback(self) -> bool:
        """True when neither named identifier resolved and UTC is in use."""
        return self.namespace is TimezoneNamespace.UTC
