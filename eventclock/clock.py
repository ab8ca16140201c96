"""Event Clock - "now" and "today" in the reference timezone, plus instant conversion.

Event start/end dates and times are stored without timezone context. Every
lifecycle check interprets them in the reference timezone, so all callers
read the clock through this module instead of datetime.now().

Invariants:
    - utc_now() is always UTC-aware; event_now() and to_event_local() are always naive
    - The reference timezone resolves at most once per ReferenceTimezoneCache;
      concurrent first callers all receive the same instance
    - No operation here raises for a datetime input; lookup failures end in
      the UTC fallback
    - The resolved zone is never refreshed, even if the host database changes
    - Invalid settings never abort resolution; the fallback warning stays on

Design Decisions:
    - Write-once holder with double-checked locking over lru_cache: lru_cache
      may run the lookup twice under a race
    - TimeNormalizer takes the clock and cache as arguments so tests and
      consumers can pin "now" without patching datetime
    - Module-level functions delegate to one default TimeNormalizer
"""

import logging
import threading
from collections.abc import Callable
from datetime import date, datetime, timezone

from pydantic import ValidationError

from eventclock.config import get_settings
from eventclock.core.convert import to_wall_clock
from eventclock.core.domain_types import (
    AbsoluteInstant, LocalDate, LocalWallClock, ReferenceTimezone,
)
from eventclock.core.resolve_timezone import ZoneFinder, resolve_reference_timezone
from eventclock.infrastructure.tz_database import find_system_zone

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def system_utc_now() -> AbsoluteInstant:
    """Read the host clock as an absolute instant."""
    return AbsoluteInstant(datetime.now(timezone.utc))


def _fallback_warning_enabled() -> bool:
    """Settings flag for the fallback warning; invalid settings keep it on."""
    try:
        return get_settings().warn_on_timezone_fallback
    except ValidationError as exc:
        logger.warning(f"Invalid event clock settings, fallback warning stays on: {exc}")
        return True


class ReferenceTimezoneCache:
    """Resolves the reference timezone once and hands out the same value afterwards.

    warn_on_fallback=None reads the flag from settings at resolution time.
    """

    def __init__(
        self,
        find: ZoneFinder = find_system_zone,
        warn_on_fallback: bool | None = None,
    ):
        self._find = find
        self._warn_on_fallback = warn_on_fallback
        self._lock = threading.Lock()
        self._value: ReferenceTimezone | None = None

    @property
    def resolved(self) -> bool:
        return self._value is not None

    def get(self) -> ReferenceTimezone:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                warn = self._warn_on_fallback
                if warn is None:
                    warn = _fallback_warning_enabled()
                self._value = resolve_reference_timezone(self._find)
                self._log_resolution(self._value, warn)
            return self._value

    @staticmethod
    def _log_resolution(reference: ReferenceTimezone, warn_on_fallback: bool) -> None:
        log_extra = {
            "timezone_key": reference.key,
            "timezone_namespace": reference.namespace.value,
        }
        if reference.is_fallback and warn_on_fallback:
            logger.warning(
                "Reference timezone unavailable on this host, event times use UTC",
                extra=log_extra,
            )
        else:
            logger.info(f"Reference timezone resolved: {reference.key}", extra=log_extra)


class TimeNormalizer:
    """Supplies event-local "now", "today" and conversions for one clock and cache."""

    def __init__(
        self,
        clock: Clock = system_utc_now,
        cache: ReferenceTimezoneCache | None = None,
    ):
        self._clock = clock
        self._cache = cache or ReferenceTimezoneCache()

    @property
    def reference_timezone(self) -> ReferenceTimezone:
        return self._cache.get()

    def utc_now(self) -> AbsoluteInstant:
        return AbsoluteInstant(self._clock())

    def to_event_local(self, value: datetime) -> LocalWallClock:
        """Convert an instant to reference-zone wall clock.

        Naive values are taken as UTC, matching how event timestamps are persisted.
        """
        return to_wall_clock(value, self._cache.get().zone)

    def event_now(self) -> LocalWallClock:
        return self.to_event_local(self.utc_now())

    def event_today(self) -> LocalDate:
        return LocalDate(self.event_now().date())


_default = TimeNormalizer()


def default_normalizer() -> TimeNormalizer:
    return _default


def reference_timezone() -> ReferenceTimezone:
    """The process-wide reference timezone (resolved on first call)."""
    return _default.reference_timezone


def utc_now() -> datetime:
    return _default.utc_now()


def event_now() -> datetime:
    return _default.event_now()


def event_today() -> date:
    return _default.event_today()


def to_event_local(value: datetime) -> datetime:
    return _default.to_event_local(value)
