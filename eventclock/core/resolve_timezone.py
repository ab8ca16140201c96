"""Timezone Resolution - ordered fallback chain from named identifiers to UTC.

Invariants:
    - resolve_reference_timezone() is total: it never raises
    - Candidates are tried strictly in order; the first success wins
    - The UTC terminal candidate never touches the lookup and always succeeds
    - Lookup failures become failed ZoneLookup values, they do not propagate

Design Decisions:
    - Lookup injected as a callable: core stays free of host database IO
    - Windows identifier first, IANA second: mirrors how the two host
      families name the same geographic zone
"""

import logging
from collections.abc import Callable, Iterable
from datetime import timezone, tzinfo

from eventclock.core.domain_types import (
    ReferenceTimezone, TimezoneCandidate, TimezoneNamespace, ZoneLookup,
)
from eventclock.core.errors import TimezoneNotFoundError

logger = logging.getLogger(__name__)

# Raises TimezoneNotFoundError when the key is unknown to the host. Any other
# exception from a finder is recorded the same way.
ZoneFinder = Callable[[TimezoneCandidate], tzinfo]

WINDOWS_REFERENCE_KEY = "South Africa Standard Time"
IANA_REFERENCE_KEY = "Africa/Johannesburg"
UTC_KEY = "UTC"

REFERENCE_CANDIDATES: tuple[TimezoneCandidate, ...] = (
    TimezoneCandidate(WINDOWS_REFERENCE_KEY, TimezoneNamespace.WINDOWS),
    TimezoneCandidate(IANA_REFERENCE_KEY, TimezoneNamespace.IANA),
)

UTC_FALLBACK = ReferenceTimezone(
    zone=timezone.utc, key=UTC_KEY, namespace=TimezoneNamespace.UTC,
)


def lookup_candidate(candidate: TimezoneCandidate, find: ZoneFinder) -> ZoneLookup:
    """Look up one candidate, folding a not-found error into the result."""
    try:
        zone = find(candidate)
    except TimezoneNotFoundError as exc:
        return ZoneLookup(candidate=candidate, error=exc)
    except Exception as exc:
        return ZoneLookup(
            candidate=candidate, error=TimezoneNotFoundError(candidate.key, repr(exc)),
        )
    return ZoneLookup(candidate=candidate, zone=zone)


def resolve_reference_timezone(
    find: ZoneFinder,
    candidates: Iterable[TimezoneCandidate] = REFERENCE_CANDIDATES,
) -> ReferenceTimezone:
    """Resolve the reference timezone from the first candidate the host knows.

    Falls back to UTC when every named candidate fails.
    """
    for candidate in candidates:
        result = lookup_candidate(candidate, find)
        if result.ok:
            return ReferenceTimezone(
                zone=result.zone, key=candidate.key, namespace=candidate.namespace,
            )
        logger.debug(
            f"Timezone candidate unavailable: {result.error.message}",
            extra={
                "timezone_key": candidate.key,
                "timezone_namespace": candidate.namespace.value,
                "error_code": result.error.code,
            },
        )
    return UTC_FALLBACK
