"""Host Timezone Database - finds zone definitions by Windows or IANA identifier.

Invariants:
    - find_system_zone() either returns a tzinfo or raises TimezoneNotFoundError
    - Windows identifiers resolve through WINDOWS_TO_IANA, then the IANA database
    - UTC namespace never consults the database

Design Decisions:
    - zoneinfo + tzdata: stdlib reader backed by the tzdata package, so hosts
      without /usr/share/zoneinfo (bare Windows, slim containers) still resolve
    - Windows table holds only the identifiers the fallback chain asks for;
      unknown Windows identifiers fail over to the IANA candidate
"""

from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from eventclock.core.domain_types import TimezoneCandidate, TimezoneNamespace
from eventclock.core.errors import TimezoneNotFoundError

# Windows registry names -> IANA keys (CLDR windowsZones, territory 001).
WINDOWS_TO_IANA: dict[str, str] = {
    "South Africa Standard Time": "Africa/Johannesburg",
    "UTC": "Etc/UTC",
}


def find_zone_by_iana_key(key: str) -> tzinfo:
    """Load an IANA zone, mapping every not-found shape to TimezoneNotFoundError."""
    try:
        return ZoneInfo(key)
    except ZoneInfoNotFoundError as exc:
        raise TimezoneNotFoundError(key, "no tz database entry") from exc
    except (ValueError, OSError) as exc:
        raise TimezoneNotFoundError(key, str(exc)) from exc


def find_zone_by_windows_key(key: str) -> tzinfo:
    iana_key = WINDOWS_TO_IANA.get(key)
    if iana_key is None:
        raise TimezoneNotFoundError(key, "unknown Windows timezone identifier")
    return find_zone_by_iana_key(iana_key)


def find_system_zone(candidate: TimezoneCandidate) -> tzinfo:
    """Find the zone for a candidate in the host database."""
    if candidate.namespace is TimezoneNamespace.UTC:
        return timezone.utc
    if candidate.namespace is TimezoneNamespace.WINDOWS:
        return find_zone_by_windows_key(candidate.key)
    return find_zone_by_iana_key(candidate.key)
