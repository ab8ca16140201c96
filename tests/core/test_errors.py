"""Error hierarchy tests - codes, categories and REST envelope.

Tests:
    - TimezoneNotFoundError is a warning-level not-found error carrying the key
    - InvalidInstantError is a 400 validation error
    - to_response() envelope shape
"""

import dataclasses

from eventclock.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, EventClockError,
    InvalidInstantError, TimezoneNotFoundError,
)


def test_timezone_not_found_error_fields():
    err = TimezoneNotFoundError("Africa/Johannesburg", "no tz database entry")
    assert isinstance(err, EventClockError)
    assert err.code == "TIMEZONE_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity == ErrorSeverity.WARNING
    assert err.context.timezone_key == "Africa/Johannesburg"
    assert "Africa/Johannesburg" in str(err)


def test_invalid_instant_error_names_type():
    err = InvalidInstantError("yesterday")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert "str" in err.message


def test_to_response_envelope():
    err = TimezoneNotFoundError("Nowhere/City", "missing")
    body = err.to_response()["error"]
    assert body["code"] == "TIMEZONE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"] == {"timezone_key": "Nowhere/City"}
    assert "timestamp" in body


def test_user_message_overrides_message_in_response():
    ctx = ErrorContext(user_message="Please send a timestamp")
    err = InvalidInstantError(42, context=ctx)
    assert err.to_response()["error"]["message"] == "Please send a timestamp"


def test_parse_failure_reason_replaces_type_message():
    err = InvalidInstantError("soon", reason="Not an ISO 8601 instant: 'soon'")
    assert err.message == "Not an ISO 8601 instant: 'soon'"
    assert err.to_response()["error"]["message"] == err.message


def test_error_context_fields():
    assert [f.name for f in dataclasses.fields(ErrorContext)] == [
        "timestamp", "timezone_key", "user_message",
    ]
