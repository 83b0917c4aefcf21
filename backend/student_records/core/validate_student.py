"""Student Input Validation — explicit field rules for StudentRequestData.

Invariants:
    - Returns {field: message} keyed by wire (camelCase) field name; empty dict means valid
    - Rules for one field run in a fixed order; a later violation overwrites an earlier one
    - id and active are never inspected (caller cannot set them)
    - Pure function: no IO, never raises for any JSON-decoded input

Design Decisions:
    - Explicit function over Pydantic Field constraints: the route decides when to
      validate and the messages are stable strings independent of Pydantic versions
    - Empty email skips the format rule (only the blank rule fires)
"""

import re
from datetime import date
from typing import Any, Mapping

from student_records.core.domain_types import (
    EMAIL_MAX_LENGTH, FULL_NAME_MAX_LENGTH, FULL_NAME_MIN_LENGTH,
)

MUST_BE_STRING = "must be a string"
MUST_NOT_BE_BLANK = "must not be blank"
MALFORMED_EMAIL = "must be a well-formed email address"
INVALID_DATE = "must be a valid date (YYYY-MM-DD)"

REQUEST_FIELDS = ("fullName", "email", "birthDate")

_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
)
_ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_student_request(payload: Mapping[str, Any]) -> dict[str, str]:
    """Validate a decoded student request body."""
    errors: dict[str, str] = {}
    _check_full_name(payload.get("fullName"), errors)
    _check_email(payload.get("email"), errors)
    _check_birth_date(payload.get("birthDate"), errors)
    return errors


def _size_message(min_length: int, max_length: int) -> str:
    return f"size must be between {min_length} and {max_length}"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_full_name(value: Any, errors: dict[str, str]) -> None:
    if value is not None and not isinstance(value, str):
        errors["fullName"] = MUST_BE_STRING
        return
    if _is_blank(value):
        errors["fullName"] = MUST_NOT_BE_BLANK
    if value is not None and not (
        FULL_NAME_MIN_LENGTH <= len(value) <= FULL_NAME_MAX_LENGTH
    ):
        errors["fullName"] = _size_message(FULL_NAME_MIN_LENGTH, FULL_NAME_MAX_LENGTH)


def _check_email(value: Any, errors: dict[str, str]) -> None:
    if value is not None and not isinstance(value, str):
        errors["email"] = MUST_BE_STRING
        return
    if _is_blank(value):
        errors["email"] = MUST_NOT_BE_BLANK
    if value and not _EMAIL_PATTERN.fullmatch(value):
        errors["email"] = MALFORMED_EMAIL
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        errors["email"] = _size_message(0, EMAIL_MAX_LENGTH)


def _check_birth_date(value: Any, errors: dict[str, str]) -> None:
    if value is None:
        return
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.fullmatch(value):
        errors["birthDate"] = INVALID_DATE
        return
    try:
        date.fromisoformat(value)
    except ValueError:
        errors["birthDate"] = INVALID_DATE
