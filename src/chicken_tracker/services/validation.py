"""Shared input rules for egg production entries and chicken profiles.

These functions are the only place the rules live. The pre-submission check
endpoint and the services that persist records both call them, so an error
reported before submission is reproduced verbatim by the authoritative
check.
"""

import math
import re
from datetime import UTC, date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from chicken_tracker.domain.chickens import ChickenProfile, Sex
from chicken_tracker.domain.eggs import EggEntry
from chicken_tracker.domain.errors import (
    ErrorKind,
    ValidationFailedError,
    ValidationIssue,
)

NAME_MAX_LENGTH = 100
BREED_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 2000

DATE_REQUIRED = "Date is required"
DATE_INVALID = "Invalid date"
DATE_IN_FUTURE = "Date cannot be in the future"
COUNT_REQUIRED = "Count is required"
COUNT_NOT_NUMBER = "Count must be a number"
COUNT_NOT_INTEGER = "Count must be a whole number"
COUNT_NEGATIVE = "Count cannot be negative"
COUNT_TOO_LARGE = "Count must be 2147483647 or less"

# Largest value the egg_production.count integer column can hold.
MAX_COUNT = 2_147_483_647

_ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


def local_today(timezone_name: str, now: datetime | None = None) -> date:
    """Return the calendar date in a timezone at ``now`` (default: current time)."""
    moment = now or datetime.now(tz=UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(ZoneInfo(timezone_name)).date()


def parse_calendar_date(value: object) -> date | None:
    """Coerce a date-like value to a calendar date without shifting timezones.

    Strings must start with an extended ``YYYY-MM-DD`` date; week dates and
    the basic ``YYYYMMDD`` form are rejected. Returns ``None`` when the value
    cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _ISO_DATE_PREFIX.match(text):
            return None
        try:
            if len(text) == len("YYYY-MM-DD"):
                return date.fromisoformat(text)
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def validate_egg_entry(entry_date: object, count: object, today: date) -> EggEntry:
    """Validate a raw ``(date, count)`` pair and return the normalized entry.

    Every rule is evaluated; all violations are raised together in one
    ``ValidationFailedError``.
    """
    issues: list[ValidationIssue] = []
    parsed_date = _check_entry_date(entry_date, today, issues)
    parsed_count = _check_count(count, issues)
    if issues:
        raise ValidationFailedError(issues)
    return EggEntry(date=parsed_date, count=parsed_count)


def _check_entry_date(
    value: object, today: date, issues: list[ValidationIssue]
) -> date | None:
    if value is None or value == "":
        issues.append(ValidationIssue("date", ErrorKind.DATE_REQUIRED, DATE_REQUIRED))
        return None
    parsed = parse_calendar_date(value)
    if parsed is None:
        issues.append(ValidationIssue("date", ErrorKind.DATE_INVALID, DATE_INVALID))
        return None
    if parsed > today:
        issues.append(
            ValidationIssue("date", ErrorKind.DATE_IN_FUTURE, DATE_IN_FUTURE)
        )
    return parsed


def _check_count(value: object, issues: list[ValidationIssue]) -> int | None:
    if value is None:
        issues.append(
            ValidationIssue("count", ErrorKind.COUNT_REQUIRED, COUNT_REQUIRED)
        )
        return None
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        issues.append(
            ValidationIssue("count", ErrorKind.COUNT_NOT_NUMBER, COUNT_NOT_NUMBER)
        )
        return None
    before = len(issues)
    if not _is_whole(value):
        issues.append(
            ValidationIssue("count", ErrorKind.COUNT_NOT_INTEGER, COUNT_NOT_INTEGER)
        )
    # NaN has no order; a Decimal NaN raises on comparison.
    if not _is_nan(value):
        if value < 0:
            issues.append(
                ValidationIssue("count", ErrorKind.COUNT_NEGATIVE, COUNT_NEGATIVE)
            )
        elif value > MAX_COUNT:
            issues.append(
                ValidationIssue("count", ErrorKind.COUNT_TOO_LARGE, COUNT_TOO_LARGE)
            )
    if len(issues) > before:
        return None
    return int(value)


def _is_nan(value: int | float | Decimal) -> bool:
    if isinstance(value, int):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def _is_whole(value: int | float | Decimal) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return math.isfinite(value) and value.is_integer()


def validate_chicken(  # noqa: PLR0913
    *,
    name: object = None,
    breed: object = None,
    sex: object = None,
    birth_date: object = None,
    death_date: object = None,
    notes: object = None,
    today: date,
) -> ChickenProfile:
    """Validate chicken profile fields. Empty optional values count as absent."""
    issues: list[ValidationIssue] = []

    clean_name = name if isinstance(name, str) else None
    if not clean_name:
        issues.append(
            ValidationIssue("name", ErrorKind.NAME_REQUIRED, "Name is required")
        )
    elif len(clean_name) > NAME_MAX_LENGTH:
        issues.append(
            ValidationIssue(
                "name", ErrorKind.TOO_LONG, "Name must be 100 characters or less"
            )
        )

    clean_breed = _optional_text(breed)
    if clean_breed is not None and len(clean_breed) > BREED_MAX_LENGTH:
        issues.append(
            ValidationIssue(
                "breed", ErrorKind.TOO_LONG, "Breed must be 100 characters or less"
            )
        )

    clean_sex: Sex | None = None
    if sex not in (None, ""):
        try:
            clean_sex = Sex(str(sex))
        except ValueError:
            issues.append(
                ValidationIssue(
                    "sex",
                    ErrorKind.SEX_INVALID,
                    "Sex must be one of HEN, ROOSTER or UNKNOWN",
                )
            )

    parsed_birth = _optional_date("birth_date", birth_date, issues)
    if parsed_birth is not None and parsed_birth > today:
        issues.append(
            ValidationIssue(
                "birth_date",
                ErrorKind.DATE_IN_FUTURE,
                "Birth date cannot be in the future",
            )
        )
    parsed_death = _optional_date("death_date", death_date, issues)
    if parsed_birth and parsed_death and parsed_death <= parsed_birth:
        issues.append(
            ValidationIssue(
                "death_date",
                ErrorKind.DEATH_BEFORE_BIRTH,
                "Death date must be after birth date",
            )
        )

    clean_notes = _optional_text(notes)
    if clean_notes is not None and len(clean_notes) > NOTES_MAX_LENGTH:
        issues.append(
            ValidationIssue(
                "notes", ErrorKind.TOO_LONG, "Notes must be 2000 characters or less"
            )
        )

    if issues:
        raise ValidationFailedError(issues)
    return ChickenProfile(
        name=clean_name or "",
        breed=clean_breed,
        sex=clean_sex,
        birth_date=parsed_birth,
        death_date=parsed_death,
        notes=clean_notes,
    )


def validate_death_date(value: object, birth_date: date | None, today: date) -> date:
    """Validate the death date supplied when marking a chicken deceased."""
    if value is None or value == "":
        raise ValidationFailedError(
            [
                ValidationIssue(
                    "death_date", ErrorKind.DATE_REQUIRED, "Death date is required."
                )
            ]
        )
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise ValidationFailedError(
            [
                ValidationIssue(
                    "death_date", ErrorKind.DATE_INVALID, "Invalid death date format."
                )
            ]
        )
    if parsed > today:
        raise ValidationFailedError(
            [
                ValidationIssue(
                    "death_date",
                    ErrorKind.DATE_IN_FUTURE,
                    "Death date cannot be in the future.",
                )
            ]
        )
    if birth_date is not None and parsed < birth_date:
        raise ValidationFailedError(
            [
                ValidationIssue(
                    "death_date",
                    ErrorKind.DEATH_BEFORE_BIRTH,
                    "Death date must be after birth date.",
                )
            ]
        )
    return parsed


def _optional_text(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_date(
    field: str, value: object, issues: list[ValidationIssue]
) -> date | None:
    if value is None or value == "":
        return None
    parsed = parse_calendar_date(value)
    if parsed is None:
        issues.append(ValidationIssue(field, ErrorKind.DATE_INVALID, DATE_INVALID))
    return parsed
