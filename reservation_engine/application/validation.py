"""
Input validation and date parsing shared by the use cases.

Dates may arrive as ``date``, ``datetime`` or ISO strings (``YYYY-MM-DD`` or a
full ISO datetime); every form is reduced to its UTC calendar day. Offsets
are honoured, so ``2026-02-01T23:30:00-05:00`` is 2026-02-02.
"""

import uuid
from datetime import date, datetime
from typing import Sequence

from reservation_engine.domain.errors import InvalidDateRangeError, ValidationError
from reservation_engine.domain.value_objects.stay_range import StayRange, to_day


def is_valid_uuid(value: str) -> bool:
    """True for a canonical 36-char UUID string."""
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def parse_date(value: date | datetime | str | None, field: str) -> date:
    if value is None or value == "":
        raise ValidationError(f"{field} is required", field=field)
    if isinstance(value, (date, datetime)):
        return to_day(value)
    text = str(value).strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return to_day(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date format for {field}: '{value}'. Use YYYY-MM-DD",
            field=field,
        ) from exc


def parse_stay_range(
    check_in: date | datetime | str | None,
    check_out: date | datetime | str | None,
) -> StayRange:
    start = parse_date(check_in, "check_in")
    end = parse_date(check_out, "check_out")
    if end <= start:
        raise InvalidDateRangeError("Check-out date must be after check-in date")
    return StayRange(check_in=start, check_out=end)


def validate_resource_ids(
    resource_ids: Sequence[str] | None,
    max_count: int | None = None,
    allow_duplicates: bool = False,
) -> list[str]:
    """
    Validates a list of resource IDs and returns it without duplicates,
    keeping the first-seen order.
    """
    if not resource_ids:
        raise ValidationError("At least one resource is required", field="resource_ids")

    if max_count is not None and len(resource_ids) > max_count:
        raise ValidationError(
            f"Cannot reserve more than {max_count} resources at once",
            field="resource_ids",
        )

    for resource_id in resource_ids:
        if not is_valid_uuid(resource_id):
            raise ValidationError(
                f"Invalid resource ID format: {resource_id}", field="resource_ids"
            )

    unique_ids = list(dict.fromkeys(resource_ids))
    if len(unique_ids) != len(resource_ids) and not allow_duplicates:
        raise ValidationError("Duplicate resource IDs are not allowed", field="resource_ids")
    return unique_ids
