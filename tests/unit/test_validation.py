from datetime import date, datetime

import pytest

from reservation_engine.application.validation import (
    is_valid_uuid,
    parse_date,
    parse_stay_range,
    validate_resource_ids,
)
from reservation_engine.domain.errors import InvalidDateRangeError, ValidationError

VALID_ID = "a0000000-0000-4000-8000-000000000001"


class TestParseDate:
    def test_plain_date_string(self):
        assert parse_date("2026-02-01", "check_in") == date(2026, 2, 1)

    def test_iso_datetime_string_drops_time(self):
        assert parse_date("2026-02-01T18:30:00Z", "check_in") == date(2026, 2, 1)

    def test_datetime_object(self):
        assert parse_date(datetime(2026, 2, 1, 12), "check_in") == date(2026, 2, 1)

    def test_offset_is_converted_to_utc_day(self):
        assert parse_date("2026-02-01T23:30:00-05:00", "check_in") == date(2026, 2, 2)
        assert parse_date("2026-02-02T01:00:00+03:00", "check_in") == date(2026, 2, 1)

    @pytest.mark.parametrize("value", ["", None, "01/02/2026", "tomorrow"])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_date(value, "check_in")
        assert exc_info.value.field == "check_in"


class TestParseStayRange:
    def test_same_day_is_rejected(self):
        with pytest.raises(InvalidDateRangeError):
            parse_stay_range("2026-02-01", "2026-02-01")

    def test_reversed_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_stay_range("2026-02-03", "2026-02-01")


class TestResourceIds:
    def test_uuid_format(self):
        assert is_valid_uuid(VALID_ID)
        assert not is_valid_uuid("not-a-uuid")
        assert not is_valid_uuid(VALID_ID.replace("-", ""))

    def test_empty_list(self):
        with pytest.raises(ValidationError):
            validate_resource_ids([])

    def test_too_many(self):
        ids = [f"a0000000-0000-4000-8000-00000000000{i}" for i in range(5)]
        with pytest.raises(ValidationError, match="more than 4"):
            validate_resource_ids(ids, max_count=4)

    def test_duplicates_rejected_by_default(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            validate_resource_ids([VALID_ID, VALID_ID])

    def test_duplicates_collapsed_when_allowed(self):
        assert validate_resource_ids([VALID_ID, VALID_ID], allow_duplicates=True) == [VALID_ID]
