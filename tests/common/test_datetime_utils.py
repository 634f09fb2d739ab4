from __future__ import annotations

from datetime import date, datetime

import pytest

from school_attendance.common.datetime_utils import iso, optional_calendar_date, parse_iso_date, to_calendar_date
from school_attendance.common.validators import check_date_range, require_bool, require_non_empty, require_positive_int
from school_attendance.core.exceptions import ValidationError


def test_parse_plain_and_timestamp_forms():
    assert parse_iso_date("2024-03-04") == date(2024, 3, 4)
    assert parse_iso_date(" 2024-03-04 ") == date(2024, 3, 4)
    assert parse_iso_date("2024-03-04T23:59:59") == date(2024, 3, 4)


@pytest.mark.parametrize("value", ["2024-3-4x", "04/03/2024", "2024-02-30", "tomorrow"])
def test_parse_rejects_malformed(value):
    with pytest.raises(ValidationError) as exc:
        parse_iso_date(value, "start_date")

    assert "start_date" in str(exc.value)


def test_to_calendar_date_drops_time():
    assert to_calendar_date(datetime(2024, 3, 4, 13, 30)) == date(2024, 3, 4)
    assert to_calendar_date(date(2024, 3, 4)) == date(2024, 3, 4)


def test_optional_date_treats_blank_as_missing():
    assert optional_calendar_date(None) is None
    assert optional_calendar_date("  ") is None
    assert optional_calendar_date("2024-03-04") == date(2024, 3, 4)


def test_iso_formats_or_blank():
    assert iso(date(2024, 3, 4)) == "2024-03-04"
    assert iso(None) == ""


def test_validators():
    assert require_non_empty(" 5A ", "class_name") == "5A"
    assert require_positive_int("3", "term_num") == 3
    assert require_bool("Yes", "present") is True

    for bad in (None, "", "x", 0, -1, 1.5, True):
        with pytest.raises(ValidationError):
            require_positive_int(bad, "term_num")
    with pytest.raises(ValidationError):
        require_non_empty("   ", "class_name")
    with pytest.raises(ValidationError):
        require_bool(None, "present")


def test_date_range_check_allows_open_and_equal_bounds():
    check_date_range(None, date(2024, 3, 4))
    check_date_range(date(2024, 3, 4), None)
    check_date_range(date(2024, 3, 4), date(2024, 3, 4))

    with pytest.raises(ValidationError):
        check_date_range(date(2024, 3, 5), date(2024, 3, 4))
