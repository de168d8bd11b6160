from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.common.datetime_utils import parse_optional_date, working_hours
from src.hr_portal.hr_portal.common.passwords import hash_password, verify_password
from src.hr_portal.hr_portal.common.validators import parse_amount, require_choice
from src.hr_portal.hr_portal.core.enums import LeaveStatus
from src.hr_portal.hr_portal.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "check_in,check_out,expected",
    [
        ("09:00", "17:30", "8h 30m"),
        ("09:45", "18:15", "8h 30m"),
        ("09:00", "-", "-"),
        ("-", "17:00", "-"),
        ("18:00", "09:00", "-"),
    ],
)
def test_working_hours(check_in, check_out, expected):
    assert working_hours(check_in, check_out) == expected


def test_parse_optional_date():
    assert parse_optional_date("2025-08-30") == date(2025, 8, 30)
    assert parse_optional_date("2025-08-30T10:00:00.000Z") == date(2025, 8, 30)
    assert parse_optional_date("-") is None
    assert parse_optional_date("") is None


def test_parse_amount_falls_back_to_default():
    assert parse_amount("1200.5", 50000) == 1200.5
    assert parse_amount("", 50000) == 50000
    assert parse_amount("n/a", 50000) == 50000


def test_require_choice():
    assert require_choice("approved", LeaveStatus, "Status") == LeaveStatus.APPROVED
    with pytest.raises(ValidationError):
        require_choice("done", LeaveStatus, "Status")


def test_password_hash_roundtrip_and_legacy_plaintext():
    hashed = hash_password("pw")

    assert verify_password(hashed, "pw")
    assert not verify_password(hashed, "PW")
    assert verify_password("legacy", "legacy")
    assert not verify_password("", "")
