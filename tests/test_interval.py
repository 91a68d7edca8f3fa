"""Tests for slot parsing and booking interval derivation."""

import math
from datetime import date, datetime

import pytest

from booking_intake.exceptions import PreconditionError
from booking_intake.scheduling.interval import SlotTime, derive_interval, parse_slot_label

DAY = date(2025, 7, 10)


class TestParseSlotLabel:
    def test_morning(self):
        assert parse_slot_label("09:00 AM") == SlotTime(9, 0)

    def test_afternoon_adds_twelve(self):
        assert parse_slot_label("04:00 PM") == SlotTime(16, 0)

    def test_noon_stays_twelve(self):
        assert parse_slot_label("12:00 PM") == SlotTime(12, 0)

    def test_midnight_becomes_zero(self):
        assert parse_slot_label("12:00 AM") == SlotTime(0, 0)

    def test_meridiem_is_case_insensitive(self):
        assert parse_slot_label("02:30 pm") == SlotTime(14, 30)

    def test_no_meridiem_is_24_hour(self):
        assert parse_slot_label("16:15") == SlotTime(16, 15)

    def test_extra_whitespace_tolerated(self):
        assert parse_slot_label("  10:00   AM ") == SlotTime(10, 0)

    @pytest.mark.parametrize(
        "label",
        ["", "   ", None, "ten am", "10-00 AM", "10:00 XM", "25:00", "10:60",
         "13:00 PM", "00:30 AM", "10:00 AM extra", "1000"],
    )
    def test_malformed_labels_rejected(self, label):
        with pytest.raises(PreconditionError):
            parse_slot_label(label)


class TestDeriveInterval:
    def test_full_day_service(self):
        interval = derive_interval(DAY, "09:00 AM", 480)
        assert interval.end_label == "17:00"

    def test_one_hour_afternoon(self):
        assert derive_interval(DAY, "04:00 PM", 60).end_label == "17:00"

    def test_crosses_noon(self):
        assert derive_interval(DAY, "11:00 AM", 120).end_label == "13:00"

    def test_start_label_preserved_verbatim(self):
        interval = derive_interval(DAY, "10:00 am", 60)
        assert interval.start_label == "10:00 am"

    def test_start_and_end_instants(self):
        interval = derive_interval(DAY, "10:00 AM", 120)
        assert interval.start == datetime(2025, 7, 10, 10, 0)
        assert interval.end == datetime(2025, 7, 10, 12, 0)
        assert interval.start.second == 0 and interval.start.microsecond == 0

    def test_zero_duration_ends_at_start(self):
        interval = derive_interval(DAY, "02:00 PM", 0)
        assert interval.end_label == "14:00"
        assert not interval.crosses_midnight

    def test_minutes_roll_over_hours(self):
        assert derive_interval(DAY, "10:30", 45).end_label == "11:15"

    def test_rolls_over_to_next_day(self):
        interval = derive_interval(DAY, "04:00 PM", 480)
        assert interval.end_label == "00:00"
        assert interval.end == datetime(2025, 7, 11, 0, 0)
        assert interval.crosses_midnight

    def test_datetime_date_ignores_time_of_day(self):
        interval = derive_interval(datetime(2025, 7, 10, 23, 59), "09:00 AM", 60)
        assert interval.start == datetime(2025, 7, 10, 9, 0)

    @pytest.mark.parametrize("duration", [None, -30, math.nan, math.inf, "120", True])
    def test_bad_duration_rejected(self, duration):
        with pytest.raises(PreconditionError, match="duration"):
            derive_interval(DAY, "09:00 AM", duration)

    def test_bad_label_rejected(self):
        with pytest.raises(PreconditionError):
            derive_interval(DAY, "nine o'clock", 60)

    def test_end_past_last_calendar_day_rejected(self):
        with pytest.raises(PreconditionError, match="out of range"):
            derive_interval(date(9999, 12, 31), "11:00 PM", 120)

    def test_huge_finite_duration_rejected(self):
        with pytest.raises(PreconditionError, match="out of range"):
            derive_interval(DAY, "09:00 AM", 1e15)
