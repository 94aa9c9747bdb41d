"""Tests for booking_classifier.py: per-day checkout/checkin/stayover split."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from services.booking_classifier import classify, day_bounds
from tests.fakes import DAY0, at, make_booking


class TestDayBounds:
    def test_bounds_cover_whole_day(self):
        start, end = day_bounds(DAY0)
        assert start == datetime(2026, 3, 2, 0, 0, 0)
        assert end == datetime(2026, 3, 2, 23, 59, 59, 999000)


class TestClassify:
    def test_checkout_on_day(self):
        b = make_booking("B-1", at(DAY0 - timedelta(days=2), 14), at(DAY0, 11))
        result = classify(DAY0, [b])
        assert result.checkouts == [b]
        assert result.checkins == []
        assert result.stayovers == []

    def test_checkin_on_day(self):
        b = make_booking("B-1", at(DAY0, 14), at(DAY0 + timedelta(days=2), 11))
        result = classify(DAY0, [b])
        assert result.checkins == [b]
        assert result.checkouts == []
        assert result.stayovers == []

    def test_stayover_spans_day(self):
        b = make_booking("B-1", at(DAY0 - timedelta(days=1)), at(DAY0 + timedelta(days=1)))
        result = classify(DAY0, [b])
        assert result.stayovers == [b]
        assert result.checkins == []
        assert result.checkouts == []

    def test_same_day_in_and_out_listed_twice(self):
        b = make_booking("B-1", at(DAY0, 9), at(DAY0, 18))
        result = classify(DAY0, [b])
        assert result.checkins == [b]
        assert result.checkouts == [b]
        assert result.stayovers == []

    def test_midnight_boundaries_are_inclusive(self):
        start, end = day_bounds(DAY0)
        arriving = make_booking("B-1", start, start + timedelta(days=3))
        leaving = make_booking("B-2", end - timedelta(days=3), end)
        result = classify(DAY0, [arriving, leaving])
        assert result.checkins == [arriving]
        assert result.checkouts == [leaving]

    def test_next_midnight_is_not_today(self):
        b = make_booking("B-1", at(DAY0 - timedelta(days=1)), at(DAY0 + timedelta(days=1)))
        result = classify(DAY0, [b])
        assert result.checkouts == []

    def test_unrelated_booking_ignored(self):
        b = make_booking("B-1", at(DAY0 + timedelta(days=5)), at(DAY0 + timedelta(days=7)))
        result = classify(DAY0, [b])
        assert (result.checkins, result.checkouts, result.stayovers) == ([], [], [])

    def test_input_order_preserved(self):
        bookings = [
            make_booking(f"B-{i}", at(DAY0, 10 + i), at(DAY0 + timedelta(days=1)))
            for i in range(4)
        ]
        result = classify(DAY0, list(reversed(bookings)))
        assert [b.id for b in result.checkins] == ["B-3", "B-2", "B-1", "B-0"]

    @pytest.mark.parametrize("check_in_offset,check_out_offset,expected", [
        (-3, 3, True),
        (-1, 1, True),
        (0, 2, False),   # checks in today
        (-2, 0, False),  # checks out today
        (1, 3, False),   # future stay
        (-5, -1, False), # past stay
    ])
    def test_stayover_iff_stay_spans_day(self, check_in_offset, check_out_offset, expected):
        b = make_booking(
            "B-1",
            at(DAY0 + timedelta(days=check_in_offset), 12),
            at(DAY0 + timedelta(days=check_out_offset), 12),
        )
        start, end = day_bounds(DAY0)
        assert (b in classify(DAY0, [b]).stayovers) is expected
        assert (b.check_in_date < start and b.check_out_date > end) is expected
