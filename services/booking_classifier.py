# services/booking_classifier.py
"""Classifies bookings as checkout / checkin / stayover for one calendar day"""
from datetime import date, datetime, time, timedelta
from typing import Iterable, Tuple

from core.domain import Booking, ClassifiedBookings


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Return (00:00:00.000, 23:59:59.999) of a calendar day."""
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return start, end


def classify(day: date, bookings: Iterable[Booking]) -> ClassifiedBookings:
    """
    Split bookings by what happens to them on `day`.

    The three predicates are independent: a booking checking in and out on
    the same day is listed under both checkins and checkouts. Cancelled
    bookings are expected to be filtered out by the caller.
    """
    start, end = day_bounds(day)
    result = ClassifiedBookings()
    for booking in bookings:
        if start <= booking.check_out_date <= end:
            result.checkouts.append(booking)
        if start <= booking.check_in_date <= end:
            result.checkins.append(booking)
        if booking.check_in_date < start and booking.check_out_date > end:
            result.stayovers.append(booking)
    return result
