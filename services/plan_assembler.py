# services/plan_assembler.py
"""Builds day-by-day housekeeping plans from a hotel's bookings"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional

from config import settings
from core.domain import (
    Booking, DayPlan, DayTasks, DayTotals, Room, StaffingRates, TaskEntry
)
from services.booking_classifier import classify
from services.workload_estimator import estimate, rates_from_settings

logger = logging.getLogger(settings.LOGGER_NAME)


def clamp_days(days: int) -> int:
    """Clamp the requested window length into [PLAN_MIN_DAYS, PLAN_MAX_DAYS]."""
    return max(settings.PLAN_MIN_DAYS, min(settings.PLAN_MAX_DAYS, int(days)))


def _tasks(bookings: Iterable[Booking], rooms_by_id: Dict[str, Room]) -> List[TaskEntry]:
    entries = []
    for booking in bookings:
        room = rooms_by_id.get(booking.room_id)
        entries.append(TaskEntry(
            booking_id=booking.id,
            room_id=booking.room_id,
            room_type=room.room_type if room else None
        ))
    return entries


def assemble_plan(
    hotel_id: str,
    bookings: Iterable[Booking],
    rooms: Iterable[Room],
    days: int,
    start: Optional[date] = None,
    rates: Optional[StaffingRates] = None
) -> List[DayPlan]:
    """
    Plan `days` consecutive days (clamped) starting at `start` (default: today).

    Bookings are narrowed once to the hotel's non-cancelled stays touching the
    window; each day is then classified with its own day-local predicates.
    """
    days = clamp_days(days)
    start = start or date.today()
    rates = rates or rates_from_settings()

    window_start = datetime.combine(start, time.min)
    window_end = window_start + timedelta(days=days)

    candidates = [
        b for b in bookings
        if b.hotel_id == hotel_id
        and not b.is_cancelled
        and b.check_in_date < window_end
        and b.check_out_date >= window_start
    ]
    rooms_by_id = {r.id: r for r in rooms}
    logger.debug(f"Planning {days} days for hotel {hotel_id} from {len(candidates)} bookings")

    plan = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        classified = classify(day, candidates)
        workload = estimate(
            checkouts=len(classified.checkouts),
            checkins=len(classified.checkins),
            stayovers=len(classified.stayovers),
            rates=rates
        )
        plan.append(DayPlan(
            date=day,
            totals=DayTotals(
                checkins=len(classified.checkins),
                checkouts=len(classified.checkouts),
                stayovers=len(classified.stayovers),
                workload_minutes=workload.workload_minutes,
                staff_needed=workload.staff_needed
            ),
            tasks=DayTasks(
                checkouts=_tasks(classified.checkouts, rooms_by_id),
                checkins=_tasks(classified.checkins, rooms_by_id),
                stayovers=_tasks(classified.stayovers, rooms_by_id)
            )
        ))
    return plan
