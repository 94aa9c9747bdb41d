# services/workload_estimator.py
import math

from config import settings
from core.domain import StaffingRates, WorkloadEstimate


def rates_from_settings() -> StaffingRates:
    return StaffingRates(
        checkout_clean_min=settings.CHECKOUT_CLEAN_MIN,
        stayover_clean_min=settings.STAYOVER_CLEAN_MIN,
        checkin_prep_min=settings.CHECKIN_PREP_MIN,
        staff_shift_min=settings.STAFF_SHIFT_MIN
    )


def estimate(
    checkouts: int,
    checkins: int,
    stayovers: int,
    rates: StaffingRates = StaffingRates()
) -> WorkloadEstimate:
    """Convert daily event counts into workload minutes and a headcount (at least 1)."""
    minutes = float(
        checkouts * rates.checkout_clean_min
        + stayovers * rates.stayover_clean_min
        + checkins * rates.checkin_prep_min
    )
    staff = max(1, math.ceil(minutes / rates.staff_shift_min))
    return WorkloadEstimate(workload_minutes=minutes, staff_needed=staff)
