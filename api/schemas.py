import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from core.domain import DayPlan, HousekeepingPlan, ScoredResult, StaffingRates, TaskEntry

class ErrorResponse(BaseModel):
    success: bool = False
    message: str

# ============= Search =============

class SearchRequest(BaseModel):
    # Validated by the search service so a non-string gives 400, not 422
    query: Any = None

class SearchSource(BaseModel):
    id: str
    type: str
    title: str
    score: float
    payload: Dict[str, Any]

    @classmethod
    def from_result(cls, result: ScoredResult) -> "SearchSource":
        return cls(**result.to_source())

class SearchResponse(BaseModel):
    success: bool = True
    context: str
    sources: List[SearchSource]

# ============= Housekeeping =============

class TaskItem(BaseModel):
    bookingId: str
    roomId: str
    roomType: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: TaskEntry) -> "TaskItem":
        return cls(bookingId=entry.booking_id, roomId=entry.room_id, roomType=entry.room_type)

class DayTotalsModel(BaseModel):
    checkins: int
    checkouts: int
    stayovers: int
    workloadMinutes: float
    staffNeeded: int

class DayTasksModel(BaseModel):
    checkouts: List[TaskItem]
    checkins: List[TaskItem]
    stayovers: List[TaskItem]

class DayPlanModel(BaseModel):
    date: dt.date
    totals: DayTotalsModel
    tasks: DayTasksModel

    @classmethod
    def from_plan(cls, day: DayPlan) -> "DayPlanModel":
        return cls(
            date=day.date,
            totals=DayTotalsModel(
                checkins=day.totals.checkins,
                checkouts=day.totals.checkouts,
                stayovers=day.totals.stayovers,
                workloadMinutes=day.totals.workload_minutes,
                staffNeeded=day.totals.staff_needed
            ),
            tasks=DayTasksModel(
                checkouts=[TaskItem.from_entry(t) for t in day.tasks.checkouts],
                checkins=[TaskItem.from_entry(t) for t in day.tasks.checkins],
                stayovers=[TaskItem.from_entry(t) for t in day.tasks.stayovers]
            )
        )

class HotelRef(BaseModel):
    id: str
    name: str

class PlanParams(BaseModel):
    days: int
    CHECKOUT_CLEAN_MIN: int
    STAYOVER_CLEAN_MIN: int
    CHECKIN_PREP_MIN: int
    STAFF_SHIFT_MIN: int

    @classmethod
    def from_rates(cls, days: int, rates: StaffingRates) -> "PlanParams":
        return cls(
            days=days,
            CHECKOUT_CLEAN_MIN=rates.checkout_clean_min,
            STAYOVER_CLEAN_MIN=rates.stayover_clean_min,
            CHECKIN_PREP_MIN=rates.checkin_prep_min,
            STAFF_SHIFT_MIN=rates.staff_shift_min
        )

class HousekeepingPlanResponse(BaseModel):
    """Either a plan (success) or a soft 'no hotel' message; empty fields are dropped."""
    success: bool
    message: Optional[str] = None
    hotel: Optional[HotelRef] = None
    plan: Optional[List[DayPlanModel]] = None
    params: Optional[PlanParams] = None

    @classmethod
    def from_plan(cls, result: HousekeepingPlan) -> "HousekeepingPlanResponse":
        return cls(
            success=True,
            hotel=HotelRef(id=result.hotel.id, name=result.hotel.name),
            plan=[DayPlanModel.from_plan(d) for d in result.plan],
            params=PlanParams.from_rates(result.days, result.rates)
        )

# ============= Catalog =============

class HotelsResponse(BaseModel):
    success: bool = True
    hotels: List[Dict[str, Any]]

class AvailabilityItem(BaseModel):
    hotel: Optional[Dict[str, Any]] = None
    room: Dict[str, Any]

class AvailabilityResponse(BaseModel):
    success: bool = True
    results: List[AvailabilityItem]
