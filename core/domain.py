"""Shared enumerations and domain models used across the application."""
from enum import Enum

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Dict, Any, Optional

# ============= Enums =============

class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"


class DocumentKind(str, Enum):
    """Kind of record wrapped by a search document."""
    HOTEL = "hotel"
    ROOM = "room"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# ============= Store records =============

@dataclass
class Hotel:
    id: str
    name: str
    address: str = ""
    contact: str = ""
    city: str = ""
    owner: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "contact": self.contact,
            "city": self.city,
            "owner": self.owner,
        }


@dataclass
class Room:
    id: str
    hotel_id: str
    room_type: str
    price_per_night: float
    amenities: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    is_available: bool = True

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "hotel": self.hotel_id,
            "roomType": self.room_type,
            "pricePerNight": self.price_per_night,
            "amenities": list(self.amenities),
            "images": list(self.images),
            "isAvailable": self.is_available,
        }


@dataclass
class Booking:
    """Read-only booking record; check_in_date < check_out_date."""
    id: str
    room_id: str
    hotel_id: str
    check_in_date: datetime
    check_out_date: datetime
    status: BookingStatus = BookingStatus.PENDING
    user_id: Optional[str] = None
    guests: int = 1
    total_price: float = 0.0
    is_paid: bool = False

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED


# ============= Search models =============

@dataclass
class Document:
    """Searchable record built fresh for every search call"""
    id: str
    kind: DocumentKind
    title: str
    text: str
    payload: Dict[str, Any]


@dataclass
class ScoredResult:
    document: Document
    score: float

    def to_source(self) -> Dict[str, Any]:
        return {
            "id": self.document.id,
            "type": self.document.kind.value,
            "title": self.document.title,
            "score": self.score,
            "payload": self.document.payload,
        }


@dataclass
class SearchOutcome:
    results: List[ScoredResult]
    context: str


# ============= Housekeeping models =============

@dataclass(frozen=True)
class StaffingRates:
    """Fixed labour rates in minutes; surfaced with every plan."""
    checkout_clean_min: int = 60
    stayover_clean_min: int = 20
    checkin_prep_min: int = 10
    staff_shift_min: int = 480


@dataclass
class ClassifiedBookings:
    checkouts: List[Booking] = field(default_factory=list)
    checkins: List[Booking] = field(default_factory=list)
    stayovers: List[Booking] = field(default_factory=list)


@dataclass
class WorkloadEstimate:
    workload_minutes: float
    staff_needed: int


@dataclass
class TaskEntry:
    booking_id: str
    room_id: str
    room_type: Optional[str] = None


@dataclass
class DayTotals:
    checkins: int
    checkouts: int
    stayovers: int
    workload_minutes: float
    staff_needed: int


@dataclass
class DayTasks:
    checkouts: List[TaskEntry] = field(default_factory=list)
    checkins: List[TaskEntry] = field(default_factory=list)
    stayovers: List[TaskEntry] = field(default_factory=list)


@dataclass
class DayPlan:
    date: date
    totals: DayTotals
    tasks: DayTasks


@dataclass
class HousekeepingPlan:
    """Plan for one hotel over a window of consecutive days"""
    hotel: Hotel
    days: int
    rates: StaffingRates
    plan: List[DayPlan] = field(default_factory=list)


@dataclass
class RoomAvailability:
    room: Room
    hotel: Optional[Hotel] = None
