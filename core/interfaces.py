"""Core interfaces for the hotel AI service"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from core.domain import (
    Booking, Hotel, HousekeepingPlan, Room, RoomAvailability, SearchOutcome
)

# ============= Repository Interfaces =============
class IHotelRepository(ABC):
    """
    Read access to hotel records.

    Implementations: SQLHotelRepository. Swap for MongoDB, an HTTP API, etc.
    """

    @abstractmethod
    async def list_hotels(self, text: Optional[str] = None) -> List[Hotel]:
        """
        List hotels in store order.

        When text is given, only hotels whose name, city or address contain it
        (case-insensitive) are returned.
        """
        pass

    @abstractmethod
    async def get_by_ids(self, hotel_ids: List[str]) -> List[Hotel]:
        """Get the hotels with the given IDs; unknown IDs are skipped"""
        pass

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> Optional[Hotel]:
        """Get the hotel registered by an owner, or None"""
        pass

class IRoomRepository(ABC):
    """Read access to room records"""

    @abstractmethod
    async def list_rooms(
        self,
        hotel_id: Optional[str] = None,
        room_type: Optional[str] = None,
        available_only: bool = False
    ) -> List[Room]:
        """List rooms in store order, optionally filtered"""
        pass

class IBookingRepository(ABC):
    """Read access to booking records. Bookings are never mutated here."""

    @abstractmethod
    async def list_bookings(self, hotel_id: Optional[str] = None) -> List[Booking]:
        """List bookings, optionally restricted to one hotel"""
        pass

# ============= Service Layer Interfaces =============
class ISearchService(ABC):
    """Natural-language lexical search over hotels and rooms"""

    @abstractmethod
    async def search(self, query: str) -> SearchOutcome:
        """Rank the current hotel and room records against a query"""
        pass

class IHousekeepingService(ABC):
    """Housekeeping workload and staffing plans"""

    @abstractmethod
    async def plan_for_owner(
        self,
        owner_id: Optional[str],
        days: int,
        start: Optional[date] = None
    ) -> HousekeepingPlan:
        """
        Build the plan for the hotel owned by owner_id.

        Raises:
            UnauthorizedError: owner_id is absent
            NotFoundError: the owner has no hotel
            UpstreamFailureError: the record store could not be read
        """
        pass

class ICatalogService(ABC):
    """Plain hotel lookup and room availability"""

    @abstractmethod
    async def find_hotels(self, query: Optional[str] = None) -> List[Hotel]:
        pass

    @abstractmethod
    async def get_availability(
        self,
        hotel_id: Optional[str] = None,
        room_type: Optional[str] = None
    ) -> List[RoomAvailability]:
        """Available rooms, each paired with its hotel (None when missing)"""
        pass
