# services/housekeeping_service.py
import logging
from datetime import date
from typing import Optional

from config import settings
from core.domain import HousekeepingPlan, StaffingRates
from core.errors import NotFoundError, UnauthorizedError
from core.interfaces import (
    IBookingRepository, IHotelRepository, IHousekeepingService, IRoomRepository
)
from services.plan_assembler import assemble_plan, clamp_days

logger = logging.getLogger(settings.LOGGER_NAME)

class HousekeepingService(IHousekeepingService):
    def __init__(
        self,
        hotel_repo: IHotelRepository,
        room_repo: IRoomRepository,
        booking_repo: IBookingRepository,
        rates: StaffingRates
    ):
        self.hotel_repo = hotel_repo
        self.room_repo = room_repo
        self.booking_repo = booking_repo
        self.rates = rates

    async def plan_for_owner(
        self,
        owner_id: Optional[str],
        days: int,
        start: Optional[date] = None
    ) -> HousekeepingPlan:
        if not owner_id:
            raise UnauthorizedError("Not authorized")

        hotel = await self.hotel_repo.get_by_owner(owner_id)
        if hotel is None:
            raise NotFoundError("No Hotel found for owner")

        rooms = await self.room_repo.list_rooms(hotel_id=hotel.id)
        bookings = await self.booking_repo.list_bookings(hotel_id=hotel.id)

        days = clamp_days(days)
        plan = assemble_plan(hotel.id, bookings, rooms, days, start=start, rates=self.rates)
        logger.info(f"Built {days}-day housekeeping plan for hotel {hotel.id}")
        return HousekeepingPlan(hotel=hotel, days=days, rates=self.rates, plan=plan)
