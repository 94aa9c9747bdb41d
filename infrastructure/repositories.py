"""Database repository implementations"""
import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.interfaces import IBookingRepository, IHotelRepository, IRoomRepository
from core.domain import Booking, BookingStatus, Hotel, Room
from core.errors import UpstreamFailureError
from database.session import BookingEntity, HotelEntity, RoomEntity
from config import settings

logger = logging.getLogger(settings.LOGGER_NAME)

class SQLHotelRepository(IHotelRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, db_hotel: HotelEntity) -> Hotel:
        """Converts an SQLAlchemy entity to a domain model."""
        return Hotel(
            id=db_hotel.id, # type: ignore
            name=db_hotel.name, # type: ignore
            address=db_hotel.address or "", # type: ignore
            contact=db_hotel.contact or "", # type: ignore
            city=db_hotel.city or "", # type: ignore
            owner=db_hotel.owner # type: ignore
        )

    async def list_hotels(self, text: Optional[str] = None) -> List[Hotel]:
        stmt = select(HotelEntity)
        if text:
            stmt = stmt.where(or_(
                HotelEntity.name.icontains(text, autoescape=True),
                HotelEntity.city.icontains(text, autoescape=True),
                HotelEntity.address.icontains(text, autoescape=True)
            ))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list hotels: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to read hotels") from e
        return [self._to_domain(h) for h in result.scalars().all()]

    async def get_by_ids(self, hotel_ids: List[str]) -> List[Hotel]:
        if not hotel_ids:
            return []
        try:
            result = await self.session.execute(
                select(HotelEntity).where(HotelEntity.id.in_(list(hotel_ids)))
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load hotels {hotel_ids}: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to read hotels") from e
        return [self._to_domain(h) for h in result.scalars().all()]

    async def get_by_owner(self, owner_id: str) -> Optional[Hotel]:
        try:
            result = await self.session.execute(
                select(HotelEntity).where(HotelEntity.owner == owner_id).limit(1)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load hotel for owner {owner_id}: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to read hotels") from e
        db_hotel = result.scalar_one_or_none()
        return self._to_domain(db_hotel) if db_hotel is not None else None

class SQLRoomRepository(IRoomRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, db_room: RoomEntity) -> Room:
        return Room(
            id=db_room.id, # type: ignore
            hotel_id=db_room.hotel_id, # type: ignore
            room_type=db_room.room_type, # type: ignore
            price_per_night=db_room.price_per_night, # type: ignore
            amenities=list(db_room.amenities or []),
            images=list(db_room.images or []),
            is_available=bool(db_room.is_available)
        )

    async def list_rooms(
        self,
        hotel_id: Optional[str] = None,
        room_type: Optional[str] = None,
        available_only: bool = False
    ) -> List[Room]:
        stmt = select(RoomEntity)
        if hotel_id:
            stmt = stmt.where(RoomEntity.hotel_id == hotel_id)
        if room_type:
            stmt = stmt.where(RoomEntity.room_type == room_type)
        if available_only:
            stmt = stmt.where(RoomEntity.is_available == True)  # noqa: E712
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list rooms: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to read rooms") from e
        return [self._to_domain(r) for r in result.scalars().all()]

class SQLBookingRepository(IBookingRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, db_booking: BookingEntity) -> Booking:
        try:
            status = BookingStatus(db_booking.status)
        except ValueError:
            logger.warning(f"Unknown status '{db_booking.status}' on booking {db_booking.id}")
            status = BookingStatus.PENDING
        return Booking(
            id=db_booking.id, # type: ignore
            room_id=db_booking.room_id, # type: ignore
            hotel_id=db_booking.hotel_id, # type: ignore
            check_in_date=db_booking.check_in_date, # type: ignore
            check_out_date=db_booking.check_out_date, # type: ignore
            status=status,
            user_id=db_booking.user_id, # type: ignore
            guests=db_booking.guests, # type: ignore
            total_price=db_booking.total_price, # type: ignore
            is_paid=bool(db_booking.is_paid)
        )

    async def list_bookings(self, hotel_id: Optional[str] = None) -> List[Booking]:
        stmt = select(BookingEntity)
        if hotel_id:
            stmt = stmt.where(BookingEntity.hotel_id == hotel_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list bookings: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to read bookings") from e
        return [self._to_domain(b) for b in result.scalars().all()]
