# services/factory.py
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends

from core.domain import StaffingRates
from core.interfaces import (
    IBookingRepository, ICatalogService, IHotelRepository, IHousekeepingService,
    IRoomRepository, ISearchService
)
from database.session import get_db
from infrastructure.repositories import (
    SQLBookingRepository, SQLHotelRepository, SQLRoomRepository
)
from services.catalog_service import CatalogService
from services.housekeeping_service import HousekeepingService
from services.lexical_ranker import LexicalRanker
from services.search_service import SearchService
from services.workload_estimator import rates_from_settings

# Provider functions for each component
def get_hotel_repository(session: AsyncSession = Depends(get_db)) -> IHotelRepository:
    """Create hotel repository with injected session."""
    return SQLHotelRepository(session)

def get_room_repository(session: AsyncSession = Depends(get_db)) -> IRoomRepository:
    """Create room repository with injected session."""
    return SQLRoomRepository(session)

def get_booking_repository(session: AsyncSession = Depends(get_db)) -> IBookingRepository:
    """Create booking repository with injected session."""
    return SQLBookingRepository(session)

def get_ranker() -> LexicalRanker:
    """Create the lexical ranker from configured weights."""
    return LexicalRanker()

def get_staffing_rates() -> StaffingRates:
    return rates_from_settings()

# Service providers using FastAPI DI
def get_search_service(
    hotel_repo: IHotelRepository = Depends(get_hotel_repository),
    room_repo: IRoomRepository = Depends(get_room_repository),
    ranker: LexicalRanker = Depends(get_ranker)
) -> ISearchService:
    return SearchService(hotel_repo=hotel_repo, room_repo=room_repo, ranker=ranker)

def get_housekeeping_service(
    hotel_repo: IHotelRepository = Depends(get_hotel_repository),
    room_repo: IRoomRepository = Depends(get_room_repository),
    booking_repo: IBookingRepository = Depends(get_booking_repository),
    rates: StaffingRates = Depends(get_staffing_rates)
) -> IHousekeepingService:
    """
    Create housekeeping service with full dependency injection.

    All repositories share the request-scoped session from get_db.
    Easy to override individual components for testing.
    """
    return HousekeepingService(
        hotel_repo=hotel_repo,
        room_repo=room_repo,
        booking_repo=booking_repo,
        rates=rates
    )

def get_catalog_service(
    hotel_repo: IHotelRepository = Depends(get_hotel_repository),
    room_repo: IRoomRepository = Depends(get_room_repository)
) -> ICatalogService:
    return CatalogService(hotel_repo=hotel_repo, room_repo=room_repo)
