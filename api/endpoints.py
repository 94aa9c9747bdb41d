# api/endpoints.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query

from config import settings
from core.errors import InvalidArgumentError, NotFoundError, UnauthorizedError
from core.interfaces import ICatalogService, IHousekeepingService, ISearchService
from services.factory import (
    get_catalog_service, get_housekeeping_service, get_search_service
)
from api.schemas import (
    AvailabilityItem, AvailabilityResponse, HotelsResponse,
    HousekeepingPlanResponse, SearchRequest, SearchResponse, SearchSource
)

logger = logging.getLogger(settings.LOGGER_NAME)

router = APIRouter(prefix=settings.API_PREFIX)

# Dependency injection
def get_current_owner_id(
    owner_id: Optional[str] = Header(None, alias=settings.OWNER_ID_HEADER)
) -> str:
    """Opaque owner identity supplied by the upstream auth layer."""
    if not owner_id or not owner_id.strip():
        raise UnauthorizedError()
    return owner_id.strip()

# Utility functions
def parse_days(raw: Optional[str]) -> int:
    if raw is None or raw.strip() == "":
        return settings.PLAN_DEFAULT_DAYS
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError("days must be an integer")

# API Endpoints
@router.post("/search", response_model=SearchResponse)
@router.post("/rag-search", response_model=SearchResponse)
async def search_endpoint(
    request: Optional[SearchRequest] = None,
    search_service: ISearchService = Depends(get_search_service)
) -> SearchResponse:
    query = request.query if request else None
    outcome = await search_service.search(query)
    return SearchResponse(
        success=True,
        context=outcome.context,
        sources=[SearchSource.from_result(r) for r in outcome.results]
    )

@router.get(
    "/housekeeping-plan",
    response_model=HousekeepingPlanResponse,
    response_model_exclude_none=True
)
async def housekeeping_plan_endpoint(
    days: Optional[str] = Query(None),
    owner_id: str = Depends(get_current_owner_id),
    housekeeping_service: IHousekeepingService = Depends(get_housekeeping_service)
) -> HousekeepingPlanResponse:
    requested = parse_days(days)
    try:
        result = await housekeeping_service.plan_for_owner(owner_id, requested)
    except NotFoundError as e:
        # "No data" is reported as a soft failure, not an error status
        logger.info(f"Housekeeping plan requested by owner without hotel: {owner_id}")
        return HousekeepingPlanResponse(success=False, message=e.message)
    return HousekeepingPlanResponse.from_plan(result)

@router.get("/hotels", response_model=HotelsResponse)
async def search_hotels(
    q: Optional[str] = Query(None),
    catalog_service: ICatalogService = Depends(get_catalog_service)
) -> HotelsResponse:
    hotels = await catalog_service.find_hotels(q)
    return HotelsResponse(hotels=[h.to_payload() for h in hotels])

@router.get("/availability", response_model=AvailabilityResponse)
async def get_availability(
    hotel_id: Optional[str] = Query(None, alias="hotelId"),
    room_type: Optional[str] = Query(None, alias="roomType"),
    catalog_service: ICatalogService = Depends(get_catalog_service)
) -> AvailabilityResponse:
    matches = await catalog_service.get_availability(hotel_id=hotel_id, room_type=room_type)
    return AvailabilityResponse(results=[
        AvailabilityItem(
            hotel=m.hotel.to_payload() if m.hotel else None,
            room=m.room.to_payload()
        )
        for m in matches
    ])
