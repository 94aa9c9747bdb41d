# services/catalog_service.py
from typing import List, Optional

from core.domain import Hotel, RoomAvailability
from core.interfaces import ICatalogService, IHotelRepository, IRoomRepository

class CatalogService(ICatalogService):
    """Hotel lookup and available-room listing used by the voice assistant"""

    def __init__(self, hotel_repo: IHotelRepository, room_repo: IRoomRepository):
        self.hotel_repo = hotel_repo
        self.room_repo = room_repo

    async def find_hotels(self, query: Optional[str] = None) -> List[Hotel]:
        text = query.strip() if query else None
        return await self.hotel_repo.list_hotels(text=text or None)

    async def get_availability(
        self,
        hotel_id: Optional[str] = None,
        room_type: Optional[str] = None
    ) -> List[RoomAvailability]:
        rooms = await self.room_repo.list_rooms(
            hotel_id=hotel_id, room_type=room_type, available_only=True
        )
        hotel_ids = list(dict.fromkeys(r.hotel_id for r in rooms))
        hotels = await self.hotel_repo.get_by_ids(hotel_ids)
        hotel_by_id = {h.id: h for h in hotels}
        return [RoomAvailability(room=r, hotel=hotel_by_id.get(r.hotel_id)) for r in rooms]
