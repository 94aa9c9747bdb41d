# services/corpus_builder.py
"""Turns hotel and room records into uniform search documents"""
from typing import Iterable, List, Union

from core.domain import Document, DocumentKind, Hotel, Room


def format_price(price: Union[int, float, None]) -> str:
    """Render a price the way it is shown to guests (100.0 -> "100")."""
    if price is None:
        return ""
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def _join_present(parts: Iterable[str]) -> str:
    return " ".join(p for p in parts if p)


def hotel_document(hotel: Hotel) -> Document:
    text = _join_present([hotel.name, hotel.address, hotel.city, hotel.contact])
    return Document(
        id=str(hotel.id),
        kind=DocumentKind.HOTEL,
        title=hotel.name or "",
        text=text,
        payload=hotel.to_payload()
    )


def room_document(room: Room) -> Document:
    amenities = ", ".join(a for a in room.amenities if a)
    text = _join_present([room.room_type, amenities, format_price(room.price_per_night)])
    return Document(
        id=str(room.id),
        kind=DocumentKind.ROOM,
        title=room.room_type or "",
        text=text,
        payload=room.to_payload()
    )


def build_corpus(hotels: Iterable[Hotel], rooms: Iterable[Room]) -> List[Document]:
    """
    Build one document per record, hotels first then rooms.

    Nothing is filtered out; the enumeration order is the tie-break order
    used by the ranker.
    """
    documents = [hotel_document(h) for h in hotels]
    documents.extend(room_document(r) for r in rooms)
    return documents
