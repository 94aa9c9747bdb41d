"""Shared pytest fixtures for the hotel AI service tests."""
from __future__ import annotations

import pytest

from core.domain import Hotel, Room, StaffingRates


@pytest.fixture()
def rates() -> StaffingRates:
    return StaffingRates()


@pytest.fixture()
def sea_view() -> Hotel:
    return Hotel(id="H-1", name="Sea View", city="Goa", owner="owner-1")


@pytest.fixture()
def suite() -> Room:
    return Room(id="R-1", hotel_id="H-1", room_type="Suite", price_per_night=100, amenities=["wifi"])


@pytest.fixture()
def sample_hotels() -> list[Hotel]:
    return [
        Hotel(
            id="H-1",
            name="Sea View",
            address="12 Beach Road",
            contact="+91 555 0100",
            city="Goa",
            owner="owner-1",
        ),
        Hotel(
            id="H-2",
            name="Mountain Lodge",
            address="3 Pine Street",
            contact="+91 555 0200",
            city="Manali",
            owner="owner-2",
        ),
    ]


@pytest.fixture()
def sample_rooms() -> list[Room]:
    return [
        Room(id="R-1", hotel_id="H-1", room_type="Suite", price_per_night=300.0,
             amenities=["Free WiFi", "Sea View"]),
        Room(id="R-2", hotel_id="H-1", room_type="Double Bed", price_per_night=150.0,
             amenities=["Free WiFi", "Room Service"]),
        Room(id="R-3", hotel_id="H-2", room_type="Single Bed", price_per_night=80.0,
             amenities=["Mountain View"], is_available=False),
    ]
