# database/session.py

import uuid
from datetime import datetime
from typing import AsyncGenerator

from sqlalchemy import (Boolean, Column, DateTime, Float, ForeignKey, Integer,
                        JSON, String)
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.orm import declarative_base

from config import settings

# Setup SQLAlchemy async engine and session maker
async_engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
AsyncSessionLocal = async_sessionmaker(async_engine, expire_on_commit=False)
Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


# ============= Models =============

class HotelEntity(Base):
    __tablename__ = "hotels"
    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False, default="")
    contact = Column(String, nullable=False, default="")
    city = Column(String, nullable=False, default="")
    owner = Column(String, index=True, nullable=False)  # opaque owner/user id
    created_at = Column(DateTime, default=datetime.utcnow)

class RoomEntity(Base):
    __tablename__ = "rooms"
    id = Column(String, primary_key=True, default=_new_id)
    hotel_id = Column(String, ForeignKey("hotels.id"), index=True, nullable=False)
    room_type = Column(String, nullable=False)
    price_per_night = Column(Float, nullable=False)
    amenities = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

class BookingEntity(Base):
    __tablename__ = "bookings"
    id = Column(String, primary_key=True, default=_new_id)
    user_id = Column(String, nullable=True)
    room_id = Column(String, ForeignKey("rooms.id"), index=True, nullable=False)
    hotel_id = Column(String, ForeignKey("hotels.id"), index=True, nullable=False)
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime, nullable=False)
    total_price = Column(Float, nullable=False, default=0.0)
    guests = Column(Integer, nullable=False, default=1)
    status = Column(String, nullable=False, default="pending")
    payment_method = Column(String, nullable=False, default="Pay At Hotel")
    is_paid = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)


# ============= Dependencies =============

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for FastAPI dependency injection"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

