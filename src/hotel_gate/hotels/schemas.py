"""Pydantic schemas for hotel endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(..., alias="hotelId")
    created_at: UtcDatetime = Field(..., alias="createdAt")
    updated_at: UtcDatetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HotelResponse(BaseModel):
    id: int
    name: str
    image: str
    created_at: UtcDatetime = Field(..., alias="createdAt")
    updated_at: UtcDatetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HotelWithRoomsResponse(HotelResponse):
    rooms: list[RoomResponse] = Field(default_factory=list, alias="Rooms")
