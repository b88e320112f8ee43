"""Hotel store — hotels and their rooms by primary key."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_gate.hotels.models import HotelModel, RoomModel


class HotelRepository:
    """Hotel and room persistence."""

    async def list_hotels(self, session: AsyncSession) -> list[HotelModel]:
        result = await session.execute(select(HotelModel).order_by(HotelModel.id))
        return list(result.scalars().all())

    async def find_hotel_with_rooms(
        self, session: AsyncSession, hotel_id: int
    ) -> HotelModel | None:
        result = await session.execute(
            select(HotelModel)
            .where(HotelModel.id == hotel_id)
            .options(selectinload(HotelModel.rooms))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create_hotel(
        self, session: AsyncSession, name: str, image: str
    ) -> HotelModel:
        hotel = HotelModel(name=name, image=image)
        session.add(hotel)
        await session.flush()
        return hotel

    async def create_room(
        self, session: AsyncSession, hotel_id: int, name: str, capacity: int
    ) -> RoomModel:
        room = RoomModel(hotel_id=hotel_id, name=name, capacity=capacity)
        session.add(room)
        await session.flush()
        return room
