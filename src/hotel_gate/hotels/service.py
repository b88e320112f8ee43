"""Hotel query service — entitlement-gated reads of hotels and rooms."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_gate.common.exceptions import NotFoundError
from hotel_gate.hotels.entitlements import EntitlementPolicy
from hotel_gate.hotels.models import HotelModel

# Largest value an INTEGER primary key can hold in the backing store.
MAX_HOTEL_ID = 2**63 - 1


class HotelStore(Protocol):
    async def list_hotels(self, session: AsyncSession) -> list[HotelModel]:
        ...

    async def find_hotel_with_rooms(
        self, session: AsyncSession, hotel_id: int
    ) -> HotelModel | None:
        ...


class HotelsService:
    """Hotel reads, each preceded by a fresh entitlement check."""

    def __init__(self, policy: EntitlementPolicy, hotel_store: HotelStore):
        self.policy = policy
        self.hotel_store = hotel_store

    async def list_hotels(self, session: AsyncSession, user_id: int) -> list[HotelModel]:
        await self.policy.check_hotel_entitlement(session, user_id)
        return await self.hotel_store.list_hotels(session)

    async def get_hotel_rooms(
        self, session: AsyncSession, hotel_id: int | None, user_id: int
    ) -> HotelModel:
        """Return the hotel with its ``rooms`` loaded.

        A missing, non-positive or out-of-range ``hotel_id`` is reported as
        ``NotFoundError`` once the entitlement check has passed.
        """
        await self.policy.check_hotel_entitlement(session, user_id)

        if hotel_id is None or not 0 < hotel_id <= MAX_HOTEL_ID:
            raise NotFoundError()

        hotel = await self.hotel_store.find_hotel_with_rooms(session, hotel_id)
        if hotel is None:
            raise NotFoundError()
        return hotel
