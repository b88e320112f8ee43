"""Shared test fixtures for hotel-gate."""

import os
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from hotel_gate.tickets.models import TicketStatus

SECRET_KEY = "test-secret-key-for-unit-tests"


@pytest.fixture
def app():
    """Create a test app with in-memory DB."""
    os.environ["HOTELGATE_DB_URL"] = "sqlite+aiosqlite://"
    os.environ["HOTELGATE_SECRET_KEY"] = SECRET_KEY

    # Clear caches and singletons so new env vars take effect
    from hotel_gate.common.config import get_settings
    get_settings.cache_clear()

    from hotel_gate.deps import reset_singletons
    reset_singletons()

    from hotel_gate.app import create_app
    return create_app()


@pytest.fixture
async def client(app):
    # Manually init DB since ASGITransport doesn't run lifespan
    from hotel_gate.deps import get_db
    db = get_db()
    await db.init()
    await db.create_all()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await db.close()


@pytest.fixture
def seed(client):
    """Factory writing users, enrollments, tickets and hotels to the app DB."""
    from hotel_gate.deps import (
        get_db,
        get_hotel_repository,
        get_ticket_repository,
        get_user_service,
    )
    return Seeder(get_db(), get_user_service(), get_ticket_repository(), get_hotel_repository())


class Seeder:
    def __init__(self, db, users, tickets, hotels):
        self.db = db
        self.users = users
        self.tickets = tickets
        self.hotels = hotels
        self._emails = 0

    async def user_with_token(self):
        """Create a user with a stored session; returns (user_id, auth headers)."""
        self._emails += 1
        async with self.db.get_session() as session:
            user = await self.users.create_user(
                session, f"user{self._emails}@example.com", "secret"
            )
            token = await self.users.create_session(session, user.id)
        return user.id, {"Authorization": f"Bearer {token}"}

    async def enrollment(self, user_id: int) -> int:
        async with self.db.get_session() as session:
            enrollment = await self.tickets.create_enrollment(
                session, user_id, name="user", cpf="123",
                birthday=datetime(1995, 5, 17, tzinfo=timezone.utc), phone="123456",
            )
        return enrollment.id

    async def ticket(
        self,
        enrollment_id: int,
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> int:
        async with self.db.get_session() as session:
            ticket_type = await self.tickets.create_ticket_type(
                session, "nice ticket", price=120,
                is_remote=is_remote, includes_hotel=includes_hotel,
            )
            ticket = await self.tickets.create_ticket(
                session, enrollment_id, ticket_type.id, status=status,
            )
        return ticket.id

    async def entitled_user(self):
        user_id, headers = await self.user_with_token()
        enrollment_id = await self.enrollment(user_id)
        await self.ticket(enrollment_id)
        return user_id, headers

    async def hotel(self, name: str = "nice hotel", image: str = "nice image", rooms=()):
        async with self.db.get_session() as session:
            hotel = await self.hotels.create_hotel(session, name, image)
            for room_name, capacity in rooms:
                await self.hotels.create_room(session, hotel.id, room_name, capacity)
        return hotel.id
