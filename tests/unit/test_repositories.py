"""Tests for ticket lookup and hotel store against an in-memory database."""

from datetime import datetime, timezone

import pytest

from hotel_gate.common.config import HotelGateSettings
from hotel_gate.common.database import DatabaseManager
from hotel_gate.common.exceptions import NotFoundError, UnauthorizedError
from hotel_gate.hotels.entitlements import EntitlementPolicy
from hotel_gate.hotels.repository import HotelRepository
from hotel_gate.tickets.models import TicketStatus
from hotel_gate.tickets.repository import TicketRepository
from hotel_gate.users.service import UserService


SECRET_KEY = "test-secret-key-for-unit-tests"
BIRTHDAY = datetime(1995, 5, 17, tzinfo=timezone.utc)


def make_settings(**overrides) -> HotelGateSettings:
    defaults = {"secret_key": SECRET_KEY, "db_url": "sqlite+aiosqlite://"}
    defaults.update(overrides)
    return HotelGateSettings(**defaults)


@pytest.fixture
async def db():
    manager = DatabaseManager(make_settings())
    await manager.init()
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def tickets():
    return TicketRepository()


@pytest.fixture
def hotels():
    return HotelRepository()


async def make_user(session, email="u@example.com"):
    return await UserService(make_settings()).create_user(session, email, "pw")


async def make_enrollment(tickets, session, user_id):
    return await tickets.create_enrollment(
        session, user_id, name="user", cpf="123", birthday=BIRTHDAY, phone="123456",
    )


class TestFindTicketByUser:
    async def test_no_enrollment(self, db, tickets):
        async with db.get_session() as session:
            user = await make_user(session)
        async with db.get_session() as session:
            assert await tickets.find_ticket_by_user(session, user.id) is None

    async def test_enrollment_without_ticket(self, db, tickets):
        async with db.get_session() as session:
            user = await make_user(session)
            await make_enrollment(tickets, session, user.id)
        async with db.get_session() as session:
            assert await tickets.find_enrollment_by_user(session, user.id) is not None
            assert await tickets.find_ticket_by_user(session, user.id) is None

    async def test_ticket_with_type_loaded(self, db, tickets):
        async with db.get_session() as session:
            user = await make_user(session)
            enrollment = await make_enrollment(tickets, session, user.id)
            ticket_type = await tickets.create_ticket_type(
                session, "nice ticket", price=120, is_remote=False, includes_hotel=True,
            )
            await tickets.create_ticket(
                session, enrollment.id, ticket_type.id, status=TicketStatus.PAID,
            )
        async with db.get_session() as session:
            ticket = await tickets.find_ticket_by_user(session, user.id)
            assert ticket is not None
            assert ticket.status == TicketStatus.PAID
            assert ticket.ticket_type.includes_hotel is True
            assert ticket.ticket_type.is_remote is False
            assert ticket.ticket_type.price == 120

    async def test_other_users_ticket_not_returned(self, db, tickets):
        async with db.get_session() as session:
            owner = await make_user(session, "owner@example.com")
            other = await make_user(session, "other@example.com")
            enrollment = await make_enrollment(tickets, session, owner.id)
            ticket_type = await tickets.create_ticket_type(session, "t", price=1)
            await tickets.create_ticket(session, enrollment.id, ticket_type.id)
        async with db.get_session() as session:
            assert await tickets.find_ticket_by_user(session, other.id) is None

    async def test_latest_ticket_wins(self, db, tickets):
        async with db.get_session() as session:
            user = await make_user(session)
            enrollment = await make_enrollment(tickets, session, user.id)
            ticket_type = await tickets.create_ticket_type(session, "t", price=1)
            await tickets.create_ticket(session, enrollment.id, ticket_type.id)
            latest = await tickets.create_ticket(
                session, enrollment.id, ticket_type.id, status=TicketStatus.PAID,
            )
        async with db.get_session() as session:
            ticket = await tickets.find_ticket_by_user(session, user.id)
            assert ticket.id == latest.id

    async def test_policy_over_real_lookup(self, db, tickets):
        policy = EntitlementPolicy(tickets)
        async with db.get_session() as session:
            user = await make_user(session)
            with pytest.raises(NotFoundError):
                await policy.check_hotel_entitlement(session, user.id)

            enrollment = await make_enrollment(tickets, session, user.id)
            remote = await tickets.create_ticket_type(
                session, "remote", price=100, is_remote=True, includes_hotel=True,
            )
            await tickets.create_ticket(
                session, enrollment.id, remote.id, status=TicketStatus.PAID,
            )
            with pytest.raises(UnauthorizedError):
                await policy.check_hotel_entitlement(session, user.id)


class TestHotelStore:
    async def test_list_empty(self, db, hotels):
        async with db.get_session() as session:
            assert await hotels.list_hotels(session) == []

    async def test_list_in_id_order(self, db, hotels):
        async with db.get_session() as session:
            first = await hotels.create_hotel(session, "A", "a.png")
            second = await hotels.create_hotel(session, "B", "b.png")
        async with db.get_session() as session:
            listed = await hotels.list_hotels(session)
            assert [h.id for h in listed] == [first.id, second.id]

    async def test_find_with_only_own_rooms(self, db, hotels):
        async with db.get_session() as session:
            hotel = await hotels.create_hotel(session, "A", "a.png")
            neighbour = await hotels.create_hotel(session, "B", "b.png")
            await hotels.create_room(session, hotel.id, "101", 2)
            await hotels.create_room(session, hotel.id, "102", 3)
            await hotels.create_room(session, neighbour.id, "1", 1)
        async with db.get_session() as session:
            found = await hotels.find_hotel_with_rooms(session, hotel.id)
            assert found.name == "A"
            assert [r.name for r in found.rooms] == ["101", "102"]
            assert all(r.hotel_id == hotel.id for r in found.rooms)

    async def test_find_without_rooms(self, db, hotels):
        async with db.get_session() as session:
            hotel = await hotels.create_hotel(session, "A", "a.png")
        async with db.get_session() as session:
            found = await hotels.find_hotel_with_rooms(session, hotel.id)
            assert found.rooms == []

    async def test_find_missing(self, db, hotels):
        async with db.get_session() as session:
            assert await hotels.find_hotel_with_rooms(session, 42) is None
