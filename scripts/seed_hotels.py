#!/usr/bin/env python3
"""Seed the database with a demo user holding a paid hotel ticket, and hotels.

Usage:
    python scripts/seed_hotels.py
"""

import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from hotel_gate.common.config import get_settings
from hotel_gate.common.database import DatabaseManager
from hotel_gate.hotels.repository import HotelRepository
from hotel_gate.tickets.models import TicketStatus
from hotel_gate.tickets.repository import TicketRepository
from hotel_gate.users.service import UserService

HOTEL_SEEDS = [
    {"name": "Seaside Resort", "image": "https://example.com/resort.jpg", "rooms": [("101", 1), ("102", 2), ("201", 3)]},
    {"name": "Grand Palace", "image": "https://example.com/palace.jpg", "rooms": [("1", 2), ("2", 2)]},
    {"name": "Mountain Lodge", "image": "https://example.com/world.jpg", "rooms": []},
]

DEMO_EMAIL = "demo@hotelgate.dev"


async def seed_hotels() -> None:
    settings = get_settings()
    db = DatabaseManager(settings)
    await db.init()
    await db.create_all()

    users = UserService(settings)
    tickets = TicketRepository()
    hotels = HotelRepository()

    async with db.get_session() as session:
        existing = await hotels.list_hotels(session)
        if existing:
            print(f"  [skip] {len(existing)} hotels already exist")
        else:
            for seed in HOTEL_SEEDS:
                hotel = await hotels.create_hotel(session, seed["name"], seed["image"])
                for name, capacity in seed["rooms"]:
                    await hotels.create_room(session, hotel.id, name, capacity)
                print(f"  [created] {seed['name']} ({len(seed['rooms'])} rooms)")

        user = await users.get_by_email(session, DEMO_EMAIL)
        if user is None:
            user = await users.create_user(session, DEMO_EMAIL, "demo-password")

        if await tickets.find_enrollment_by_user(session, user.id) is None:
            enrollment = await tickets.create_enrollment(
                session, user.id, name="Demo", cpf="00000000000",
                birthday=datetime(1990, 1, 1, tzinfo=timezone.utc), phone="000000000",
            )
            ticket_type = await tickets.create_ticket_type(
                session, "In-person + hotel", price=600, is_remote=False, includes_hotel=True,
            )
            await tickets.create_ticket(
                session, enrollment.id, ticket_type.id, status=TicketStatus.PAID,
            )
            print(f"  [created] paid hotel ticket for {DEMO_EMAIL}")
        token = await users.create_session(session, user.id)

    await db.close()
    print(f"\nDone. Demo user {DEMO_EMAIL} (id {user.id}) token:\n{token}")


if __name__ == "__main__":
    asyncio.run(seed_hotels())
