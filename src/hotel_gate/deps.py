"""Dependency injection singletons for hotel-gate."""

from hotel_gate.common.config import get_settings
from hotel_gate.common.database import DatabaseManager
from hotel_gate.hotels.entitlements import EntitlementPolicy
from hotel_gate.hotels.repository import HotelRepository
from hotel_gate.hotels.service import HotelsService
from hotel_gate.tickets.repository import TicketRepository
from hotel_gate.users.service import UserService

_db: DatabaseManager | None = None
_tickets: TicketRepository | None = None
_hotel_store: HotelRepository | None = None
_policy: EntitlementPolicy | None = None
_hotels: HotelsService | None = None
_users: UserService | None = None


def get_db() -> DatabaseManager:
    global _db
    if _db is None:
        _db = DatabaseManager(get_settings())
    return _db


def get_ticket_repository() -> TicketRepository:
    global _tickets
    if _tickets is None:
        _tickets = TicketRepository()
    return _tickets


def get_hotel_repository() -> HotelRepository:
    global _hotel_store
    if _hotel_store is None:
        _hotel_store = HotelRepository()
    return _hotel_store


def get_entitlement_policy() -> EntitlementPolicy:
    global _policy
    if _policy is None:
        _policy = EntitlementPolicy(get_ticket_repository())
    return _policy


def get_hotels_service() -> HotelsService:
    global _hotels
    if _hotels is None:
        _hotels = HotelsService(get_entitlement_policy(), get_hotel_repository())
    return _hotels


def get_user_service() -> UserService:
    global _users
    if _users is None:
        _users = UserService(get_settings())
    return _users


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _db, _tickets, _hotel_store, _policy, _hotels, _users
    _db = None
    _tickets = None
    _hotel_store = None
    _policy = None
    _hotels = None
    _users = None
