"""Hotel entitlement policy.

A user may view hotel data only when their enrollment holds a ticket that
is paid, includes the hotel and is for in-person attendance. Every failing
combination of those three conditions is reported as one
``UnauthorizedError``; a missing enrollment or ticket is a ``NotFoundError``.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_gate.common.exceptions import NotFoundError, UnauthorizedError
from hotel_gate.common.logging import get_logger
from hotel_gate.tickets.models import TicketModel, TicketStatus

logger = get_logger("hotels.entitlements")


class TicketLookup(Protocol):
    async def find_ticket_by_user(
        self, session: AsyncSession, user_id: int
    ) -> TicketModel | None:
        ...


def is_hotel_entitled(ticket: TicketModel) -> bool:
    """True when a loaded ticket grants access to hotel data."""
    ticket_type = ticket.ticket_type
    return (
        ticket.status == TicketStatus.PAID
        and ticket_type.includes_hotel
        and not ticket_type.is_remote
    )


class EntitlementPolicy:
    """Decides whether a user may read hotels and rooms."""

    def __init__(self, ticket_lookup: TicketLookup):
        self.ticket_lookup = ticket_lookup

    async def check_hotel_entitlement(self, session: AsyncSession, user_id: int) -> None:
        """Raise ``NotFoundError`` or ``UnauthorizedError`` unless entitled."""
        ticket = await self.ticket_lookup.find_ticket_by_user(session, user_id)
        if ticket is None:
            logger.debug("No enrollment or ticket for user %s", user_id)
            raise NotFoundError()

        if not is_hotel_entitled(ticket):
            logger.debug("Ticket %s does not grant hotel access", ticket.id)
            raise UnauthorizedError()
