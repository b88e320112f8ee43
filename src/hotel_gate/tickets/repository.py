"""Ticket lookup — enrollment → ticket → ticket type for a user."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_gate.tickets.models import (
    EnrollmentModel,
    TicketModel,
    TicketStatus,
    TicketTypeModel,
)


class TicketRepository:
    """Reads and seeds enrollments and tickets."""

    async def find_ticket_by_user(
        self, session: AsyncSession, user_id: int
    ) -> TicketModel | None:
        """Return the user's latest ticket with its type loaded.

        ``None`` when the user has no enrollment, or an enrollment without
        any ticket.
        """
        result = await session.execute(
            select(TicketModel)
            .join(EnrollmentModel, TicketModel.enrollment_id == EnrollmentModel.id)
            .where(EnrollmentModel.user_id == user_id)
            .options(selectinload(TicketModel.ticket_type))
            .execution_options(populate_existing=True)
            .order_by(TicketModel.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def find_enrollment_by_user(
        self, session: AsyncSession, user_id: int
    ) -> EnrollmentModel | None:
        result = await session.execute(
            select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_enrollment(
        self,
        session: AsyncSession,
        user_id: int,
        name: str,
        cpf: str,
        birthday: datetime,
        phone: str,
    ) -> EnrollmentModel:
        enrollment = EnrollmentModel(
            user_id=user_id, name=name, cpf=cpf, birthday=birthday, phone=phone,
        )
        session.add(enrollment)
        await session.flush()
        return enrollment

    async def create_ticket_type(
        self,
        session: AsyncSession,
        name: str,
        price: int,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> TicketTypeModel:
        ticket_type = TicketTypeModel(
            name=name, price=price, is_remote=is_remote, includes_hotel=includes_hotel,
        )
        session.add(ticket_type)
        await session.flush()
        return ticket_type

    async def create_ticket(
        self,
        session: AsyncSession,
        enrollment_id: int,
        ticket_type_id: int,
        status: TicketStatus = TicketStatus.RESERVED,
    ) -> TicketModel:
        ticket = TicketModel(
            enrollment_id=enrollment_id, ticket_type_id=ticket_type_id, status=status,
        )
        session.add(ticket)
        await session.flush()
        return ticket
