"""SQLAlchemy models for hotels and rooms."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_gate.common.models import Base, TimestampMixin


class HotelModel(Base, TimestampMixin):
    __tablename__ = "hotels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str] = mapped_column(String(2048), nullable=False)

    rooms: Mapped[list["RoomModel"]] = relationship(
        back_populates="hotel", order_by="RoomModel.id"
    )


class RoomModel(Base, TimestampMixin):
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=False, index=True
    )

    hotel: Mapped[HotelModel] = relationship(back_populates="rooms")
