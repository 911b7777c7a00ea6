from typing import Optional

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TicketListingModel(Base):
    __tablename__ = 'ticket_listing'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    event_section_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('event_section.id'), index=True
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    row_name: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    seat_numbers: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    is_resale: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_lowest_price: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_clear_view: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='available', nullable=False)
