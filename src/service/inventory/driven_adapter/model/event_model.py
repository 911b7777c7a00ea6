from datetime import date, time
from typing import Optional

from sqlalchemy import Boolean, Date, Float, ForeignKey, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class EventModel(Base):
    __tablename__ = 'event'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    venue_id: Mapped[str] = mapped_column(String(36), ForeignKey('venue.id'), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    event_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    event_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    doors_open_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    performer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price_from: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price_to: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    list_price_from: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    list_price_to: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
