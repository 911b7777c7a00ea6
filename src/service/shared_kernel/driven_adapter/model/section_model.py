from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SectionModel(Base):
    __tablename__ = 'section'
    __table_args__ = (UniqueConstraint('venue_id', 'svg_path', name='uq_section_venue_svg_path'),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    venue_id: Mapped[str] = mapped_column(String(36), ForeignKey('venue.id'), index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    section_type: Mapped[str] = mapped_column(String(20), default='standard', nullable=False)
    svg_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    capacity: Mapped[int] = mapped_column(Integer, default=100, nullable=False)
    row_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    seats_per_row: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    is_general_admission: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
