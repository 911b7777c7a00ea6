from sqlalchemy import Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class EventSectionModel(Base):
    __tablename__ = 'event_section'
    __table_args__ = (UniqueConstraint('event_id', 'section_id', name='uq_event_section'),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    event_id: Mapped[str] = mapped_column(String(36), ForeignKey('event.id'), index=True)
    section_id: Mapped[str] = mapped_column(String(36), ForeignKey('section.id'))
    price: Mapped[float] = mapped_column(Float, nullable=False)
    service_fee: Mapped[float] = mapped_column(Float, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    available_count: Mapped[int] = mapped_column(Integer, nullable=False)
