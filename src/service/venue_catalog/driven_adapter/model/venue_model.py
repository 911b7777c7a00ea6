from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class VenueModel(Base):
    __tablename__ = 'venue'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    city: Mapped[str] = mapped_column(String(255), default='Unknown', nullable=False)
    state: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    map_document: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
