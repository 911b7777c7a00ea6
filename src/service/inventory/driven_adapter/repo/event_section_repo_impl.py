"""
Event Section Repository Implementations - query and command sides
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

import attrs
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.record_id import new_record_id
from src.service.inventory.app.interface.i_event_section_command_repo import (
    IEventSectionCommandRepo,
)
from src.service.inventory.app.interface.i_event_section_query_repo import IEventSectionQueryRepo
from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity
from src.service.inventory.driven_adapter.model.event_section_model import EventSectionModel


class EventSectionQueryRepoImpl(IEventSectionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def list_by_event(self, *, event_id: str) -> List[EventSectionEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventSectionModel)
                .where(EventSectionModel.event_id == event_id)
                .order_by(EventSectionModel.id)
            )
            return [
                EventSectionEntity(
                    id=model.id,
                    event_id=model.event_id,
                    section_id=model.section_id,
                    price=model.price,
                    service_fee=model.service_fee,
                    capacity=model.capacity,
                    available_count=model.available_count,
                )
                for model in result.scalars().all()
            ]


class EventSectionCommandRepoImpl(IEventSectionCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create_many(
        self, *, event_sections: List[EventSectionEntity]
    ) -> List[EventSectionEntity]:
        if not event_sections:
            return []
        created = [attrs.evolve(es, id=es.id or new_record_id()) for es in event_sections]
        async with self.session_factory() as session:
            session.add_all(EventSectionModel(**attrs.asdict(es)) for es in created)
            await session.commit()
        return created
