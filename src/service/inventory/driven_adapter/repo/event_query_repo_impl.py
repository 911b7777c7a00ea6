"""
Event Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.inventory.domain.entity.event_entity import EventEntity
from src.service.inventory.driven_adapter.model.event_model import EventModel


def event_model_to_entity(model: EventModel) -> EventEntity:
    return EventEntity(
        id=model.id,
        venue_id=model.venue_id,
        title=model.title,
        description=model.description,
        event_date=model.event_date,
        event_time=model.event_time,
        doors_open_time=model.doors_open_time,
        category=model.category,
        performer=model.performer,
        image_url=model.image_url,
        price_from=model.price_from,
        price_to=model.price_to,
        list_price_from=model.list_price_from,
        list_price_to=model.list_price_to,
        is_featured=model.is_featured,
        is_active=model.is_active,
    )


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        async with self._get_session() as session:
            model = await session.get(EventModel, event_id)
            return event_model_to_entity(model) if model else None

    @Logger.io
    async def list_by_venue(self, *, venue_id: str) -> List[EventEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventModel)
                .where(EventModel.venue_id == venue_id)
                .order_by(EventModel.event_date, EventModel.title)
            )
            return [event_model_to_entity(model) for model in result.scalars().all()]
