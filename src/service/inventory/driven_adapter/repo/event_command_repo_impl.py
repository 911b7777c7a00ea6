"""
Event Command Repository Implementation - CQRS Write Side
"""

from typing import Any, AsyncContextManager, Callable, Optional

import attrs
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.record_id import new_record_id
from src.service.inventory.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.inventory.domain.entity.event_entity import EventEntity
from src.service.inventory.driven_adapter.model.event_model import EventModel


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        created = attrs.evolve(event, id=event.id or new_record_id())
        async with self.session_factory() as session:
            session.add(EventModel(**attrs.asdict(created, recurse=False)))
            await session.commit()
        return created

    @Logger.io
    async def update_price_envelope(
        self,
        *,
        event_id: str,
        price_from: float,
        price_to: float,
        list_price_from: Optional[float] = None,
        list_price_to: Optional[float] = None,
    ) -> None:
        values: dict[str, Any] = {'price_from': price_from, 'price_to': price_to}
        if list_price_from is not None:
            values['list_price_from'] = list_price_from
        if list_price_to is not None:
            values['list_price_to'] = list_price_to

        async with self.session_factory() as session:
            result = await session.execute(
                update(EventModel).where(EventModel.id == event_id).values(**values)
            )
            if result.rowcount == 0:
                raise NotFoundError(f'Event not found: {event_id}')
            await session.commit()
