"""
Venue Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity
from src.service.venue_catalog.driven_adapter.model.venue_model import VenueModel


class VenueQueryRepoImpl(IVenueQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _model_to_entity(model: VenueModel) -> VenueEntity:
        return VenueEntity(
            id=model.id,
            name=model.name,
            city=model.city,
            state=model.state,
            map_document=model.map_document,
        )

    @Logger.io
    async def get_by_id(self, *, venue_id: str) -> Optional[VenueEntity]:
        async with self._get_session() as session:
            model = await session.get(VenueModel, venue_id)
            return self._model_to_entity(model) if model else None

    @Logger.io(truncate_content=True)
    async def list_all(self) -> List[VenueEntity]:
        async with self._get_session() as session:
            result = await session.execute(select(VenueModel).order_by(VenueModel.name))
            return [self._model_to_entity(model) for model in result.scalars().all()]
