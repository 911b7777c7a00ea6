"""
Venue Command Repository Implementation - CQRS Write Side
"""

from typing import AsyncContextManager, Callable

import attrs
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.record_id import new_record_id
from src.service.venue_catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity
from src.service.venue_catalog.driven_adapter.model.venue_model import VenueModel


class VenueCommandRepoImpl(IVenueCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def create(self, *, venue: VenueEntity) -> VenueEntity:
        async with self.session_factory() as session:
            venue_model = VenueModel(
                id=venue.id or new_record_id(),
                name=venue.name,
                city=venue.city,
                state=venue.state,
                map_document=venue.map_document,
            )
            session.add(venue_model)
            await session.commit()
            return attrs.evolve(venue, id=venue_model.id)

    @Logger.io(truncate_content=True)
    async def update_map_document(self, *, venue_id: str, map_document: str) -> None:
        async with self.session_factory() as session:
            result = await session.execute(
                update(VenueModel)
                .where(VenueModel.id == venue_id)
                .values(map_document=map_document)
            )
            if result.rowcount == 0:
                raise NotFoundError(f'Venue not found: {venue_id}')
            await session.commit()
