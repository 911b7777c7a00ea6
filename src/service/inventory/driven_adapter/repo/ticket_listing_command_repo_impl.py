"""
Ticket Listing Command Repository Implementation - CQRS Write Side
"""

from typing import AsyncContextManager, Callable, List

import attrs
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.record_id import new_record_id
from src.service.inventory.app.interface.i_ticket_listing_command_repo import (
    ITicketListingCommandRepo,
)
from src.service.inventory.domain.entity.ticket_listing_entity import TicketListingEntity
from src.service.inventory.driven_adapter.model.ticket_listing_model import TicketListingModel


class TicketListingCommandRepoImpl(ITicketListingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def create_many(
        self, *, listings: List[TicketListingEntity]
    ) -> List[TicketListingEntity]:
        if not listings:
            return []
        created = [attrs.evolve(listing, id=listing.id or new_record_id()) for listing in listings]
        async with self.session_factory() as session:
            session.add_all(
                TicketListingModel(
                    id=listing.id,
                    event_section_id=listing.event_section_id,
                    price=listing.price,
                    quantity=listing.quantity,
                    row_name=listing.row_name,
                    seat_numbers=listing.seat_numbers,
                    is_resale=listing.is_resale,
                    is_lowest_price=listing.is_lowest_price,
                    has_clear_view=listing.has_clear_view,
                    status=listing.status.value,
                )
                for listing in created
            )
            await session.commit()
        Logger.base.info(f'📝 [LISTING] Inserted {len(created)} listings')
        return created

    @Logger.io
    async def delete_by_event_sections(self, *, event_section_ids: List[str]) -> int:
        if not event_section_ids:
            return 0
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TicketListingModel).where(
                    TicketListingModel.event_section_id.in_(event_section_ids)
                )
            )
            await session.commit()
            return result.rowcount or 0
