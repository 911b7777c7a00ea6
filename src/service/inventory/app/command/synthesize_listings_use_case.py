"""
Synthesize Listings Use Case

Generates ticket listings for every priced section of an event, priced
within the event's envelope.
"""

from typing import Dict, List, Sequence

from src.platform.exception.exceptions import NotFoundError, SynthesisPreconditionError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.dto.synthesis_result import ListingSynthesisResult
from src.service.inventory.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.inventory.app.interface.i_event_section_query_repo import IEventSectionQueryRepo
from src.service.inventory.app.interface.i_ticket_listing_command_repo import (
    ITicketListingCommandRepo,
)
from src.service.inventory.domain.entity.event_entity import EventEntity
from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity
from src.service.inventory.domain.entity.ticket_listing_entity import TicketListingEntity
from src.service.inventory.domain.inventory_synthesis_domain import event_price_band
from src.service.inventory.domain.listing_generator import ListingGenerator
from src.service.inventory.domain.value_object.price_band import PriceBand
from src.service.shared_kernel.app.interface.i_section_query_repo import ISectionQueryRepo
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


class SynthesizeListingsUseCase:
    def __init__(
        self,
        event_query_repo: IEventQueryRepo,
        section_query_repo: ISectionQueryRepo,
        event_section_query_repo: IEventSectionQueryRepo,
        ticket_listing_command_repo: ITicketListingCommandRepo,
        listing_generator: ListingGenerator,
    ):
        self.event_query_repo = event_query_repo
        self.section_query_repo = section_query_repo
        self.event_section_query_repo = event_section_query_repo
        self.ticket_listing_command_repo = ticket_listing_command_repo
        self.listing_generator = listing_generator

    async def load_event_sections(
        self, *, event_id: str
    ) -> tuple[EventEntity, List[EventSectionEntity]]:
        """
        Raises:
            NotFoundError: event does not exist
            SynthesisPreconditionError: event has no priced sections
        """
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(f'Event not found: {event_id}')
        event_sections = await self.event_section_query_repo.list_by_event(event_id=event_id)
        if not event_sections:
            raise SynthesisPreconditionError(f'No sections found for event {event.title}')
        return event, event_sections

    async def generate_and_store(
        self,
        *,
        event: EventEntity,
        event_sections: Sequence[EventSectionEntity],
        band: PriceBand,
        target_per_section: int,
    ) -> ListingSynthesisResult:
        sections: Dict[str, SectionEntity] = {
            section.id: section  # type: ignore[misc]
            for section in await self.section_query_repo.list_by_venue(venue_id=event.venue_id)
        }

        result = ListingSynthesisResult(event_id=event.id or '')
        listings: List[TicketListingEntity] = []
        for event_section in event_sections:
            section = sections.get(event_section.section_id)
            if section is None:
                Logger.base.warning(
                    f'⚠️ [SYNTH] Section {event_section.section_id} no longer exists, skipped'
                )
                continue
            generated = self.listing_generator.generate(
                event_section=event_section,
                section=section,
                band=band,
                target_per_section=target_per_section,
            )
            result.sections_processed += 1
            if not generated:
                result.sections_without_listings += 1
            listings.extend(generated)

        created = await self.ticket_listing_command_repo.create_many(listings=listings)
        result.listings_created = len(created)
        result.tickets_created = sum(listing.quantity for listing in created)
        return result

    @Logger.io
    async def synthesize(
        self,
        *,
        event_id: str,
        target_quantity_per_section: int = 20,
        price_variation: float = 0.2,
    ) -> ListingSynthesisResult:
        """
        Generate listings for all event sections

        Args:
            event_id: Event to stock
            target_quantity_per_section: Rough number of tickets per section
            price_variation: Minimum relative spread of the price band over price_from

        Raises:
            NotFoundError: event does not exist
            SynthesisPreconditionError: no priced sections or no price envelope
        """
        event, event_sections = await self.load_event_sections(event_id=event_id)
        band = event_price_band(event, price_variation=price_variation)

        result = await self.generate_and_store(
            event=event,
            event_sections=event_sections,
            band=band,
            target_per_section=target_quantity_per_section,
        )
        Logger.base.info(
            f'🎟️ [SYNTH] event={event_id}: {result.listings_created} listings / '
            f'{result.tickets_created} tickets across {result.sections_processed} sections'
        )
        return result
