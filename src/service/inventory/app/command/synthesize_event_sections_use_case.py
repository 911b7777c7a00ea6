"""
Synthesize Event Sections Use Case

Prices every section of the event's venue for that event. Running it again
only adds sections that were added to the venue since.
"""

from typing import List

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.inventory.app.interface.i_event_section_command_repo import (
    IEventSectionCommandRepo,
)
from src.service.inventory.app.interface.i_event_section_query_repo import IEventSectionQueryRepo
from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity
from src.service.inventory.domain.inventory_synthesis_domain import build_event_sections
from src.service.shared_kernel.app.interface.i_section_query_repo import ISectionQueryRepo


class SynthesizeEventSectionsUseCase:
    def __init__(
        self,
        event_query_repo: IEventQueryRepo,
        section_query_repo: ISectionQueryRepo,
        event_section_query_repo: IEventSectionQueryRepo,
        event_section_command_repo: IEventSectionCommandRepo,
        service_fee_rate: float = 0.15,
        default_section_capacity: int = 100,
    ):
        self.event_query_repo = event_query_repo
        self.section_query_repo = section_query_repo
        self.event_section_query_repo = event_section_query_repo
        self.event_section_command_repo = event_section_command_repo
        self.service_fee_rate = service_fee_rate
        self.default_section_capacity = default_section_capacity

    @Logger.io
    async def synthesize(self, *, event_id: str) -> List[EventSectionEntity]:
        """
        Create event sections for the venue sections that have none yet

        Returns:
            Newly created event sections (empty when all already exist)

        Raises:
            NotFoundError: event does not exist
            SynthesisPreconditionError: venue has no sections or event has no price envelope
        """
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(f'Event not found: {event_id}')

        sections = await self.section_query_repo.list_by_venue(venue_id=event.venue_id)
        existing = await self.event_section_query_repo.list_by_event(event_id=event_id)

        event_sections = build_event_sections(
            event=event,
            sections=sections,
            existing_section_ids=[es.section_id for es in existing],
            service_fee_rate=self.service_fee_rate,
            default_capacity=self.default_section_capacity,
        )
        created = await self.event_section_command_repo.create_many(event_sections=event_sections)

        Logger.base.info(
            f'💺 [SYNTH] event={event_id}: {len(created)} new event sections '
            f'({len(existing)} already priced)'
        )
        return created
