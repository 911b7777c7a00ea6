"""
Apply Discount and Regenerate Use Case

Re-stocks an event at a discount from its list price envelope.

Flow:
1. Load the event and its priced sections
2. Plan the discounted band (guardrails on the source envelope)
3. Optionally delete the event's existing listings
4. Generate listings within the discounted band
5. Write the discounted envelope back, recording the list envelope once

With clear_existing=True a repeated run leaves the same shape of inventory
and the same envelope. Without it, listings accumulate.
"""

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.synthesize_listings_use_case import (
    SynthesizeListingsUseCase,
)
from src.service.inventory.app.dto.synthesis_result import DiscountResult
from src.service.inventory.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.inventory.app.interface.i_ticket_listing_command_repo import (
    ITicketListingCommandRepo,
)
from src.service.inventory.domain.inventory_synthesis_domain import plan_discount


class ApplyDiscountAndRegenerateUseCase:
    def __init__(
        self,
        synthesize_listings_use_case: SynthesizeListingsUseCase,
        event_command_repo: IEventCommandRepo,
        ticket_listing_command_repo: ITicketListingCommandRepo,
    ):
        self.synthesize_listings_use_case = synthesize_listings_use_case
        self.event_command_repo = event_command_repo
        self.ticket_listing_command_repo = ticket_listing_command_repo

    @Logger.io
    async def apply(
        self,
        *,
        event_id: str,
        discount_percent: float = 50,
        tickets_per_section: int = 20,
        clear_existing: bool = False,
    ) -> DiscountResult:
        """
        Raises:
            NotFoundError: event does not exist
            SynthesisPreconditionError: event has no priced sections
            DomainError: discount outside [0, 100)
        """
        event, event_sections = await self.synthesize_listings_use_case.load_event_sections(
            event_id=event_id
        )
        plan = plan_discount(event, discount_percent=discount_percent)

        cleared = 0
        if clear_existing:
            cleared = await self.ticket_listing_command_repo.delete_by_event_sections(
                event_section_ids=[es.id for es in event_sections if es.id]
            )

        synthesis = await self.synthesize_listings_use_case.generate_and_store(
            event=event,
            event_sections=event_sections,
            band=plan.band,
            target_per_section=tickets_per_section,
        )

        price_from, price_to = plan.envelope
        first_discount = event.list_price_from is None
        await self.event_command_repo.update_price_envelope(
            event_id=event_id,
            price_from=price_from,
            price_to=price_to,
            list_price_from=plan.source.min_price if first_discount else None,
            list_price_to=plan.source.max_price if first_discount else None,
        )

        Logger.base.info(
            f'🏷️ [DISCOUNT] event={event_id} -{discount_percent}%: envelope '
            f'{price_from}-{price_to}, cleared={cleared} created={synthesis.listings_created}'
        )
        return DiscountResult(
            event_id=event_id,
            discount_percent=discount_percent,
            price_from=price_from,
            price_to=price_to,
            listings_cleared=cleared,
            listings_created=synthesis.listings_created,
            tickets_created=synthesis.tickets_created,
        )
