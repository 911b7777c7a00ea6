"""
Ticket Listing Command Repository Interface - CQRS Write Side
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.inventory.domain.entity.ticket_listing_entity import TicketListingEntity


class ITicketListingCommandRepo(ABC):
    @abstractmethod
    async def create_many(
        self, *, listings: List[TicketListingEntity]
    ) -> List[TicketListingEntity]:
        pass

    @abstractmethod
    async def delete_by_event_sections(self, *, event_section_ids: List[str]) -> int:
        """
        Remove every listing of the given event sections

        Returns:
            Number of deleted listings
        """
        pass
