"""
Venue Command Repository Interface - CQRS Write Side
"""

from abc import ABC, abstractmethod

from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity


class IVenueCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, venue: VenueEntity) -> VenueEntity:
        """Persist a new venue; returns it with its generated id"""
        pass

    @abstractmethod
    async def update_map_document(self, *, venue_id: str, map_document: str) -> None:
        """Attach (or replace) the stored seating-chart document"""
        pass
