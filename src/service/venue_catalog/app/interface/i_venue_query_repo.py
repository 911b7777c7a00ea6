"""
Venue Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity


class IVenueQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, venue_id: str) -> Optional[VenueEntity]:
        """Venue without sections, or None"""
        pass

    @abstractmethod
    async def list_all(self) -> List[VenueEntity]:
        """
        All venues without sections, the candidate pool for map matching

        Returns:
            Venues ordered by name
        """
        pass
