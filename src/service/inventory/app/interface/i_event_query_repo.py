"""
Event Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.inventory.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_by_venue(self, *, venue_id: str) -> List[EventEntity]:
        """Active and inactive events hosted at the venue"""
        pass
