"""
Event Command Repository Interface - CQRS Write Side
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.inventory.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        """Persist a new event; returns it with its generated id"""
        pass

    @abstractmethod
    async def update_price_envelope(
        self,
        *,
        event_id: str,
        price_from: float,
        price_to: float,
        list_price_from: Optional[float] = None,
        list_price_to: Optional[float] = None,
    ) -> None:
        """
        Overwrite the event's price envelope

        list_price_* are only written when given (first discount run)
        """
        pass
