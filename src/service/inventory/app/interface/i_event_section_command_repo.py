from abc import ABC, abstractmethod
from typing import List

from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity


class IEventSectionCommandRepo(ABC):
    @abstractmethod
    async def create_many(
        self, *, event_sections: List[EventSectionEntity]
    ) -> List[EventSectionEntity]:
        """
        Persist new event sections

        Returns:
            The event sections with their generated ids, in input order
        """
        pass
