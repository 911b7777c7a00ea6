from abc import ABC, abstractmethod
from typing import List

from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity


class IEventSectionQueryRepo(ABC):
    @abstractmethod
    async def list_by_event(self, *, event_id: str) -> List[EventSectionEntity]:
        pass
