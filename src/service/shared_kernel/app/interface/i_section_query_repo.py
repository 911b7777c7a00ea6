"""
Section Query Repository Interface - Shared Kernel

Read side of venue sections, shared by the venue catalog (reconciliation)
and inventory synthesis (pricing).
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


class ISectionQueryRepo(ABC):
    @abstractmethod
    async def list_by_venue(self, *, venue_id: str) -> List[SectionEntity]:
        """
        List all sections of a venue

        Returns:
            Sections ordered by sort_order, then name
        """
        pass
