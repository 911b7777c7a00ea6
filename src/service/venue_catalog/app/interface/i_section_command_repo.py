"""
Section Command Repository Interface - CQRS Write Side

Sections are only ever created or gain an svg path; nothing here deletes.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


class ISectionCommandRepo(ABC):
    @abstractmethod
    async def create_many(self, *, sections: List[SectionEntity]) -> List[SectionEntity]:
        """
        Persist new sections

        Returns:
            The sections with their generated ids, in input order
        """
        pass

    @abstractmethod
    async def update_svg_path(self, *, section_id: str, svg_path: str) -> None:
        pass
