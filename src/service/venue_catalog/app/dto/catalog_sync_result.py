"""Catalog Sync DTOs"""

from dataclasses import dataclass, field
from typing import List

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


@dataclass
class CatalogSyncResult:
    venue_id: str
    mode: str
    created_count: int = 0
    updated_count: int = 0
    conflicts: List[str] = field(default_factory=list)
    created_sections: List[SectionEntity] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return self.created_count + self.updated_count
