"""
Venue Entity

A venue record with its (optional) stored seating-chart document. Sections
are loaded separately through ISectionQueryRepo.
"""

from typing import List, Optional

import attrs

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Venue {attribute.name} cannot be empty')


@attrs.define
class VenueEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    city: str = 'Unknown'
    state: Optional[str] = None
    map_document: Optional[str] = None  # Raw document content, header included
    sections: List[SectionEntity] = attrs.field(factory=list)
    id: Optional[str] = None

    @property
    def has_map(self) -> bool:
        return bool(self.map_document)
