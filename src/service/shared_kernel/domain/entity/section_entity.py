"""
Section Entity - Shared Kernel

A seating section of a venue. Owned by the venue catalog (created once, later
only gains an svg_path) and read by inventory synthesis for pricing.
"""

from typing import Optional

import attrs

from src.service.shared_kernel.domain.enum.section_type import SectionType


def _validate_capacity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'Section {attribute.name} cannot be negative')


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError('Section name cannot be empty')


@attrs.define
class SectionEntity:
    venue_id: str
    name: str = attrs.field(validator=_validate_name)
    section_type: SectionType = SectionType.STANDARD
    svg_path: Optional[str] = None
    capacity: int = attrs.field(default=100, validator=_validate_capacity)
    row_count: Optional[int] = None
    seats_per_row: Optional[int] = None
    is_general_admission: bool = False
    sort_order: int = 0
    id: Optional[str] = None

    @property
    def has_svg_path(self) -> bool:
        return bool(self.svg_path)
