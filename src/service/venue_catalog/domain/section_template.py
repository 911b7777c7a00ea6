"""
Section Template - Domain Logic

Generic seating layouts for venues whose seating chart yields no sections
(or that have no chart at all). The layout is picked from the venue name.

[Venue kind by name]  checked in this order, first hit wins
- amphitheater: 'amphitheatre', 'amphitheater', 'pavilion'
- stadium:      'stadium', 'field', 'park'
- theater:      'theatre', 'theater', 'opera'
- club:         'club', 'hall', 'house', 'room'
- arena:        anything else

Template sections carry no svg path, so a later map upload still creates
real sections next to them (see catalog_sync_domain.GENERIC_SECTION_NAMES).
"""

from enum import StrEnum
from typing import Dict, List, Optional, Tuple

import attrs

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.shared_kernel.domain.enum.section_type import SectionType


class VenueKind(StrEnum):
    STADIUM = 'stadium'
    ARENA = 'arena'
    THEATER = 'theater'
    AMPHITHEATER = 'amphitheater'
    CLUB = 'club'


@attrs.define(frozen=True)
class TemplateSection:
    name: str
    section_type: SectionType
    capacity: int
    is_general_admission: bool = False


# 'amphitheater' contains 'theater', so it is checked first
VENUE_KIND_KEYWORDS: Tuple[Tuple[VenueKind, Tuple[str, ...]], ...] = (
    (VenueKind.AMPHITHEATER, ('amphitheatre', 'amphitheater', 'pavilion')),
    (VenueKind.STADIUM, ('stadium', 'field', 'park')),
    (VenueKind.THEATER, ('theatre', 'theater', 'opera')),
    (VenueKind.CLUB, ('club', 'hall', 'house', 'room')),
)

SECTION_TEMPLATES: Dict[VenueKind, Tuple[TemplateSection, ...]] = {
    VenueKind.STADIUM: (
        TemplateSection('Field Level', SectionType.FLOOR, 200),
        TemplateSection('Lower Level', SectionType.LOWER, 500),
        TemplateSection('Club Level', SectionType.PREMIUM, 300),
        TemplateSection('Upper Level', SectionType.UPPER, 800),
        TemplateSection('Endzone', SectionType.STANDARD, 400),
    ),
    VenueKind.ARENA: (
        TemplateSection('Floor', SectionType.FLOOR, 150),
        TemplateSection('Lower Bowl', SectionType.LOWER, 400),
        TemplateSection('Club', SectionType.PREMIUM, 200),
        TemplateSection('Upper Bowl', SectionType.UPPER, 600),
    ),
    VenueKind.THEATER: (
        TemplateSection('Orchestra', SectionType.LOWER, 300),
        TemplateSection('Front Mezzanine', SectionType.LOWER, 150),
        TemplateSection('Rear Mezzanine', SectionType.LOWER, 200),
        TemplateSection('Balcony', SectionType.UPPER, 250),
    ),
    VenueKind.AMPHITHEATER: (
        TemplateSection('Pit', SectionType.FLOOR, 100, is_general_admission=True),
        TemplateSection('Orchestra', SectionType.LOWER, 300),
        TemplateSection('Pavilion', SectionType.STANDARD, 400),
        TemplateSection('Lawn', SectionType.STANDARD, 1000, is_general_admission=True),
    ),
    VenueKind.CLUB: (
        TemplateSection('General Admission', SectionType.FLOOR, 500, is_general_admission=True),
        TemplateSection('VIP', SectionType.PREMIUM, 50),
        TemplateSection('Balcony', SectionType.UPPER, 100),
    ),
}

TEMPLATE_SECTION_NAMES = frozenset(
    section.name.lower() for template in SECTION_TEMPLATES.values() for section in template
)


def venue_kind_for(venue_name: Optional[str]) -> VenueKind:
    lowered = (venue_name or '').lower()
    for kind, keywords in VENUE_KIND_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return kind
    return VenueKind.ARENA


def template_sections(*, venue_id: str, venue_name: Optional[str]) -> List[SectionEntity]:
    """New (unsaved) sections of the template matching the venue name, in sort order"""
    template = SECTION_TEMPLATES[venue_kind_for(venue_name)]
    return [
        SectionEntity(
            venue_id=venue_id,
            name=section.name,
            section_type=section.section_type,
            capacity=section.capacity,
            is_general_admission=section.is_general_admission,
            sort_order=sort_order,
        )
        for sort_order, section in enumerate(template, start=1)
    ]
