"""Venue Catalog Value Objects"""

from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionCandidate,
    SectionExtraction,
)
from src.service.venue_catalog.domain.value_object.section_type_bands import SectionTypeBands

__all__ = ['MapDocument', 'SectionCandidate', 'SectionExtraction', 'SectionTypeBands']
