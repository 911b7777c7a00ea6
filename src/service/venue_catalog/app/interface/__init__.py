"""Venue Catalog Interfaces"""

from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.app.interface.i_section_command_repo import ISectionCommandRepo
from src.service.venue_catalog.app.interface.i_text_interpretation_oracle import (
    ITextInterpretationOracle,
)
from src.service.venue_catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_catalog.app.interface.i_venue_query_repo import IVenueQueryRepo

__all__ = [
    'IMapExtractor',
    'ISectionCommandRepo',
    'ITextInterpretationOracle',
    'IVenueCommandRepo',
    'IVenueQueryRepo',
]
