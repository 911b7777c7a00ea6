"""
Regex Map Extractor - default, deterministic extraction path
"""

from typing import Optional

from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.domain.section_extractor import SectionExtractor
from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionExtraction,
)


class RegexMapExtractor(IMapExtractor):
    def __init__(self, section_extractor: SectionExtractor) -> None:
        self.section_extractor = section_extractor

    async def try_extract(self, document: MapDocument) -> Optional[SectionExtraction]:
        return self.section_extractor.extract(document)
