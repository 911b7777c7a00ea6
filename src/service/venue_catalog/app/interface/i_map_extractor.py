"""
Map Extractor Interface

Capability interface over section extraction, so the regex extractor can be
decorated (e.g. by the text interpretation oracle) without callers knowing.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionExtraction,
)


class IMapExtractor(ABC):
    @abstractmethod
    async def try_extract(self, document: MapDocument) -> Optional[SectionExtraction]:
        """
        Extract section candidates from a map document

        Returns:
            Extraction result, or None when this extractor has nothing to offer

        Raises:
            ParseError: document carries no vector markup block
        """
        pass
