"""
Map Archive Reader Interface

Unpacks an uploaded bundle into seating-chart documents plus the raw rows of
an optional event manifest.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

import attrs

from src.service.venue_catalog.domain.value_object.map_document import MapDocument


@attrs.define
class MapArchive:
    documents: List[MapDocument] = attrs.field(factory=list)
    manifest_rows: List[Dict[str, Any]] = attrs.field(factory=list)
    skipped_files: List[str] = attrs.field(factory=list)


class IMapArchiveReader(ABC):
    @abstractmethod
    def read(self, data: bytes) -> MapArchive:
        """
        Raises:
            DomainError: data is not a readable archive
        """
        pass
