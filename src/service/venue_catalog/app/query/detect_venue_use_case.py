"""
Detect Venue Use Case

Resolves which venue a seating-chart document belongs to, trying the name
declared in the document header first and the file name second.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from src.platform.exception.exceptions import MatchError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.name_matcher import match_entry
from src.service.venue_catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity
from src.service.venue_catalog.domain.value_object.map_document import MapDocument
from src.service.venue_catalog.domain.venue_name_hint import venue_name_from_filename


@dataclass
class VenueDetection:
    venue: VenueEntity
    matched_name: str
    strategy: str


class DetectVenueUseCase:
    def __init__(self, venue_query_repo: IVenueQueryRepo):
        self.venue_query_repo = venue_query_repo

    @staticmethod
    def name_hints(document: MapDocument, extracted_venue_name: Optional[str]) -> list[str]:
        hints = [extracted_venue_name] if extracted_venue_name else []
        if document.filename:
            hints.append(venue_name_from_filename(document.filename))
        return hints

    @Logger.io(truncate_content=True)
    async def detect(
        self,
        *,
        document: MapDocument,
        extracted_venue_name: Optional[str] = None,
        venue_pool: Optional[Sequence[VenueEntity]] = None,
    ) -> VenueDetection:
        """
        Raises:
            MatchError: no hint matched any venue in the pool
        """
        pool = venue_pool if venue_pool is not None else await self.venue_query_repo.list_all()
        hints = self.name_hints(document, extracted_venue_name)

        for hint in hints:
            if found := match_entry(hint, pool):
                Logger.base.info(
                    f'🎯 [MATCH] "{hint}" -> {found.record.name} ({found.strategy})'
                )
                return VenueDetection(
                    venue=found.record,  # type: ignore[arg-type]
                    matched_name=hint,
                    strategy=found.strategy,
                )

        raise MatchError(hints[0] if hints else document.filename or '<unnamed document>')
