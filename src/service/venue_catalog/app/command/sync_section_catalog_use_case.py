"""
Sync Section Catalog Use Case

Reconciles a venue's stored sections with the sections its seating-chart
document contains, or seeds a generic layout for a venue with no sections.
Sections are only ever added or linked to an svg path.
"""

from typing import List, Optional, Sequence

from src.platform.exception.exceptions import NotFoundError, ParseError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_section_query_repo import ISectionQueryRepo
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.venue_catalog.app.dto.catalog_sync_result import CatalogSyncResult
from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.app.interface.i_section_command_repo import ISectionCommandRepo
from src.service.venue_catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_catalog.domain.catalog_sync_domain import plan_catalog_sync
from src.service.venue_catalog.domain.section_template import template_sections, venue_kind_for
from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionCandidate,
)


class SyncSectionCatalogUseCase:
    def __init__(
        self,
        venue_query_repo: IVenueQueryRepo,
        section_query_repo: ISectionQueryRepo,
        section_command_repo: ISectionCommandRepo,
        map_extractor: IMapExtractor,
        default_section_capacity: int = 100,
    ):
        self.venue_query_repo = venue_query_repo
        self.section_query_repo = section_query_repo
        self.section_command_repo = section_command_repo
        self.map_extractor = map_extractor
        self.default_section_capacity = default_section_capacity

    @Logger.io
    async def sync_sections(
        self,
        *,
        venue_id: str,
        candidates: Sequence[SectionCandidate],
        replace_mode: bool = False,
    ) -> CatalogSyncResult:
        """
        Apply extracted candidates to a venue's section catalog

        Flow:
        1. Load existing sections
        2. Plan (create or backfill mode, see catalog_sync_domain)
        3. Persist new sections, then svg path links
        4. Report conflicts as warnings; they never abort the sync
        """
        existing = await self.section_query_repo.list_by_venue(venue_id=venue_id)
        plan = plan_catalog_sync(
            venue_id=venue_id,
            candidates=candidates,
            existing_sections=existing,
            replace_mode=replace_mode,
            default_capacity=self.default_section_capacity,
        )

        created = await self.section_command_repo.create_many(sections=plan.sections_to_create)
        for link in plan.svg_path_updates:
            if link.section.id is None:
                continue
            await self.section_command_repo.update_svg_path(
                section_id=link.section.id, svg_path=link.svg_path
            )

        for conflict in plan.conflicts:
            Logger.base.warning(f'⚠️ [SYNC] {conflict.message}')

        Logger.base.info(
            f'🪑 [SYNC] venue={venue_id} mode={plan.mode}: '
            f'created={len(created)} linked={len(plan.svg_path_updates)} '
            f'conflicts={len(plan.conflicts)}'
        )
        return CatalogSyncResult(
            venue_id=venue_id,
            mode=plan.mode.value,
            created_count=len(created),
            updated_count=len(plan.svg_path_updates),
            conflicts=[conflict.message for conflict in plan.conflicts],
            created_sections=list(created),
        )

    @Logger.io
    async def sync_from_map(
        self,
        *,
        venue_id: str,
        document: Optional[MapDocument] = None,
        replace_mode: bool = False,
    ) -> CatalogSyncResult:
        """
        Extract sections from a document (default: the venue's stored map) and sync

        Raises:
            NotFoundError: venue does not exist
            ParseError: no document given and the venue has no stored map,
                or the document has no markup block
        """
        venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
        if venue is None:
            raise NotFoundError(f'Venue not found: {venue_id}')

        if document is None:
            if not venue.map_document:
                raise ParseError(f'Venue {venue.name} has no seating chart')
            document = MapDocument(content=venue.map_document)

        extraction = await self.map_extractor.try_extract(document)
        candidates = extraction.candidates if extraction else ()
        return await self.sync_sections(
            venue_id=venue_id, candidates=candidates, replace_mode=replace_mode
        )

    @Logger.io
    async def seed_generic_sections(
        self, *, venue_id: str, venue_name: Optional[str] = None
    ) -> List[SectionEntity]:
        """
        Give a venue without any sections the generic layout for its kind

        Returns:
            The created sections; empty when the venue already has sections
        """
        if await self.section_query_repo.list_by_venue(venue_id=venue_id):
            return []

        created = await self.section_command_repo.create_many(
            sections=template_sections(venue_id=venue_id, venue_name=venue_name)
        )
        Logger.base.info(
            f'🪑 [SYNC] venue={venue_id} seeded {len(created)} generic '
            f'{venue_kind_for(venue_name)} sections'
        )
        return created
