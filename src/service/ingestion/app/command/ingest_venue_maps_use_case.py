"""
Ingest Venue Maps Use Case

Batch entry point for uploaded seating charts (and an optional event
manifest). One failing document or row never aborts the batch: failures are
counted and collected in a bounded error log.

Flow:
1. Manifest rows: find or create each row's venue, create its event unless
   an event with the same title and date already exists
2. Per document:
   a. Extract sections and the declared venue name
   b. Resolve the venue (declared name, then file name)
   c. Attach the document when the venue has none (or force)
   d. Sync the venue's section catalog
   e. Optionally price sections and stock listings for the venue's events;
      with the generic fallback, a venue left without sections first gets
      the generic layout for its kind
3. With synthesis and the generic fallback, stock manifest venues no
   document matched
4. Aggregate counts
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from src.platform.exception.exceptions import CustomBaseError, MatchError
from src.platform.logging.loguru_io import Logger
from src.service.ingestion.app.dto.ingestion_result import DocumentMatch, IngestionResult
from src.service.ingestion.domain.manifest_row import EventManifestRow
from src.service.inventory.app.command.synthesize_event_sections_use_case import (
    SynthesizeEventSectionsUseCase,
)
from src.service.inventory.app.command.synthesize_listings_use_case import (
    SynthesizeListingsUseCase,
)
from src.service.inventory.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.inventory.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.inventory.domain.inventory_synthesis_domain import event_price_band
from src.service.shared_kernel.app.dto.batch_error_log import BatchErrorLog
from src.service.shared_kernel.domain.name_matcher import normalize
from src.service.venue_catalog.app.command.sync_section_catalog_use_case import (
    SyncSectionCatalogUseCase,
)
from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_catalog.app.query.detect_venue_use_case import DetectVenueUseCase
from src.service.venue_catalog.domain.entity.venue_entity import VenueEntity
from src.service.venue_catalog.domain.value_object.map_document import MapDocument


class IngestVenueMapsUseCase:
    def __init__(
        self,
        venue_query_repo: IVenueQueryRepo,
        venue_command_repo: IVenueCommandRepo,
        event_query_repo: IEventQueryRepo,
        event_command_repo: IEventCommandRepo,
        map_extractor: IMapExtractor,
        detect_venue_use_case: DetectVenueUseCase,
        sync_section_catalog_use_case: SyncSectionCatalogUseCase,
        synthesize_event_sections_use_case: SynthesizeEventSectionsUseCase,
        synthesize_listings_use_case: SynthesizeListingsUseCase,
        max_reported_errors: int = 20,
    ):
        self.venue_query_repo = venue_query_repo
        self.venue_command_repo = venue_command_repo
        self.event_query_repo = event_query_repo
        self.event_command_repo = event_command_repo
        self.map_extractor = map_extractor
        self.detect_venue_use_case = detect_venue_use_case
        self.sync_section_catalog_use_case = sync_section_catalog_use_case
        self.synthesize_event_sections_use_case = synthesize_event_sections_use_case
        self.synthesize_listings_use_case = synthesize_listings_use_case
        self.max_reported_errors = max_reported_errors

    @Logger.io(truncate_content=True)
    async def ingest(
        self,
        *,
        documents: Sequence[MapDocument],
        venue_pool: Optional[Sequence[VenueEntity]] = None,
        manifest_rows: Sequence[Mapping[str, Any]] = (),
        force: bool = False,
        replace_sections: bool = False,
        synthesize_inventory: bool = False,
        generic_section_fallback: bool = False,
        tickets_per_section: int = 20,
    ) -> IngestionResult:
        """
        Args:
            documents: Seating-chart documents to ingest
            venue_pool: Venues to match against (default: every stored venue)
            manifest_rows: Raw event manifest rows (CSV dicts)
            force: Replace a venue's stored map even when it has one
            replace_sections: Add sections for every extracted candidate
                instead of only backfilling svg paths
            synthesize_inventory: Price sections and generate listings for
                the venue's events after its catalog is synced
            generic_section_fallback: Seed a generic layout (by venue kind) for
                venues that have no sections when synthesizing
            tickets_per_section: Listing target per section when synthesizing
        """
        result = IngestionResult(errors=BatchErrorLog(limit=self.max_reported_errors))
        pool: List[VenueEntity] = (
            list(venue_pool) if venue_pool is not None else await self.venue_query_repo.list_all()
        )

        manifest_venues: List[VenueEntity] = []
        if manifest_rows:
            manifest_venues = await self._import_manifest(
                manifest_rows=manifest_rows, pool=pool, result=result
            )

        for document in documents:
            result.documents_processed += 1
            label = document.filename or f'document #{result.documents_processed}'
            try:
                await self._ingest_document(
                    document=document,
                    pool=pool,
                    result=result,
                    force=force,
                    replace_sections=replace_sections,
                    synthesize_inventory=synthesize_inventory,
                    generic_section_fallback=generic_section_fallback,
                    tickets_per_section=tickets_per_section,
                )
            except MatchError as e:
                Logger.base.warning(f'🔍 [INGEST] {label}: {e.message}')
                result.documents_unmatched += 1
                result.unmatched.append(label)
            except CustomBaseError as e:
                result.documents_failed += 1
                result.errors.record(label, e.message)
            except Exception as e:
                Logger.base.exception(f'❌ [INGEST] {label}: unexpected failure')
                result.documents_failed += 1
                result.errors.record(label, e)

        if synthesize_inventory and generic_section_fallback:
            stocked = {match.venue_id for match in result.matches}
            for venue in manifest_venues:
                if venue.id in stocked:
                    continue
                try:
                    await self._synthesize_venue_inventory(
                        venue=venue,
                        result=result,
                        generic_section_fallback=True,
                        tickets_per_section=tickets_per_section,
                    )
                except CustomBaseError as e:
                    result.errors.record(f'venue {venue.name}', e.message)

        Logger.base.info(f'✅ [INGEST] Batch done: {result.summary()}')
        return result

    async def _ingest_document(
        self,
        *,
        document: MapDocument,
        pool: Sequence[VenueEntity],
        result: IngestionResult,
        force: bool,
        replace_sections: bool,
        synthesize_inventory: bool,
        generic_section_fallback: bool,
        tickets_per_section: int,
    ) -> None:
        extraction = await self.map_extractor.try_extract(document)
        detection = await self.detect_venue_use_case.detect(
            document=document,
            extracted_venue_name=extraction.extracted_venue_name if extraction else None,
            venue_pool=pool,
        )
        venue = detection.venue
        assert venue.id is not None

        if force or not venue.has_map:
            await self.venue_command_repo.update_map_document(
                venue_id=venue.id, map_document=document.content
            )
            venue.map_document = document.content
            result.venues_updated += 1
        elif venue.map_document != document.content:
            Logger.base.info(f'⏭️ [INGEST] {venue.name} already has a map, skipped')
            result.documents_skipped += 1
            return

        sync = await self.sync_section_catalog_use_case.sync_sections(
            venue_id=venue.id,
            candidates=extraction.candidates if extraction else (),
            replace_mode=replace_sections,
        )
        result.sections_created += sync.created_count
        result.sections_updated += sync.updated_count
        result.section_conflicts += len(sync.conflicts)
        result.matches.append(
            DocumentMatch(
                filename=document.filename or '',
                venue_id=venue.id,
                venue_name=venue.name,
                strategy=detection.strategy,
                sections_created=sync.created_count,
                sections_updated=sync.updated_count,
            )
        )

        if synthesize_inventory:
            await self._synthesize_venue_inventory(
                venue=venue,
                result=result,
                generic_section_fallback=generic_section_fallback,
                tickets_per_section=tickets_per_section,
            )

    async def _synthesize_venue_inventory(
        self,
        *,
        venue: VenueEntity,
        result: IngestionResult,
        generic_section_fallback: bool,
        tickets_per_section: int,
    ) -> None:
        """Stock only newly priced sections so re-ingesting does not pile up listings"""
        if generic_section_fallback and venue.id:
            seeded = await self.sync_section_catalog_use_case.seed_generic_sections(
                venue_id=venue.id, venue_name=venue.name
            )
            result.generic_sections_created += len(seeded)

        for event in await self.event_query_repo.list_by_venue(venue_id=venue.id or ''):
            if not event.is_active or event.id is None:
                continue
            try:
                created = await self.synthesize_event_sections_use_case.synthesize(
                    event_id=event.id
                )
                if not created:
                    continue
                synthesis = await self.synthesize_listings_use_case.generate_and_store(
                    event=event,
                    event_sections=created,
                    band=event_price_band(event),
                    target_per_section=tickets_per_section,
                )
            except CustomBaseError as e:
                result.errors.record(f'event {event.title}', e.message)
                continue
            result.events_synthesized += 1
            result.listings_created += synthesis.listings_created

    async def _import_manifest(
        self,
        *,
        manifest_rows: Sequence[Mapping[str, Any]],
        pool: List[VenueEntity],
        result: IngestionResult,
    ) -> List[VenueEntity]:
        """Returns the venues the manifest rows refer to, in first-seen order"""
        event_keys: Dict[str, Set[str]] = {}
        venues: Dict[str, VenueEntity] = {}

        for index, raw in enumerate(manifest_rows, start=1):
            label = f'manifest row {index}'
            try:
                row = EventManifestRow.parse(raw)
                label = f'manifest row {index} ({row.title})'

                venue = next(
                    (v for v in pool if normalize(v.name) == normalize(row.venue_name)), None
                )
                if venue is None:
                    venue = await self.venue_command_repo.create(
                        venue=VenueEntity(
                            name=row.venue_name, city=row.city or 'Unknown', state=row.state
                        )
                    )
                    pool.append(venue)
                    result.venues_created += 1
                    Logger.base.info(f'🏟️ [INGEST] Created venue {venue.name}')
                assert venue.id is not None

                if venue.id not in event_keys:
                    venues[venue.id] = venue
                    existing = await self.event_query_repo.list_by_venue(venue_id=venue.id)
                    event_keys[venue.id] = {event.dedupe_key for event in existing}

                event = row.to_event(venue_id=venue.id)
                if event.dedupe_key in event_keys[venue.id]:
                    result.events_skipped += 1
                    continue

                await self.event_command_repo.create(event=event)
                event_keys[venue.id].add(event.dedupe_key)
                result.events_created += 1
            except CustomBaseError as e:
                result.errors.record(label, e.message)
            except ValueError as e:
                result.errors.record(label, e)

        return list(venues.values())
