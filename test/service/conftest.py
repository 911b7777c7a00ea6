"""
Use case fixtures wired to in-memory repositories

Every fixture shares one InMemoryStore per test, mirroring how the DI
container shares one database between repositories.
"""

import random

import pytest

from src.service.ingestion.app.command.ingest_venue_maps_use_case import IngestVenueMapsUseCase
from src.service.inventory.app.command.apply_discount_and_regenerate_use_case import (
    ApplyDiscountAndRegenerateUseCase,
)
from src.service.inventory.app.command.synthesize_event_sections_use_case import (
    SynthesizeEventSectionsUseCase,
)
from src.service.inventory.app.command.synthesize_listings_use_case import (
    SynthesizeListingsUseCase,
)
from src.service.inventory.domain.listing_generator import ListingGenerator
from src.service.venue_catalog.app.command.sync_section_catalog_use_case import (
    SyncSectionCatalogUseCase,
)
from src.service.venue_catalog.app.query.detect_venue_use_case import DetectVenueUseCase
from src.service.venue_catalog.domain.section_extractor import SectionExtractor
from src.service.venue_catalog.driven_adapter.extractor.regex_map_extractor import (
    RegexMapExtractor,
)
from test.service.in_memory_repos import (
    InMemoryEventCommandRepo,
    InMemoryEventQueryRepo,
    InMemoryEventSectionCommandRepo,
    InMemoryEventSectionQueryRepo,
    InMemorySectionCommandRepo,
    InMemorySectionQueryRepo,
    InMemoryStore,
    InMemoryTicketListingCommandRepo,
    InMemoryVenueCommandRepo,
    InMemoryVenueQueryRepo,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def map_extractor() -> RegexMapExtractor:
    return RegexMapExtractor(section_extractor=SectionExtractor())


@pytest.fixture
def listing_generator() -> ListingGenerator:
    """Seeded so listing counts and prices are reproducible"""
    return ListingGenerator(rng=random.Random(20240601))


@pytest.fixture
def sync_section_catalog_use_case(
    store: InMemoryStore, map_extractor: RegexMapExtractor
) -> SyncSectionCatalogUseCase:
    return SyncSectionCatalogUseCase(
        venue_query_repo=InMemoryVenueQueryRepo(store),
        section_query_repo=InMemorySectionQueryRepo(store),
        section_command_repo=InMemorySectionCommandRepo(store),
        map_extractor=map_extractor,
    )


@pytest.fixture
def detect_venue_use_case(store: InMemoryStore) -> DetectVenueUseCase:
    return DetectVenueUseCase(venue_query_repo=InMemoryVenueQueryRepo(store))


@pytest.fixture
def synthesize_event_sections_use_case(store: InMemoryStore) -> SynthesizeEventSectionsUseCase:
    return SynthesizeEventSectionsUseCase(
        event_query_repo=InMemoryEventQueryRepo(store),
        section_query_repo=InMemorySectionQueryRepo(store),
        event_section_query_repo=InMemoryEventSectionQueryRepo(store),
        event_section_command_repo=InMemoryEventSectionCommandRepo(store),
    )


@pytest.fixture
def synthesize_listings_use_case(
    store: InMemoryStore, listing_generator: ListingGenerator
) -> SynthesizeListingsUseCase:
    return SynthesizeListingsUseCase(
        event_query_repo=InMemoryEventQueryRepo(store),
        section_query_repo=InMemorySectionQueryRepo(store),
        event_section_query_repo=InMemoryEventSectionQueryRepo(store),
        ticket_listing_command_repo=InMemoryTicketListingCommandRepo(store),
        listing_generator=listing_generator,
    )


@pytest.fixture
def apply_discount_use_case(
    store: InMemoryStore, synthesize_listings_use_case: SynthesizeListingsUseCase
) -> ApplyDiscountAndRegenerateUseCase:
    return ApplyDiscountAndRegenerateUseCase(
        synthesize_listings_use_case=synthesize_listings_use_case,
        event_command_repo=InMemoryEventCommandRepo(store),
        ticket_listing_command_repo=InMemoryTicketListingCommandRepo(store),
    )


@pytest.fixture
def ingest_venue_maps_use_case(
    store: InMemoryStore,
    map_extractor: RegexMapExtractor,
    detect_venue_use_case: DetectVenueUseCase,
    sync_section_catalog_use_case: SyncSectionCatalogUseCase,
    synthesize_event_sections_use_case: SynthesizeEventSectionsUseCase,
    synthesize_listings_use_case: SynthesizeListingsUseCase,
) -> IngestVenueMapsUseCase:
    return IngestVenueMapsUseCase(
        venue_query_repo=InMemoryVenueQueryRepo(store),
        venue_command_repo=InMemoryVenueCommandRepo(store),
        event_query_repo=InMemoryEventQueryRepo(store),
        event_command_repo=InMemoryEventCommandRepo(store),
        map_extractor=map_extractor,
        detect_venue_use_case=detect_venue_use_case,
        sync_section_catalog_use_case=sync_section_catalog_use_case,
        synthesize_event_sections_use_case=synthesize_event_sections_use_case,
        synthesize_listings_use_case=synthesize_listings_use_case,
        max_reported_errors=3,
    )
