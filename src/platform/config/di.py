"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

import random

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.ingestion.app.command.ingest_venue_maps_use_case import IngestVenueMapsUseCase
from src.service.ingestion.driven_adapter.archive.zip_map_archive_reader import (
    ZipMapArchiveReader,
)
from src.service.inventory.app.command.apply_discount_and_regenerate_use_case import (
    ApplyDiscountAndRegenerateUseCase,
)
from src.service.inventory.app.command.synthesize_event_sections_use_case import (
    SynthesizeEventSectionsUseCase,
)
from src.service.inventory.app.command.synthesize_listings_use_case import (
    SynthesizeListingsUseCase,
)
from src.service.inventory.domain.listing_generator import (
    ListingGenerationPolicy,
    ListingGenerator,
)
from src.service.inventory.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.inventory.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.inventory.driven_adapter.repo.event_section_repo_impl import (
    EventSectionCommandRepoImpl,
    EventSectionQueryRepoImpl,
)
from src.service.inventory.driven_adapter.repo.ticket_listing_command_repo_impl import (
    TicketListingCommandRepoImpl,
)
from src.service.shared_kernel.driven_adapter.repo.section_query_repo_impl import (
    SectionQueryRepoImpl,
)
from src.service.venue_catalog.app.command.sync_section_catalog_use_case import (
    SyncSectionCatalogUseCase,
)
from src.service.venue_catalog.app.query.detect_venue_use_case import DetectVenueUseCase
from src.service.venue_catalog.domain.section_extractor import SectionExtractor
from src.service.venue_catalog.domain.value_object.section_type_bands import SectionTypeBands
from src.service.venue_catalog.driven_adapter.extractor.oracle_map_extractor import (
    OracleMapExtractor,
)
from src.service.venue_catalog.driven_adapter.extractor.regex_map_extractor import (
    RegexMapExtractor,
)
from src.service.venue_catalog.driven_adapter.oracle.http_text_interpretation_oracle import (
    HttpTextInterpretationOracle,
)
from src.service.venue_catalog.driven_adapter.repo.section_command_repo_impl import (
    SectionCommandRepoImpl,
)
from src.service.venue_catalog.driven_adapter.repo.venue_command_repo_impl import (
    VenueCommandRepoImpl,
)
from src.service.venue_catalog.driven_adapter.repo.venue_query_repo_impl import (
    VenueQueryRepoImpl,
)


def _build_map_extractor(
    settings: Settings, regex_extractor: RegexMapExtractor
) -> RegexMapExtractor | OracleMapExtractor:
    """Oracle-assisted extraction only when an API key is configured"""
    if not settings.ORACLE_ENABLED:
        return regex_extractor
    return OracleMapExtractor(
        fallback=regex_extractor, oracle=HttpTextInterpretationOracle(settings=settings)
    )


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (session factory shared by every repo)
    database = providers.Singleton(
        Database, db_url=config_service.provided.DATABASE_URL_ASYNC
    )

    # Repositories (stateless - use session_factory per call)
    venue_query_repo = providers.Singleton(
        VenueQueryRepoImpl, session_factory=database.provided.session
    )
    venue_command_repo = providers.Singleton(
        VenueCommandRepoImpl, session_factory=database.provided.session
    )
    section_query_repo = providers.Singleton(
        SectionQueryRepoImpl, session_factory=database.provided.session
    )
    section_command_repo = providers.Singleton(
        SectionCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_section_query_repo = providers.Singleton(
        EventSectionQueryRepoImpl, session_factory=database.provided.session
    )
    event_section_command_repo = providers.Singleton(
        EventSectionCommandRepoImpl, session_factory=database.provided.session
    )
    ticket_listing_command_repo = providers.Singleton(
        TicketListingCommandRepoImpl, session_factory=database.provided.session
    )

    # Map extraction
    section_type_bands = providers.Singleton(
        SectionTypeBands,
        floor_below=config_service.provided.SECTION_FLOOR_BELOW,
        lower_below=config_service.provided.SECTION_LOWER_BELOW,
        premium_below=config_service.provided.SECTION_PREMIUM_BELOW,
    )
    section_extractor = providers.Singleton(SectionExtractor, bands=section_type_bands)
    regex_map_extractor = providers.Singleton(
        RegexMapExtractor, section_extractor=section_extractor
    )
    map_extractor = providers.Singleton(
        _build_map_extractor, settings=config_service, regex_extractor=regex_map_extractor
    )
    map_archive_reader = providers.Singleton(ZipMapArchiveReader)

    # Listing synthesis (seeded RNG gives reproducible listings)
    rng = providers.Singleton(random.Random, config_service.provided.SYNTHESIS_RANDOM_SEED)
    listing_generation_policy = providers.Singleton(
        ListingGenerationPolicy,
        price_floor=config_service.provided.LISTING_PRICE_FLOOR,
        price_cap=config_service.provided.LISTING_PRICE_CAP,
        jitter_seed=config_service.provided.JITTER_SEED,
    )
    listing_generator = providers.Singleton(
        ListingGenerator, rng=rng, policy=listing_generation_policy
    )

    # Use cases
    detect_venue_use_case = providers.Factory(
        DetectVenueUseCase, venue_query_repo=venue_query_repo
    )
    sync_section_catalog_use_case = providers.Factory(
        SyncSectionCatalogUseCase,
        venue_query_repo=venue_query_repo,
        section_query_repo=section_query_repo,
        section_command_repo=section_command_repo,
        map_extractor=map_extractor,
        default_section_capacity=config_service.provided.DEFAULT_SECTION_CAPACITY,
    )
    synthesize_event_sections_use_case = providers.Factory(
        SynthesizeEventSectionsUseCase,
        event_query_repo=event_query_repo,
        section_query_repo=section_query_repo,
        event_section_query_repo=event_section_query_repo,
        event_section_command_repo=event_section_command_repo,
        service_fee_rate=config_service.provided.SERVICE_FEE_RATE,
        default_section_capacity=config_service.provided.DEFAULT_SECTION_CAPACITY,
    )
    synthesize_listings_use_case = providers.Factory(
        SynthesizeListingsUseCase,
        event_query_repo=event_query_repo,
        section_query_repo=section_query_repo,
        event_section_query_repo=event_section_query_repo,
        ticket_listing_command_repo=ticket_listing_command_repo,
        listing_generator=listing_generator,
    )
    apply_discount_and_regenerate_use_case = providers.Factory(
        ApplyDiscountAndRegenerateUseCase,
        synthesize_listings_use_case=synthesize_listings_use_case,
        event_command_repo=event_command_repo,
        ticket_listing_command_repo=ticket_listing_command_repo,
    )
    ingest_venue_maps_use_case = providers.Factory(
        IngestVenueMapsUseCase,
        venue_query_repo=venue_query_repo,
        venue_command_repo=venue_command_repo,
        event_query_repo=event_query_repo,
        event_command_repo=event_command_repo,
        map_extractor=map_extractor,
        detect_venue_use_case=detect_venue_use_case,
        sync_section_catalog_use_case=sync_section_catalog_use_case,
        synthesize_event_sections_use_case=synthesize_event_sections_use_case,
        synthesize_listings_use_case=synthesize_listings_use_case,
        max_reported_errors=config_service.provided.MAX_REPORTED_ERRORS,
    )


container = Container()


async def cleanup() -> None:
    await container.database().dispose()
    container.reset_singletons()
