"""
Unit tests for the map ingestion batch

Covers venue matching, map attachment rules, manifest import and the
optional inventory synthesis step against in-memory repositories.
"""

import pytest

from src.service.ingestion.app.command.ingest_venue_maps_use_case import IngestVenueMapsUseCase
from src.service.venue_catalog.domain.value_object.map_document import MapDocument
from test.service.in_memory_repos import InMemoryStore
from test.service.map_documents import EXAMPLE_ARENA_MAP, svg_with_ids


ARENA_DOCUMENT = MapDocument(content=EXAMPLE_ARENA_MAP, filename='arena_upload.svg')


@pytest.mark.unit
class TestIngestDocuments:
    @pytest.mark.asyncio
    async def test_header_match_attaches_map_and_creates_sections(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        # Arrange
        venue = store.add_venue('Example Arena')

        # Act
        result = await ingest_venue_maps_use_case.ingest(documents=[ARENA_DOCUMENT])

        # Assert
        assert result.documents_processed == 1
        assert result.venues_updated == 1
        assert result.sections_created == 3
        assert [match.venue_name for match in result.matches] == ['Example Arena']
        assert result.matches[0].filename == 'arena_upload.svg'
        assert store.venues[venue.id].map_document == EXAMPLE_ARENA_MAP

    @pytest.mark.asyncio
    async def test_file_name_is_the_second_hint(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        store.add_venue('Blue Room')
        document = MapDocument(
            content=svg_with_ids('101-group'), filename='blue_room-seating-map.svg'
        )

        result = await ingest_venue_maps_use_case.ingest(documents=[document])

        assert [match.venue_name for match in result.matches] == ['Blue Room']
        assert result.sections_created == 1

    @pytest.mark.asyncio
    async def test_unmatched_document(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        store.add_venue('Example Arena')
        document = MapDocument(content=svg_with_ids('101-group'), filename='unknown_place.svg')

        result = await ingest_venue_maps_use_case.ingest(documents=[document])

        assert result.documents_unmatched == 1
        assert result.unmatched == ['unknown_place.svg']
        assert result.documents_failed == 0
        assert store.sections == {}

    @pytest.mark.asyncio
    async def test_venue_with_a_different_map_is_skipped(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        old_map = svg_with_ids('201-group', header='Venue: Example Arena\n')
        venue = store.add_venue('Example Arena', map_document=old_map)

        result = await ingest_venue_maps_use_case.ingest(documents=[ARENA_DOCUMENT])

        assert result.documents_skipped == 1
        assert result.venues_updated == 0
        assert store.venues[venue.id].map_document == old_map
        assert store.sections == {}

    @pytest.mark.asyncio
    async def test_force_replaces_the_stored_map(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        venue = store.add_venue('Example Arena', map_document=svg_with_ids('201-group'))

        result = await ingest_venue_maps_use_case.ingest(documents=[ARENA_DOCUMENT], force=True)

        assert result.venues_updated == 1
        assert result.sections_created == 3
        assert store.venues[venue.id].map_document == EXAMPLE_ARENA_MAP

    @pytest.mark.asyncio
    async def test_same_map_again_is_a_noop(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        store.add_venue('Example Arena')
        await ingest_venue_maps_use_case.ingest(documents=[ARENA_DOCUMENT])

        result = await ingest_venue_maps_use_case.ingest(documents=[ARENA_DOCUMENT])

        assert result.documents_skipped == 0
        assert result.sections_matched == 0
        assert len(store.sections) == 3

    @pytest.mark.asyncio
    async def test_document_without_markup_fails_alone(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        store.add_venue('Example Arena')
        broken = MapDocument(content='Venue: Example Arena\nno drawing here', filename='a.txt')

        result = await ingest_venue_maps_use_case.ingest(documents=[broken, ARENA_DOCUMENT])

        assert result.documents_processed == 2
        assert result.documents_failed == 1
        assert result.errors.errors[0].startswith('a.txt: ')
        assert result.sections_created == 3

    @pytest.mark.asyncio
    async def test_error_log_is_bounded(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        documents = [MapDocument(content='empty', filename=f'map_{i}.txt') for i in range(5)]

        result = await ingest_venue_maps_use_case.ingest(documents=documents)

        assert result.documents_failed == 5
        assert len(result.errors.errors) == 3
        assert result.errors.suppressed_count == 2
        assert result.summary()['suppressed_errors'] == 2


@pytest.mark.unit
class TestIngestManifest:
    @pytest.mark.asyncio
    async def test_manifest_creates_venues_and_deduplicates_events(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        # Arrange
        store.add_venue('Example Arena')
        rows = [
            {'title': 'Opening Night', 'venueName': 'example arena', 'eventDate': '2026-11-01'},
            {'title': 'OPENING NIGHT', 'venueName': 'Example Arena', 'eventDate': '2026-11-01'},
            {'title': 'Tour Stop', 'venue_name': 'New Hall', 'city': 'Austin'},
            {'title': '', 'venue_name': 'New Hall'},
        ]

        # Act
        result = await ingest_venue_maps_use_case.ingest(documents=[], manifest_rows=rows)

        # Assert
        assert result.venues_created == 1
        assert result.events_created == 2
        assert result.events_skipped == 1
        assert len(result.errors.errors) == 1
        assert result.errors.errors[0].startswith('manifest row 4')
        new_hall = next(v for v in store.venues.values() if v.name == 'New Hall')
        assert new_hall.city == 'Austin'

    @pytest.mark.asyncio
    async def test_created_venue_is_matched_by_documents(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        rows = [{'title': 'Opening Night', 'venue_name': 'Example Arena', 'price_from': '50'}]

        result = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT], manifest_rows=rows
        )

        assert result.venues_created == 1
        assert result.matches[0].venue_name == 'Example Arena'
        assert result.sections_created == 3


@pytest.mark.unit
class TestIngestWithInventory:
    @pytest.mark.asyncio
    async def test_synthesizes_listings_once(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        # Arrange
        venue = store.add_venue('Example Arena')
        event = store.add_event(venue.id, 'Opening Night', price_from=50.0, price_to=150.0)
        store.add_event(venue.id, 'Cancelled Show', price_from=50.0, is_active=False)

        # Act
        first = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT], synthesize_inventory=True
        )
        second = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT], synthesize_inventory=True
        )

        # Assert
        listings = store.listings_of_event(event.id)
        assert first.events_synthesized == 1
        assert first.listings_created == len(listings) > 0
        assert second.events_synthesized == 0
        assert second.listings_created == 0
        assert len(store.event_sections) == 3

    @pytest.mark.asyncio
    async def test_event_without_envelope_is_reported(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        venue = store.add_venue('Example Arena')
        store.add_event(venue.id, 'Unpriced Show')

        result = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT], synthesize_inventory=True
        )

        assert result.sections_created == 3
        assert result.events_synthesized == 0
        assert result.errors.errors[0].startswith('event Unpriced Show: ')
        assert result.documents_failed == 0


@pytest.mark.unit
class TestIngestWithGenericSections:
    @pytest.mark.asyncio
    async def test_map_without_sections_is_stocked_from_template(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        # Arrange
        venue = store.add_venue('Example Arena')
        event = store.add_event(venue.id, 'Opening Night', price_from=50.0, price_to=150.0)
        document = MapDocument(
            content=svg_with_ids('concourse-group', header='Venue: Example Arena\n'),
            filename='example-arena.svg',
        )

        # Act
        result = await ingest_venue_maps_use_case.ingest(
            documents=[document], synthesize_inventory=True, generic_section_fallback=True
        )

        # Assert
        assert result.sections_created == 0
        assert result.generic_sections_created == 4
        assert sorted(s.name for s in store.sections.values()) == [
            'Club',
            'Floor',
            'Lower Bowl',
            'Upper Bowl',
        ]
        assert result.events_synthesized == 1
        assert result.listings_created == len(store.listings_of_event(event.id)) > 0
        assert result.errors.errors == []

    @pytest.mark.asyncio
    async def test_without_fallback_an_empty_catalog_is_reported(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        venue = store.add_venue('Example Arena')
        store.add_event(venue.id, 'Opening Night', price_from=50.0, price_to=150.0)
        document = MapDocument(
            content=svg_with_ids('concourse-group', header='Venue: Example Arena\n'),
            filename='example-arena.svg',
        )

        result = await ingest_venue_maps_use_case.ingest(
            documents=[document], synthesize_inventory=True
        )

        assert result.generic_sections_created == 0
        assert result.events_synthesized == 0
        assert result.errors.errors[0].startswith('event Opening Night: ')
        assert store.sections == {}

    @pytest.mark.asyncio
    async def test_manifest_venue_without_map_is_stocked(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        rows = [
            {
                'title': 'Lawn Party',
                'venue_name': 'Red Rocks Amphitheatre',
                'price_from': '40',
                'price_to': '120',
            }
        ]

        result = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT],
            manifest_rows=rows,
            synthesize_inventory=True,
            generic_section_fallback=True,
        )

        assert result.documents_unmatched == 1
        assert result.venues_created == 1
        assert result.generic_sections_created == 4
        assert sorted(s.name for s in store.sections.values()) == [
            'Lawn',
            'Orchestra',
            'Pavilion',
            'Pit',
        ]
        assert result.events_synthesized == 1
        assert result.listings_created > 0

    @pytest.mark.asyncio
    async def test_matched_venue_with_map_sections_is_not_seeded(
        self, store: InMemoryStore, ingest_venue_maps_use_case: IngestVenueMapsUseCase
    ) -> None:
        venue = store.add_venue('Example Arena')
        store.add_event(venue.id, 'Opening Night', price_from=50.0, price_to=150.0)

        result = await ingest_venue_maps_use_case.ingest(
            documents=[ARENA_DOCUMENT], synthesize_inventory=True, generic_section_fallback=True
        )

        assert result.sections_created == 3
        assert result.generic_sections_created == 0
        assert len(store.sections) == 3
