import pytest

from src.platform.exception.exceptions import MatchError
from src.service.venue_catalog.app.query.detect_venue_use_case import DetectVenueUseCase
from src.service.venue_catalog.domain.value_object.map_document import MapDocument
from src.service.venue_catalog.domain.venue_name_hint import venue_name_from_filename
from test.service.in_memory_repos import InMemoryStore


@pytest.mark.unit
class TestDetectVenueUseCase:
    @pytest.mark.asyncio
    async def test_header_name_is_tried_first(
        self, store: InMemoryStore, detect_venue_use_case: DetectVenueUseCase
    ) -> None:
        store.add_venue('Example Arena')
        store.add_venue('Other Hall')

        detection = await detect_venue_use_case.detect(
            document=MapDocument(content='<svg/>', filename='other_hall.svg'),
            extracted_venue_name='Example Arena',
        )

        assert detection.venue.name == 'Example Arena'
        assert detection.strategy == 'exact'

    @pytest.mark.asyncio
    async def test_falls_back_to_file_name(
        self, store: InMemoryStore, detect_venue_use_case: DetectVenueUseCase
    ) -> None:
        store.add_venue('Madison Square Garden')

        detection = await detect_venue_use_case.detect(
            document=MapDocument(content='<svg/>', filename='uploads/madison-square-garden_map.svg'),
            extracted_venue_name='Some Unknown Place',
        )

        assert detection.venue.name == 'Madison Square Garden'
        assert detection.matched_name == 'Madison Square Garden'

    @pytest.mark.asyncio
    async def test_explicit_pool_restricts_candidates(
        self, store: InMemoryStore, detect_venue_use_case: DetectVenueUseCase
    ) -> None:
        store.add_venue('Example Arena')

        with pytest.raises(MatchError) as exc_info:
            await detect_venue_use_case.detect(
                document=MapDocument(content='<svg/>'),
                extracted_venue_name='Example Arena',
                venue_pool=[],
            )
        assert exc_info.value.candidate == 'Example Arena'
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_nothing_matches(
        self, store: InMemoryStore, detect_venue_use_case: DetectVenueUseCase
    ) -> None:
        store.add_venue('Madison Square Garden')

        with pytest.raises(MatchError):
            await detect_venue_use_case.detect(
                document=MapDocument(content='<svg/>', filename='msg.svg'),
                extracted_venue_name='MSG Arena',
            )


@pytest.mark.unit
class TestVenueNameFromFilename:
    @pytest.mark.parametrize(
        ('filename', 'expected'),
        [
            ('madison_square_garden-seating.svg', 'Madison Square Garden'),
            ('red-rocks seating chart map.txt', 'Red Rocks'),
            ('maps/The_Forum.xml', 'The Forum'),
        ],
    )
    def test_strips_separators_and_noise_words(self, filename: str, expected: str) -> None:
        assert venue_name_from_filename(filename) == expected
