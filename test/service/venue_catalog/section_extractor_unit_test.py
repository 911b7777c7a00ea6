"""
Unit tests for SectionExtractor

Covers markup splitting, header venue names, noise filtering and
first-seen deduplication.
"""

import pytest

from src.platform.exception.exceptions import ParseError
from src.service.shared_kernel.domain.enum.section_type import SectionType
from src.service.venue_catalog.domain.section_extractor import (
    SectionExtractor,
    is_noise_id,
    parse_header_venue_name,
    split_markup,
)
from src.service.venue_catalog.domain.value_object.map_document import MapDocument
from src.service.venue_catalog.domain.value_object.section_type_bands import SectionTypeBands
from test.service.map_documents import EXAMPLE_ARENA_MAP, MIXED_SECTIONS_MAP, svg_with_ids


@pytest.fixture
def extractor() -> SectionExtractor:
    return SectionExtractor()


@pytest.mark.unit
class TestSplitMarkup:
    def test_header_is_text_before_first_svg_tag(self) -> None:
        split = split_markup('Venue: Somewhere\n<svg viewBox="0 0 1 1"><g id="a"/></svg>\ntrailer')

        assert split.header == 'Venue: Somewhere\n'
        assert split.markup == '<svg viewBox="0 0 1 1"><g id="a"/></svg>'

    def test_unclosed_markup_runs_to_end(self) -> None:
        split = split_markup('<svg><g id="101-group">')
        assert split.markup == '<svg><g id="101-group">'

    def test_missing_svg_tag_raises_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            split_markup('Venue: Nowhere\njust text')
        assert exc_info.value.message == 'No <svg> tag found in file'


@pytest.mark.unit
class TestHeaderVenueName:
    def test_venue_line(self) -> None:
        assert parse_header_venue_name('Venue: Example Arena  \nCity: Springfield\n') == (
            'Example Arena'
        )

    def test_title_line_is_cut_at_dash(self) -> None:
        assert parse_header_venue_name('Title: Example Arena - Seating Chart\n') == (
            'Example Arena'
        )

    def test_venue_line_wins_over_title(self) -> None:
        header = 'Title: Tour Poster - 2024\nVenue: Example Arena\n'
        assert parse_header_venue_name(header) == 'Example Arena'

    def test_no_header_returns_none(self) -> None:
        assert parse_header_venue_name('') is None
        assert parse_header_venue_name('Venue:   \n') is None


@pytest.mark.unit
class TestNoiseIds:
    @pytest.mark.parametrize('element_id', ['defs', 'clip0', 'g12', 'path3', 'stage', 'court-lines'])
    def test_structural_ids_are_noise(self, element_id: str) -> None:
        assert is_noise_id(element_id)

    @pytest.mark.parametrize('element_id', ['101-group', 'floor-a-group', 'vip-suite-group'])
    def test_section_ids_are_not_noise(self, element_id: str) -> None:
        assert not is_noise_id(element_id)


@pytest.mark.unit
class TestExtract:
    def test_mixed_ids_keep_only_sections(self, extractor: SectionExtractor) -> None:
        # Act
        result = extractor.extract(MapDocument(content=MIXED_SECTIONS_MAP))

        # Assert
        assert result.raw_ids == ('101-group', 'vip-suite-group')
        assert [c.section_type for c in result.candidates] == [
            SectionType.LOWER,
            SectionType.PREMIUM,
        ]
        assert [c.display_name for c in result.candidates] == ['Section 101', 'VIP Suite']
        assert result.extracted_venue_name is None
        assert result.source == 'regex'

    def test_example_arena(self, extractor: SectionExtractor) -> None:
        result = extractor.extract(MapDocument(content=EXAMPLE_ARENA_MAP, filename='arena.svg'))

        assert result.extracted_venue_name == 'Example Arena'
        assert result.raw_ids == ('101-group', '102-group', 'floor-a-group')
        assert [c.section_type for c in result.candidates] == [
            SectionType.LOWER,
            SectionType.LOWER,
            SectionType.FLOOR,
        ]
        assert result.candidates[2].display_name == 'Floor A'

    def test_duplicates_keep_first_seen_order(self, extractor: SectionExtractor) -> None:
        content = svg_with_ids('305-group', '101-group', '305-group', 'ga-group')

        result = extractor.extract(MapDocument(content=content))

        assert result.raw_ids == ('305-group', '101-group', 'ga-group')
        assert result.candidates[2].is_general_admission

    def test_group_ids_outside_rule_table_are_dropped(self, extractor: SectionExtractor) -> None:
        content = svg_with_ids('concourse-group', 'lobby-group', '1234-group', '12-group')

        result = extractor.extract(MapDocument(content=content))

        assert result.raw_ids == ('12-group',)
        assert result.candidates[0].section_type == SectionType.FLOOR

    def test_plural_and_compound_named_sections_are_kept(
        self, extractor: SectionExtractor
    ) -> None:
        content = svg_with_ids(
            'suites-group', 'boxes-group', 'clubseats-group', 'vipbox-group', 'loge1-group'
        )

        result = extractor.extract(MapDocument(content=content))

        assert set(result.raw_ids) == {
            'suites-group',
            'boxes-group',
            'clubseats-group',
            'vipbox-group',
            'loge1-group',
        }
        assert [c.section_type for c in result.candidates] == [
            SectionType.PREMIUM,
            SectionType.PREMIUM,
            SectionType.PREMIUM,
            SectionType.PREMIUM,
            SectionType.LOWER,
        ]

    def test_custom_bands(self) -> None:
        extractor = SectionExtractor(
            bands=SectionTypeBands(floor_below=10, lower_below=100, premium_below=200)
        )

        result = extractor.extract(MapDocument(content=svg_with_ids('150-group', '250-group')))

        assert [c.section_type for c in result.candidates] == [
            SectionType.PREMIUM,
            SectionType.UPPER,
        ]

    def test_document_without_markup_raises(self, extractor: SectionExtractor) -> None:
        with pytest.raises(ParseError):
            extractor.extract(MapDocument(content='Venue: Example Arena\nno drawing here'))
