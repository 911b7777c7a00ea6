"""
Unit tests for OracleMapExtractor

The regex result always stands; the oracle can only add a missing venue
name and sections whose ids exist in the markup.
"""

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import ParseError
from src.service.shared_kernel.domain.enum.section_type import SectionType
from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.app.interface.i_text_interpretation_oracle import (
    ITextInterpretationOracle,
    OracleInterpretation,
    OracleSection,
)
from src.service.venue_catalog.domain.section_extractor import SectionExtractor
from src.service.venue_catalog.domain.value_object.map_document import MapDocument
from src.service.venue_catalog.driven_adapter.extractor.oracle_map_extractor import (
    OracleMapExtractor,
)
from src.service.venue_catalog.driven_adapter.extractor.regex_map_extractor import (
    RegexMapExtractor,
)
from test.service.map_documents import svg_with_ids


class StubOracle(ITextInterpretationOracle):
    """Returns a fixed interpretation and counts calls"""

    def __init__(self, interpretation: Optional[OracleInterpretation]) -> None:
        self.interpretation = interpretation
        self.calls = 0

    async def interpret(self, *, content: str) -> Optional[OracleInterpretation]:
        self.calls += 1
        return self.interpretation


def _extractor(oracle: ITextInterpretationOracle) -> OracleMapExtractor:
    return OracleMapExtractor(
        fallback=RegexMapExtractor(section_extractor=SectionExtractor()), oracle=oracle
    )


DOCUMENT = MapDocument(content=svg_with_ids('101-group', 'skybar-group', 'stage'))


@pytest.mark.unit
class TestOracleMapExtractor:
    @pytest.mark.asyncio
    async def test_oracle_failure_keeps_regex_result(self) -> None:
        oracle = StubOracle(None)

        result = await _extractor(oracle).try_extract(DOCUMENT)

        assert oracle.calls == 1
        assert result is not None
        assert result.raw_ids == ('101-group',)
        assert result.source == 'regex'

    @pytest.mark.asyncio
    async def test_oracle_adds_markup_sections_and_venue_name(self) -> None:
        oracle = StubOracle(
            OracleInterpretation(
                venue_name='Skyline Pavilion',
                sections=[
                    OracleSection(raw_id='101-group', name='Renamed', section_type='upper'),
                    OracleSection(raw_id='skybar-group', section_type='premium'),
                    OracleSection(raw_id='invented-group', name='Not In Markup'),
                ],
            )
        )

        result = await _extractor(oracle).try_extract(DOCUMENT)

        assert result is not None
        assert result.raw_ids == ('101-group', 'skybar-group')
        # Regex candidate is untouched
        assert result.candidates[0].display_name == 'Section 101'
        assert result.candidates[0].section_type == SectionType.LOWER
        assert result.candidates[1].display_name == 'Skybar'
        assert result.candidates[1].section_type == SectionType.PREMIUM
        assert result.extracted_venue_name == 'Skyline Pavilion'
        assert result.source == 'regex+oracle'

    @pytest.mark.asyncio
    async def test_header_venue_name_wins(self) -> None:
        oracle = StubOracle(OracleInterpretation(venue_name='Guess', sections=[]))
        document = MapDocument(content=svg_with_ids('101-group', header='Venue: Real Name\n'))

        result = await _extractor(oracle).try_extract(document)

        assert result is not None
        assert result.extracted_venue_name == 'Real Name'
        assert result.source == 'regex'

    @pytest.mark.asyncio
    async def test_unknown_section_type_becomes_standard(self) -> None:
        oracle = StubOracle(
            OracleInterpretation(sections=[OracleSection(raw_id='skybar-group', section_type='?')])
        )

        result = await _extractor(oracle).try_extract(DOCUMENT)

        assert result is not None
        assert result.candidates[-1].section_type == SectionType.STANDARD

    @pytest.mark.asyncio
    async def test_parse_error_is_not_masked(self) -> None:
        oracle = StubOracle(OracleInterpretation(venue_name='Anything'))

        with pytest.raises(ParseError):
            await _extractor(oracle).try_extract(MapDocument(content='plain text'))
        assert oracle.calls == 0

    @pytest.mark.asyncio
    async def test_oracle_is_not_consulted_without_a_default_result(self) -> None:
        fallback = AsyncMock(spec=IMapExtractor)
        fallback.try_extract.return_value = None
        oracle = StubOracle(OracleInterpretation(venue_name='Anything'))

        result = await OracleMapExtractor(fallback=fallback, oracle=oracle).try_extract(DOCUMENT)

        assert result is None
        assert oracle.calls == 0
        fallback.try_extract.assert_awaited_once_with(DOCUMENT)
