"""
Oracle Map Extractor

Decorates the default extractor with the text interpretation oracle.
The default result always stands; oracle output can only add to it:
- a venue name when the header declared none
- sections whose ids exist in the markup but were not extracted

Any oracle failure (timeout, transport, malformed output) leaves the
default result untouched.
"""

from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.section_type import SectionType
from src.service.venue_catalog.app.interface.i_map_extractor import IMapExtractor
from src.service.venue_catalog.app.interface.i_text_interpretation_oracle import (
    ITextInterpretationOracle,
    OracleInterpretation,
)
from src.service.venue_catalog.domain.section_extractor import ELEMENT_ID_PATTERN
from src.service.venue_catalog.domain.section_rule_table import title_case_key
from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionCandidate,
    SectionExtraction,
)


class OracleMapExtractor(IMapExtractor):
    def __init__(self, *, fallback: IMapExtractor, oracle: ITextInterpretationOracle) -> None:
        self.fallback = fallback
        self.oracle = oracle

    @Logger.io(truncate_content=True)
    async def try_extract(self, document: MapDocument) -> Optional[SectionExtraction]:
        extraction = await self.fallback.try_extract(document)
        if extraction is None:
            return None

        interpretation = await self.oracle.interpret(content=document.content)
        if interpretation is None:
            Logger.base.info('🤖 [ORACLE] No interpretation, keeping regex extraction')
            return extraction

        return self._supplement(extraction, interpretation)

    def _supplement(
        self, extraction: SectionExtraction, interpretation: OracleInterpretation
    ) -> SectionExtraction:
        markup_ids = {m.group(1) for m in ELEMENT_ID_PATTERN.finditer(extraction.markup)}
        known_ids = {raw_id.lower() for raw_id in extraction.raw_ids}

        extra: list[SectionCandidate] = []
        for section in interpretation.sections:
            if section.raw_id not in markup_ids or section.raw_id.lower() in known_ids:
                continue
            known_ids.add(section.raw_id.lower())
            extra.append(
                SectionCandidate(
                    raw_id=section.raw_id,
                    display_name=section.name
                    or title_case_key(section.raw_id.removesuffix('-group')),
                    section_type=_parse_section_type(section.section_type),
                    is_general_admission=section.is_general_admission,
                )
            )

        venue_name = extraction.extracted_venue_name or interpretation.venue_name
        if not extra and venue_name == extraction.extracted_venue_name:
            return extraction

        Logger.base.info(
            f'🤖 [ORACLE] Supplemented {len(extra)} sections, venue={venue_name!r}'
        )
        return attrs.evolve(
            extraction,
            candidates=extraction.candidates + tuple(extra),
            extracted_venue_name=venue_name,
            source='regex+oracle',
        )


def _parse_section_type(value: Optional[str]) -> SectionType:
    try:
        return SectionType((value or '').lower())
    except ValueError:
        return SectionType.STANDARD
