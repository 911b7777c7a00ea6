"""
Section Extractor

Derives seating-section candidates from a seating-chart document.

[Flow]
1. Split the document at the first opening <svg> tag: text before it is the
   metadata header, the markup block runs to the last closing tag
2. Read the declared venue name from the header ('Venue:' then 'Title:')
3. Scan element ids in the markup, dropping decorative/structural ids
4. Keep '<key>-group' ids whose key passes the section rule table
5. Deduplicate, keeping first-seen order
"""

import re
from typing import Iterator, Optional

import attrs

from src.platform.exception.exceptions import ParseError
from src.platform.logging.loguru_io import Logger
from src.service.venue_catalog.domain.section_rule_table import classify_section
from src.service.venue_catalog.domain.value_object.map_document import (
    MapDocument,
    SectionCandidate,
    SectionExtraction,
)
from src.service.venue_catalog.domain.value_object.section_type_bands import SectionTypeBands


SVG_OPEN_TAG_PATTERN = re.compile(r'<svg[^>]*>', re.IGNORECASE)
SVG_CLOSE_TAG = '</svg>'
ELEMENT_ID_PATTERN = re.compile(r'\bid=["\']([^"\']+)["\']', re.IGNORECASE)
VENUE_HEADER_PATTERN = re.compile(r'Venue:[ \t]*(.+?)[ \t]*(?:\n|$)')
TITLE_HEADER_PATTERN = re.compile(r'Title:[ \t]*(.+?)[ \t]*(?:[ \t]-[ \t]|\n|$)')
GROUP_SUFFIX = '-group'

# Ids of drawing structure and stage/court decoration, never seating
NOISE_ID_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r'^svg$',
        r'^defs$',
        r'^clip',
        r'^mask',
        r'^gradient',
        r'^pattern',
        r'^filter',
        r'^g\d*$',
        r'^layer',
        r'^path\d*$',
        r'^rect\d*$',
        r'^text\d*$',
        r'^tspan',
        r'^use\d*$',
        r'^symbol',
        r'^image',
        r'^style',
        r'^metadata',
        r'^namedview',
        r'^sodipodi',
        r'^parent',
        r'^sections$',
        r'^background',
        r'^stage',
        r'^court',
        r'^field',
        r'^ice',
        r'^arena',
        r'^border',
        r'^outline',
    )
)


@attrs.define(frozen=True)
class MarkupSplit:
    header: str
    markup: str


def split_markup(content: str) -> MarkupSplit:
    """Raises ParseError when the document carries no vector markup block"""
    open_tag = SVG_OPEN_TAG_PATTERN.search(content)
    if open_tag is None:
        raise ParseError()

    close_at = content.lower().rfind(SVG_CLOSE_TAG)
    end = close_at + len(SVG_CLOSE_TAG) if close_at >= open_tag.start() else len(content)
    return MarkupSplit(header=content[: open_tag.start()], markup=content[open_tag.start() : end])


def parse_header_venue_name(header: str) -> Optional[str]:
    for pattern in (VENUE_HEADER_PATTERN, TITLE_HEADER_PATTERN):
        if (m := pattern.search(header)) and m.group(1).strip():
            return m.group(1).strip()
    return None


def is_noise_id(element_id: str) -> bool:
    return any(pattern.search(element_id) for pattern in NOISE_ID_PATTERNS)


class SectionExtractor:
    def __init__(self, *, bands: SectionTypeBands | None = None) -> None:
        self.bands = bands or SectionTypeBands()

    @Logger.io(truncate_content=True)
    def iter_section_ids(self, markup: str) -> Iterator[str]:
        for m in ELEMENT_ID_PATTERN.finditer(markup):
            element_id = m.group(1)
            if is_noise_id(element_id) or not element_id.endswith(GROUP_SUFFIX):
                continue
            yield element_id

    def classify(self, raw_id: str) -> Optional[SectionCandidate]:
        return classify_section(raw_id, raw_id[: -len(GROUP_SUFFIX)], self.bands)

    @Logger.io(truncate_content=True)
    def extract(self, document: MapDocument) -> SectionExtraction:
        split = split_markup(document.content)

        seen: set[str] = set()
        candidates: list[SectionCandidate] = []
        for raw_id in self.iter_section_ids(split.markup):
            if raw_id in seen:
                continue
            seen.add(raw_id)
            if candidate := self.classify(raw_id):
                candidates.append(candidate)

        venue_name = parse_header_venue_name(split.header)
        Logger.base.info(
            f'🗺️ [EXTRACT] {document.filename or "<inline>"}: '
            f'{len(candidates)} sections, venue={venue_name!r}'
        )
        return SectionExtraction(
            candidates=tuple(candidates),
            extracted_venue_name=venue_name,
            markup=split.markup,
        )
