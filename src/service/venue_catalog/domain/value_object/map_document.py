"""
Map Document Value Objects

MapDocument is the raw uploaded seating chart (text, usually a vector image
with a free-text metadata header in front). SectionCandidate and
SectionExtraction are what the extractor derives from it.
"""

from pathlib import PurePath
from typing import Optional, Tuple

import attrs

from src.service.shared_kernel.domain.enum.section_type import SectionType


@attrs.define(frozen=True)
class MapDocument:
    content: str
    filename: Optional[str] = None

    @property
    def stem(self) -> Optional[str]:
        """File name without directories and extension, used as a venue-name hint"""
        if not self.filename:
            return None
        return PurePath(self.filename).stem


@attrs.define(frozen=True)
class SectionCandidate:
    raw_id: str  # Element id in the markup, e.g. '101-group'
    display_name: str
    section_type: SectionType
    is_general_admission: bool = False

    @property
    def section_key(self) -> str:
        """raw_id without the '-group' suffix"""
        if self.raw_id.lower().endswith('-group'):
            return self.raw_id[: -len('-group')]
        return self.raw_id


@attrs.define(frozen=True)
class SectionExtraction:
    candidates: Tuple[SectionCandidate, ...] = ()
    extracted_venue_name: Optional[str] = None
    markup: str = ''
    source: str = 'regex'

    @property
    def raw_ids(self) -> Tuple[str, ...]:
        return tuple(candidate.raw_id for candidate in self.candidates)
