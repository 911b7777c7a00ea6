"""
Section Rule Table

Ordered classification rules for the key of a '<key>-group' element id.
The first rule whose pattern matches decides the section type, the display
name and the general-admission flag. Keys that no rule matches are not
seating sections.

[Rules]
- numbered:  '101'     -> type by SectionTypeBands, 'Section 101'
- lettered:  'F12'     -> type by prefix letter,   'Floor 12'
             'A3'      -> standard,                'Section A 3'
             'F'       -> standard (no digits),    'Section F'
- named:     'vip-box' -> type by vocabulary word, 'VIP Box'
             'suites'  -> prefix match, no word boundary needed
"""

import re
from typing import Callable, Optional

import attrs

from src.service.shared_kernel.domain.enum.section_type import SectionType
from src.service.venue_catalog.domain.value_object.map_document import SectionCandidate
from src.service.venue_catalog.domain.value_object.section_type_bands import SectionTypeBands


LETTER_PREFIX_NAMES = {
    'F': 'Floor',
    'L': 'Loge',
    'A': 'Section A',
    'B': 'Section B',
    'C': 'Section C',
    'D': 'Section D',
}
LETTER_PREFIX_TYPES = {'F': SectionType.FLOOR, 'L': SectionType.PREMIUM}

SECTION_VOCABULARY = (
    'floor',
    'pit',
    'ga',
    'vip',
    'club',
    'premium',
    'box',
    'suite',
    'terrace',
    'orchestra',
    'mezzanine',
    'balcony',
    'loge',
)
VOCABULARY_TYPES = {
    'floor': SectionType.FLOOR,
    'pit': SectionType.FLOOR,
    'ga': SectionType.FLOOR,
    'vip': SectionType.PREMIUM,
    'club': SectionType.PREMIUM,
    'premium': SectionType.PREMIUM,
    'box': SectionType.PREMIUM,
    'suite': SectionType.PREMIUM,
    'balcony': SectionType.UPPER,
    'terrace': SectionType.LOWER,
    'orchestra': SectionType.LOWER,
    'mezzanine': SectionType.LOWER,
    'loge': SectionType.LOWER,
}
GENERAL_ADMISSION_WORDS = frozenset({'ga', 'pit'})
UPPERCASE_WORDS = frozenset({'vip', 'ga'})

_WORD_SPLIT_PATTERN = re.compile(r'[-_\s]+')


def title_case_key(section_key: str) -> str:
    words = [word for word in _WORD_SPLIT_PATTERN.split(section_key) if word]
    return ' '.join(
        word.upper() if word.lower() in UPPERCASE_WORDS else word.capitalize() for word in words
    )


def _numbered_type(m: re.Match, bands: SectionTypeBands) -> SectionType:
    return bands.classify(int(m.group(1)))


def _lettered_type(m: re.Match, bands: SectionTypeBands) -> SectionType:
    if not m.group(2):
        return SectionType.STANDARD
    return LETTER_PREFIX_TYPES.get(m.group(1).upper(), SectionType.STANDARD)


def _lettered_name(m: re.Match) -> str:
    prefix, number = m.group(1).upper(), m.group(2)
    if number and prefix in LETTER_PREFIX_NAMES:
        return f'{LETTER_PREFIX_NAMES[prefix]} {number}'
    return f'Section {prefix}{number}'


def _named_type(m: re.Match, bands: SectionTypeBands) -> SectionType:
    return VOCABULARY_TYPES.get(m.group(1).lower(), SectionType.STANDARD)


@attrs.define(frozen=True)
class SectionRule:
    name: str
    pattern: re.Pattern
    section_type: Callable[[re.Match, SectionTypeBands], SectionType]
    display_name: Callable[[re.Match], str]
    general_admission: Callable[[re.Match], bool] = lambda m: False


SECTION_RULES: tuple[SectionRule, ...] = (
    SectionRule(
        name='numbered',
        pattern=re.compile(r'^(\d{1,3})$'),
        section_type=_numbered_type,
        display_name=lambda m: f'Section {m.group(1)}',
    ),
    SectionRule(
        name='lettered',
        pattern=re.compile(r'^([a-z])(\d{0,2})$', re.IGNORECASE),
        section_type=_lettered_type,
        display_name=_lettered_name,
    ),
    SectionRule(
        name='named',
        pattern=re.compile(rf'^({"|".join(SECTION_VOCABULARY)})', re.IGNORECASE),
        section_type=_named_type,
        display_name=lambda m: title_case_key(m.string),
        general_admission=lambda m: m.group(1).lower() in GENERAL_ADMISSION_WORDS,
    ),
)


def classify_section(
    raw_id: str, section_key: str, bands: SectionTypeBands
) -> Optional[SectionCandidate]:
    for rule in SECTION_RULES:
        if m := rule.pattern.match(section_key):
            return SectionCandidate(
                raw_id=raw_id,
                display_name=rule.display_name(m),
                section_type=rule.section_type(m, bands),
                is_general_admission=rule.general_admission(m),
            )
    return None
