"""
Section Type Enum - Shared Kernel

Seating tier of a venue section. Drives both section classification during
map ingestion and the price tier during inventory synthesis.
"""

from enum import StrEnum


class SectionType(StrEnum):
    FLOOR = 'floor'
    LOWER = 'lower'
    UPPER = 'upper'
    PREMIUM = 'premium'
    STANDARD = 'standard'
