"""Numbered-section bands: which section number range maps to which tier."""

import attrs

from src.service.shared_kernel.domain.enum.section_type import SectionType


@attrs.define(frozen=True)
class SectionTypeBands:
    floor_below: int = 100
    lower_below: int = 200
    premium_below: int = 300  # 200-level is the club/premium band

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.floor_below <= self.lower_below <= self.premium_below:
            raise ValueError('Section bands must be ascending')

    def classify(self, section_number: int) -> SectionType:
        if section_number < self.floor_below:
            return SectionType.FLOOR
        if section_number < self.lower_below:
            return SectionType.LOWER
        if section_number < self.premium_below:
            return SectionType.PREMIUM
        return SectionType.UPPER
