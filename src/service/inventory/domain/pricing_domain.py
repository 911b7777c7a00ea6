"""
Pricing - Domain Logic

Price tiers, per-section jitter and listing price bounds. Everything here is
deterministic; randomness is passed in by the listing generator.

[Tier rules] (first match wins)
- VIP / suite / premium / box names     3.0
- floor type, floor / pit names         2.5
- club names, 200-level numbers         2.0
- premium type                          3.0
- lower type, 'lower', 100-level        1.8
- upper type, 'upper', 300+ level       0.8
- anything else                         1.0
"""

from decimal import ROUND_HALF_UP, Decimal
import hashlib
import math
import re
from typing import Callable, Optional

import attrs

from src.service.inventory.domain.value_object.price_band import PriceBand
from src.service.shared_kernel.domain.enum.section_type import SectionType


JITTER_MIN = 0.9
JITTER_MAX = 1.1
DEFAULT_TIER_MULTIPLIER = 1.0

_LEVEL_PATTERN = re.compile(r'\b([1-9])\d{2}\b')
_CENT = Decimal('0.01')


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def section_level(section_name: str) -> Optional[int]:
    """Hundreds digit of the first 3-digit number in the name ('Section 214' -> 2)"""
    m = _LEVEL_PATTERN.search(section_name)
    return int(m.group(1)) if m else None


def _name_has(*words: str) -> Callable[[SectionType, str], bool]:
    return lambda section_type, name: any(word in name for word in words)


def _level_is(predicate: Callable[[int], bool]) -> Callable[[SectionType, str], bool]:
    def check(section_type: SectionType, name: str) -> bool:
        level = section_level(name)
        return level is not None and predicate(level)

    return check


@attrs.define(frozen=True)
class TierRule:
    name: str
    multiplier: float
    predicates: tuple[Callable[[SectionType, str], bool], ...]

    def applies(self, section_type: SectionType, lowered_name: str) -> bool:
        return any(predicate(section_type, lowered_name) for predicate in self.predicates)


def _type_is(expected: SectionType) -> Callable[[SectionType, str], bool]:
    return lambda section_type, name: section_type == expected


TIER_RULES: tuple[TierRule, ...] = (
    TierRule('vip', 3.0, (_name_has('vip', 'suite', 'premium', 'box'),)),
    TierRule('floor', 2.5, (_type_is(SectionType.FLOOR), _name_has('floor', 'pit'))),
    TierRule('club', 2.0, (_name_has('club'), _level_is(lambda level: level == 2))),
    TierRule('premium', 3.0, (_type_is(SectionType.PREMIUM),)),
    TierRule(
        'lower',
        1.8,
        (_type_is(SectionType.LOWER), _name_has('lower'), _level_is(lambda level: level == 1)),
    ),
    TierRule(
        'upper',
        0.8,
        (_type_is(SectionType.UPPER), _name_has('upper'), _level_is(lambda level: level >= 3)),
    ),
)


def tier_multiplier(section_type: SectionType, section_name: str) -> float:
    lowered = section_name.lower()
    for rule in TIER_RULES:
        if rule.applies(section_type, lowered):
            return rule.multiplier
    return DEFAULT_TIER_MULTIPLIER


def stable_section_jitter(section_id: str, *, seed: str) -> float:
    """Per-section price factor in [0.9, 1.1), identical for identical inputs"""
    digest = hashlib.sha256(f'{seed}:{section_id}'.encode()).digest()
    fraction = int.from_bytes(digest[:8], 'big') / 2**64
    return JITTER_MIN + (JITTER_MAX - JITTER_MIN) * fraction


def skewed_fraction(uniform: float, *, skew: float = 1.8) -> float:
    """Bias a uniform [0, 1) draw toward 0 so most listings sit near the band floor"""
    return uniform**skew


def row_premium(row_index: int, row_count: int, *, front_row_premium: float = 0.12) -> float:
    """1 + premium for the front row, falling linearly to 1.0 at the back row"""
    if row_count <= 1:
        return 1.0 + front_row_premium
    return 1.0 + front_row_premium * (1 - row_index / (row_count - 1))


@attrs.define(frozen=True)
class ListingPriceBounds:
    floor: float
    cap: float

    @classmethod
    def for_band(
        cls,
        band: PriceBand,
        *,
        absolute_floor: float = 12.0,
        floor_ratio: float = 0.75,
        cap: float = 1200.0,
    ) -> 'ListingPriceBounds':
        # Bounds on the cent grid so rounding can never step outside them
        floor = math.ceil(max(absolute_floor, floor_ratio * band.min_price) * 100) / 100
        ceiling = math.floor(cap * 100) / 100
        return cls(floor=min(floor, ceiling), cap=ceiling)

    def clamp(self, price: float) -> float:
        return min(max(price, self.floor), self.cap)
