import pytest

from src.service.inventory.domain.pricing_domain import (
    ListingPriceBounds,
    round2,
    row_premium,
    section_level,
    skewed_fraction,
    stable_section_jitter,
    tier_multiplier,
)
from src.service.inventory.domain.value_object.price_band import PriceBand
from src.service.shared_kernel.domain.enum.section_type import SectionType


@pytest.mark.unit
class TestTierMultiplier:
    @pytest.mark.parametrize(
        ('section_type', 'name', 'expected'),
        [
            (SectionType.PREMIUM, 'VIP Suite', 3.0),
            (SectionType.UPPER, 'Suite 305', 3.0),
            (SectionType.FLOOR, 'Floor A', 2.5),
            (SectionType.STANDARD, 'Pit Left', 2.5),
            (SectionType.PREMIUM, 'Section 214', 2.0),
            (SectionType.STANDARD, 'Club Level', 2.0),
            (SectionType.PREMIUM, 'Loge 4', 3.0),
            (SectionType.LOWER, 'Section 101', 1.8),
            (SectionType.STANDARD, 'Lower Terrace', 1.8),
            (SectionType.UPPER, 'Section 305', 0.8),
            (SectionType.STANDARD, 'Section 412', 0.8),
            (SectionType.STANDARD, 'Section X12', 1.0),
        ],
    )
    def test_first_matching_rule_wins(
        self, section_type: SectionType, name: str, expected: float
    ) -> None:
        assert tier_multiplier(section_type, name) == expected

    def test_section_level(self) -> None:
        assert section_level('Section 214') == 2
        assert section_level('Floor 12') is None
        assert section_level('Section 1010') is None


@pytest.mark.unit
class TestPricingHelpers:
    def test_round2_is_half_up(self) -> None:
        assert round2(2.675) == 2.68
        assert round2(1.005) == 1.01
        assert round2(90.0) == 90.0

    def test_jitter_is_stable_and_bounded(self) -> None:
        first = stable_section_jitter('section-1', seed='s')
        assert first == stable_section_jitter('section-1', seed='s')
        assert 0.9 <= first < 1.1
        assert first != stable_section_jitter('section-1', seed='other')

    def test_skew_biases_toward_zero(self) -> None:
        assert skewed_fraction(0.0) == 0.0
        assert skewed_fraction(0.5) < 0.5
        assert skewed_fraction(1.0) == 1.0

    def test_row_premium_falls_from_front_to_back(self) -> None:
        assert row_premium(0, 10) == pytest.approx(1.12)
        assert row_premium(9, 10) == pytest.approx(1.0)
        assert row_premium(0, 1) == pytest.approx(1.12)


@pytest.mark.unit
class TestListingPriceBounds:
    def test_absolute_floor_applies_to_cheap_bands(self) -> None:
        bounds = ListingPriceBounds.for_band(PriceBand(10, 20))
        assert bounds.floor == 12.0
        assert bounds.cap == 1200.0

    def test_relative_floor_applies_to_expensive_bands(self) -> None:
        bounds = ListingPriceBounds.for_band(PriceBand(100, 200))
        assert bounds.floor == 75.0

    def test_floor_never_exceeds_cap(self) -> None:
        bounds = ListingPriceBounds.for_band(PriceBand(5000, 6000))
        assert bounds.floor == bounds.cap == 1200.0

    def test_clamp(self) -> None:
        bounds = ListingPriceBounds(floor=12.0, cap=1200.0)
        assert bounds.clamp(3.0) == 12.0
        assert bounds.clamp(5000.0) == 1200.0
        assert bounds.clamp(55.5) == 55.5
