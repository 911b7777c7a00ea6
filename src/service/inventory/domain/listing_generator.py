"""
Listing Generator - Domain Logic

Synthesizes marketplace-looking ticket listings for one event section.

[Per section]
1. Target ticket count: random around the requested count, clamped
2. Row pool: random number of lettered rows
3. Listings of 1-6 tickets (small groups most likely) until the target runs out
4. Price: band position skewed low, x tier, x stable section jitter,
   x front-row premium, bounded, cent offset
5. Exactly one cheapest listing is flagged (first created wins ties)

[Invariants]
- sum of quantities <= target count
- every price within ListingPriceBounds
"""

import random
import string
from typing import List, Optional, Sequence

import attrs

from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity
from src.service.inventory.domain.entity.ticket_listing_entity import TicketListingEntity
from src.service.inventory.domain.pricing_domain import (
    ListingPriceBounds,
    round2,
    row_premium,
    skewed_fraction,
    stable_section_jitter,
    tier_multiplier,
)
from src.service.inventory.domain.value_object.price_band import PriceBand
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


@attrs.define(frozen=True)
class ListingGenerationPolicy:
    target_min_factor: float = 0.6
    target_max_factor: float = 1.4
    target_floor: int = 6
    target_cap: int = 80
    min_rows: int = 8
    max_rows: int = 22
    min_listings: int = 4
    max_listings: int = 24
    quantity_weights: tuple[int, ...] = (30, 30, 15, 15, 5, 5)  # quantities 1..6
    price_skew: float = 1.8
    front_row_premium: float = 0.12
    price_floor: float = 12.0
    price_floor_ratio: float = 0.75
    price_cap: float = 1200.0
    max_cent_offset: int = 9
    resale_rate: float = 0.35
    clear_view_rate: float = 0.75
    default_seats_per_row: int = 20
    jitter_seed: str = 'section-jitter-v1'


def row_label(index: int) -> str:
    """0 -> 'A', 25 -> 'Z', 26 -> 'AA'"""
    letters = string.ascii_uppercase
    label = ''
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        label = letters[remainder] + label
    return label


def flag_lowest_price(listings: Sequence[TicketListingEntity]) -> Optional[TicketListingEntity]:
    """Flag exactly one minimum-price listing; min() keeps the first of equal prices"""
    for listing in listings:
        listing.is_lowest_price = False
    if not listings:
        return None
    lowest = min(listings, key=lambda listing: listing.price)
    lowest.is_lowest_price = True
    return lowest


class ListingGenerator:
    def __init__(
        self, *, rng: random.Random, policy: ListingGenerationPolicy | None = None
    ) -> None:
        self.rng = rng
        self.policy = policy or ListingGenerationPolicy()

    def target_count(self, target_per_section: int) -> int:
        if target_per_section <= 0:
            return 0
        p = self.policy
        drawn = self.rng.randint(
            round(target_per_section * p.target_min_factor),
            round(target_per_section * p.target_max_factor),
        )
        return min(max(drawn, p.target_floor), p.target_cap)

    def draw_quantity(self) -> int:
        quantities = range(1, len(self.policy.quantity_weights) + 1)
        return self.rng.choices(quantities, weights=self.policy.quantity_weights)[0]

    def price_bounds(self, band: PriceBand) -> ListingPriceBounds:
        p = self.policy
        return ListingPriceBounds.for_band(
            band, absolute_floor=p.price_floor, floor_ratio=p.price_floor_ratio, cap=p.price_cap
        )

    def price_listing(
        self,
        *,
        band: PriceBand,
        section: SectionEntity,
        row_index: int,
        row_count: int,
    ) -> float:
        p = self.policy
        bounds = self.price_bounds(band)
        position = skewed_fraction(self.rng.random(), skew=p.price_skew)
        raw = band.min_price + (band.max_price - band.min_price) * position
        raw *= tier_multiplier(section.section_type, section.name)
        raw *= stable_section_jitter(section.id or section.name, seed=p.jitter_seed)
        raw *= row_premium(row_index, row_count, front_row_premium=p.front_row_premium)
        offset = self.rng.randint(-p.max_cent_offset, p.max_cent_offset) / 100
        return round2(bounds.clamp(round2(bounds.clamp(raw)) + offset))

    def generate(
        self,
        *,
        event_section: EventSectionEntity,
        section: SectionEntity,
        band: PriceBand,
        target_per_section: int,
    ) -> List[TicketListingEntity]:
        if event_section.id is None:
            raise ValueError('Event section must be persisted before generating listings')

        p = self.policy
        remaining = self.target_count(target_per_section)
        if remaining == 0:
            return []

        row_count = self.rng.randint(p.min_rows, p.max_rows)
        seats_per_row = section.seats_per_row or p.default_seats_per_row
        listing_count = self.rng.randint(p.min_listings, p.max_listings)

        listings: List[TicketListingEntity] = []
        for _ in range(listing_count):
            if remaining <= 0:
                break
            quantity = min(self.draw_quantity(), remaining)
            remaining -= quantity
            row_index = self.rng.randrange(row_count)

            row_name: Optional[str] = None
            seat_numbers: Optional[List[int]] = None
            if not section.is_general_admission:
                row_name = row_label(row_index)
                first_seat = self.rng.randint(1, max(1, seats_per_row - quantity + 1))
                seat_numbers = list(range(first_seat, first_seat + quantity))

            listings.append(
                TicketListingEntity(
                    event_section_id=event_section.id,
                    price=self.price_listing(
                        band=band, section=section, row_index=row_index, row_count=row_count
                    ),
                    quantity=quantity,
                    row_name=row_name,
                    seat_numbers=seat_numbers,
                    is_resale=self.rng.random() < p.resale_rate,
                    has_clear_view=self.rng.random() < p.clear_view_rate,
                )
            )

        flag_lowest_price(listings)
        return listings
