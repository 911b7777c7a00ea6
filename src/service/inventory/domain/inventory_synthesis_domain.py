"""
Inventory Synthesis - Domain Logic

Event section pricing and discount price bands.

[Event sections]
- price = base (event price_from) x tier multiplier, rounded to cents
- capacity = section capacity (default when unset), fully available
- one event section per (event, section); existing pairs are left alone

[Discount band]
- source envelope: recorded list price if any, else the current envelope,
  else 50 / 150
- guardrails: source min >= 40, source max >= 2 x source min
- band = source x (100 - discount) / 100
"""

from typing import Iterable, List, Sequence

import attrs

from src.platform.exception.exceptions import DomainError, SynthesisPreconditionError
from src.service.inventory.domain.entity.event_entity import EventEntity
from src.service.inventory.domain.entity.event_section_entity import EventSectionEntity
from src.service.inventory.domain.pricing_domain import round2, tier_multiplier
from src.service.inventory.domain.value_object.price_band import PriceBand
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity


DEFAULT_SOURCE_PRICE_FROM = 50.0
DEFAULT_SOURCE_PRICE_TO = 150.0
MIN_SOURCE_PRICE = 40.0
MIN_SOURCE_SPREAD_RATIO = 2.0


def build_event_sections(
    *,
    event: EventEntity,
    sections: Sequence[SectionEntity],
    existing_section_ids: Iterable[str] = (),
    service_fee_rate: float = 0.15,
    default_capacity: int = 100,
) -> List[EventSectionEntity]:
    """
    Raises:
        SynthesisPreconditionError: no sections, or the event has no price envelope
    """
    if not sections:
        raise SynthesisPreconditionError(f'No sections found for venue {event.venue_id}')
    if not event.has_price_envelope or event.id is None:
        raise SynthesisPreconditionError(f'Event {event.title} has no price envelope')

    base_price = float(event.price_from)  # type: ignore[arg-type]
    skip = set(existing_section_ids)
    event_sections = []
    for section in sections:
        if section.id is None or section.id in skip:
            continue
        skip.add(section.id)
        price = round2(base_price * tier_multiplier(section.section_type, section.name))
        capacity = section.capacity or default_capacity
        event_sections.append(
            EventSectionEntity(
                event_id=event.id,
                section_id=section.id,
                price=price,
                service_fee=round2(price * service_fee_rate),
                capacity=capacity,
                available_count=capacity,
            )
        )
    return event_sections


def event_price_band(event: EventEntity, *, price_variation: float = 0.2) -> PriceBand:
    if not event.has_price_envelope:
        raise SynthesisPreconditionError(f'Event {event.title} has no price envelope')
    price_from = float(event.price_from)  # type: ignore[arg-type]
    price_to = max(float(event.price_to or price_from), price_from)
    return PriceBand(price_from, price_to).with_min_spread(price_variation)


@attrs.define(frozen=True)
class DiscountPlan:
    source: PriceBand
    band: PriceBand

    @property
    def envelope(self) -> tuple[float, float]:
        return round2(self.band.min_price), round2(self.band.max_price)


def plan_discount(event: EventEntity, *, discount_percent: float) -> DiscountPlan:
    if not 0 <= discount_percent < 100:
        raise DomainError(f'Discount must be within [0, 100), got {discount_percent}')

    source_from = event.list_price_from or event.price_from or DEFAULT_SOURCE_PRICE_FROM
    source_to = event.list_price_to or event.price_to or DEFAULT_SOURCE_PRICE_TO
    source_from = max(float(source_from), MIN_SOURCE_PRICE)
    source_to = max(float(source_to), source_from * MIN_SOURCE_SPREAD_RATIO)

    source = PriceBand(source_from, source_to)
    return DiscountPlan(source=source, band=source.scaled((100 - discount_percent) / 100))
