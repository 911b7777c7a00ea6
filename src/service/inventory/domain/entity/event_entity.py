"""
Event Entity

An event hosted at a venue. price_from/price_to is the event's price
envelope; list_price_from/list_price_to keep the envelope as it was before
the first discount so repeated discount runs start from the same source.
"""

from datetime import date, time
from typing import Optional

import attrs


def _validate_title(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError('Event title cannot be empty')


@attrs.define
class EventEntity:
    venue_id: str
    title: str = attrs.field(validator=_validate_title)
    price_from: Optional[float] = None
    price_to: Optional[float] = None
    list_price_from: Optional[float] = None
    list_price_to: Optional[float] = None
    description: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[time] = None
    doors_open_time: Optional[time] = None
    category: Optional[str] = None
    performer: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: bool = False
    is_active: bool = True
    id: Optional[str] = None

    @property
    def has_price_envelope(self) -> bool:
        return self.price_from is not None and self.price_from > 0

    @property
    def dedupe_key(self) -> str:
        """Manifest imports treat title + date as the identity of an event"""
        day = self.event_date.isoformat() if self.event_date else ''
        return f'{self.title.strip().lower()}|{day}'
