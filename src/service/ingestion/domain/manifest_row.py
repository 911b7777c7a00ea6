"""
Event Manifest Row

One event of an upload manifest (CSV exported from a spreadsheet). Column
names are accepted in snake_case or camelCase ('venue_name' / 'venueName').
"""

from datetime import date, time
import re
from typing import Any, Mapping, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.inventory.domain.entity.event_entity import EventEntity


_TRUE_VALUES = frozenset({'true', '1', 'yes', 'y'})
_CAMEL_BOUNDARY_PATTERN = re.compile(r'(?<=[a-z0-9])([A-Z])')
_SEPARATOR_PATTERN = re.compile(r'[\s-]+')


def _snake_case(key: str) -> str:
    spaced = _CAMEL_BOUNDARY_PATTERN.sub(r'_\1', key.strip())
    return _SEPARATOR_PATTERN.sub('_', spaced).lower()


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _price(value: Any, column: str) -> Optional[float]:
    text = _text(value)
    if text is None:
        return None
    try:
        return float(text.replace('$', '').replace(',', ''))
    except ValueError:
        raise DomainError(f'Invalid {column}: {text!r}')


def _date(value: Any) -> Optional[date]:
    text = _text(value)
    if text is None:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise DomainError(f'Invalid event_date: {text!r} (expected YYYY-MM-DD)')


def _time(value: Any, column: str) -> Optional[time]:
    text = _text(value)
    if text is None:
        return None
    try:
        return time.fromisoformat(text)
    except ValueError:
        raise DomainError(f'Invalid {column}: {text!r} (expected HH:MM)')


def _flag(value: Any, default: bool) -> bool:
    text = _text(value)
    return default if text is None else text.lower() in _TRUE_VALUES


@attrs.define(frozen=True)
class EventManifestRow:
    title: str
    venue_name: str
    city: Optional[str] = None
    state: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[time] = None
    doors_open_time: Optional[time] = None
    category: Optional[str] = None
    performer: Optional[str] = None
    image_url: Optional[str] = None
    price_from: Optional[float] = None
    price_to: Optional[float] = None
    is_featured: bool = False
    is_active: bool = True

    @classmethod
    def parse(cls, raw: Mapping[str, Any]) -> 'EventManifestRow':
        """
        Raises:
            DomainError: missing title / venue name or a malformed value
        """
        row = {_snake_case(key): value for key, value in raw.items() if key}
        title = _text(row.get('title'))
        venue_name = _text(row.get('venue_name')) or _text(row.get('venue'))
        if not title or not venue_name:
            raise DomainError('Manifest row needs both title and venue_name')

        return cls(
            title=title,
            venue_name=venue_name,
            city=_text(row.get('city')),
            state=_text(row.get('state')),
            description=_text(row.get('description')),
            event_date=_date(row.get('event_date')),
            event_time=_time(row.get('event_time'), 'event_time'),
            doors_open_time=_time(row.get('doors_open_time'), 'doors_open_time'),
            category=_text(row.get('category')) or _text(row.get('category_slug')),
            performer=_text(row.get('performer')) or _text(row.get('performer_name')),
            image_url=_text(row.get('image_url')),
            price_from=_price(row.get('price_from'), 'price_from'),
            price_to=_price(row.get('price_to'), 'price_to'),
            is_featured=_flag(row.get('is_featured'), False),
            is_active=_flag(row.get('is_active'), True),
        )

    def to_event(self, *, venue_id: str) -> EventEntity:
        return EventEntity(
            venue_id=venue_id,
            title=self.title,
            description=self.description,
            event_date=self.event_date,
            event_time=self.event_time,
            doors_open_time=self.doors_open_time,
            category=self.category,
            performer=self.performer,
            image_url=self.image_url,
            price_from=self.price_from,
            price_to=self.price_to,
            is_featured=self.is_featured,
            is_active=self.is_active,
        )
