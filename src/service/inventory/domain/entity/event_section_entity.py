from typing import Optional

import attrs


@attrs.define
class EventSectionEntity:
    event_id: str
    section_id: str
    price: float
    service_fee: float
    capacity: int
    available_count: int
    id: Optional[str] = None

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.available_count <= self.capacity:
            raise ValueError('available_count must be within [0, capacity]')
