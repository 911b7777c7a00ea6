from typing import List, Optional

import attrs

from src.service.inventory.domain.enum.listing_status import ListingStatus


def _validate_quantity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValueError('Listing quantity must be at least 1')


@attrs.define
class TicketListingEntity:
    event_section_id: str
    price: float
    quantity: int = attrs.field(validator=_validate_quantity)
    row_name: Optional[str] = None
    seat_numbers: Optional[List[int]] = None
    is_resale: bool = False
    is_lowest_price: bool = False
    has_clear_view: bool = True
    status: ListingStatus = ListingStatus.AVAILABLE
    id: Optional[str] = None
