from enum import StrEnum


class ListingStatus(StrEnum):
    AVAILABLE = 'available'
    RESERVED = 'reserved'
    SOLD = 'sold'
