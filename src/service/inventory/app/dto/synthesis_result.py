"""Inventory Synthesis DTOs"""

from dataclasses import dataclass


@dataclass
class ListingSynthesisResult:
    event_id: str
    sections_processed: int = 0
    sections_without_listings: int = 0
    listings_created: int = 0
    tickets_created: int = 0


@dataclass
class DiscountResult:
    event_id: str
    discount_percent: float
    price_from: float
    price_to: float
    listings_cleared: int = 0
    listings_created: int = 0
    tickets_created: int = 0
