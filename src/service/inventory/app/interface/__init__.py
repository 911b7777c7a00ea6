"""Inventory Interfaces"""

from src.service.inventory.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.inventory.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.inventory.app.interface.i_event_section_command_repo import (
    IEventSectionCommandRepo,
)
from src.service.inventory.app.interface.i_event_section_query_repo import IEventSectionQueryRepo
from src.service.inventory.app.interface.i_ticket_listing_command_repo import (
    ITicketListingCommandRepo,
)

__all__ = [
    'IEventCommandRepo',
    'IEventQueryRepo',
    'IEventSectionCommandRepo',
    'IEventSectionQueryRepo',
    'ITicketListingCommandRepo',
]
