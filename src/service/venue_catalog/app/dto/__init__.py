"""Venue Catalog DTOs"""

from src.service.venue_catalog.app.dto.catalog_sync_result import CatalogSyncResult

__all__ = ['CatalogSyncResult']
