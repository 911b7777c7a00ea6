"""Ingestion DTOs"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from src.service.shared_kernel.app.dto.batch_error_log import BatchErrorLog


@dataclass
class DocumentMatch:
    filename: str
    venue_id: str
    venue_name: str
    strategy: str
    sections_created: int = 0
    generic_sections_created: int = 0
    sections_updated: int = 0


@dataclass
class IngestionResult:
    documents_processed: int = 0
    documents_skipped: int = 0  # venue already had a different map and force was off
    documents_unmatched: int = 0
    documents_failed: int = 0
    venues_created: int = 0
    venues_updated: int = 0
    sections_created: int = 0
    sections_updated: int = 0
    generic_sections_created: int = 0
    section_conflicts: int = 0
    events_created: int = 0
    events_skipped: int = 0
    events_synthesized: int = 0
    listings_created: int = 0
    unmatched: List[str] = field(default_factory=list)
    matches: List[DocumentMatch] = field(default_factory=list)
    errors: BatchErrorLog = field(default_factory=BatchErrorLog)

    @property
    def sections_matched(self) -> int:
        return self.sections_created + self.sections_updated

    def summary(self) -> Dict[str, Any]:
        return {
            'documents_processed': self.documents_processed,
            'venues_created': self.venues_created,
            'venues_updated': self.venues_updated,
            'documents_skipped': self.documents_skipped,
            'documents_unmatched': self.documents_unmatched,
            'documents_failed': self.documents_failed,
            'sections_matched': self.sections_matched,
            'generic_sections_created': self.generic_sections_created,
            'section_conflicts': self.section_conflicts,
            'events_created': self.events_created,
            'events_skipped': self.events_skipped,
            'events_synthesized': self.events_synthesized,
            'listings_created': self.listings_created,
            'unmatched': list(self.unmatched),
            'errors': list(self.errors.errors),
            'suppressed_errors': self.errors.suppressed_count,
        }
