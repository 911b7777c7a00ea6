"""
Batch Error Log - Shared Kernel

Collects per-item failures of a batch run (map ingestion, event synthesis)
without aborting the batch. Only the first `limit` messages are kept; the
rest are counted so a caller can still report how many were hidden.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class BatchErrorLog:
    limit: int = 20
    errors: List[str] = field(default_factory=list)
    suppressed_count: int = 0

    def record(self, item: str, error: Exception | str) -> None:
        message = f'{item}: {error}'
        if len(self.errors) < self.limit:
            self.errors.append(message)
        else:
            self.suppressed_count += 1

    @property
    def total_count(self) -> int:
        return len(self.errors) + self.suppressed_count

    def __bool__(self) -> bool:
        return self.total_count > 0
