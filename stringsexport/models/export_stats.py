"""Counters collected while exporting one file."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ExportStats:
    """Statistics for one writer run."""

    count: int = 0
    android: int = 0
    empty_terms: List[Optional[str]] = field(default_factory=list)

    @property
    def empty_count(self) -> int:
        return len(self.empty_terms)
