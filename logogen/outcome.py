"""
ProcessingOutcome - Result of handling one DimensionSpec in a run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .dimension_spec import DimensionSpec
from .errors import LogoGenError


class OutcomeStatus(Enum):
    SKIPPED = 'skipped'
    PRODUCED = 'produced'
    FAILED = 'failed'


@dataclass
class ProcessingOutcome:
    """
    Attributes:
        spec: The target that was handled
        status: Skipped (cache hit), produced or failed
        output_path: Where the output lives (or would have)
        bytes_written: Size of the written file, 0 unless produced
        error: The failure, when status is FAILED
    """
    spec: DimensionSpec
    status: OutcomeStatus
    output_path: str
    bytes_written: int = 0
    error: Optional[LogoGenError] = None
    
    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.FAILED
    
    def format_status(self) -> str:
        """Format a one-line status, e.g. ``icon.png - PRODUCED (4.2 KB)``."""
        if self.status is OutcomeStatus.PRODUCED:
            return f"{self.spec.name} - PRODUCED ({self._format_size(self.bytes_written)})"
        if self.status is OutcomeStatus.SKIPPED:
            return f"{self.spec.name} - SKIPPED (cached)"
        return f"{self.spec.name} - FAILED ({self.error})"
    
    @staticmethod
    def _format_size(num_bytes: int) -> str:
        if num_bytes < 1024:
            return f"{num_bytes} B"
        if num_bytes < 1024 * 1024:
            return f"{num_bytes / 1024:.1f} KB"
        return f"{num_bytes / (1024 * 1024):.1f} MB"
