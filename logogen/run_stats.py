"""
RunStats - Statistics for a generation run.
"""

import time
from dataclasses import dataclass, field
from typing import List

from .outcome import OutcomeStatus, ProcessingOutcome


@dataclass
class RunStats:
    """
    Statistics for a generation run.
    
    Attributes:
        total: Number of catalog entries in the run
        produced: Outputs written
        skipped: Outputs skipped on a cache hit
        failed: Outputs that failed to resize or encode
        bytes_written: Total bytes of outputs written
        start_time: Start timestamp
        error_details: List of error messages
    """
    total: int = 0
    produced: int = 0
    skipped: int = 0
    failed: int = 0
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)
    
    def record(self, outcome: ProcessingOutcome) -> None:
        """Count one outcome."""
        if outcome.status is OutcomeStatus.PRODUCED:
            self.produced += 1
            self.bytes_written += outcome.bytes_written
        elif outcome.status is OutcomeStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1
            self.error_details.append(str(outcome.error))
    
    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time
