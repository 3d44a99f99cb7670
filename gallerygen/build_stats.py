"""
BuildStats - Statistics for a gallery build run.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class BuildStats:
    """
    Statistics for a build run.

    Attributes:
        discovered: Image files found by the walk
        thumbnails_generated: Thumbnails written successfully
        thumbnail_errors: Images whose thumbnail step failed
        dropped: Records left out of the manifest (strict mode)
        directories_scanned: Directories listed
        cycles_skipped: Directories skipped because they loop back to an ancestor
        start_time: Start timestamp
        error_details: List of error messages
    """
    discovered: int = 0
    thumbnails_generated: int = 0
    thumbnail_errors: int = 0
    dropped: int = 0
    directories_scanned: int = 0
    cycles_skipped: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def rate_per_second(self) -> float:
        """Images discovered per second."""
        if self.elapsed_seconds > 0:
            return self.discovered / self.elapsed_seconds
        return 0.0

    def record_error(self, message: str) -> None:
        self.thumbnail_errors += 1
        self.error_details.append(message)
