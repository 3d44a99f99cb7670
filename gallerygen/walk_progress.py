"""
WalkProgress - Tracks and displays walk progress.
"""

import logging
import time
from typing import Dict, Optional

from .build_stats import BuildStats
from .image_record import ImageRecord


class WalkProgress:
    """
    Tracks and displays walk progress with optional per-file output.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each file as it's processed
            log_interval: Log summary progress every N images (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.folder_counts: Dict[str, int] = {}
        self.start_time: Optional[float] = None

    def on_directory_start(self, path: str) -> None:
        """Called when the walker starts listing a directory."""
        if self.show_files:
            print(f"\n=== {path} ===")
        else:
            self.logger.debug(f"Scanning directory: {path}")

    def on_file_processed(self, record: ImageRecord, stats: Optional[BuildStats] = None) -> None:
        """
        Called once per discovered image, after its thumbnail step.

        Args:
            record: The record built for the image
            stats: Running statistics, used for periodic summaries
        """
        if self.start_time is None:
            self.start_time = time.time()

        folder = record.folder or '.'
        self.folder_counts[folder] = self.folder_counts.get(folder, 0) + 1
        total = sum(self.folder_counts.values())

        if self.show_files:
            tag = '[ERROR]' if record.thumbnail_failed else '[OK]'
            print(f"  {tag} {record.format_status()}")
        elif total % self.log_interval == 0:
            elapsed = time.time() - self.start_time
            rate = total / elapsed if elapsed > 0 else 0
            errors = stats.thumbnail_errors if stats else 0
            self.logger.info(f"  Progress: {total:,} images, {errors} errors ({rate:.0f}/sec)")

    def on_directory_skipped(self, path: str, reason: str) -> None:
        """Called when a directory is not descended into."""
        if self.show_files:
            print(f"  [SKIP] {path} -> {reason}")
