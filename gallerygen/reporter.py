"""
Reporter - Generates human-readable reports from manifest data.
"""

import logging
import os
import sys
from typing import Dict, List, Optional, TextIO

from .image_record import ImageRecord
from .manifest import Manifest


class Reporter:
    """
    Generates human-readable reports from manifest data.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _format_bytes(self, bytes_val: float) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} PB"

    @staticmethod
    def _thumbnail_file(record: ImageRecord, project_root: str) -> str:
        return os.path.join(project_root, *record.thumbnail.split('/'))

    def find_dangling(self, manifest: Manifest, project_root: str) -> List[ImageRecord]:
        """Records whose thumbnail path does not exist under project_root."""
        return [
            record for record in manifest.get_records_with_thumbnails()
            if not os.path.isfile(self._thumbnail_file(record, project_root))
        ]

    def report_summary(self, manifest: Manifest, project_root: Optional[str] = None) -> None:
        """Generate a summary report, grouped by the folder each image sits in."""
        self._print("=" * 70)
        self._print("GALLERY MANIFEST SUMMARY")
        self._print("=" * 70)
        self._print()

        self._print("Overall Statistics:")
        self._print(f"  Total Images:         {manifest.total_images:,}")
        self._print(f"  With Thumbnails:      {manifest.total_with_thumbnails:,}")
        self._print(f"  Without Thumbnails:   {manifest.total_images - manifest.total_with_thumbnails:,}")

        if project_root is not None:
            thumb_bytes = 0
            dangling = 0
            for record in manifest.get_records_with_thumbnails():
                path = self._thumbnail_file(record, project_root)
                if os.path.isfile(path):
                    thumb_bytes += os.path.getsize(path)
                else:
                    dangling += 1
            self._print(f"  Dangling Thumbnails:  {dangling:,}")
            self._print(f"  Thumbnail Size:       {self._format_bytes(thumb_bytes)}")
        self._print()

        folders: Dict[str, List[int]] = {}
        for record in manifest.records:
            counts = folders.setdefault(record.folder or '.', [0, 0])
            counts[0] += 1
            if record.has_thumbnail:
                counts[1] += 1

        self._print("Folders:")
        self._print("-" * 70)
        self._print(f"{'Folder':<44} {'Images':>10} {'Thumbnails':>12}")
        self._print("-" * 70)
        for name in sorted(folders.keys()):
            total, with_thumbs = folders[name]
            self._print(f"{name:<44} {total:>10,} {with_thumbs:>12,}")
        self._print("-" * 70)
        self._print()

    def report_dangling(
        self,
        manifest: Manifest,
        project_root: str,
        limit: int = 100
    ) -> int:
        """
        List records whose thumbnail file is missing on disk.

        Returns:
            Number of dangling thumbnail references
        """
        self._print("=" * 70)
        self._print("DANGLING THUMBNAIL REFERENCES")
        self._print("=" * 70)
        self._print()

        dangling = self.find_dangling(manifest, project_root)
        for record in dangling[:limit]:
            self._print(f"  {record.url} -> {record.thumbnail}")
        if len(dangling) > limit:
            self._print(f"  ... and {len(dangling) - limit:,} more")

        self._print()
        self._print(f"Total dangling: {len(dangling):,}")
        self._print()
        return len(dangling)
