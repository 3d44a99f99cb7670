"""
Walker - Recursively discovers images and builds their manifest records.
"""

import logging
import os
from typing import List, Optional, Set

from .build_stats import BuildStats
from .errors import DirectoryListError, ThumbnailError
from .image_record import ImageRecord, ThumbnailStatus
from .thumbnail_generator import ThumbnailGenerator
from .walk_progress import WalkProgress


IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp', '.tiff', '.webp')


def is_image(filename: str) -> bool:
    """Check if a file is an image based on its extension (case-insensitive)."""
    return filename.lower().endswith(IMAGE_EXTENSIONS)


def image_title(filename: str) -> str:
    """File name with its last extension removed: 'photo.JPG' -> 'photo'."""
    idx = filename.rfind('.')
    if idx < 0:
        return filename
    return filename[:idx]


def relative_url(path: str, root: str) -> str:
    """Path relative to root with '/' separators regardless of platform."""
    rel_path = os.path.relpath(path, root)
    if os.altsep:
        rel_path = rel_path.replace(os.altsep, '/')
    return rel_path.replace(os.sep, '/')


class Walker:
    """
    Walks a source tree depth-first and produces one ImageRecord per image.

    Directory entries are visited in name order so that repeated runs over
    the same tree yield the same record order. Symlinked directories are
    followed, but a directory whose real path is already on the current descent
    path is skipped, which stops symlink cycles while still walking a second
    link to a directory that sits elsewhere in the tree.
    """

    def __init__(
        self,
        thumbnail_generator: Optional[ThumbnailGenerator] = None,
        strict: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize walker.

        Args:
            thumbnail_generator: Generator to run per image, or None to emit
                records without thumbnails
            strict: Drop records whose thumbnail failed instead of keeping
                them with a dangling thumbnail path
            logger: Optional logger instance
        """
        self.thumb_gen = thumbnail_generator
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)
        self.stats = BuildStats()

    def walk(
        self,
        source_dir: str,
        project_root: str,
        progress: Optional[WalkProgress] = None,
        stats: Optional[BuildStats] = None
    ) -> List[ImageRecord]:
        """
        Discover every image under source_dir.

        Args:
            source_dir: Root of the image tree
            project_root: Root that urls and thumbnail paths are relative to
            progress: Optional progress tracker
            stats: Optional stats object to accumulate into

        Returns:
            Records in discovery order

        Raises:
            DirectoryListError: a directory could not be listed
        """
        self.stats = stats if stats is not None else BuildStats()
        records: List[ImageRecord] = []
        ancestors: Set[str] = set()

        self._walk_directory(source_dir, project_root, records, ancestors, progress)
        return records

    def _list_directory(self, directory: str) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryListError(directory, e.strerror or str(e)) from e

    def _walk_directory(
        self,
        directory: str,
        project_root: str,
        records: List[ImageRecord],
        ancestors: Set[str],
        progress: Optional[WalkProgress]
    ) -> None:
        real_path = os.path.realpath(directory)
        if real_path in ancestors:
            self.logger.warning(f"Skipping {directory}: symlink cycle back to {real_path}")
            self.stats.cycles_skipped += 1
            if progress:
                progress.on_directory_skipped(directory, 'symlink cycle')
            return

        if progress:
            progress.on_directory_start(directory)

        entries = self._list_directory(directory)
        self.stats.directories_scanned += 1

        ancestors.add(real_path)
        try:
            for entry in entries:
                if entry.is_dir():
                    self._walk_directory(entry.path, project_root, records, ancestors, progress)
                elif entry.is_file() and is_image(entry.name):
                    record = self._process_image(entry.path, entry.name, project_root)
                    if progress:
                        progress.on_file_processed(record, self.stats)
                    if self.strict and record.thumbnail_failed:
                        self.logger.warning(f"Dropping {record.url} from manifest (strict mode)")
                        self.stats.dropped += 1
                        continue
                    records.append(record)
                else:
                    self.logger.debug(f"Ignoring non-image file: {entry.path}")
        finally:
            ancestors.discard(real_path)

    def _process_image(self, path: str, filename: str, project_root: str) -> ImageRecord:
        """Build the record for one image, generating its thumbnail if enabled."""
        self.stats.discovered += 1
        title = image_title(filename)
        url = relative_url(path, project_root)

        if self.thumb_gen is None:
            return ImageRecord(title=title, url=url, alt=title)

        thumb_path = self.thumb_gen.thumbnail_path(path, project_root)
        try:
            self.thumb_gen.make_thumbnail(path, project_root)
            status = ThumbnailStatus.GENERATED
            self.stats.thumbnails_generated += 1
            self.logger.debug(f"Generated thumbnail for {url}")
        except ThumbnailError as e:
            error_msg = f"Error creating thumbnail for {url}: {e}"
            self.logger.error(error_msg)
            self.stats.record_error(error_msg)
            status = ThumbnailStatus.FAILED

        return ImageRecord(
            title=title,
            url=url,
            alt=title,
            thumbnail=relative_url(thumb_path, project_root),
            thumbnail_status=status,
        )
