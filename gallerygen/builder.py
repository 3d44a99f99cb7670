"""
Builder - Runs one full gallery build: walk the image tree, write thumbnails,
persist the manifest.
"""

import logging
import os
from typing import Optional, Tuple

from .build_stats import BuildStats
from .config import GalleryConfig
from .errors import StructuralError
from .manifest import Manifest
from .walk_progress import WalkProgress
from .walker import Walker


class Builder:
    """
    Orchestrates a complete scan-and-rebuild.

    Every run reprocesses every image and replaces the previous manifest.
    """

    def __init__(
        self,
        config: GalleryConfig,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize builder.

        Args:
            config: Gallery configuration
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.stats = BuildStats()

    def _ensure_directory(self, path: str, label: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise StructuralError(f"Cannot create {label} folder {path}: {e}") from e

    def run(self, progress: Optional[WalkProgress] = None) -> Tuple[Manifest, BuildStats]:
        """
        Walk the source tree and write thumbnails and the manifest.

        Args:
            progress: Optional progress tracker

        Returns:
            Tuple of (manifest, stats)

        Raises:
            StructuralError: source folder missing, output folder uncreatable,
                directory unlistable, or manifest unwritable
        """
        self.stats = BuildStats()
        images_path = self.config.images_path
        project_path = self.config.project_path

        if not os.path.isdir(images_path):
            raise StructuralError(f"Images folder not found: {images_path}")

        thumb_gen = None
        if self.config.generate_thumbnails:
            self._ensure_directory(self.config.thumbnail_path, 'thumbnail')
            thumb_gen = self.config.thumbnail_generator(logger=self.logger)

        self.logger.info(f"Scanning images in {images_path}")
        walker = Walker(thumb_gen, strict=self.config.strict, logger=self.logger)
        records = walker.walk(images_path, project_path, progress=progress, stats=self.stats)

        manifest = Manifest.build(records)
        manifest.persist(self.config.data_path, self.config.manifest_filename)

        self.logger.info(
            f"Build complete: {manifest.total_images} images, "
            f"{self.stats.thumbnails_generated} thumbnails, "
            f"{self.stats.thumbnail_errors} errors "
            f"({self.stats.elapsed_seconds:.1f}s)"
        )
        return manifest, self.stats
