"""
GalleryConfig - Paths and thumbnail settings for a gallery build.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .manifest import MANIFEST_FILENAME
from .thumbnail_generator import CROP_CLAMP, CROP_POLICIES, ThumbnailGenerator


@dataclass
class GalleryConfig:
    """
    Configuration for one gallery build.

    The defaults reproduce the classic layout: run from a tools folder
    inside the project, read ``../images``, write thumbnails to
    ``../assets/thumbnail`` and the manifest to ``../data/images.json``.

    Attributes:
        project_root: Root that urls and output folders are relative to
        images_dir: Source image tree (default: <project_root>/images)
        thumbnail_subdir: Thumbnail folder under the project root
        data_subdir: Manifest folder under the project root
        manifest_filename: Manifest file name
        scale_factor: Divisor applied to each image dimension
        crop_width: Thumbnail crop width
        crop_height: Thumbnail crop height
        jpeg_quality: JPEG quality for thumbnails (1-100)
        crop_policy: 'clamp', 'pad' or 'fail' for crops larger than the image
        fill_color: Padding color for the 'pad' policy
        generate_thumbnails: If False, records carry no thumbnail field
        strict: Drop records whose thumbnail failed
        unique_thumbnail_names: Hash the source path into thumbnail names
    """
    project_root: str = '..'
    images_dir: Optional[str] = None
    thumbnail_subdir: str = 'assets/thumbnail'
    data_subdir: str = 'data'
    manifest_filename: str = MANIFEST_FILENAME
    scale_factor: int = 5
    crop_width: int = 415
    crop_height: int = 415
    jpeg_quality: int = 80
    crop_policy: str = CROP_CLAMP
    fill_color: Tuple[int, int, int] = (255, 255, 255)
    generate_thumbnails: bool = True
    strict: bool = False
    unique_thumbnail_names: bool = False

    @classmethod
    def from_env(cls) -> 'GalleryConfig':
        """Create configuration from environment variables."""
        return cls(
            project_root=os.getenv('GALLERYGEN_PROJECT_ROOT', '..'),
            images_dir=os.getenv('GALLERYGEN_IMAGES_DIR') or None,
        )

    @property
    def project_path(self) -> str:
        return os.path.abspath(self.project_root)

    @property
    def images_path(self) -> str:
        if self.images_dir:
            return os.path.abspath(self.images_dir)
        return os.path.join(self.project_path, 'images')

    @property
    def thumbnail_path(self) -> str:
        return os.path.join(self.project_path, *self.thumbnail_subdir.split('/'))

    @property
    def data_path(self) -> str:
        return os.path.join(self.project_path, *self.data_subdir.split('/'))

    @property
    def manifest_path(self) -> str:
        return os.path.join(self.data_path, self.manifest_filename)

    def validate(self) -> List[str]:
        """Validate configuration, returning a list of error messages."""
        errors = []
        if not self.project_root:
            errors.append("Project root is required")
        if self.scale_factor < 1:
            errors.append(f"Scale factor must be at least 1 (got {self.scale_factor})")
        if self.crop_width < 1 or self.crop_height < 1:
            errors.append(f"Crop size must be positive (got {self.crop_width}x{self.crop_height})")
        if not 1 <= self.jpeg_quality <= 100:
            errors.append(f"JPEG quality must be between 1 and 100 (got {self.jpeg_quality})")
        if self.crop_policy not in CROP_POLICIES:
            errors.append(
                f"Crop policy must be one of {', '.join(CROP_POLICIES)} (got {self.crop_policy})"
            )
        return errors

    def thumbnail_generator(self, logger=None) -> ThumbnailGenerator:
        """Build the ThumbnailGenerator these settings describe."""
        return ThumbnailGenerator(
            scale_factor=self.scale_factor,
            crop_width=self.crop_width,
            crop_height=self.crop_height,
            quality=self.jpeg_quality,
            crop_policy=self.crop_policy,
            fill_color=self.fill_color,
            thumbnail_subdir=self.thumbnail_subdir,
            unique_names=self.unique_thumbnail_names,
            logger=logger,
        )
