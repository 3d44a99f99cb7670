"""
Gallery thumbnail and manifest builder.

One run walks a source image tree, writes a centre-cropped thumbnail for
every image, and writes data/images.json describing each image and its
thumbnail for a static gallery page to load.
"""

__version__ = "1.0.0"

from .errors import (
    GalleryError,
    StructuralError,
    DirectoryListError,
    WriteError,
    ThumbnailError,
    DecodeError,
    TransformError,
    EncodeError,
)
from .image_codec import ImageFormat, DecodedImage, decode_image, encode_image
from .thumbnail_generator import ThumbnailGenerator
from .image_record import ImageRecord, ThumbnailStatus
from .manifest import Manifest
from .config import GalleryConfig
from .build_stats import BuildStats
from .walk_progress import WalkProgress
from .walker import Walker
from .builder import Builder
from .reporter import Reporter

__all__ = [
    "GalleryError",
    "StructuralError",
    "DirectoryListError",
    "WriteError",
    "ThumbnailError",
    "DecodeError",
    "TransformError",
    "EncodeError",
    "ImageFormat",
    "DecodedImage",
    "decode_image",
    "encode_image",
    "ThumbnailGenerator",
    "ImageRecord",
    "ThumbnailStatus",
    "Manifest",
    "GalleryConfig",
    "BuildStats",
    "WalkProgress",
    "Walker",
    "Builder",
    "Reporter",
]
