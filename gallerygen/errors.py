"""
Exception types raised by the gallery build.

StructuralError and its subclasses abort a run. ThumbnailError and its
subclasses are per-image failures that the walker logs and moves past.
"""


class GalleryError(Exception):
    """Base class for all gallerygen errors."""


class StructuralError(GalleryError):
    """Fatal error: missing source tree, unlistable directory, unwritable output."""


class DirectoryListError(StructuralError):
    """A directory's contents could not be enumerated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot list directory {path}: {reason}")


class WriteError(StructuralError):
    """The manifest (or its parent directory) could not be written."""


class ThumbnailError(GalleryError):
    """A single image's thumbnail could not be produced."""


class DecodeError(ThumbnailError):
    """File could not be opened or its content is not a decodable image."""


class TransformError(ThumbnailError):
    """Resize or crop could not produce a usable region."""


class EncodeError(ThumbnailError):
    """Thumbnail could not be encoded or written."""
