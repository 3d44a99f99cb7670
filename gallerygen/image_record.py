"""
ImageRecord - Manifest entry for a single image and its thumbnail.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ThumbnailStatus(str, Enum):
    """Outcome of the thumbnail step for one image."""
    GENERATED = 'generated'
    FAILED = 'failed'
    NOT_ATTEMPTED = 'not_attempted'


@dataclass(frozen=True)
class ImageRecord:
    """
    Manifest entry for a single discovered image.

    Attributes:
        title: File name without its extension
        url: Image path relative to the project root, '/'-separated
        alt: Alt text, defaults to the title
        thumbnail: Thumbnail path relative to the project root, or None when
            no thumbnail was attempted. A FAILED record keeps the path the
            thumbnail would have had, so the reference may dangle.
        thumbnail_status: Outcome of the thumbnail step (not serialized)
    """
    title: str
    url: str
    alt: str = ''
    thumbnail: Optional[str] = None
    thumbnail_status: ThumbnailStatus = field(
        default=ThumbnailStatus.NOT_ATTEMPTED, compare=False
    )

    def __post_init__(self):
        if not self.alt:
            object.__setattr__(self, 'alt', self.title)

    @property
    def has_thumbnail(self) -> bool:
        """True when a thumbnail path is recorded (it may still be dangling)."""
        return self.thumbnail is not None

    @property
    def thumbnail_failed(self) -> bool:
        return self.thumbnail_status == ThumbnailStatus.FAILED

    @property
    def folder(self) -> str:
        """Parent folder of the image within the url, or '' at the top level."""
        head, _, _ = self.url.rpartition('/')
        return head

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            'title': self.title,
            'url': self.url,
            'alt': self.alt,
        }
        if self.thumbnail is not None:
            data['thumbnail'] = self.thumbnail
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'ImageRecord':
        """Create from dictionary."""
        thumbnail = data.get('thumbnail')
        status = ThumbnailStatus.GENERATED if thumbnail is not None else ThumbnailStatus.NOT_ATTEMPTED
        return cls(
            title=data['title'],
            url=data['url'],
            alt=data.get('alt', ''),
            thumbnail=thumbnail,
            thumbnail_status=status,
        )

    def format_status(self) -> str:
        """
        Format a human-readable status line for per-file output.

        Returns:
            Status string like "images/a/photo.jpg -> assets/thumbnail/photo.jpg"
        """
        if self.thumbnail_status == ThumbnailStatus.GENERATED:
            return f"{self.url} -> {self.thumbnail}"
        elif self.thumbnail_status == ThumbnailStatus.FAILED:
            return f"{self.url} -> thumbnail FAILED ({self.thumbnail})"
        return f"{self.url} - no thumbnail"
