"""
Manifest - Ordered list of image records, serialized as data/images.json.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List

from .errors import WriteError
from .image_record import ImageRecord


logger = logging.getLogger(__name__)

MANIFEST_FILENAME = 'images.json'


@dataclass
class Manifest:
    """
    Gallery manifest containing every discovered image record.

    Attributes:
        records: Image records in discovery order
    """
    records: List[ImageRecord] = field(default_factory=list)

    @classmethod
    def build(cls, records: Iterable[ImageRecord]) -> 'Manifest':
        """Create a manifest from records, keeping their order."""
        manifest = cls()
        for record in records:
            manifest.add_record(record)
        return manifest

    def add_record(self, record: ImageRecord) -> None:
        """Append an image record to the manifest."""
        self.records.append(record)

    def get_records_with_thumbnails(self) -> Iterator[ImageRecord]:
        """Yield records that reference a thumbnail."""
        for record in self.records:
            if record.has_thumbnail:
                yield record

    @property
    def total_images(self) -> int:
        """Total number of images."""
        return len(self.records)

    @property
    def total_with_thumbnails(self) -> int:
        """Images whose record references a thumbnail."""
        return sum(1 for r in self.records if r.has_thumbnail)

    @property
    def total_failed_thumbnails(self) -> int:
        """Images whose thumbnail step failed during this run."""
        return sum(1 for r in self.records if r.thumbnail_failed)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'images': [r.to_dict() for r in self.records]}

    @classmethod
    def from_dict(cls, data: dict) -> 'Manifest':
        """Create from dictionary."""
        return cls.build(ImageRecord.from_dict(d) for d in data.get('images', []))

    def to_json(self) -> str:
        """Pretty-printed JSON document with 2-space indentation."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def save(self, filepath: str) -> None:
        """
        Save manifest to a JSON file, replacing any previous content.

        Raises:
            WriteError: the parent directory cannot be created or the file
                cannot be written
        """
        path = Path(filepath)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(self.to_json())
        except OSError as e:
            raise WriteError(f"Cannot write manifest {filepath}: {e}") from e

        logger.info(f"Manifest saved: {filepath} ({self.total_images} images)")

    def persist(self, output_dir: str, filename: str = MANIFEST_FILENAME) -> str:
        """Save into output_dir, creating it if absent. Returns the file path."""
        filepath = os.path.join(output_dir, filename)
        self.save(filepath)
        return filepath

    @classmethod
    def load(cls, filepath: str) -> 'Manifest':
        """Load manifest from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)
