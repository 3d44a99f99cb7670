"""
Pytest fixtures for gallerygen tests.
"""

import os

import pytest
from PIL import Image


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')


@pytest.fixture
def make_image():
    """Fixture providing a factory that writes a solid-color image to disk."""
    def _make_image(path, size=(100, 100), fmt='PNG', mode='RGB', color='red'):
        path = str(path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        img = Image.new(mode, size, color=color)
        img.save(path, format=fmt)
        return path
    return _make_image


@pytest.fixture
def small_generator(logger):
    """Fixture providing a fast generator: halve, then crop 10x10."""
    from gallerygen.thumbnail_generator import ThumbnailGenerator

    return ThumbnailGenerator(scale_factor=2, crop_width=10, crop_height=10, logger=logger)


@pytest.fixture
def site(tmp_path, make_image):
    """
    Fixture providing a project tree:

        site/images/beach.jpg
        site/images/notes.txt
        site/images/travel/Paris.PNG
        site/images/travel/2024/summer/lake.jpeg
    """
    root = tmp_path / 'site'
    images = root / 'images'
    make_image(images / 'beach.jpg', size=(60, 40), fmt='JPEG')
    make_image(images / 'travel' / 'Paris.PNG', size=(40, 40), fmt='PNG', color='blue')
    make_image(images / 'travel' / '2024' / 'summer' / 'lake.jpeg', size=(50, 30), fmt='JPEG')
    (images / 'notes.txt').write_text('not an image')
    return root


@pytest.fixture
def site_config(site):
    """Fixture providing a config for the site tree with small thumbnail settings."""
    from gallerygen.config import GalleryConfig

    return GalleryConfig(
        project_root=str(site),
        scale_factor=2,
        crop_width=10,
        crop_height=10,
    )


@pytest.fixture
def sample_manifest():
    """Fixture providing a manifest with generated, failed and plain records."""
    from gallerygen.manifest import Manifest
    from gallerygen.image_record import ImageRecord, ThumbnailStatus

    return Manifest.build([
        ImageRecord(
            title='beach',
            url='images/beach.jpg',
            thumbnail='assets/thumbnail/beach.jpg',
            thumbnail_status=ThumbnailStatus.GENERATED,
        ),
        ImageRecord(
            title='Paris',
            url='images/travel/Paris.PNG',
            thumbnail='assets/thumbnail/Paris.PNG',
            thumbnail_status=ThumbnailStatus.FAILED,
        ),
        ImageRecord(
            title='lake',
            url='images/travel/2024/summer/lake.jpeg',
        ),
    ])
