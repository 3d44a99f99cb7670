"""Tests for Builder class."""

import json

import pytest
from PIL import Image

from gallerygen.builder import Builder
from gallerygen.config import GalleryConfig
from gallerygen.errors import StructuralError, WriteError


class TestBuilder:
    """Tests for Builder class."""

    def test_run_writes_manifest_and_thumbnails(self, site, site_config, logger):
        """Test a full run produces the manifest and every thumbnail."""
        manifest, stats = Builder(site_config, logger).run()

        data = json.loads((site / 'data' / 'images.json').read_text())
        assert data == manifest.to_dict()
        assert len(data['images']) == 3
        for entry in data['images']:
            assert (site / entry['thumbnail']).is_file()
        assert stats.thumbnails_generated == 3
        assert stats.thumbnail_errors == 0

    def test_run_is_deterministic(self, site, site_config, logger):
        """Test two runs on an unchanged tree give byte-identical manifests."""
        manifest_file = site / 'data' / 'images.json'

        Builder(site_config, logger).run()
        first = manifest_file.read_bytes()
        Builder(site_config, logger).run()

        assert manifest_file.read_bytes() == first

    def test_run_without_thumbnails(self, site, site_config, logger):
        """Test disabling thumbnails omits the field and the folder."""
        site_config.generate_thumbnails = False

        Builder(site_config, logger).run()

        data = json.loads((site / 'data' / 'images.json').read_text())
        assert all('thumbnail' not in entry for entry in data['images'])
        assert not (site / 'assets').exists()

    def test_broken_image_does_not_abort(self, site, site_config, logger):
        """Test a per-image failure still yields a complete manifest."""
        (site / 'images' / 'broken.png').write_bytes(b'garbage')

        manifest, stats = Builder(site_config, logger).run()

        assert manifest.total_images == 4
        assert stats.thumbnail_errors == 1

    def test_default_geometry_clamps(self, tmp_path, make_image, logger):
        """Test a 2000x2000 source yields a 400x400 thumbnail under clamp."""
        make_image(tmp_path / 'images' / 'big.jpg', size=(2000, 2000), fmt='JPEG')

        Builder(GalleryConfig(project_root=str(tmp_path)), logger).run()

        with Image.open(tmp_path / 'assets' / 'thumbnail' / 'big.jpg') as img:
            assert img.size == (400, 400)

    def test_missing_images_folder(self, tmp_path, logger):
        """Test a missing source tree is fatal."""
        with pytest.raises(StructuralError, match='Images folder not found'):
            Builder(GalleryConfig(project_root=str(tmp_path)), logger).run()

    def test_thumbnail_folder_uncreatable(self, site, site_config, logger):
        """Test an uncreatable thumbnail folder is fatal."""
        (site / 'assets').write_text('in the way')

        with pytest.raises(StructuralError):
            Builder(site_config, logger).run()

    def test_manifest_unwritable(self, site, site_config, logger):
        """Test an unwritable manifest location is fatal."""
        (site / 'data').write_text('in the way')

        with pytest.raises(WriteError):
            Builder(site_config, logger).run()
