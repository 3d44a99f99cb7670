"""Tests for GalleryConfig."""

import os

from gallerygen.config import GalleryConfig


class TestGalleryConfig:
    """Tests for GalleryConfig dataclass."""

    def test_defaults(self):
        """Test defaults match the classic layout and thumbnail geometry."""
        config = GalleryConfig()

        assert config.project_root == '..'
        assert config.scale_factor == 5
        assert config.crop_width == 415
        assert config.crop_height == 415
        assert config.jpeg_quality == 80
        assert config.crop_policy == 'clamp'
        assert config.generate_thumbnails is True
        assert config.strict is False

    def test_derived_paths(self, tmp_path):
        """Test folders derived from the project root."""
        root = str(tmp_path)
        config = GalleryConfig(project_root=root)

        assert config.images_path == os.path.join(root, 'images')
        assert config.thumbnail_path == os.path.join(root, 'assets', 'thumbnail')
        assert config.manifest_path == os.path.join(root, 'data', 'images.json')

    def test_images_dir_override(self, tmp_path):
        """Test an explicit images folder."""
        config = GalleryConfig(project_root=str(tmp_path), images_dir=str(tmp_path / 'photos'))

        assert config.images_path == str(tmp_path / 'photos')

    def test_from_env(self, monkeypatch, tmp_path):
        """Test environment variables are read."""
        monkeypatch.setenv('GALLERYGEN_PROJECT_ROOT', str(tmp_path))
        monkeypatch.setenv('GALLERYGEN_IMAGES_DIR', str(tmp_path / 'pics'))

        config = GalleryConfig.from_env()

        assert config.project_root == str(tmp_path)
        assert config.images_dir == str(tmp_path / 'pics')

    def test_from_env_defaults(self, monkeypatch):
        """Test env defaults when nothing is set."""
        monkeypatch.delenv('GALLERYGEN_PROJECT_ROOT', raising=False)
        monkeypatch.delenv('GALLERYGEN_IMAGES_DIR', raising=False)

        config = GalleryConfig.from_env()

        assert config.project_root == '..'
        assert config.images_dir is None

    def test_validate_ok(self):
        """Test defaults validate cleanly."""
        assert GalleryConfig().validate() == []

    def test_validate_errors(self):
        """Test each invalid setting is reported."""
        config = GalleryConfig(
            scale_factor=0,
            crop_width=0,
            jpeg_quality=101,
            crop_policy='stretch',
        )

        errors = config.validate()

        assert len(errors) == 4

    def test_thumbnail_generator(self):
        """Test the generator mirrors the config."""
        config = GalleryConfig(scale_factor=3, crop_width=100, crop_height=80,
                               crop_policy='pad', unique_thumbnail_names=True)

        gen = config.thumbnail_generator()

        assert gen.scale_factor == 3
        assert gen.crop_width == 100
        assert gen.crop_height == 80
        assert gen.crop_policy == 'pad'
        assert gen.unique_names is True
        assert gen.quality == 80
