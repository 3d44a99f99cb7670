"""
ThumbnailGenerator - Downscales and centre-crops images into gallery thumbnails.
"""

import hashlib
import logging
import os
from typing import Optional, Tuple

from PIL import Image

from .errors import TransformError
from .image_codec import DecodedImage, decode_image, encode_image


CROP_CLAMP = 'clamp'
CROP_PAD = 'pad'
CROP_FAIL = 'fail'
CROP_POLICIES = (CROP_CLAMP, CROP_PAD, CROP_FAIL)


def _centered_offset(outer: int, inner: int) -> int:
    """Offset of an inner span centred in an outer one, halved toward zero."""
    diff = outer - inner
    if diff < 0:
        return -((-diff) // 2)
    return diff // 2


class ThumbnailGenerator:
    """
    Generates fixed-size thumbnails from original images using Pillow.

    Pipeline per image: decode, shrink both sides by ``scale_factor``,
    cut a ``crop_width`` x ``crop_height`` region from the centre, and
    re-encode in the source's detected format (JPEG or PNG).
    """

    def __init__(
        self,
        scale_factor: int = 5,
        crop_width: int = 415,
        crop_height: int = 415,
        quality: int = 80,
        crop_policy: str = CROP_CLAMP,
        fill_color: Tuple[int, int, int] = (255, 255, 255),
        thumbnail_subdir: str = 'assets/thumbnail',
        unique_names: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize thumbnail generator.

        Args:
            scale_factor: Divisor applied to each dimension before cropping (default: 5)
            crop_width: Width of the centred crop (default: 415)
            crop_height: Height of the centred crop (default: 415)
            quality: JPEG quality for output (default: 80)
            crop_policy: 'clamp', 'pad' or 'fail' when the crop exceeds the image
            fill_color: Background for 'pad' on images without alpha
            thumbnail_subdir: Thumbnail folder relative to the destination root
            unique_names: Suffix names with a hash of the source path
            logger: Optional logger instance
        """
        if crop_policy not in CROP_POLICIES:
            raise ValueError(f"Unknown crop policy: {crop_policy}")
        self.scale_factor = scale_factor
        self.crop_width = crop_width
        self.crop_height = crop_height
        self.quality = quality
        self.crop_policy = crop_policy
        self.fill_color = fill_color
        self.thumbnail_subdir = thumbnail_subdir
        self.unique_names = unique_names
        self.logger = logger or logging.getLogger(__name__)

    def thumbnail_dir(self, dest_root: str) -> str:
        """Directory thumbnails are written to under a destination root."""
        return os.path.join(dest_root, *self.thumbnail_subdir.split('/'))

    def thumbnail_path(self, source_file: str, dest_root: str) -> str:
        """
        Path the thumbnail for ``source_file`` is (or would be) written to.

        By default this is the source's base name in a flat folder, so two
        sources with the same name share one thumbnail and the last one
        processed wins.
        """
        filename = os.path.basename(source_file)
        if self.unique_names:
            rel_path = os.path.relpath(source_file, dest_root).replace(os.sep, '/')
            digest = hashlib.md5(rel_path.encode('utf-8')).hexdigest()[:8]
            stem, ext = os.path.splitext(filename)
            filename = f"{stem}_{digest}{ext}"
        return os.path.join(self.thumbnail_dir(dest_root), filename)

    def make_thumbnail(self, source_file: str, dest_root: str) -> str:
        """
        Generate the thumbnail for one source image.

        Args:
            source_file: Path to the original image
            dest_root: Project root the thumbnail folder lives under

        Returns:
            Path of the written thumbnail

        Raises:
            DecodeError: source cannot be opened or decoded
            TransformError: source is too small to scale, or the crop is
                out of bounds under the 'fail' policy
            EncodeError: detected format is not JPEG/PNG, or the write failed
        """
        dest_path = self.thumbnail_path(source_file, dest_root)

        decoded = decode_image(source_file)
        resized = self.resize(decoded)
        thumbnail = self.crop_center(resized)
        encode_image(thumbnail, dest_path, decoded.format, quality=self.quality,
                     format_name=decoded.pil_format)

        self.logger.debug(
            f"Thumbnail {dest_path}: {decoded.width}x{decoded.height} -> "
            f"{resized.size[0]}x{resized.size[1]} -> {thumbnail.size[0]}x{thumbnail.size[1]}"
        )
        return dest_path

    def resize(self, decoded: DecodedImage) -> Image.Image:
        """Shrink both dimensions by the scale factor with a bicubic filter."""
        width = decoded.width // self.scale_factor
        height = decoded.height // self.scale_factor
        if width == 0 or height == 0:
            raise TransformError(
                f"{decoded.source_path} is too small to scale by {self.scale_factor} "
                f"({decoded.width}x{decoded.height})"
            )

        img = self._prepare_mode(decoded.image)
        return img.resize((width, height), Image.Resampling.BICUBIC)

    def crop_center(self, img: Image.Image) -> Image.Image:
        """
        Cut the crop region from the centre of an image.

        When the image is smaller than the crop in either dimension the
        configured policy decides: 'clamp' keeps only the overlap with the
        image, 'pad' places the image on a crop-sized canvas, 'fail' raises
        TransformError.
        """
        width, height = img.size
        left = _centered_offset(width, self.crop_width)
        top = _centered_offset(height, self.crop_height)
        right = left + self.crop_width
        bottom = top + self.crop_height

        if left >= 0 and top >= 0 and right <= width and bottom <= height:
            return img.crop((left, top, right, bottom))

        if self.crop_policy == CROP_FAIL:
            raise TransformError(
                f"Crop {self.crop_width}x{self.crop_height} exceeds image {width}x{height}"
            )

        if self.crop_policy == CROP_CLAMP:
            box = (max(left, 0), max(top, 0), min(right, width), min(bottom, height))
            return img.crop(box)

        if img.mode in ('RGBA', 'LA'):
            canvas = Image.new(img.mode, (self.crop_width, self.crop_height))
        else:
            canvas = Image.new('RGB', (self.crop_width, self.crop_height), self.fill_color)
            img = img.convert('RGB')
        canvas.paste(img, (-left, -top))
        return canvas

    @staticmethod
    def _prepare_mode(img: Image.Image) -> Image.Image:
        """Convert palette and exotic modes so bicubic resampling applies."""
        if img.mode in ('RGB', 'RGBA', 'L', 'LA'):
            return img
        if img.mode.startswith('I'):
            # 16-bit samples scaled down to 8 bits, not clipped at 255
            return img.convert('I').point(lambda v: v * (1 / 256)).convert('L')
        if img.mode in ('P', 'PA') or 'transparency' in img.info:
            return img.convert('RGBA')
        return img.convert('RGB')
