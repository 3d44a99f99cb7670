"""
Image decode/encode adapter around Pillow.

Decoding sniffs the real content format; encoding picks the writer from that
detected format, not from the file extension.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from PIL import Image

from .errors import DecodeError, EncodeError


logger = logging.getLogger(__name__)


class ImageFormat(str, Enum):
    """Format classes the thumbnail pipeline distinguishes."""
    JPEG = 'jpeg'
    PNG = 'png'
    UNSUPPORTED = 'unsupported'

    @classmethod
    def from_pil(cls, pil_format: Optional[str]) -> 'ImageFormat':
        """Map a Pillow format name (e.g. 'JPEG', 'MPO', 'GIF') to a format class."""
        name = (pil_format or '').upper()
        # MPO is the multi-picture JPEG variant many cameras write
        if name in ('JPEG', 'MPO'):
            return cls.JPEG
        if name == 'PNG':
            return cls.PNG
        return cls.UNSUPPORTED


@dataclass
class DecodedImage:
    """
    A fully loaded image and the format its content was detected as.

    Attributes:
        image: Pillow image with pixel data loaded
        format: Detected format class
        source_path: File the image was decoded from
        pil_format: Raw Pillow format name, kept for diagnostics
    """
    image: Image.Image
    format: ImageFormat
    source_path: str
    pil_format: Optional[str] = None

    @property
    def width(self) -> int:
        return self.image.size[0]

    @property
    def height(self) -> int:
        return self.image.size[1]

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Bounding rectangle as (left, upper, right, lower)."""
        return (0, 0, self.width, self.height)


def decode_image(path: str) -> DecodedImage:
    """
    Open and fully decode an image file.

    The file handle is released before returning, on success and on failure.

    Raises:
        DecodeError: file cannot be opened or is not a decodable image
    """
    try:
        with Image.open(path) as img:
            img.load()
            pil_format = img.format
            # copy() detaches the pixel data from the closed file
            image = img.copy()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot decode {path}: {e}") from e

    fmt = ImageFormat.from_pil(pil_format)
    logger.debug(f"Decoded {path}: {pil_format} {image.size[0]}x{image.size[1]} {image.mode}")
    return DecodedImage(image=image, format=fmt, source_path=path, pil_format=pil_format)


def _flatten_alpha(img: Image.Image) -> Image.Image:
    """Composite any alpha onto white and return an RGB image for JPEG output."""
    if img.mode in ('RGBA', 'LA'):
        background = Image.new('RGB', img.size, (255, 255, 255))
        if img.mode == 'LA':
            img = img.convert('RGBA')
        background.paste(img, mask=img.split()[-1])
        return background
    elif img.mode == 'P':
        img = img.convert('RGBA')
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    elif img.mode not in ('RGB', 'L', 'CMYK'):
        return img.convert('RGB')
    return img


def encode_image(
    img: Image.Image,
    path: str,
    fmt: ImageFormat,
    quality: int = 80,
    format_name: Optional[str] = None
) -> None:
    """
    Write an image to disk in the given format class.

    Args:
        img: Image to write
        path: Destination file (overwritten if present)
        fmt: JPEG or PNG; anything else is rejected
        quality: JPEG quality on a 1-100 scale
        format_name: Detected Pillow format name, used in the error message

    Raises:
        EncodeError: unsupported format, or the file could not be written
    """
    if fmt == ImageFormat.JPEG:
        save_kwargs = {'format': 'JPEG', 'quality': quality}
        img = _flatten_alpha(img)
    elif fmt == ImageFormat.PNG:
        save_kwargs = {'format': 'PNG'}
    else:
        raise EncodeError(f"unsupported format: {format_name or fmt.value}")

    try:
        img.save(path, **save_kwargs)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Cannot write {path}: {e}") from e
