"""JPEG data-URL encoding for images sent to vision / meal-analysis APIs.

Images are downsampled so the longest side is at most 2048px, compressed as
JPEG, and wrapped in a ``data:image/jpeg;base64,...`` URL that can be dropped
straight into a JSON request body.

Examples::

    from gains.utils.images import encode_image, encode_image_bytes

    encode_image(photo)                   # 'data:image/jpeg;base64,/9j/4AAQ...'
    encode_image(photo, quality=0.5)      # smaller payload
    encode_image_bytes(upload.read())     # raw bytes from a file upload
    encode_image(Image.new("RGB", (0, 0)))  # None, nothing to compress
"""

from __future__ import annotations

import base64
import logging
import math
from io import BytesIO

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

MAX_DIMENSION = 2048
DEFAULT_QUALITY = 0.7
DATA_URL_PREFIX = "data:image/jpeg;base64,"

# Modes the JPEG encoder accepts as-is; anything else is flattened to RGB.
_JPEG_MODES = ("RGB", "L", "CMYK")


def scaled_size(width: int, height: int, max_dimension: int = MAX_DIMENSION) -> tuple[int, int]:
    """Return the size that fits *max_dimension* on the longest side.

    Sizes already within bounds come back unchanged. Otherwise the longest
    side becomes exactly *max_dimension* and the other side keeps the aspect
    ratio, rounded half up and never below 1px. Landscape pins the width;
    portrait and square pin the height.
    """
    if width <= max_dimension and height <= max_dimension:
        return width, height
    if width > height:
        return max_dimension, max(1, math.floor(max_dimension * height / width + 0.5))
    return max(1, math.floor(max_dimension * width / height + 0.5)), max_dimension


def resized(image: Image.Image, max_dimension: int = MAX_DIMENSION) -> Image.Image:
    """Downsample *image* to fit *max_dimension*. Returns *image* itself when it already fits."""
    size = scaled_size(image.width, image.height, max_dimension)
    if size == image.size or 0 in image.size:
        return image
    return image.resize(size, Image.Resampling.LANCZOS)


def _pil_quality(quality: float) -> int:
    """Map 0.0-1.0 onto Pillow's 0-100 JPEG quality scale."""
    quality = min(max(quality, 0.0), 1.0)
    return round(quality * 100)


def _jpeg_bytes(image: Image.Image, quality: float) -> bytes | None:
    """Compress *image* as JPEG. Returns None when there is nothing to encode."""
    if image.width == 0 or image.height == 0:
        logger.debug("Skipping JPEG encode of empty %dx%d image", image.width, image.height)
        return None
    try:
        if image.mode not in _JPEG_MODES:
            image = image.convert("RGB")
        buf = BytesIO()
        image.save(buf, format="JPEG", quality=_pil_quality(quality))
    except (OSError, ValueError, SystemError):
        logger.debug("JPEG encode failed", exc_info=True)
        return None
    return buf.getvalue() or None


def _data_url(data: bytes) -> str:
    return DATA_URL_PREFIX + base64.b64encode(data).decode("ascii")


def encode_image(
    image: Image.Image,
    quality: float = DEFAULT_QUALITY,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> str | None:
    """Downsample, JPEG-compress and base64-encode *image* as a data URL.

    Args:
        image: Source image. Never modified; resizing and mode conversion
            work on copies.
        quality: JPEG quality between 0.0 and 1.0 (clamped). Default 0.7.
        max_dimension: Cap for the longest side, in pixels.

    Returns:
        ``"data:image/jpeg;base64,..."``, or None if compression produced
        no bytes.
    """
    data = _jpeg_bytes(resized(image, max_dimension), quality)
    if data is None:
        return None
    return _data_url(data)


def jpeg_data_url(image: Image.Image, quality: float = DEFAULT_QUALITY) -> str | None:
    """Like :func:`encode_image` but keeps the original dimensions."""
    data = _jpeg_bytes(image, quality)
    if data is None:
        return None
    return _data_url(data)


def encode_image_bytes(
    data: bytes,
    quality: float = DEFAULT_QUALITY,
    *,
    max_dimension: int = MAX_DIMENSION,
    resize: bool = True,
) -> str | None:
    """Decode raw image bytes (PNG, JPEG, WebP, ...) and encode them.

    EXIF orientation is applied first so phone photos come out upright.
    With *resize=False* the decoded size is kept (see :func:`jpeg_data_url`).
    Undecodable input, and input over Pillow's ``MAX_IMAGE_PIXELS`` limit,
    returns None.
    """
    try:
        img = Image.open(BytesIO(data))
        img.load()
        img = ImageOps.exif_transpose(img)
    except (Image.DecompressionBombError, UnidentifiedImageError, OSError, SyntaxError, ValueError):
        logger.debug("Could not decode %d image bytes", len(data), exc_info=True)
        return None
    if not resize:
        return jpeg_data_url(img, quality)
    return encode_image(img, quality, max_dimension=max_dimension)
