"""
Image Format Detection and Lookup Tables
"""

import logging
from types import MappingProxyType
from typing import FrozenSet, Mapping, Union

from ..models.image_info import ImageFormat
from .byteio import Buffer, matches, read_tag

logger = logging.getLogger(__name__)

FormatKey = Union[str, ImageFormat]

JPEG_SIGNATURE = b"\xff\xd8\xff"
PNG_SIGNATURE = b"\x89PNG"
GIF_SIGNATURE = b"GIF8"
RIFF_SIGNATURE = b"RIFF"
WEBP_SIGNATURE = b"WEBP"
FTYP_SIGNATURE = b"ftyp"
AVIF_BRANDS: FrozenSet[bytes] = frozenset({b"avif", b"avis"})

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class FormatDetector:
    """Detect image formats from magic bytes"""

    CONTENT_TYPES: Mapping[str, str] = MappingProxyType({
        'jpeg': 'image/jpeg',
        'jpg': 'image/jpeg',
        'png': 'image/png',
        'gif': 'image/gif',
        'webp': 'image/webp',
        'avif': 'image/avif',
    })

    EXTENSIONS: Mapping[str, str] = MappingProxyType({
        'jpeg': 'jpg',
        'jpg': 'jpg',
        'png': 'png',
        'gif': 'gif',
        'webp': 'webp',
        'avif': 'avif',
    })

    SUPPORTED_FORMATS: FrozenSet[str] = frozenset(CONTENT_TYPES)

    @staticmethod
    def detect_format(data: Buffer) -> ImageFormat:
        """
        Detect format from the first 12 bytes.

        Checks JPEG, PNG, GIF, WebP and AVIF signatures in that order; the
        first match wins. Short buffers never raise, they simply fall
        through to UNKNOWN.

        Args:
            data: Raw image bytes

        Returns:
            ImageFormat enum, ImageFormat.UNKNOWN if nothing matched
        """
        if matches(data, 0, JPEG_SIGNATURE):
            return ImageFormat.JPEG

        if matches(data, 0, PNG_SIGNATURE):
            return ImageFormat.PNG

        if matches(data, 0, GIF_SIGNATURE):
            return ImageFormat.GIF

        if matches(data, 0, RIFF_SIGNATURE) and matches(data, 8, WEBP_SIGNATURE):
            return ImageFormat.WEBP

        if matches(data, 4, FTYP_SIGNATURE) and read_tag(data, 8) in AVIF_BRANDS:
            return ImageFormat.AVIF

        logger.debug("No known signature in %d-byte buffer", len(data))
        return ImageFormat.UNKNOWN

    @staticmethod
    def get_content_type(image_format: FormatKey) -> str:
        """
        Get MIME content type for a format key.

        Args:
            image_format: Format key (e.g. 'jpeg', 'jpg') or ImageFormat

        Returns:
            Content type, 'application/octet-stream' for unknown keys
        """
        key = _format_key(image_format)
        return FormatDetector.CONTENT_TYPES.get(key, DEFAULT_CONTENT_TYPE)

    @staticmethod
    def get_extension(image_format: FormatKey) -> str:
        """
        Get file extension (without dot) for a format key.

        Args:
            image_format: Format key (e.g. 'jpeg', 'jpg') or ImageFormat

        Returns:
            Extension, or the key itself for unknown keys
        """
        key = _format_key(image_format)
        return FormatDetector.EXTENSIONS.get(key, key)

    @staticmethod
    def is_supported_format(image_format: FormatKey) -> bool:
        """
        Check if format key is supported (case-insensitive).

        Args:
            image_format: Format key or ImageFormat

        Returns:
            True if format is one of jpeg, jpg, png, gif, webp, avif
        """
        return _format_key(image_format).lower() in FormatDetector.SUPPORTED_FORMATS


def _format_key(image_format: FormatKey) -> str:
    if isinstance(image_format, ImageFormat):
        return image_format.value
    return image_format


detect_format = FormatDetector.detect_format
