"""
Header Dimension Readers

Reads intrinsic pixel dimensions from container headers without decoding
pixel data. Every reader is total: truncated or malformed structures give
FALLBACK_DIMENSIONS instead of raising.
"""

import logging
from typing import Callable, Dict

from ..models.image_info import FALLBACK_DIMENSIONS, Dimensions, ImageFormat
from .byteio import (
    Buffer,
    byte_at,
    read_tag,
    read_u16_be,
    read_u16_le,
    read_u24_le,
    read_u32_be,
)
from .formats import FormatDetector

logger = logging.getLogger(__name__)

# JPEG markers in 0xC0-0xCF that are not Start Of Frame
JPEG_NON_SOF_MARKERS = frozenset({
    0xC4,  # DHT
    0xC8,  # JPG (reserved)
    0xCC,  # DAC
})

# ISO-BMFF boxes whose children are scanned in place, mapped to header size
AVIF_CONTAINER_BOXES: Dict[bytes, int] = {
    b"meta": 12,  # full box: extra version/flags word
    b"iprp": 8,
    b"ipco": 8,
}


def read_png_dimensions(data: Buffer) -> Dimensions:
    """IHDR is always the first chunk: width at 16, height at 20 (BE u32)"""
    return Dimensions(read_u32_be(data, 16), read_u32_be(data, 20))


def read_gif_dimensions(data: Buffer) -> Dimensions:
    """Logical screen descriptor: width at 6, height at 8 (LE u16)"""
    return Dimensions(read_u16_le(data, 6), read_u16_le(data, 8))


def is_sof_marker(marker: int) -> bool:
    """Check if marker is a Start Of Frame marker"""
    return 0xC0 <= marker <= 0xCF and marker not in JPEG_NON_SOF_MARKERS


def read_jpeg_dimensions(data: Buffer) -> Dimensions:
    """
    Scan JPEG marker segments for the first Start Of Frame.

    Bytes other than the 0xFF prefix are skipped one at a time, so stray
    fill bytes are tolerated. Non-SOF segments are skipped by their
    length field.

    Args:
        data: Raw JPEG bytes

    Returns:
        Dimensions from the SOF segment, or FALLBACK_DIMENSIONS
    """
    i = 2
    while i < len(data):
        if data[i] != 0xFF:
            i += 1
            continue

        marker = byte_at(data, i + 1)

        if is_sof_marker(marker):
            height = read_u16_be(data, i + 5)
            width = read_u16_be(data, i + 7)
            return Dimensions(width, height)

        length = read_u16_be(data, i + 2)
        i += 2 + length

    logger.debug("No SOF marker found in %d-byte JPEG", len(data))
    return FALLBACK_DIMENSIONS


def read_webp_dimensions(data: Buffer) -> Dimensions:
    """
    Read WebP canvas size from the first chunk after the RIFF header.

    Handles all three payload chunks:
    - VP8X (extended): 24-bit minus-one fields at 24 and 27
    - VP8L (lossless): 14-bit packed fields after the signature byte
    - VP8  (lossy): 14-bit fields in the key frame header at 26 and 28

    Args:
        data: Raw WebP bytes

    Returns:
        Dimensions, or FALLBACK_DIMENSIONS for an unrecognized chunk
    """
    chunk = read_tag(data, 12)

    if chunk == b"VP8X":
        width = read_u24_le(data, 24) + 1
        height = read_u24_le(data, 27) + 1
        return Dimensions(width, height)

    if chunk == b"VP8L":
        b0, b1, b2, b3 = (byte_at(data, 21 + i) for i in range(4))
        width = ((b0 | (b1 << 8)) & 0x3FFF) + 1
        height = (((b1 >> 6) | (b2 << 2) | (b3 << 10)) & 0x3FFF) + 1
        return Dimensions(width, height)

    if chunk == b"VP8 ":
        width = read_u16_le(data, 26) & 0x3FFF
        height = read_u16_le(data, 28) & 0x3FFF
        return Dimensions(width, height)

    logger.debug("Unrecognized WebP chunk %r", chunk)
    return FALLBACK_DIMENSIONS


def read_avif_dimensions(data: Buffer) -> Dimensions:
    """
    Walk ISO-BMFF boxes looking for the 'ispe' property.

    A single forward scan: container boxes (meta, iprp, ipco) are entered
    by stepping over their header only, every other box is skipped whole.
    The ispe box holds version/flags, then BE u32 width and height.

    Args:
        data: Raw AVIF bytes

    Returns:
        Dimensions from ispe, or FALLBACK_DIMENSIONS
    """
    offset = 0
    while offset < len(data) - 8:
        box_size = read_u32_be(data, offset)
        box_type = read_tag(data, offset + 4)

        if box_size == 0:
            logger.debug("Zero-size %r box at offset %d", box_type, offset)
            break

        if box_type == b"ispe":
            width = read_u32_be(data, offset + 12)
            height = read_u32_be(data, offset + 16)
            return Dimensions(width, height)

        header_size = AVIF_CONTAINER_BOXES.get(box_type)
        if header_size is not None:
            offset += header_size
            continue

        offset += box_size

    logger.debug("No ispe box found in %d-byte AVIF", len(data))
    return FALLBACK_DIMENSIONS


DIMENSION_READERS: Dict[ImageFormat, Callable[[Buffer], Dimensions]] = {
    ImageFormat.PNG: read_png_dimensions,
    ImageFormat.JPEG: read_jpeg_dimensions,
    ImageFormat.GIF: read_gif_dimensions,
    ImageFormat.WEBP: read_webp_dimensions,
    ImageFormat.AVIF: read_avif_dimensions,
}


def read_dimensions(data: Buffer, image_format: ImageFormat) -> Dimensions:
    """
    Read dimensions with the reader for an already detected format.

    Args:
        data: Raw image bytes
        image_format: Format returned by FormatDetector.detect_format

    Returns:
        Dimensions, FALLBACK_DIMENSIONS for unknown formats
    """
    reader = DIMENSION_READERS.get(image_format)
    if reader is None:
        return FALLBACK_DIMENSIONS
    return reader(data)


def get_image_dimensions(data: Buffer) -> Dimensions:
    """
    Detect the format and read its dimensions.

    Args:
        data: Raw image bytes

    Returns:
        Dimensions, FALLBACK_DIMENSIONS when unknown or unparseable
    """
    return read_dimensions(data, FormatDetector.detect_format(data))
