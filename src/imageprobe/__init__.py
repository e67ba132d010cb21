"""
ImageProbe - header-only image metadata extraction

This library provides:
- Format detection from magic bytes (JPEG, PNG, GIF, WebP, AVIF)
- Pixel dimensions read from headers, without decoding pixel data
- Orientation, content type and extension lookup
- Size and format validation

Example:
    >>> from imageprobe import get_image_info
    >>> from pathlib import Path
    >>>
    >>> info = get_image_info(Path("photo.webp").read_bytes())
    >>> print(info.to_dict())
    {'width': 640, 'height': 480, 'format': 'webp', 'orientation': 'landscape'}
"""

from .version import __version__

# Image headers
from .image import FormatDetector, detect_format, get_image_dimensions

# Models
from .models import (
    FALLBACK_DIMENSIONS,
    Dimensions,
    ImageFormat,
    ImageInfo,
    Orientation,
    ProbeResult,
)

# Validation
from .validation import ImageValidator

# High-level API
from .api import (
    batch_probe,
    detect_orientation,
    get_image_dimensions_async,
    get_image_info,
    get_image_info_async,
    probe_file,
)

__all__ = [
    # Version
    "__version__",
    # Image
    "FormatDetector",
    "detect_format",
    "get_image_dimensions",
    # Models
    "ImageFormat",
    "Orientation",
    "Dimensions",
    "FALLBACK_DIMENSIONS",
    "ImageInfo",
    "ProbeResult",
    # Validation
    "ImageValidator",
    # High-level API
    "get_image_info",
    "get_image_info_async",
    "get_image_dimensions_async",
    "detect_orientation",
    "probe_file",
    "batch_probe",
]
