"""Data models for ImageProbe"""

from .image_info import (
    FALLBACK_DIMENSIONS,
    Dimensions,
    ImageFormat,
    ImageInfo,
    Orientation,
)
from .probe_result import ProbeResult

__all__ = [
    "ImageFormat",
    "Orientation",
    "Dimensions",
    "FALLBACK_DIMENSIONS",
    "ImageInfo",
    "ProbeResult",
]
