"""Image header parsing module"""

from .dimensions import get_image_dimensions, read_dimensions
from .formats import FormatDetector, detect_format
from ..models.image_info import ImageFormat

__all__ = [
    "ImageFormat",
    "FormatDetector",
    "detect_format",
    "get_image_dimensions",
    "read_dimensions",
]
