"""
Image Info Model - output record of a header probe

Shared by the format detector, the dimension readers and the HTTP service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple


class ImageFormat(Enum):
    """Container formats recognized from magic bytes"""
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"
    AVIF = "avif"
    UNKNOWN = "unknown"


class Orientation(Enum):
    """Orientation derived from intrinsic dimensions"""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class Dimensions(NamedTuple):
    """Pixel width and height read from a header"""
    width: int
    height: int


# Reported whenever a header cannot be parsed far enough
FALLBACK_DIMENSIONS = Dimensions(1920, 1080)


@dataclass(frozen=True)
class ImageInfo:
    """
    Format, dimensions and orientation of one image buffer.

    Created fresh per call and never mutated. An unknown format or the
    fallback dimensions are ordinary values, not errors.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        format: Detected container format
        orientation: Landscape when width >= height
    """
    width: int
    height: int
    format: ImageFormat
    orientation: Orientation

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'width': self.width,
            'height': self.height,
            'format': self.format.value,
            'orientation': self.orientation.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImageInfo':
        """
        Create ImageInfo from dictionary (e.g., API response).

        Unrecognized format strings map to ImageFormat.UNKNOWN.

        Args:
            data: Dictionary with width, height, format and orientation

        Returns:
            ImageInfo object
        """
        image_format = data.get('format', ImageFormat.UNKNOWN)
        if isinstance(image_format, str):
            try:
                image_format = ImageFormat(image_format.lower())
            except ValueError:
                image_format = ImageFormat.UNKNOWN

        width = int(data['width'])
        height = int(data['height'])

        # Derived from the dimensions when absent
        orientation = data.get('orientation')
        if orientation is None:
            orientation = Orientation.LANDSCAPE if width >= height else Orientation.PORTRAIT
        elif isinstance(orientation, str):
            orientation = Orientation(orientation)

        return cls(
            width=width,
            height=height,
            format=image_format,
            orientation=orientation,
        )

    @property
    def dimensions(self) -> Dimensions:
        """Get (width, height) pair"""
        return Dimensions(self.width, self.height)

    @property
    def is_landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE

    @property
    def is_unknown(self) -> bool:
        """Check if no known container format was recognized"""
        return self.format is ImageFormat.UNKNOWN
