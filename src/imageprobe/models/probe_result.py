"""
Probe Result Model

Represents the result of probing a single image file on disk.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .image_info import ImageInfo


@dataclass
class ProbeResult:
    """
    Result from probing a single image file.

    Contains the header metadata and indicates success/failure.
    """
    success: bool
    path: Optional[Path] = None
    file_size: Optional[int] = None
    info: Optional[ImageInfo] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """Check if probe failed"""
        return not self.success

    @property
    def is_too_large(self) -> bool:
        """Check if probe failed due to the size limit"""
        return not self.success and bool(self.error) and "too large" in self.error.lower()
