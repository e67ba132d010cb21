"""
Image Validation Module

Validates image buffers and files before probing.
"""

from pathlib import Path
from typing import Optional, Tuple

from ..image.byteio import Buffer
from ..image.formats import FormatDetector
from ..models.image_info import ImageFormat

UNSUPPORTED_FORMAT = "Unsupported format: unrecognized magic bytes"


class ImageValidator:
    """Validate image buffers and files"""

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB
    HEADER_SIZE = 12  # bytes needed for format detection

    @staticmethod
    def is_valid_file_size(size: int, max_size: int = MAX_FILE_SIZE) -> bool:
        """
        Check size against an upper bound (inclusive).

        Args:
            size: Size in bytes
            max_size: Largest accepted size in bytes

        Returns:
            True if size <= max_size
        """
        return size <= max_size

    @staticmethod
    def validate_bytes(
        data: Buffer,
        max_size: int = MAX_FILE_SIZE
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate an in-memory image buffer.

        Checks:
        - Buffer is not empty
        - Size within limit
        - Magic bytes match a supported format

        Args:
            data: Raw image bytes
            max_size: Largest accepted size in bytes

        Returns:
            (is_valid, error_message) tuple
        """
        size = len(data)
        if size == 0:
            return False, "File is empty"

        if not ImageValidator.is_valid_file_size(size, max_size):
            return False, ImageValidator.too_large_message(size, max_size)

        if FormatDetector.detect_format(data) is ImageFormat.UNKNOWN:
            return False, UNSUPPORTED_FORMAT

        return True, None

    @staticmethod
    def validate_file(
        file_path: Path,
        max_size: int = MAX_FILE_SIZE
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate image file.

        Checks:
        - File exists
        - File size within limits
        - Magic bytes match a supported format

        Args:
            file_path: Path to image file
            max_size: Largest accepted size in bytes

        Returns:
            (is_valid, error_message) tuple
        """
        if not file_path.exists():
            return False, f"File not found: {file_path}"

        if not file_path.is_file():
            return False, f"Not a file: {file_path}"

        try:
            size = file_path.stat().st_size
        except OSError as e:
            return False, f"Cannot access file: {e}"

        if not ImageValidator.is_valid_file_size(size, max_size):
            return False, ImageValidator.too_large_message(size, max_size)

        if size == 0:
            return False, "File is empty"

        try:
            with file_path.open("rb") as f:
                header = f.read(ImageValidator.HEADER_SIZE)
        except OSError as e:
            return False, f"Cannot read file: {e}"

        if FormatDetector.detect_format(header) is ImageFormat.UNKNOWN:
            return False, UNSUPPORTED_FORMAT

        return True, None

    @staticmethod
    def is_valid(file_path: Path) -> bool:
        """
        Quick check if file is valid.

        Args:
            file_path: Path to image file

        Returns:
            True if file is valid
        """
        valid, _ = ImageValidator.validate_file(file_path)
        return valid

    @staticmethod
    def too_large_message(size: int, max_size: int) -> str:
        """Error message for a size over the limit"""
        size_mb = size / 1024 / 1024
        max_mb = max_size / 1024 / 1024
        return f"File too large: {size_mb:.1f} MB (max {max_mb:.1f} MB)"
