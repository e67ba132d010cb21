"""
High-level API for ImageProbe

Convenience functions for probing image buffers and files.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .image.byteio import Buffer
from .image.dimensions import read_dimensions
from .image.formats import FormatDetector
from .models.image_info import Dimensions, ImageInfo, Orientation
from .models.probe_result import ProbeResult
from .validation.image_validator import ImageValidator

logger = logging.getLogger(__name__)


def detect_orientation(width: int, height: int) -> Orientation:
    """Landscape when width >= height, ties included"""
    return Orientation.LANDSCAPE if width >= height else Orientation.PORTRAIT


def get_image_info(data: Buffer) -> ImageInfo:
    """
    Probe an image buffer: format, dimensions and orientation.

    Never raises. Unrecognized buffers come back as ImageFormat.UNKNOWN
    with the fallback dimensions (1920x1080).

    Args:
        data: Raw image bytes

    Returns:
        ImageInfo record

    Example:
        >>> from imageprobe import get_image_info
        >>>
        >>> info = get_image_info(Path("photo.jpg").read_bytes())
        >>> print(f"{info.format.value}: {info.width}x{info.height}")
    """
    image_format = FormatDetector.detect_format(data)
    width, height = read_dimensions(data, image_format)

    return ImageInfo(
        width=width,
        height=height,
        format=image_format,
        orientation=detect_orientation(width, height),
    )


async def get_image_dimensions_async(data: Buffer) -> Dimensions:
    """
    Awaitable form of get_image_dimensions for async pipelines.

    The work is synchronous and never suspends.
    """
    return read_dimensions(data, FormatDetector.detect_format(data))


async def get_image_info_async(data: Buffer) -> ImageInfo:
    """Awaitable form of get_image_info for async pipelines."""
    return get_image_info(data)


def probe_file(
    image_path: Path,
    max_size: int = ImageValidator.MAX_FILE_SIZE
) -> ProbeResult:
    """
    Read an image file and probe its header.

    Args:
        image_path: Path to image file
        max_size: Largest accepted file size in bytes

    Returns:
        ProbeResult with ImageInfo, or an error message on failure
    """
    if not image_path.exists():
        return ProbeResult(success=False, path=image_path, error=f"File not found: {image_path}")

    if not image_path.is_file():
        return ProbeResult(success=False, path=image_path, error=f"Not a file: {image_path}")

    try:
        size = image_path.stat().st_size
    except OSError as e:
        return ProbeResult(success=False, path=image_path, error=f"Cannot access file: {e}")

    # Limit is enforced before anything is loaded into memory
    if not ImageValidator.is_valid_file_size(size, max_size):
        return ProbeResult(
            success=False,
            path=image_path,
            file_size=size,
            error=ImageValidator.too_large_message(size, max_size),
        )

    try:
        data = image_path.read_bytes()
    except OSError as e:
        logger.warning("Cannot read %s: %s", image_path, e)
        return ProbeResult(success=False, path=image_path, error=f"Cannot read file: {e}")

    is_valid, error = ImageValidator.validate_bytes(data, max_size)
    if not is_valid:
        return ProbeResult(success=False, path=image_path, file_size=len(data), error=error)

    info = get_image_info(data)
    logger.debug("Probed %s: %s %dx%d", image_path, info.format.value, info.width, info.height)

    return ProbeResult(
        success=True,
        path=image_path,
        file_size=len(data),
        info=info,
    )


def batch_probe(
    image_paths: List[Path],
    max_size: int = ImageValidator.MAX_FILE_SIZE,
    progress_callback: Optional[Callable[[int, int, ProbeResult], None]] = None
) -> List[ProbeResult]:
    """
    Probe multiple images with optional progress tracking.

    Args:
        image_paths: List of paths to image files
        max_size: Largest accepted file size in bytes
        progress_callback: Optional callback(current, total, result)

    Returns:
        List of ProbeResult objects, in input order

    Example:
        >>> from pathlib import Path
        >>> from imageprobe import batch_probe
        >>>
        >>> def on_progress(current, total, result):
        ...     if result.success:
        ...         print(f"[{current}/{total}] {result.path.name}: {result.info.width}x{result.info.height}")
        ...     else:
        ...         print(f"[{current}/{total}] {result.error}")
        >>>
        >>> results = batch_probe(list(Path("./photos").glob("*")), progress_callback=on_progress)
    """
    results = []
    total = len(image_paths)

    for i, path in enumerate(image_paths, 1):
        result = probe_file(path, max_size=max_size)
        results.append(result)

        if progress_callback:
            progress_callback(i, total, result)

    return results
