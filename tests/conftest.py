"""
Shared fixtures: real sample images encoded in memory with Pillow.
"""

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image


def encode_image(fmt: str, size: tuple, **save_kwargs) -> bytes:
    """Encode a solid-color image with Pillow and return the file bytes"""
    mode = 'P' if fmt == 'GIF' else 'RGB'
    img = Image.new(mode, size, 0 if mode == 'P' else (70, 130, 180))
    buffer = BytesIO()
    img.save(buffer, format=fmt, **save_kwargs)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def sample_images():
    """
    Pillow-encoded samples keyed by name: (bytes, (width, height), format)
    """
    return {
        "jpeg_baseline": (encode_image('JPEG', (800, 600), quality=85), (800, 600), "jpeg"),
        "jpeg_progressive": (encode_image('JPEG', (640, 960), progressive=True), (640, 960), "jpeg"),
        "png": (encode_image('PNG', (1920, 1080)), (1920, 1080), "png"),
        "gif": (encode_image('GIF', (320, 240)), (320, 240), "gif"),
        "webp_lossy": (encode_image('WEBP', (300, 200), quality=80), (300, 200), "webp"),
        "webp_lossless": (encode_image('WEBP', (100, 50), lossless=True), (100, 50), "webp"),
    }


@pytest.fixture
def image_dir(tmp_path: Path, sample_images) -> Path:
    """Directory with one file per Pillow sample plus a non-image file"""
    for name, (data, _, fmt) in sample_images.items():
        (tmp_path / f"{name}.{fmt}").write_bytes(data)
    (tmp_path / "notes.txt").write_bytes(b"not an image at all")
    return tmp_path
