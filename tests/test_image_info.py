"""
Tests for get_image_info() and the ImageInfo model
"""

import asyncio

import pytest

from imageprobe import (
    ImageFormat,
    ImageInfo,
    Orientation,
    detect_orientation,
    get_image_dimensions_async,
    get_image_info,
    get_image_info_async,
)
from builders import avif_header, gif_header, jpeg_header, png_header, webp_vp8x


class TestOrientation:

    def test_square_is_landscape(self):
        assert detect_orientation(100, 100) is Orientation.LANDSCAPE

    def test_portrait(self):
        assert detect_orientation(50, 100) is Orientation.PORTRAIT

    def test_landscape(self):
        assert detect_orientation(1920, 1080) is Orientation.LANDSCAPE


class TestGetImageInfo:

    def test_jpeg(self):
        info = get_image_info(jpeg_header(800, 600))

        assert info == ImageInfo(800, 600, ImageFormat.JPEG, Orientation.LANDSCAPE)

    def test_portrait_avif(self):
        info = get_image_info(avif_header(800, 1200))

        assert info.format is ImageFormat.AVIF
        assert info.dimensions == (800, 1200)
        assert info.orientation is Orientation.PORTRAIT
        assert info.is_landscape is False

    def test_unknown_is_data_not_error(self):
        info = get_image_info(b"definitely not an image")

        assert info.is_unknown
        assert info.dimensions == (1920, 1080)
        assert info.orientation is Orientation.LANDSCAPE

    def test_empty_buffer(self):
        info = get_image_info(b"")

        assert info.format is ImageFormat.UNKNOWN
        assert info.dimensions == (1920, 1080)

    @pytest.mark.parametrize("data", [
        png_header(10, 20),
        gif_header(3, 3),
        webp_vp8x(640, 480),
        avif_header(7, 9),
        b"\xff\xd8\xff",
    ])
    def test_idempotent(self, data):
        assert get_image_info(data) == get_image_info(data)

    def test_record_is_frozen(self):
        info = get_image_info(png_header(10, 20))
        with pytest.raises(AttributeError):
            info.width = 99

    def test_pillow_samples(self, sample_images):
        for name, (data, (width, height), fmt) in sample_images.items():
            info = get_image_info(data)
            assert info.format.value == fmt, name
            assert (info.width, info.height) == (width, height), name


class TestAsyncEntryPoints:

    def test_info_async(self):
        info = asyncio.run(get_image_info_async(webp_vp8x(640, 480)))
        assert info == get_image_info(webp_vp8x(640, 480))

    def test_dimensions_async(self):
        dims = asyncio.run(get_image_dimensions_async(png_header(1920, 1080)))
        assert dims == (1920, 1080)


class TestImageInfoSerialization:

    def test_to_dict(self):
        info = get_image_info(gif_header(320, 240))

        assert info.to_dict() == {
            'width': 320,
            'height': 240,
            'format': 'gif',
            'orientation': 'landscape',
        }

    def test_from_dict(self):
        info = get_image_info(avif_header(1200, 800))
        assert ImageInfo.from_dict(info.to_dict()) == info

    def test_from_dict_unrecognized_format(self):
        info = ImageInfo.from_dict({
            'width': 1, 'height': 2, 'format': 'tiff', 'orientation': 'portrait'
        })
        assert info.format is ImageFormat.UNKNOWN
        assert info.orientation is Orientation.PORTRAIT

    def test_from_dict_without_orientation(self):
        """Orientation is derived from the dimensions when missing"""
        portrait = ImageInfo.from_dict({'width': 50, 'height': 100, 'format': 'png'})
        square = ImageInfo.from_dict({'width': 100, 'height': 100})

        assert portrait.orientation is Orientation.PORTRAIT
        assert square.orientation is Orientation.LANDSCAPE
        assert square.format is ImageFormat.UNKNOWN
