"""
Tests for high-level probe_file() / batch_probe() API

Tests the file pipeline:
- Read → Validation → Format detection → Dimensions
"""

from pathlib import Path

from imageprobe import ImageFormat, ProbeResult, batch_probe, probe_file


class TestProbeFileSuccess:
    """Test successful probing"""

    def test_probe_jpeg(self, image_dir: Path):
        result = probe_file(image_dir / "jpeg_baseline.jpeg")

        assert isinstance(result, ProbeResult)
        assert result.success is True
        assert result.error is None
        assert result.info.format is ImageFormat.JPEG
        assert result.info.dimensions == (800, 600)
        assert result.file_size == (image_dir / "jpeg_baseline.jpeg").stat().st_size

    def test_probe_webp_lossless(self, image_dir: Path):
        result = probe_file(image_dir / "webp_lossless.webp")

        assert result.success is True
        assert result.info.to_dict() == {
            'width': 100,
            'height': 50,
            'format': 'webp',
            'orientation': 'landscape',
        }

    def test_format_from_bytes_not_name(self, image_dir: Path, sample_images):
        """A misnamed file is still detected by its content"""
        misnamed = image_dir / "photo.jpg"
        misnamed.write_bytes(sample_images["png"][0])

        result = probe_file(misnamed)

        assert result.info.format is ImageFormat.PNG


class TestProbeFileFailure:
    """Test failures reported as data"""

    def test_nonexistent(self):
        result = probe_file(Path("nonexistent.jpg"))

        assert result.success is False
        assert result.failed is True
        assert "not found" in result.error.lower()

    def test_directory(self, image_dir: Path):
        result = probe_file(image_dir)

        assert result.success is False
        assert "not a file" in result.error.lower()

    def test_too_large(self, image_dir: Path):
        result = probe_file(image_dir / "png.png", max_size=10)

        assert result.success is False
        assert result.is_too_large is True
        assert result.info is None

    def test_not_an_image(self, image_dir: Path):
        result = probe_file(image_dir / "notes.txt")

        assert result.success is False
        assert "unsupported" in result.error.lower()


class TestBatchProbe:
    """Test batch_probe() with progress tracking"""

    def test_results_in_input_order(self, image_dir: Path):
        paths = sorted(image_dir.iterdir())
        results = batch_probe(paths)

        assert [r.path for r in results] == paths

    def test_mixed_success(self, image_dir: Path):
        paths = [image_dir / "gif.gif", image_dir / "notes.txt", image_dir / "missing.png"]
        results = batch_probe(paths)

        assert [r.success for r in results] == [True, False, False]

    def test_progress_callback(self, image_dir: Path):
        paths = [image_dir / "png.png", image_dir / "gif.gif"]
        calls = []

        batch_probe(paths, progress_callback=lambda i, total, r: calls.append((i, total, r.success)))

        assert calls == [(1, 2, True), (2, 2, True)]

    def test_empty_batch(self):
        assert batch_probe([]) == []


class TestProbeFileSizeLimit:
    """Size limit is checked from stat() before the file is read"""

    def test_oversize_file_never_read(self, tmp_path: Path, monkeypatch):
        big = tmp_path / "big.png"
        with big.open("wb") as f:
            f.write(b"\x89PNG\r\n\x1a\n")
            f.truncate(64 * 1024 * 1024)

        reads = []

        def fail_read(self):
            reads.append(self)
            raise MemoryError("file should not be loaded")

        monkeypatch.setattr(Path, "read_bytes", fail_read)

        result = probe_file(big)

        assert reads == []
        assert result.success is False
        assert result.is_too_large is True
        assert result.file_size == 64 * 1024 * 1024

    def test_limit_is_inclusive(self, image_dir: Path):
        path = image_dir / "gif.gif"
        result = probe_file(path, max_size=path.stat().st_size)

        assert result.success is True
