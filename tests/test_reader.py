"""Tests for image loading."""

import io
import urllib.error

import pytest
from PIL import Image

from pic2term.core import reader
from pic2term.core.reader import (
    _guess_extension_from_url,
    aspect_ratio,
    download_image,
    is_url,
    load_image,
)


class TestIsUrl:
    def test_http(self):
        assert is_url("http://example.com/a.png")

    def test_https(self):
        assert is_url("https://example.com/a.png")

    def test_local_path(self):
        assert not is_url("/tmp/a.png")

    def test_relative_path(self):
        assert not is_url("a.png")


class TestGuessExtension:
    def test_png(self):
        assert _guess_extension_from_url("https://x.org/pic.PNG?s=1") == ".png"

    def test_missing(self):
        assert _guess_extension_from_url("https://x.org/image") == ".img"


class TestLoadImage:
    def test_png_roundtrip(self, tmp_path):
        path = tmp_path / "red.png"
        Image.new("RGB", (12, 8), (255, 0, 0)).save(path)
        img = load_image(path)
        assert img.mode == "RGB"
        assert img.size == (12, 8)
        assert img.getpixel((0, 0)) == (255, 0, 0)

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.new("L", (4, 4), 100).save(path)
        img = load_image(str(path))
        assert img.getpixel((1, 1)) == (100, 100, 100)

    def test_transparent_becomes_black(self, tmp_path):
        path = tmp_path / "clear.png"
        Image.new("RGBA", (4, 4), (255, 255, 255, 0)).save(path)
        assert load_image(path).getpixel((0, 0)) == (0, 0, 0)

    def test_animated_gif_first_frame(self, tmp_path):
        path = tmp_path / "anim.gif"
        frames = [Image.new("RGB", (6, 6), (i * 100, 0, 0)) for i in range(3)]
        frames[0].save(path, save_all=True, append_images=frames[1:], duration=100)
        img = load_image(path)
        assert img.size == (6, 6)
        assert img.getpixel((0, 0))[0] < 50

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "nope.png")

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(ValueError, match="Unsupported"):
            load_image(path)


class TestAspectRatio:
    def test_landscape(self):
        assert aspect_ratio(Image.new("RGB", (200, 100))) == 2.0

    def test_portrait(self):
        assert aspect_ratio(Image.new("RGB", (50, 100))) == 0.5


def _png_bytes(color=(0, 255, 0)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (5, 3), color).save(buf, format="PNG")
    return buf.getvalue()


class TestDownload:
    def test_url_loads_and_removes_temp_file(self, monkeypatch):
        body = _png_bytes()
        monkeypatch.setattr(
            reader.urllib.request, "urlopen", lambda req, timeout: io.BytesIO(body)
        )
        downloaded = []

        def _recording_download(url):
            path = download_image(url)
            downloaded.append(path)
            return path

        monkeypatch.setattr(reader, "download_image", _recording_download)
        img = load_image("https://example.com/pic.png")
        assert img.size == (5, 3)
        assert img.getpixel((0, 0)) == (0, 255, 0)
        assert len(downloaded) == 1
        assert downloaded[0].suffix == ".png"
        assert not downloaded[0].exists()

    def test_unreachable_url(self, monkeypatch):
        def _fail(req, timeout):
            raise urllib.error.URLError("connection refused")

        monkeypatch.setattr(reader.urllib.request, "urlopen", _fail)
        with pytest.raises(ValueError, match="Failed to download"):
            load_image("http://example.com/pic.png")

    def test_empty_body(self, monkeypatch):
        monkeypatch.setattr(
            reader.urllib.request, "urlopen", lambda req, timeout: io.BytesIO(b"")
        )
        with pytest.raises(ValueError, match="empty"):
            download_image("https://example.com/pic.png")
