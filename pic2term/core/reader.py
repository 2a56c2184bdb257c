"""Image loading from local files or HTTP(S) URLs.

Animated formats are reduced to their first frame.
"""

from __future__ import annotations

import tempfile
import urllib.error
import urllib.request
from pathlib import Path
from urllib.parse import urlparse

from loguru import logger
from PIL import Image, UnidentifiedImageError


def is_url(path: str) -> bool:
    """Check if the input looks like an HTTP(S) URL."""
    return urlparse(str(path)).scheme in ("http", "https")


def _guess_extension_from_url(url: str) -> str:
    """Extract file extension from a URL path."""
    suffix = Path(urlparse(url).path).suffix.lower()
    return suffix or ".img"


def download_image(url: str) -> Path:
    """Download an image from a URL to a temp file.

    Args:
        url: HTTP(S) URL to download.

    Returns:
        Path to the downloaded temporary file.

    Raises:
        ValueError: if the URL is unreachable or returns an error.
    """
    ext = _guess_extension_from_url(url)
    tmp = tempfile.NamedTemporaryFile(suffix=ext, delete=False)
    tmp_path = Path(tmp.name)
    logger.debug("Downloading {} to {}", url, tmp_path)

    try:
        req = urllib.request.Request(url, headers={"User-Agent": "pic2term/0.1"})
        with urllib.request.urlopen(req, timeout=30) as resp:
            while True:
                chunk = resp.read(65536)
                if not chunk:
                    break
                tmp.write(chunk)
        tmp.close()
    except urllib.error.URLError as e:
        tmp.close()
        tmp_path.unlink(missing_ok=True)
        raise ValueError(f"Failed to download {url}: {e}") from e
    except Exception:
        tmp.close()
        tmp_path.unlink(missing_ok=True)
        raise

    if tmp_path.stat().st_size == 0:
        tmp_path.unlink(missing_ok=True)
        raise ValueError(f"Downloaded file is empty: {url}")

    return tmp_path


def load_image(path: str | Path) -> Image.Image:
    """Open an image and return it as RGB.

    Accepts local file paths or HTTP(S) URLs. URLs are downloaded
    to a temporary file first.

    Raises:
        FileNotFoundError: a local path does not exist.
        ValueError: the file is not a decodable image, or a download failed.
    """
    path_str = str(path)
    downloaded = is_url(path_str)
    if downloaded:
        local_path = download_image(path_str)
    else:
        local_path = Path(path_str)
        if not local_path.exists():
            raise FileNotFoundError(f"File not found: {local_path}")

    try:
        with Image.open(local_path) as img:
            img.load()
            # Composite transparency onto black rather than keeping stale RGB
            if img.mode in ("RGBA", "LA") or "transparency" in img.info:
                rgba = img.convert("RGBA")
                canvas = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
                canvas.paste(rgba, (0, 0), rgba)
                rgb = canvas.convert("RGB")
            else:
                rgb = img.convert("RGB")
    except UnidentifiedImageError as e:
        raise ValueError(f"Unsupported or corrupt image: {path_str}") from e
    finally:
        if downloaded:
            local_path.unlink(missing_ok=True)

    logger.debug("Loaded {} ({}x{})", path_str, rgb.width, rgb.height)
    return rgb


def aspect_ratio(img: Image.Image) -> float:
    """Width / height of an image."""
    return img.width / img.height
