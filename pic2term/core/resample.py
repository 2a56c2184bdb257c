"""Resampling the source image to the resolved geometry."""

from __future__ import annotations

from enum import Enum

import numpy as np
from loguru import logger
from PIL import Image


class FilterName(str, Enum):
    NEAREST = "nearest"
    TRIANGLE = "triangle"
    GAUSSIAN = "gaussian"
    CATMULLROM = "catmullrom"
    LANCZOS3 = "lanczos3"


# Pillow has no gaussian filter; Hamming is the closest smooth window it offers.
PIL_FILTERS: dict[FilterName, Image.Resampling] = {
    FilterName.NEAREST: Image.Resampling.NEAREST,
    FilterName.TRIANGLE: Image.Resampling.BILINEAR,
    FilterName.GAUSSIAN: Image.Resampling.HAMMING,
    FilterName.CATMULLROM: Image.Resampling.BICUBIC,
    FilterName.LANCZOS3: Image.Resampling.LANCZOS,
}


def resize(
    img: Image.Image,
    width: int,
    height: int,
    filter: FilterName = FilterName.NEAREST,
) -> Image.Image:
    """Resize to exactly width x height pixels in RGB mode."""
    logger.debug(
        "Resizing {}x{} -> {}x{} with {} filter",
        img.width,
        img.height,
        width,
        height,
        filter.value,
    )
    return img.convert("RGB").resize((width, height), PIL_FILTERS[filter])


def to_buffer(img: Image.Image) -> np.ndarray:
    """Pixel buffer of shape (height, width, 3), uint8."""
    return np.array(img.convert("RGB"), dtype=np.uint8)
