"""Error diffusion dithering onto a fixed palette.

Pixels are visited in raster order. Each one is mapped to its nearest
palette entry and the quantization error is pushed forward onto the
twelve not-yet-visited neighbours listed in KERNEL.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger

from pic2term.core.errors import PreconditionViolation
from pic2term.core.palette import PALETTE_SIZE

KERNEL_DENOMINATOR = 48

# (dx, dy, numerator); weights are numerator / KERNEL_DENOMINATOR
KERNEL: tuple[tuple[int, int, int], ...] = (
    (1, 0, 7), (2, 0, 5),
    (-2, 1, 3), (-1, 1, 5), (0, 1, 7), (1, 1, 5), (2, 1, 3),
    (-2, 2, 1), (-1, 2, 3), (0, 2, 5), (1, 2, 3), (2, 2, 1),
)  # fmt: skip


def _check_buffer(buffer: np.ndarray) -> None:
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise PreconditionViolation(
            f"Pixel buffer must have shape (height, width, 3), got {buffer.shape}"
        )
    if buffer.shape[0] == 0 or buffer.shape[1] == 0:
        raise PreconditionViolation(f"Pixel buffer is empty: {buffer.shape}")


def _check_palette(palette: np.ndarray) -> None:
    if palette.shape != (PALETTE_SIZE, 3):
        raise PreconditionViolation(
            f"Palette must have {PALETTE_SIZE} RGB entries, got shape {palette.shape}"
        )


def nearest_index(pixel: np.ndarray, palette: np.ndarray) -> int:
    """Index of the palette entry with the smallest squared RGB distance.

    Ties go to the lowest index.
    """
    diff = palette - pixel
    distances = (diff * diff).sum(axis=1)
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(distances))


def _scaled_error(residual: np.ndarray, numerator: int) -> np.ndarray:
    """residual * numerator / KERNEL_DENOMINATOR, truncated toward zero."""
    scaled = residual * numerator
    return np.sign(scaled) * (np.abs(scaled) // KERNEL_DENOMINATOR)


def dither(
    buffer: np.ndarray, palette: np.ndarray | Sequence[tuple[int, int, int]]
) -> np.ndarray:
    """Quantize an RGB buffer to palette indices with error diffusion.

    Args:
        buffer: (height, width, 3) uint8 array. Not modified; diffusion
            works on a private copy.
        palette: 256 RGB entries, as an array or a sequence of triples.

    Returns:
        Flat int array of length width * height in raster order.
    """
    buffer = np.asarray(buffer)
    palette = np.asarray(palette, dtype=np.int32)
    _check_buffer(buffer)
    _check_palette(palette)

    h, w = buffer.shape[:2]
    logger.debug("Dithering {}x{} buffer", w, h)

    img = buffer.astype(np.int32).copy()
    indices = np.empty(w * h, dtype=np.intp)

    for y in range(h):
        for x in range(w):
            pixel = img[y, x]
            idx = nearest_index(pixel, palette)
            indices[y * w + x] = idx

            residual = pixel - palette[idx]
            if not residual.any():
                continue

            for dx, dy, numerator in KERNEL:
                nx, ny = x + dx, y + dy
                if 0 <= nx < w and ny < h:
                    img[ny, nx] = np.clip(
                        img[ny, nx] + _scaled_error(residual, numerator), 0, 255
                    )

    return indices
