from __future__ import annotations
from typing import Union
import numpy as np
from .kernels import Kernel


__all__ = ['sample', 'RADIUS']


RADIUS = 2

Coordinates = Union[float, np.ndarray]


def sample(pixels: np.ndarray, xs: Coordinates, ys: Coordinates, kernel: Kernel, radius: int = RADIUS) -> np.ndarray:
    """**Interpolate colors at continuous coordinates of a source image.**

    Each coordinate is blended from the source pixels around it. Offsets run from ``-radius`` to ``radius + 1``
    on both axes, so every coordinate gathers ``(2 * radius + 2) ** 2`` taps. Each tap is weighted by
    ``kernel(|dx|) * kernel(|dy|)``, where the distances are divided by ``radius``. Taps falling outside the source
    are skipped, not extended from the edge.

    The loop runs over the taps, and every tap is evaluated for all coordinates at once.

        >>> sample(pixels, 3.5, 2.0, Kernel.MITCHELL_NETRAVALI).shape
        (4,)

    :param pixels: Source pixels as an array of shape (height, width, channels), 8-bit values.
    :param xs: Horizontal coordinates in source pixel space. Any shape that broadcasts with ``ys``.
    :param ys: Vertical coordinates in source pixel space.
    :param kernel: The interpolation kernel.
    :param radius: The sampling radius. Defaults to 2.
    :return: A ``uint8`` array of shape ``xs.shape + (channels,)``. Coordinates with no positive total weight
        come out as all zeros.
    """
    xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
    height, width, channels = pixels.shape
    x0 = np.floor(xs).astype(np.int64)
    y0 = np.floor(ys).astype(np.int64)

    sums = np.zeros(xs.shape + (channels,), dtype=np.float64)
    total = np.zeros(xs.shape, dtype=np.float64)

    for j in range(-radius, radius + 2):
        src_y = y0 + j
        inside_y = (src_y >= 0) & (src_y < height)
        weight_y = kernel(np.abs((ys - src_y) / radius))
        rows = np.clip(src_y, 0, height - 1)

        for i in range(-radius, radius + 2):
            src_x = x0 + i
            inside = inside_y & (src_x >= 0) & (src_x < width)
            weight = np.where(inside, weight_y * kernel(np.abs((xs - src_x) / radius)), 0.0)
            colors = pixels[rows, np.clip(src_x, 0, width - 1)]

            sums += weight[..., np.newaxis] * colors
            total += weight

    positive = total > 0
    result = np.zeros_like(sums)
    np.divide(sums, total[..., np.newaxis], out=result, where=positive[..., np.newaxis])
    return np.clip(result, 0, 255).astype(np.uint8)
