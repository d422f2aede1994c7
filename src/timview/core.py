from __future__ import annotations
from typing import Iterator, Optional
import numpy as np
from PIL import Image
from .kernels import Kernel
from .sampler import sample, RADIUS
from .typealiases import Size, InvalidDimensionsError


__all__ = ['resize', 'render', 'render_rows', 'target_size', 'intermediate_size', 'ESCAPE', 'SEGMENT', 'FG', 'BG',
           'RESET']


ESCAPE = '\033'
SEGMENT = '▀'
FG = ESCAPE + '[38;2;{};{};{}m'
BG = ESCAPE + '[48;2;{};{};{}m'
RESET = ESCAPE + '[0m'

# Target rows sampled per call, bounds the per-tap working arrays.
BAND_ROWS = 64


def target_size(width: int, height: int, source_size: Size) -> Size:
    """Fill in a zero target dimension from the other one, keeping the source aspect ratio.

    :param width: The target width, or 0 to derive it.
    :param height: The target height, or 0 to derive it.
    :param source_size: The source (width, height).
    :return: The complete target size. A derived dimension is rounded half up and is at least 1.
    """
    src_width, src_height = source_size
    if width == 0 and height == 0:
        return src_width, src_height
    if width == 0:
        width = max(1, int(height * src_width / src_height + 0.5))
    elif height == 0:
        height = max(1, int(width * src_height / src_width + 0.5))
    return width, height


def intermediate_size(source_size: Size, samples: int) -> Optional[Size]:
    """The size of the coarse pre-downsample, or ``None`` when the direct multi-sample path should run instead."""
    if samples > 1:
        width, height = source_size[0] // samples, source_size[1] // samples
        if width > 0 and height > 0:
            return width, height
    return None


def _to_array(image: Image.Image) -> np.ndarray:
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return np.asarray(image)


def _bands(height: int) -> Iterator[slice]:
    for top in range(0, height, BAND_ROWS):
        yield slice(top, min(top + BAND_ROWS, height))


def _smooth(pixels: np.ndarray, width: int, height: int, kernel: Kernel) -> np.ndarray:
    # One sample per target pixel, taken at the pixel's top left corner in source space.
    src_height, src_width = pixels.shape[:2]
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :] * (src_width / width)
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis] * (src_height / height)

    result = np.empty((height, width, pixels.shape[2]), dtype=np.uint8)
    for band in _bands(height):
        result[band] = sample(pixels, xs, ys[band], kernel, RADIUS)
    return result


def _supersample(pixels: np.ndarray, width: int, height: int, kernel: Kernel, samples: int) -> np.ndarray:
    src_height, src_width = pixels.shape[:2]
    scale_x = src_width / width
    scale_y = src_height / height
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :]
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis]
    offsets = [k / samples - 0.5 for k in range(samples)]

    result = np.empty((height, width, pixels.shape[2]), dtype=np.uint8)
    for band in _bands(height):
        sums = np.zeros((band.stop - band.start, width, pixels.shape[2]), dtype=np.float64)
        for offset_y in offsets:
            for offset_x in offsets:
                sums += sample(pixels, (xs + offset_x) * scale_x, (ys[band] + offset_y) * scale_y, kernel, RADIUS)
        result[band] = np.clip(sums / (samples * samples), 0, 255).astype(np.uint8)
    return result


def resize(
        width: int, height: int, source: Image.Image, kernel: Kernel = Kernel.MITCHELL_NETRAVALI,
        samples: int = 2) -> Image.Image:

    """**Resample an image to a new size.**

    Passing 0 for one dimension derives it from the other through the source aspect ratio. Passing 0 for both
    returns ``source`` itself.

    The strategy is picked once per call. When ``samples`` is above one and the source divided by ``samples`` is
    still at least a pixel on each axis, the source is first shrunk to that coarse size and then resampled to the
    target, one sample per pixel on both passes. Otherwise every target pixel averages a ``samples`` x
    ``samples`` grid of sub-samples centred on it.

        >>> resize(80, 0, Image.new('RGBA', (400, 300))).size
        (80, 60)

    :param width: The target width in pixels. 0 derives it from ``height``.
    :param height: The target height in pixels. 0 derives it from ``width``.
    :param source: The source image. It is never modified.
    :param kernel: The interpolation kernel. Defaults to Mitchell-Netravali.
    :param samples: Sub-samples per axis for anti-aliasing. Defaults to 2.
    :return: A new ``RGBA`` image, or ``source`` when both dimensions are 0.
    """

    if width < 0 or height < 0:
        raise InvalidDimensionsError(f'Target dimensions must not be negative, got {width}x{height}.')
    if samples < 1:
        raise InvalidDimensionsError(f'Sample count must be at least 1, got {samples}.')
    src_width, src_height = source.size
    if src_width <= 0 or src_height <= 0:
        raise InvalidDimensionsError(f'Source image is empty ({src_width}x{src_height}).')

    if width == 0 and height == 0:
        return source
    width, height = target_size(width, height, source.size)

    pixels = _to_array(source)
    intermediate = intermediate_size(source.size, samples)
    if intermediate is not None:
        coarse = _smooth(pixels, *intermediate, kernel)
        result = _smooth(coarse, width, height, kernel)
    else:
        result = _supersample(pixels, width, height, kernel, samples)

    return Image.fromarray(result)


def render_rows(image: Image.Image, line_end: str = '\n') -> Iterator[str]:
    """Yield the image as terminal text, one glyph row at a time. Every glyph row covers two pixel rows: the upper
    one in the foreground color and the lower one in the background color. An odd last row has no background.

    :param image: The image to render. Alpha is ignored.
    :param line_end: Appended after the reset code of every row. Use ``'\\r\\n'`` on a raw terminal.
    """
    pixels = np.asarray(image.convert('RGB')).tolist()
    height = len(pixels)

    for y in range(0, height, 2):
        if y + 1 < height:
            row = ''.join(
                FG.format(*upper) + BG.format(*lower) + SEGMENT for upper, lower in zip(pixels[y], pixels[y + 1]))
        else:
            row = ''.join(FG.format(*upper) + SEGMENT for upper in pixels[y])
        yield row + RESET + line_end


def render(image: Image.Image, line_end: str = '\n') -> str:
    """Render the whole image as one string. See ``render_rows``."""
    return ''.join(render_rows(image, line_end))
