import numpy as np
import pytest
from PIL import Image
from timview import core
from timview.core import resize, target_size, intermediate_size, _smooth, _supersample
from timview.sampler import sample
from timview.kernels import Kernel
from timview.typealiases import InvalidDimensionsError


def test_both_zero_is_identity(gradient):
    assert resize(0, 0, gradient, Kernel.MITCHELL_NETRAVALI, 4) is gradient


def test_derives_height_from_width():
    img = Image.new('RGBA', (400, 300))
    assert resize(80, 0, img).size == (80, 60)
    assert resize(33, 0, img).size == (33, round(33 * 300 / 400))


def test_derives_width_from_height():
    img = Image.new('RGBA', (300, 400))
    assert resize(0, 80, img).size == (60, 80)


def test_derived_dimension_is_at_least_one():
    assert target_size(3, 0, (1000, 1)) == (3, 1)


def test_target_size_rounds_half_up():
    assert target_size(5, 0, (10, 3)) == (5, 2)


def test_intermediate_size():
    assert intermediate_size((100, 50), 4) == (25, 12)
    assert intermediate_size((100, 3), 4) is None
    assert intermediate_size((100, 50), 1) is None


def test_same_size_single_sample_is_close_to_source(gradient):
    result = resize(16, 12, gradient, Kernel.MITCHELL_NETRAVALI, 1)
    assert result.size == gradient.size
    difference = np.abs(np.asarray(result, dtype=int) - np.asarray(gradient, dtype=int))
    assert difference.max() <= 20


def test_uniform_stays_uniform_on_both_paths():
    img = Image.new('RGBA', (40, 30), (10, 200, 90, 255))
    two_stage = resize(10, 0, img, Kernel.MITCHELL_NETRAVALI, 2)
    direct = resize(10, 0, Image.new('RGBA', (3, 3), (10, 200, 90, 255)), Kernel.MITCHELL_NETRAVALI, 4)
    for result in (two_stage, direct):
        difference = np.abs(np.asarray(result, dtype=int) - [10, 200, 90, 255])
        assert difference.max() <= 1


def test_source_is_not_modified(gradient):
    before = gradient.tobytes()
    resize(5, 4, gradient, Kernel.LANCZOS, 2)
    assert gradient.tobytes() == before


@pytest.mark.parametrize('kernel', list(Kernel))
@pytest.mark.parametrize('samples', [1, 2, 5])
def test_channels_stay_in_range(kernel, samples):
    rng = np.random.default_rng(7)
    noise = rng.integers(0, 256, size=(9, 11, 4), dtype=np.uint8)
    noise[::2, ::3] = (0, 0, 0, 0)
    result = np.asarray(resize(7, 5, Image.fromarray(noise), kernel, samples))
    assert result.shape == (5, 7, 4)
    assert result.dtype == np.uint8


def test_upscale_one_pixel_source():
    img = Image.new('RGBA', (1, 1), (255, 0, 0, 255))
    result = resize(4, 0, img, Kernel.BICUBIC, 2)
    assert result.size == (4, 4)


def test_mode_is_converted():
    img = Image.new('RGB', (8, 8), (0, 0, 255))
    result = resize(4, 4, img)
    assert result.mode == 'RGBA'
    assert result.getpixel((1, 1))[2] >= 254


@pytest.mark.parametrize('width, height, samples', [(-1, 4, 2), (4, -1, 2), (4, 4, 0)])
def test_rejects_invalid_dimensions(red, width, height, samples):
    with pytest.raises(InvalidDimensionsError):
        resize(width, height, red, Kernel.MITCHELL_NETRAVALI, samples)


def test_rejects_empty_source():
    with pytest.raises(InvalidDimensionsError):
        resize(4, 4, Image.new('RGBA', (0, 0)))


def noise(width, height, seed=3):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)


def test_large_enough_source_takes_two_stage_path():
    pixels = noise(40, 30)
    result = np.asarray(resize(10, 0, Image.fromarray(pixels), Kernel.MITCHELL_NETRAVALI, 2))
    coarse = _smooth(pixels, *intermediate_size((40, 30), 2), Kernel.MITCHELL_NETRAVALI)
    expected = _smooth(coarse, 10, 8, Kernel.MITCHELL_NETRAVALI)
    np.testing.assert_array_equal(result, expected)
    assert not np.array_equal(result, _supersample(pixels, 10, 8, Kernel.MITCHELL_NETRAVALI, 2))


def test_source_thinner_than_samples_takes_direct_path():
    pixels = noise(40, 3)
    assert intermediate_size((40, 3), 4) is None
    result = np.asarray(resize(10, 0, Image.fromarray(pixels), Kernel.BICUBIC, 4))
    np.testing.assert_array_equal(result, _supersample(pixels, 10, 1, Kernel.BICUBIC, 4))


def test_bands_match_single_pass(monkeypatch):
    pixels = noise(12, 20)
    xs = np.arange(7, dtype=np.float64)[np.newaxis, :] * (12 / 7)
    ys = np.arange(11, dtype=np.float64)[:, np.newaxis] * (20 / 11)
    whole = sample(pixels, xs, ys, Kernel.BICUBIC)

    monkeypatch.setattr(core, 'BAND_ROWS', 3)
    np.testing.assert_array_equal(_smooth(pixels, 7, 11, Kernel.BICUBIC), whole)
    banded = _supersample(pixels, 7, 11, Kernel.BICUBIC, 2)
    monkeypatch.setattr(core, 'BAND_ROWS', 64)
    np.testing.assert_array_equal(banded, _supersample(pixels, 7, 11, Kernel.LANCZOS, 2))
