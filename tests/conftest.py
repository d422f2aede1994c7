import pytest
from PIL import Image


@pytest.fixture
def red():
    return Image.new('RGBA', (2, 2), (255, 0, 0, 255))


@pytest.fixture
def gradient():
    img = Image.new('RGBA', (16, 12))
    img.putdata([(x * 16, y * 20, 128, 255) for y in range(12) for x in range(16)])
    return img


@pytest.fixture
def photo_dir(tmp_path):
    Image.new('RGB', (40, 30), (0, 128, 255)).save(tmp_path / 'b.png')
    Image.new('RGB', (30, 40), (200, 10, 10)).save(tmp_path / 'a.JPG')
    (tmp_path / 'notes.txt').write_text('not an image')
    (tmp_path / 'nested.png').mkdir()
    return tmp_path
