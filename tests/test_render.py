import re
from PIL import Image
from timview.core import resize, render, render_rows, FG, BG, SEGMENT, RESET
from timview.kernels import Kernel


GLYPH = re.compile(r'\x1b\[38;2;(\d+);(\d+);(\d+)m(?:\x1b\[48;2;(\d+);(\d+);(\d+)m)?▀')


def glyphs(row):
    return [tuple(int(v) if v else None for v in match) for match in GLYPH.findall(row)]


def test_red_square_renders_one_red_row(red):
    text = render(resize(2, 2, red, Kernel.MITCHELL_NETRAVALI, 2))
    rows = text.split('\n')[:-1]
    assert len(rows) == 1
    assert rows[0].endswith(RESET)
    cells = glyphs(rows[0])
    assert len(cells) == 2
    for cell in cells:
        assert cell[0] >= 254 and cell[1] == 0 and cell[2] == 0
        assert cell[3] >= 254 and cell[4] == 0 and cell[5] == 0


def test_exact_glyph_format():
    img = Image.new('RGBA', (1, 2))
    img.putpixel((0, 0), (1, 2, 3, 255))
    img.putpixel((0, 1), (4, 5, 6, 255))
    assert render(img) == '\x1b[38;2;1;2;3m\x1b[48;2;4;5;6m▀\x1b[0m\n'
    assert FG.format(1, 2, 3) + BG.format(4, 5, 6) + SEGMENT + RESET + '\n' == render(img)


def test_odd_height_last_row_has_no_background():
    img = Image.new('RGBA', (4, 3), (9, 9, 9, 255))
    rows = list(render_rows(img))
    assert len(rows) == 2
    assert rows[0].count('\x1b[48;2;') == 4
    assert '\x1b[48;2;' not in rows[1]
    assert rows[1].count(SEGMENT) == 4


def test_raster_order():
    img = Image.new('RGBA', (2, 4))
    img.putdata([(x, y, 0, 255) for y in range(4) for x in range(2)])
    rows = list(render_rows(img))
    assert [glyphs(row) for row in rows] == [
        [(0, 0, 0, 0, 1, 0), (1, 0, 0, 1, 1, 0)],
        [(0, 2, 0, 0, 3, 0), (1, 2, 0, 1, 3, 0)],
    ]


def test_line_end():
    img = Image.new('RGBA', (1, 1), (255, 255, 255, 255))
    assert render(img, '\r\n').endswith(RESET + '\r\n')


def test_alpha_is_ignored():
    img = Image.new('RGBA', (1, 1), (10, 20, 30, 0))
    assert render(img) == FG.format(10, 20, 30) + SEGMENT + RESET + '\n'
