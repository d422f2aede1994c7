from typing import Optional
from PIL import Image, ImageOps, UnidentifiedImageError
from ..config import Settings
from ..core import resize, render
from ..typealiases import SomeSortOfPath, DecodeException


__all__ = ['load', 'process', 'view']


def load(path: SomeSortOfPath) -> Image.Image:
    """**Decode an image file into premultiplied RGBA.**

    EXIF orientation is applied. Colors are multiplied by alpha, so fully transparent areas read as black in
    the rendered output.

    :param path: The path to a png or jpeg file.
    :return: The decoded image in ``RGBA`` mode.
    :raises DecodeException: The file cannot be opened or decoded.
    """
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img).convert('RGBA')
    except (FileNotFoundError, IsADirectoryError, PermissionError):
        raise DecodeException(f'could not open file {path}')
    except Image.DecompressionBombError:
        raise DecodeException(f'image {path} is too large to decode')
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise DecodeException(f'could not decode image {path}')

    premultiplied = img.convert('RGBa')
    return Image.frombytes('RGBA', img.size, premultiplied.tobytes())


def process(path: SomeSortOfPath, columns: int, settings: Optional[Settings] = None) -> Image.Image:
    """**Load an image and resize it to fit a terminal.**

    The width is ``columns * settings.ratio``, the height follows the image's aspect ratio.

        >>> process('foo.png', 120).size
        (60, 45)

    :param path: The path to the image file.
    :param columns: The width of the terminal in characters.
    :param settings: Ratio, samples and kernel. Defaults to ``Settings()``.
    :return: The resized image.
    """
    settings = settings or Settings()
    img = load(path)
    return resize(settings.target_width(columns), 0, img, settings.kernel, settings.samples)


def view(path: SomeSortOfPath, columns: int, settings: Optional[Settings] = None, line_end: str = '\n') -> str:
    """**Convert an image file to colored terminal text.**

        >>> print(view('foo.png', 120), end='')
        [Prints the image, 60 characters wide.]

    :param path: The path to the image file.
    :param columns: The width of the terminal in characters.
    :param settings: Ratio, samples and kernel. Defaults to ``Settings()``.
    :param line_end: The line terminator of every glyph row. Defaults to ``'\\n'``.
    :return: The rendered text.
    """
    return render(process(path, columns, settings), line_end)
