"""
timview
=======

Terminal IMage VIEWer. View png and jpeg images right in the terminal, drawn with ANSI true-color escape codes.

How It Looks
------------

Every character cell is an upper half block (``▀``). Its foreground color paints the top half and its background
color paints the bottom half, so one line of text carries two rows of pixels.

Basic Usage
-----------

From the command line, pass an image or a directory:

    $ timview foo.png
    $ timview -r 1 -k lanczos photos/

A directory opens a slideshow: the left and right arrow keys switch images, CTRL+C leaves.

From Python, use the function matching your use case:

- ``image.view()`` converts an image file to a string of terminal text.

- ``slideshow.play()`` takes over the terminal and browses a directory. It renders the images in a process pool, so
  it **requires** a ``if __name__ == '__main__'`` check in the top level of the user code.

- ``resize()`` and ``render()`` are the building blocks behind both, for images that are already in memory:

    >>> import timview as tv
    >>> from PIL import Image
    >>> print(tv.render(tv.resize(60, 0, Image.open('foo.png'))), end='')

The most important **settings** are the ``ratio`` (the share of the terminal width taken by the image, 0.5 by
default), the ``samples`` count used for anti-aliasing and the interpolation ``kernel``. Mitchell-Netravali is the
default kernel; linear, cubic, bicubic and lanczos are also available.
"""

from . import image, slideshow
from .config import Settings
from .core import *
from .kernels import Kernel
from .typealiases import TimviewException, InvalidDimensionsError, DecodeException, TerminalException


__version__ = '0.1.0'
