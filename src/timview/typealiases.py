from typing import Union, Tuple
from os import PathLike
from pathlib import Path

SomeSortOfPath = Union[str, PathLike, Path]
Number = Union[int, float]
Size = Tuple[int, int]


class TimviewException(Exception):
    pass


class InvalidDimensionsError(TimviewException, ValueError):
    pass


class DecodeException(TimviewException):
    pass


class TerminalException(TimviewException):
    pass
