"""Thin wrappers around the platform terminal: raw mode, size, color support and arrow key decoding."""

from __future__ import annotations
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Optional, Tuple
import os
import sys
import warnings
from .core import ESCAPE
from .typealiases import TerminalException


__all__ = ['Key', 'CLEAR', 'CURSOR_HIDE', 'CURSOR_SHOW', 'decode_keys', 'raw_mode', 'read_keys', 'is_terminal',
           'size', 'enable_colored_output']


CLEAR = ESCAPE + '[2J' + ESCAPE + '[3J' + ESCAPE + '[H'
CURSOR_HIDE = ESCAPE + '[?25l'
CURSOR_SHOW = ESCAPE + '[?25h'

CTRL_C = 3
ARROW_PREFIX = b'\x1b['
ARROW_RIGHT = ord('C')
ARROW_LEFT = ord('D')

WINDOWS = sys.platform == 'win32'
ENABLE_PROCESSED_INPUT = 0x0001
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


class Key(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    EXIT = 'exit'


def decode_keys(data: bytes) -> Optional[Key]:
    """Translate one read from a raw terminal into a key, or ``None`` for anything else."""
    if len(data) == 3 and data[:2] == ARROW_PREFIX:
        if data[2] == ARROW_RIGHT:
            return Key.RIGHT
        if data[2] == ARROW_LEFT:
            return Key.LEFT
        return None
    if CTRL_C in data:
        return Key.EXIT
    return None


def _fileno(stream: Any) -> int:
    return stream if isinstance(stream, int) else stream.fileno()


def is_terminal(stream: Any) -> bool:
    try:
        return os.isatty(_fileno(stream))
    except (OSError, ValueError):
        return False


def size(stream: Any) -> Optional[Tuple[int, int]]:
    """Return (columns, lines) of the terminal behind ``stream``, or ``None`` if it has no size."""
    try:
        columns, lines = os.get_terminal_size(_fileno(stream))
    except (OSError, ValueError):
        return None
    return columns, lines


def _console_mode(stream: Any) -> Optional[int]:
    """The Windows console mode behind ``stream``, or ``None`` if it is not a console."""
    import ctypes
    import msvcrt

    try:
        handle = msvcrt.get_osfhandle(_fileno(stream))
    except OSError:
        return None
    mode = ctypes.c_uint32()
    if not ctypes.windll.kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return None
    return mode.value


def _set_console_mode(stream: Any, mode: int) -> bool:
    import ctypes
    import msvcrt

    try:
        handle = msvcrt.get_osfhandle(_fileno(stream))
    except OSError:
        return False
    return bool(ctypes.windll.kernel32.SetConsoleMode(handle, mode))


def enable_colored_output(stream: Any) -> bool:
    """Make sure escape sequences are interpreted. Only the Windows console needs to be told."""
    if not WINDOWS:
        return True

    mode = _console_mode(stream)
    if mode is None:
        return False
    return _set_console_mode(stream, mode | ENABLE_VIRTUAL_TERMINAL_PROCESSING)


@contextmanager
def raw_mode(stream: Any) -> Iterator[None]:
    """Switch the terminal to raw mode for the duration of the block, restoring the previous mode afterwards.
    On the Windows console only processed input is turned off, so CTRL+C reaches ``msvcrt`` as a key."""
    if WINDOWS:
        mode = _console_mode(stream)
        if mode is None or not _set_console_mode(stream, mode & ~ENABLE_PROCESSED_INPUT):
            raise TerminalException('could not switch console to raw mode')
        try:
            yield
        finally:
            _set_console_mode(stream, mode)
        return

    import termios
    import tty

    fd = _fileno(stream)
    try:
        state = termios.tcgetattr(fd)
        tty.setraw(fd)
    except termios.error as e:
        raise TerminalException(f'could not switch terminal to raw mode: {e}')
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, state)


def _read_windows_keys() -> Iterator[Key]:
    import msvcrt

    while True:
        char = msvcrt.getwch()
        if char in ('\x00', '\xe0'):
            code = msvcrt.getwch()
            if code == 'M':
                yield Key.RIGHT
            elif code == 'K':
                yield Key.LEFT
        elif char == '\x03':
            yield Key.EXIT


def read_keys(stream: Any) -> Iterator[Key]:
    """Block on ``stream`` and yield every recognised key press. Stops at end of input."""
    if WINDOWS:
        yield from _read_windows_keys()
        return

    fd = _fileno(stream)
    if not is_terminal(fd):
        warnings.warn('Reading keys from something that is not a terminal.', RuntimeWarning)
    while True:
        data = os.read(fd, 3)
        if not data:
            return
        key = decode_keys(data)
        if key is not None:
            yield key
