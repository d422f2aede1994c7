from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Any, Dict, List, Optional, Sequence
import queue
import sys
import threading
from .. import utils
from ..config import Settings
from ..image import view
from ..terminal import Key, CLEAR, CURSOR_HIDE, CURSOR_SHOW, raw_mode, read_keys
from ..typealiases import SomeSortOfPath, TimviewException


__all__ = ['Slideshow', 'play']


LINE_END = '\r\n'
TOOLTIP = 'CTRL+C to EXIT'


class Slideshow:
    """Navigation state of the slideshow. Renders arrive in any order and are kept by position, so the arrow keys
    always follow the directory listing. Moving onto an image that is not rendered yet is ignored.

        >>> show = Slideshow(['a.png', 'b.png'], 40)
        >>> show.rendered(0, 'A')
        True
        >>> show.press(Key.RIGHT)
        False
    """

    def __init__(self, paths: Sequence[str], width: int) -> None:
        if not paths:
            raise TimviewException('A slideshow needs at least one image.')
        self.paths = list(paths)
        self.width = width
        self.texts: List[Optional[str]] = [None] * len(self.paths)
        self.current = 1
        self.finished = False

    @property
    def count(self) -> int:
        return len(self.paths)

    def ready(self, position: int) -> bool:
        return self.texts[position - 1] is not None

    def rendered(self, index: int, text: str) -> bool:
        """Store the text of image ``index`` (0-based). Return True if it belongs on screen right now."""
        self.texts[index] = text
        return index == self.current - 1

    def press(self, key: Key) -> bool:
        """Apply a key. Return True if the screen has to be redrawn."""
        if key is Key.EXIT:
            self.finished = True
            return False
        if not self.ready(self.current):
            return False

        step = 1 if key is Key.RIGHT else -1
        position = utils.clamp(self.current + step, 1, self.count)
        if position == self.current or not self.ready(position):
            return False
        self.current = position
        return True

    def controls(self) -> str:
        """The ``< n/N >`` counter centred over the image, with the exit hint at the right edge."""
        text = f'< {self.current}/{self.count} >'
        centred = text.rjust((self.width + len(text)) // 2)
        return centred.ljust(self.width - len(TOOLTIP)) + TOOLTIP

    def screen(self) -> str:
        return (CLEAR + f'Displaying: {self.paths[self.current - 1]}' + LINE_END
                + (self.texts[self.current - 1] or '') + self.controls())


def _collect(futures: Dict[Future, int], events: queue.Queue) -> None:
    for future in as_completed(futures):
        index = futures[future]
        try:
            text = future.result()
        except TimviewException as e:
            text = f'ERROR: {e}' + LINE_END
        except Exception as e:
            events.put(e)
            return
        events.put((index, text))


def _forward_keys(stdin: Any, events: queue.Queue) -> None:
    for key in read_keys(stdin):
        events.put(key)
    events.put(Key.EXIT)


def play(
        directory: SomeSortOfPath, columns: int, settings: Optional[Settings] = None, stdin: Any = None,
        stdout: Any = None) -> None:

    """**Show every image of a directory, one at a time, switching with the arrow keys.**

    All images are rendered concurrently, one task per image in a process pool. The first image shows up as soon as
    it is ready, CTRL+C leaves. Like any code that spawns processes, this **needs** a ``if __name__ == "__main__"``
    check in the entry point of a script that calls it.

        >>> play('photos', 120)
        [Takes over the terminal until CTRL+C.]

    :param directory: The directory holding png and jpeg files.
    :param columns: The width of the terminal in characters.
    :param settings: Ratio, samples and kernel. Defaults to ``Settings()``.
    :param stdin: The terminal to read keys from. Defaults to ``sys.stdin``.
    :param stdout: The terminal to draw on. Defaults to ``sys.stdout``.
    :return: ``None``.
    """

    settings = settings or Settings()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    paths = utils.image_paths(directory)
    if not paths:
        raise TimviewException(f'no images found in {directory}')
    show = Slideshow(paths, settings.target_width(columns))
    events: queue.Queue = queue.Queue()

    executor = ProcessPoolExecutor()
    try:
        futures = {executor.submit(view, path, columns, settings, LINE_END): k for k, path in enumerate(paths)}
        threading.Thread(target=_collect, args=(futures, events), daemon=True).start()

        with raw_mode(stdin):
            threading.Thread(target=_forward_keys, args=(stdin, events), daemon=True).start()
            stdout.write(CURSOR_HIDE)
            stdout.flush()
            try:
                while not show.finished:
                    event = events.get()
                    if isinstance(event, BaseException):
                        raise event
                    if isinstance(event, Key):
                        redraw = show.press(event)
                    else:
                        redraw = show.rendered(*event)
                    if redraw:
                        stdout.write(show.screen())
                        stdout.flush()
            finally:
                stdout.write(CLEAR + CURSOR_SHOW)
                stdout.flush()
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
