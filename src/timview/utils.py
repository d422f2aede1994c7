from typing import Any, Callable, List
import os
from pathlib import Path
from .typealiases import Number, SomeSortOfPath


IMAGE_EXTENSIONS = ('.jpeg', '.jpg', '.png')


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Limit a value to the [low, high] range."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def conditional_print(quiet: bool, file: Any = None) -> Callable:
    """Return a conditional print function."""
    def _print(*values: Any, end: str = '\n'):
        if not quiet:
            print(*values, end=end, file=file)
    return _print


def image_paths(directory: SomeSortOfPath) -> List[str]:
    """Return the paths of the png and jpeg files directly inside ``directory``, sorted by name. Subdirectories
    are not searched."""
    paths = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                continue
            if Path(entry.name).suffix.lower() in IMAGE_EXTENSIONS:
                paths.append(str(Path(directory) / entry.name))
    return sorted(paths)
