from __future__ import annotations
from typing import Union
from .kernels import Kernel
from .utils import clamp


__all__ = ['Settings']


class Settings:
    """The knobs of a render, passed explicitly to every entry point. Out of range values are clamped rather
    than rejected, the same way the command line treats them.

        >>> Settings(ratio=3, samples=1).ratio, Settings(ratio=3, samples=1).samples
        (1.0, 2)
    """

    MIN_RATIO, MAX_RATIO = 0.1, 1.0
    MIN_SAMPLES, MAX_SAMPLES = 2, 16

    def __init__(
            self, ratio: float = 0.5, samples: int = 2, kernel: Union[Kernel, str] = Kernel.MITCHELL_NETRAVALI,
            nowarn: bool = False) -> None:

        """**Initialize the Settings class.**

        :param ratio: Share of the terminal width the image takes, between 0.1 and 1. Defaults to 0.5.
        :param samples: Sub-samples per axis used for anti-aliasing, between 2 and 16. Defaults to 2.
        :param kernel: The interpolation kernel, as a ``Kernel`` or its command line name. Defaults to
            Mitchell-Netravali.
        :param nowarn: Set to True to silence warnings. Defaults to False.
        :return: ``None``.
        """

        self.ratio = float(clamp(ratio, self.MIN_RATIO, self.MAX_RATIO))
        self.samples = int(clamp(samples, self.MIN_SAMPLES, self.MAX_SAMPLES))
        self.kernel = Kernel(kernel)
        self.nowarn = nowarn

    def target_width(self, columns: int) -> int:
        """The image width in pixels for a terminal ``columns`` wide."""
        return max(1, int(columns * self.ratio + 0.5))

    def __repr__(self) -> str:
        return (f'Settings(ratio={self.ratio}, samples={self.samples}, kernel={self.kernel.value!r}, '
                f'nowarn={self.nowarn})')
