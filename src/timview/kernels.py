"""Interpolation kernels.

Every kernel maps a distance to a weight. The distance is taken as an absolute value and the weight is zero
outside the kernel's support radius. Kernels work on Python floats and on numpy arrays alike, element-wise.
"""

from __future__ import annotations
from enum import Enum
from typing import Union
import numpy as np


__all__ = ['Kernel', 'linear', 'cubic', 'mitchell_netravali', 'bicubic', 'lanczos']


Distance = Union[float, np.ndarray]


def linear(t: Distance) -> np.ndarray:
    t = np.abs(t)
    return np.where(t <= 1, t, 0.0)


def cubic(t: Distance) -> np.ndarray:
    """Smoothstep. Meant for distances already normalized into [0, 1]."""
    t = np.abs(t)
    return np.where(t <= 1, t * t * (3 - 2 * t), 0.0)


def mitchell_netravali(t: Distance) -> np.ndarray:
    """Mitchell-Netravali cubic, support radius 2. Balances sharpness and ringing."""
    t = np.abs(t)
    near = (7 * t ** 3 - 12 * t ** 2 + 16 / 3) / 6
    far = (-7 / 3 * t ** 3 + 12 * t ** 2 - 20 * t + 32 / 3) / 6
    return np.where(t <= 1, near, np.where(t <= 2, far, 0.0))


def bicubic(t: Distance) -> np.ndarray:
    """Catmull-Rom style cubic, support radius 2."""
    t = np.abs(t)
    near = (1.5 * t - 2.5) * t * t + 1
    far = ((-0.5 * t + 2.5) * t - 4) * t + 2
    return np.where(t < 1, near, np.where(t < 2, far, 0.0))


def lanczos(t: Distance) -> np.ndarray:
    """Lanczos windowed sinc, support radius 3. Exactly 1 at 0."""
    t = np.abs(t)
    # np.sinc is the normalized sinc, so this is sin(pi t) sin(pi t / 3) / (pi^2 t^2 / 3)
    return np.where(t < 3, np.sinc(t) * np.sinc(t / 3), 0.0)


class Kernel(Enum):
    """The interpolation kernels a resize can use. Values are the names accepted on the command line."""

    LINEAR = 'linear'
    CUBIC = 'cubic'
    MITCHELL_NETRAVALI = 'mitchell'
    BICUBIC = 'bicubic'
    LANCZOS = 'lanczos'

    @property
    def support(self) -> int:
        """The distance past which the kernel weight is zero."""
        return _SUPPORT[self]

    def __call__(self, t: Distance) -> np.ndarray:
        return _FUNCTIONS[self](t)

    @classmethod
    def names(cls) -> list:
        return [kernel.value for kernel in cls]


_FUNCTIONS = {
    Kernel.LINEAR: linear,
    Kernel.CUBIC: cubic,
    Kernel.MITCHELL_NETRAVALI: mitchell_netravali,
    Kernel.BICUBIC: bicubic,
    Kernel.LANCZOS: lanczos,
}

_SUPPORT = {
    Kernel.LINEAR: 1,
    Kernel.CUBIC: 1,
    Kernel.MITCHELL_NETRAVALI: 2,
    Kernel.BICUBIC: 2,
    Kernel.LANCZOS: 3,
}
