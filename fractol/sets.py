"""Escape-time iteration for the Mandelbrot and Julia sets."""

from __future__ import annotations


def _escape_time(z: complex, c: complex, max_iter: int, escape: float) -> int:
    for i in range(max_iter):
        if z.real * z.real + z.imag * z.imag > escape:
            return i
        z = z * z + c
    return max_iter


def mandelbrot(z: complex, c: complex, max_iter: int, escape: float) -> int:
    """Count iterations of z -> z*z + c before |z|^2 exceeds ``escape``.

    Returns ``max_iter`` for points that never escape.
    """
    return _escape_time(complex(z), complex(c), max_iter, escape)


def julia(z: complex, c: complex, max_iter: int, escape: float) -> int:
    """Count iterations for the Julia set of ``c`` starting at ``z``.

    Returns ``max_iter`` for points that never escape.
    """
    return _escape_time(complex(z), complex(c), max_iter, escape)