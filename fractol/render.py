"""Turning a view of the plane into an image of escape-time colours."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fractol.sets import julia, mandelbrot
from fractol.view import (
    COLOR_DEEP_NAVY,
    COLOR_MAJESTIC_BLUE,
    COLOR_POWDER_SHIMMER,
    HEIGHT,
    WIDTH,
    FractalKind,
    View,
    rescale,
)


def color_for(count: int, max_iter: int) -> int:
    """Return the RGB colour of a point that escaped after ``count`` steps.

    Points that never escaped (``count >= max_iter``) get the set colour.
    """
    if count < max_iter:
        return int(rescale(count, COLOR_DEEP_NAVY, COLOR_MAJESTIC_BLUE, max_iter))
    return COLOR_POWDER_SHIMMER


def _escape_count(view: View, point: complex) -> int:
    if view.kind is FractalKind.MANDELBROT:
        return mandelbrot(0j, point, view.iteration_count, view.escape_value)
    return julia(point, view.julia, view.iteration_count, view.escape_value)


def pixel_color(view: View, x: int, y: int) -> int:
    """Return the colour of pixel ``(x, y)`` for the given view."""
    count = _escape_count(view, view.to_complex(x, y))
    return color_for(count, view.iteration_count)


def _plane_grid(view: View) -> tuple[np.ndarray, np.ndarray]:
    columns = np.arange(WIDTH, dtype=np.float64)
    rows = np.arange(HEIGHT, dtype=np.float64)
    real_row = rescale(columns, -2.0, 2.0, WIDTH) * view.zoom + view.offset_x
    imag_col = rescale(rows, 2.0, -2.0, HEIGHT) * view.zoom + view.offset_y
    real = np.broadcast_to(real_row, (HEIGHT, WIDTH))
    imag = np.broadcast_to(imag_col[:, None], (HEIGHT, WIDTH))
    return real, imag


def escape_counts(view: View) -> np.ndarray:
    """Return a ``(HEIGHT, WIDTH)`` array of escape counts for every pixel."""
    max_iter = view.iteration_count
    real, imag = _plane_grid(view)
    size = HEIGHT * WIDTH

    if view.kind is FractalKind.MANDELBROT:
        zx = np.zeros(size)
        zy = np.zeros(size)
        cx = real.ravel().copy()
        cy = imag.ravel().copy()
    else:
        zx = real.ravel().copy()
        zy = imag.ravel().copy()
        cx = np.full(size, view.julia.real)
        cy = np.full(size, view.julia.imag)

    counts = np.full(size, max_iter, dtype=np.int64)
    active = np.arange(size)
    for i in range(max_iter):
        x2 = zx * zx
        y2 = zy * zy
        escaped = x2 + y2 > view.escape_value
        if escaped.any():
            counts[active[escaped]] = i
            keep = ~escaped
            active = active[keep]
            if active.size == 0:
                break
            zx, zy, cx, cy = zx[keep], zy[keep], cx[keep], cy[keep]
            x2, y2 = x2[keep], y2[keep]
        zy = 2 * zx * zy + cy
        zx = x2 - y2 + cx
    return counts.reshape(HEIGHT, WIDTH)


def _colorize(counts: np.ndarray, max_iter: int) -> np.ndarray:
    gradient = rescale(
        counts.astype(np.float64), COLOR_DEEP_NAVY, COLOR_MAJESTIC_BLUE, max_iter
    ).astype(np.uint32)
    return np.where(counts < max_iter, gradient, np.uint32(COLOR_POWDER_SHIMMER)).astype(
        np.uint32
    )


@dataclass
class Renderer:
    """Draws frames of a view; keeps the most recent frame in ``image``."""

    image: np.ndarray | None = None

    def render(self, view: View) -> np.ndarray:
        """Advance continuous zoom, draw a frame and return it as RGB integers."""
        view.advance_zoom()
        counts = escape_counts(view)
        self.image = _colorize(counts, view.iteration_count)
        return self.image