"""View state of a fractal window and its response to input events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIDTH = 800
HEIGHT = 800

EVENT_CLOSE_BTN = 17

COLOR_THEME_BLACK = 0x0A0A1A
COLOR_DEEP_NAVY = 0x111144
COLOR_INDIGO_BLUE = 0x222288
COLOR_MAJESTIC_BLUE = 0x3333AA
COLOR_COBALT_BLUE = 0x4444CC
COLOR_ELECTRIC_BLUE = 0x5555FF
COLOR_VIVID_SKY = 0x7777FF
COLOR_FROST_BLUE = 0x9999FF
COLOR_ICY_GLIMMER = 0xBBBBFF
COLOR_POWDER_SHIMMER = 0xDDDDFF
COLOR_SNOWY_HIGHLIGHT = 0xEEEEFF
COLOR_WHITE_GLINT = 0xFFFFFF

MAX_ITERATIONS = 1000
MIN_KEY_ITERATIONS = 20
MIN_WHEEL_ITERATIONS = 42
MOUSE_WHEEL_UP = 4
MOUSE_WHEEL_DOWN = 5


class Key(IntEnum):
    """X11 key codes the viewer understands."""

    ESC = 65307
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    MINUS = 45
    SPACE = 32
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    ASTERISK = 0x2A


class FractalKind(Enum):
    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def rescale(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``value`` from ``[0, old_max]`` linearly onto ``[new_min, new_max]``."""
    return (new_max - new_min) * value / old_max + new_min


@dataclass
class View:
    """Which fractal is shown and where the viewport sits in the plane."""

    kind: FractalKind = FractalKind.MANDELBROT
    julia: complex = 0j
    escape_value: float = 9.0
    iteration_count: int = 500
    offset_x: float = 0.0
    offset_y: float = 0.0
    zoom: float = 1.0
    theme_index: int = 0
    is_zooming_in: bool = False
    is_zooming_out: bool = False
    _zoom_frame: int = field(default=0, init=False, repr=False)

    def to_complex(self, x: float, y: float) -> complex:
        """Return the point of the plane under pixel ``(x, y)``."""
        real = rescale(x, -2.0, 2.0, WIDTH) * self.zoom + self.offset_x
        imag = rescale(y, 2.0, -2.0, HEIGHT) * self.zoom + self.offset_y
        return complex(real, imag)

    def on_key(self, keycode: int) -> bool:
        """Apply a key press. Returns False when the key asks to close."""
        step = 0.5 * self.zoom
        if keycode == Key.ESC:
            return False
        if keycode == Key.LEFT:
            self.offset_x -= step
        elif keycode == Key.RIGHT:
            self.offset_x += step
        elif keycode == Key.UP:
            self.offset_y += step
        elif keycode == Key.DOWN:
            self.offset_y -= step
        elif keycode == Key.ASTERISK:
            self.iteration_count = min(self.iteration_count + 10, MAX_ITERATIONS)
        elif keycode == Key.MINUS:
            self.iteration_count = max(self.iteration_count - 10, MIN_KEY_ITERATIONS)
        return True

    def _update_zoom_and_iterations(self, button: int) -> None:
        if button == MOUSE_WHEEL_UP:
            factor = 0.8
            self.iteration_count = min(self.iteration_count + 5, MAX_ITERATIONS)
        elif button == MOUSE_WHEEL_DOWN:
            factor = 1.2
            self.iteration_count = max(self.iteration_count - 5, MIN_WHEEL_ITERATIONS)
        else:
            return
        self.zoom *= factor

    def on_mouse(self, button: int, x: int, y: int) -> None:
        """Zoom with the wheel, keeping the point under the cursor fixed."""
        before = self.to_complex(x, y)
        self._update_zoom_and_iterations(button)
        self.offset_x = before.real - rescale(x, -2.0, 2.0, WIDTH) * self.zoom
        self.offset_y = before.imag - rescale(y, 2.0, -2.0, HEIGHT) * self.zoom

    def advance_zoom(self) -> None:
        """Apply continuous zoom on every fifth frame."""
        frame = self._zoom_frame
        self._zoom_frame += 1
        if frame % 5 == 0:
            if self.is_zooming_in:
                self.zoom *= 1.01
            if self.is_zooming_out:
                self.zoom *= 0.99