"""Command-line entry point and the window that shows a fractal."""

from __future__ import annotations

import sys
from typing import Any

import numpy as np

from fractol.numeric import NumberRangeError, matches_name, parse_double
from fractol.render import Renderer
from fractol.view import (
    MOUSE_WHEEL_DOWN,
    MOUSE_WHEEL_UP,
    FractalKind,
    View,
)

USAGE = "Usage:./fractol [mandelbrot | julia <x> <y>]\n"
_DISPLAY_ERROR = "There was a problem with the display"


class UsageError(ValueError):
    """Raised when the command-line arguments do not name a fractal."""

    def __init__(self, message: str = USAGE.strip()) -> None:
        super().__init__(message)


def parse_arguments(argv: list[str]) -> tuple[str, View]:
    """Return the window title and the initial view for the arguments.

    Accepts ``mandelbrot`` alone, or ``julia <x> <y>``. Raises UsageError
    otherwise and NumberRangeError when a Julia coordinate overflows.
    """
    args = list(argv)
    if len(args) == 1 and matches_name(args[0], "mandelbrot"):
        return args[0], View(kind=FractalKind.MANDELBROT)
    if len(args) == 3 and matches_name(args[0], "julia"):
        constant = complex(parse_double(args[1]), parse_double(args[2]))
        return args[0], View(kind=FractalKind.JULIA, julia=constant)
    raise UsageError()


def _to_ppm(image: np.ndarray) -> bytes:
    height, width = image.shape
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (image >> 16) & 0xFF
    rgb[..., 1] = (image >> 8) & 0xFF
    rgb[..., 2] = image & 0xFF
    return f"P6 {width} {height} 255\n".encode("ascii") + rgb.tobytes()


class FractalWindow:
    """A window that draws a view and responds to keys and the mouse."""

    def __init__(self, title: str, view: View, renderer: Renderer | None = None) -> None:
        self.title = title
        self.view = view
        self.renderer = renderer if renderer is not None else Renderer()
        self._tk: Any = None
        self._root: Any = None
        self._label: Any = None
        self._photo: Any = None

    def run(self) -> None:
        """Open the window and process events until it is closed.

        Raises RuntimeError when no display is available.
        """
        try:
            import tkinter
        except ImportError as err:
            raise RuntimeError(_DISPLAY_ERROR) from err
        try:
            root = tkinter.Tk()
        except tkinter.TclError as err:
            raise RuntimeError(_DISPLAY_ERROR) from err

        self._tk = tkinter
        self._root = root
        root.title(self.title)
        root.resizable(False, False)
        self._label = tkinter.Label(root, borderwidth=0, highlightthickness=0)
        self._label.pack()

        root.bind("<Key>", self._on_key)
        self._label.bind("<Button>", self._on_button)
        self._label.bind("<MouseWheel>", self._on_wheel)
        root.protocol("WM_DELETE_WINDOW", self._close)

        self._redraw()
        try:
            root.mainloop()
        finally:
            self._root = None
            self._label = None
            self._photo = None

    def _redraw(self) -> None:
        image = self.renderer.render(self.view)
        photo = self._tk.PhotoImage(master=self._root, data=_to_ppm(image), format="PPM")
        self._label.configure(image=photo)
        self._photo = photo

    def _close(self) -> None:
        if self._root is not None:
            self._root.destroy()

    def _on_key(self, event: Any) -> None:
        if not self.view.on_key(event.keysym_num):
            self._close()
            return
        self._redraw()

    def _on_button(self, event: Any) -> None:
        self.view.on_mouse(event.num, event.x, event.y)
        self._redraw()

    def _on_wheel(self, event: Any) -> None:
        button = MOUSE_WHEEL_UP if event.delta > 0 else MOUSE_WHEEL_DOWN
        self.view.on_mouse(button, event.x, event.y)
        self._redraw()


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        title, view = parse_arguments(args)
    except UsageError:
        sys.stderr.write(USAGE)
        return 1
    except NumberRangeError:
        return 1
    try:
        FractalWindow(title, view).run()
    except RuntimeError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())