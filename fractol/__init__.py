"""Mandelbrot and Julia set viewer: escape-time sets, view state, rendering and a Tk window."""

__version__ = "1.0.0"
__all__ = ["numeric", "sets", "view", "render", "app"]