# fractol

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800 × 800 window, colours every pixel by how quickly its orbit escapes, and
lets you pan, zoom and change the iteration depth while you explore.

## Installation

```
pip install .
```

The computation uses `numpy`. The window is drawn with `tkinter`, which ships
with most Python installations. If Tk is missing or no display can be opened,
the command prints `There was a problem with the display` to standard error
and exits with status 1.

## Usage

Draw the Mandelbrot set:

```
fractol mandelbrot
```

Draw the Julia set for the constant `c = x + yi`:

```
fractol julia -0.8 0.156
fractol julia 0.285 0.01
```

The fractal name is matched by its beginning: any first argument that starts
with `mandelbrot` (with no further arguments) or `julia` (with exactly two
more) is accepted, and it becomes the window title. Any other arguments print

```
Usage:./fractol [mandelbrot | julia <x> <y>]
```

to standard error and exit with status 1.

The Julia coordinates are read as `[sign]integer[.fraction]`: leading
whitespace and one optional `+` or `-` are skipped, every character up to the
decimal point is taken as a digit without checking, and the fraction stops at
the first non-digit. If the integer part does not fit in a 32-bit signed
integer the command exits with status 1 without drawing anything.

## Controls

| Input             | Effect                                                   |
|-------------------|----------------------------------------------------------|
| Arrow keys        | Pan by half of the current zoom factor                   |
| `*`               | Add 10 iterations (up to 1000)                           |
| `-`               | Remove 10 iterations (down to 20)                        |
| Mouse wheel up    | Zoom in towards the cursor, add 5 iterations (max 1000)  |
| Mouse wheel down  | Zoom out from the cursor, remove 5 iterations (min 42)   |
| `Esc` / close     | Quit                                                     |

Each wheel step multiplies the zoom by 0.8 (in) or 1.2 (out) and keeps the
point of the plane under the cursor fixed, so you can dive into any detail by
scrolling over it. Every input redraws the whole frame.

Each view starts with 500 iterations, zoom 1, the plane from −2 to 2 on both
axes, and an escape test of |z|² > 9. Points that escape are shaded by their
escape count, interpolated from deep navy (`0x111144`) towards majestic blue
(`0x3333AA`); points that never escape are drawn in powder blue (`0xDDDDFF`).

## Library use

The pieces behind the viewer can be used without a window:

- `fractol.sets.mandelbrot(z, c, max_iter, escape)` and
  `fractol.sets.julia(z, c, max_iter, escape)` return the number of steps of
  `z -> z*z + c` before |z|² exceeds `escape`, or `max_iter` if it never does.
- `fractol.view.View` holds the fractal kind (`FractalKind.MANDELBROT` or
  `FractalKind.JULIA`), the Julia constant, zoom, offsets and iteration count.
  `View.on_key(keycode)` applies a `Key` press and returns `False` for
  `Key.ESC`; `View.on_mouse(button, x, y)` zooms for buttons 4 and 5;
  `View.to_complex(x, y)` maps a pixel to a point of the plane;
  `View.advance_zoom()` applies continuous zoom on every fifth call when
  `is_zooming_in` or `is_zooming_out` is set.
- `fractol.view.rescale(value, new_min, new_max, old_max)` maps
  `[0, old_max]` linearly onto `[new_min, new_max]`.
- `fractol.render.escape_counts(view)` returns an 800 × 800 `numpy` array of
  escape counts; `fractol.render.pixel_color(view, x, y)` and
  `fractol.render.color_for(count, max_iter)` give single pixel colours;
  `fractol.render.Renderer().render(view)` returns a frame of `0xRRGGBB`
  integers and keeps it in `Renderer.image`.
- `fractol.numeric.parse_double` and `fractol.numeric.parse_int` are the
  number parsers used for arguments; both raise
  `fractol.numeric.NumberRangeError` on 32-bit overflow.
- `fractol.app.parse_arguments(argv)` returns the title and initial `View`
  for a list of arguments, raising `fractol.app.UsageError` when they do not
  name a fractal; `fractol.app.FractalWindow(title, view).run()` opens the
  window.

## Limitations

The window has a fixed size of 800 × 800 pixels, only the Mandelbrot set and
Julia sets can be drawn, and there is no way to save a frame to a file from
the command line.

## Running the tests

```
pip install .[test]
pytest
```