import numpy as np
import pytest

from fractol.render import Renderer, color_for, escape_counts, pixel_color
from fractol.sets import julia, mandelbrot
from fractol.view import (
    COLOR_DEEP_NAVY,
    COLOR_MAJESTIC_BLUE,
    COLOR_POWDER_SHIMMER,
    HEIGHT,
    WIDTH,
    FractalKind,
    View,
)

SAMPLE_PIXELS = [(0, 0), (123, 456), (799, 799), (250, 400), (600, 200), (400, 400)]
ITERATIONS = 30


def _mandelbrot_view():
    return View(iteration_count=ITERATIONS)


def _julia_view():
    return View(kind=FractalKind.JULIA, julia=complex(-0.8, 0.156), iteration_count=ITERATIONS)


@pytest.fixture(scope="module")
def mandelbrot_counts():
    return escape_counts(_mandelbrot_view())


@pytest.fixture(scope="module")
def julia_counts():
    return escape_counts(_julia_view())


def test_color_for_points_in_set():
    assert color_for(ITERATIONS, ITERATIONS) == COLOR_POWDER_SHIMMER


def test_color_for_immediate_escape_is_deep_navy():
    assert color_for(0, 500) == COLOR_DEEP_NAVY


@pytest.mark.parametrize("count", [1, 10, 100, 499])
def test_color_for_escaped_points_stay_in_gradient(count):
    color = color_for(count, 500)
    assert COLOR_DEEP_NAVY <= color < COLOR_MAJESTIC_BLUE


def test_color_for_is_monotonic():
    colors = [color_for(i, 500) for i in range(500)]
    assert colors == sorted(colors)


def test_pixel_color_centre_of_mandelbrot_is_in_set():
    assert pixel_color(View(iteration_count=50), WIDTH // 2, HEIGHT // 2) == COLOR_POWDER_SHIMMER


def test_pixel_color_corner_matches_escape_time():
    view = _mandelbrot_view()
    count = mandelbrot(0j, view.to_complex(0, 0), ITERATIONS, view.escape_value)
    assert count < ITERATIONS
    assert pixel_color(view, 0, 0) == color_for(count, ITERATIONS)


def test_pixel_color_julia_starts_from_pixel():
    view = View(kind=FractalKind.JULIA, julia=0j, iteration_count=ITERATIONS)
    assert pixel_color(view, WIDTH // 2, HEIGHT // 2) == COLOR_POWDER_SHIMMER
    count = julia(view.to_complex(0, 0), 0j, ITERATIONS, view.escape_value)
    assert pixel_color(view, 0, 0) == color_for(count, ITERATIONS)


def test_escape_counts_shape_and_bounds(mandelbrot_counts):
    assert mandelbrot_counts.shape == (HEIGHT, WIDTH)
    assert mandelbrot_counts.min() >= 0
    assert mandelbrot_counts.max() == ITERATIONS


@pytest.mark.parametrize("x, y", SAMPLE_PIXELS)
def test_escape_counts_match_mandelbrot(mandelbrot_counts, x, y):
    view = _mandelbrot_view()
    expected = mandelbrot(0j, view.to_complex(x, y), ITERATIONS, view.escape_value)
    assert mandelbrot_counts[y, x] == expected


@pytest.mark.parametrize("x, y", SAMPLE_PIXELS)
def test_escape_counts_match_julia(julia_counts, x, y):
    view = _julia_view()
    expected = julia(view.to_complex(x, y), view.julia, ITERATIONS, view.escape_value)
    assert julia_counts[y, x] == expected


def test_julia_counts_are_point_symmetric(julia_counts):
    # z -> z*z + c commutes with z -> -z, so pixel (x, y) mirrors (800 - x, 800 - y).
    assert julia_counts[100, 300] == julia_counts[700, 500]


def test_renderer_image_matches_pixel_colors():
    view = _mandelbrot_view()
    renderer = Renderer()
    image = renderer.render(view)
    assert renderer.image is image
    assert image.shape == (HEIGHT, WIDTH)
    for x, y in SAMPLE_PIXELS:
        assert image[y, x] == pixel_color(view, x, y)


def test_renderer_colors_come_from_palette():
    image = Renderer().render(_julia_view())
    values = [int(v) for v in np.unique(image)]
    outside_palette = [
        v
        for v in values
        if v != COLOR_POWDER_SHIMMER and not COLOR_DEEP_NAVY <= v < COLOR_MAJESTIC_BLUE
    ]
    assert outside_palette == []
    assert COLOR_POWDER_SHIMMER in values
    assert min(values) == COLOR_DEEP_NAVY


def test_renderer_applies_continuous_zoom_every_fifth_frame():
    view = View(iteration_count=20, is_zooming_in=True)
    renderer = Renderer()
    renderer.render(view)
    assert view.zoom == pytest.approx(1.01)
    renderer.render(view)
    assert view.zoom == pytest.approx(1.01)