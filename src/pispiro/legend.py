"""Poster legend elements: direction mapping, pointer arrow, color scale, legend circle."""

import math
from collections.abc import Callable

from .canvas import Canvas


def make_direction(digit: int) -> float:
    """Heading for a digit: 36 degree steps clockwise on screen, 0 points up."""
    return digit * 2 * math.pi / 10 - math.pi / 2


def pointer(
    canvas: Canvas,
    x0: float,
    y0: float,
    theta: float,
    d_theta: float,
    length: float,
    gap: float,
):
    """Filled arrow head with its tip at (x0, y0) pointing along theta."""
    canvas.fill_polygon(
        [
            (x0, y0),
            (x0 - length * math.cos(theta + d_theta), y0 - length * math.sin(theta + d_theta)),
            (x0 - (length - gap) * math.cos(theta), y0 - (length - gap) * math.sin(theta)),
            (x0 - length * math.cos(theta - d_theta), y0 - length * math.sin(theta - d_theta)),
            (x0, y0),
        ]
    )


def color_scale(
    canvas: Canvas,
    x0: float,
    y0: float,
    steps: int,
    width: float,
    height: float,
    make_color: Callable[[float], str],
):
    """Horizontal bar of steps swatches centered on x0, top edge at y0."""
    w = width / steps
    for index in range(steps):
        t = index / (steps - 1)
        with canvas.with_color(make_color(t)):
            canvas.fill_rect(x0 - width / 2 + width * t - w / 2, y0, w, height)


def legend_circle(
    canvas: Canvas,
    x0: float,
    y0: float,
    unit: float,
    direction: Callable[[int], float] = make_direction,
):
    """Spokes for digits 0-9 with their labels. Uses the canvas color and font."""
    for digit in range(10):
        theta = direction(digit)
        c, s = math.cos(theta), math.sin(theta)
        canvas.draw_line(x0 + unit * c, y0 + unit * s, x0 + 3 * unit * c, y0 + 3 * unit * s)
        canvas.draw_centered_string(str(digit), x0 + 4 * unit * c, y0 + 4 * unit * s)
