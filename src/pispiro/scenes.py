"""Scene composers: the spirograph grid and the pi poster."""

import logging
import math
from pathlib import Path

from tqdm import tqdm

from .canvas import Canvas
from .colors import gray, make_color
from .config import Config, FontConfig, PosterConfig, SpirographConfig
from .digits import load_digits
from .fonts import code_font, roman_font
from .legend import color_scale, legend_circle, make_direction, pointer
from .spirograph import Spirograph
from .turtle import Turtle

logger = logging.getLogger(__name__)

POINTER_HALF_ANGLE = math.pi / 10
LEGEND_FONT_SIZE = 20
TITLE_FONT_SIZE = 26


def spirograph_grid(cfg: SpirographConfig) -> list[Spirograph]:
    """Grid cells left to right, rolling radius growing with column, pen offset with row."""
    s = float(cfg.size)
    n = cfg.grid
    curves = []
    for i in range(n):
        for j in range(n):
            r1 = 0.5 * s / n
            r2 = r1 * 0.8 / n * (i + 1)
            curves.append(
                Spirograph(
                    cx=i * s / n + s / n / 2,
                    cy=j * s / n + s / n / 2,
                    r1=r1,
                    r2=r2,
                    rho=r2 * 0.8 / n * (j + 1),
                )
            )
    return curves


def paint_spirographs(cfg: SpirographConfig) -> Canvas:
    canvas = Canvas(cfg.size, cfg.size, color=cfg.color, stroke_width=cfg.stroke_width)
    for curve in spirograph_grid(cfg):
        curve.paint(canvas, cfg.t_end, cfg.t_step)
    return canvas


def render_spirographs(config: Config) -> Path:
    canvas = paint_spirographs(config.spirograph)
    return canvas.save(config.output_dir / config.spirograph.filename)


def format_line(line_digits: list[int], group_size: int) -> str:
    """Digits as text, split into space-separated groups of group_size."""
    size = max(group_size, 1)
    text = "".join(str(d) for d in line_digits)
    return " ".join(text[i : i + size] for i in range(0, len(text), size))


def count_label(count: int) -> str:
    """Spaced-out digit count, e.g. 100000 -> '1 0 0 , 0 0 0'."""
    return " ".join(f"{count:,}")


def paint_digit_block(canvas: Canvas, digits: list[int], cfg: PosterConfig, fonts: FontConfig):
    per_line = cfg.digits_per_line
    # a trailing partial line counts, so the last line sits on the bottom margin
    line_count = math.ceil(len(digits) / per_line)
    spacing = (cfg.height - 2 * cfg.margin) / (line_count - 1) if line_count > 1 else 0.0
    group_size = per_line // cfg.groups_per_line
    x = cfg.width / 2 - 15

    canvas.font = code_font(fonts, cfg.text_font_size)
    for index, start in enumerate(range(0, len(digits), per_line)):
        line = format_line(digits[start : start + per_line], group_size)
        y = cfg.margin + index * spacing

        color = gray(0.8)
        if cfg.emphasis_every and (index + 1) % cfg.emphasis_every == 0:
            color = make_color(start / len(digits), saturation=0.3, brightness=0.85)

        with canvas.with_color(color):
            if index == 0:
                canvas.draw_string(
                    "3.",
                    x - canvas.string_width(line) / 2 - canvas.string_width("3."),
                    y + (canvas.font.ascent - canvas.font.descent) / 2,
                )
            canvas.draw_centered_string(line, x, y)


def paint_legends(canvas: Canvas, cfg: PosterConfig, fonts: FontConfig):
    with canvas.with_color(gray(0.7)):
        canvas.font = code_font(fonts, 26)
        legend_circle(canvas, cfg.width / 2, 0.87 * cfg.height, cfg.legend_unit, make_direction)

    lx = cfg.width / 2
    ly = cfg.height - cfg.legend_height - 2.5 * cfg.margin
    color_scale(canvas, lx, ly, cfg.color_scale_steps, cfg.legend_width, cfg.legend_height, make_color)

    canvas.font = code_font(fonts, LEGEND_FONT_SIZE)
    canvas.color = gray(0.7)
    pointer(
        canvas,
        lx - cfg.legend_width / 2 - LEGEND_FONT_SIZE,
        ly + cfg.legend_height / 2,
        0.0,
        POINTER_HALF_ANGLE,
        1.5 * cfg.pointer_length,
        1.5 * cfg.pointer_gap,
    )


def paint_title(canvas: Canvas, digit_count: int, cfg: PosterConfig, fonts: FontConfig):
    canvas.color = gray(0.4)
    canvas.font = roman_font(fonts, 600, italic=True)
    font = canvas.font
    canvas.draw_string_outline(
        "π",
        cfg.width / 2 - font.string_width("π") / 2,
        300.0 + cfg.margin + (font.ascent - font.descent) / 2,
    )

    canvas.font = roman_font(fonts, TITLE_FONT_SIZE * 2)
    canvas.draw_centered_string(count_label(digit_count), cfg.width / 2, cfg.margin + 60.0)
    canvas.color = gray(0.5)
    canvas.font = roman_font(fonts, TITLE_FONT_SIZE, italic=True)
    canvas.draw_centered_string("digits of", cfg.width / 2, cfg.margin + 60.0 + 1.8 * TITLE_FONT_SIZE)


def walk_digits(canvas: Canvas, digits: list[int], cfg: PosterConfig, progress: bool = False) -> Turtle:
    """Turtle walk: one step per digit, heading picked by the previous digit."""
    x0 = cfg.width / 2 + 180
    y0 = cfg.height / 2 + cfg.margin - 600
    theta0 = make_direction(digits[0])

    canvas.color = gray(0.4)
    pointer(canvas, x0, y0, theta0, POINTER_HALF_ANGLE, cfg.pointer_length, cfg.pointer_gap)

    turtle = Turtle(x0, y0, theta0)
    with turtle.paint(canvas) as t:
        t.color(make_color(0.0))
        rest = digits[1:]
        for index, digit in enumerate(tqdm(rest, desc="Walking", disable=not progress)):
            if index % cfg.color_every == 0:
                t.color(make_color(index / len(digits)))
            t.walk(cfg.step_length)
            t.direction(make_direction(digit))

    logger.debug("Turtle walk drew %d paths", len(turtle.paths))
    return turtle


def paint_pi_poster(
    digits: list[int],
    cfg: PosterConfig,
    fonts: FontConfig,
    progress: bool = False,
) -> Canvas:
    """Draw the poster layers in paint order."""
    if not digits:
        raise ValueError("Poster needs at least one digit")

    canvas = Canvas(cfg.width, cfg.height, color="#FF0000")
    paint_digit_block(canvas, digits, cfg, fonts)
    paint_legends(canvas, cfg, fonts)
    paint_title(canvas, len(digits), cfg, fonts)
    walk_digits(canvas, digits, cfg, progress)
    return canvas


def render_pi_poster(config: Config, progress: bool = False) -> Path:
    digits = load_digits(config.digits_path, config.poster.max_digits)
    canvas = paint_pi_poster(digits, config.poster, config.fonts, progress)
    return canvas.save(config.output_dir / config.poster.filename)
