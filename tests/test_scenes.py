"""Spirograph grid and pi poster composition."""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET

import pytest

from pispiro.canvas import Canvas
from pispiro.colors import gray, make_color
from pispiro.config import Config, FontConfig, PosterConfig, SpirographConfig
from pispiro.legend import make_direction
from pispiro.scenes import (
    count_label,
    format_line,
    paint_digit_block,
    paint_pi_poster,
    paint_spirographs,
    render_pi_poster,
    render_spirographs,
    spirograph_grid,
    walk_digits,
)

_SVG_NS = "http://www.w3.org/2000/svg"

DIGITS = [1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7, 9, 3, 2, 3, 8, 4, 6, 2, 6, 4, 3, 3]


def _elements(svg_text: str, tag: str) -> list[ET.Element]:
    root = ET.fromstring(svg_text.encode("utf-8"))
    return list(root.iter(f"{{{_SVG_NS}}}{tag}"))


def _small_poster() -> PosterConfig:
    return PosterConfig(width=300, height=400, margin=10, digits_per_line=10, groups_per_line=2, color_every=10)


def test_spirograph_grid_layout() -> None:
    curves = spirograph_grid(SpirographConfig(size=1000, grid=10))
    assert len(curves) == 100

    first = curves[0]
    assert (first.cx, first.cy) == pytest.approx((50.0, 50.0))
    assert first.r1 == pytest.approx(50.0)
    assert first.r2 == pytest.approx(4.0)
    assert first.rho == pytest.approx(0.32)

    last = curves[-1]
    assert (last.cx, last.cy) == pytest.approx((950.0, 950.0))
    assert last.r2 == pytest.approx(40.0)
    assert last.rho == pytest.approx(32.0)


def test_spirograph_scene_strokes_one_red_path_per_cell() -> None:
    canvas = paint_spirographs(SpirographConfig(size=100, grid=3))
    paths = _elements(canvas.to_svg(), "path")
    assert len(paths) == 9
    assert {p.attrib["stroke"] for p in paths} == {"#FF0000"}


def test_render_spirographs_writes_file(tmp_path) -> None:
    config = Config(output_dir=tmp_path, spirograph=SpirographConfig(size=100, grid=2))
    out = render_spirographs(config)
    assert out == tmp_path / "spirograph.svg"
    assert len(_elements(out.read_text(encoding="utf-8"), "path")) == 4


def test_format_line_groups_digits() -> None:
    assert format_line([1, 4, 1, 5, 9, 2, 6], 3) == "141 592 6"
    assert format_line([3], 50) == "3"


def test_count_label() -> None:
    assert count_label(100_000) == "1 0 0 , 0 0 0"
    assert count_label(25) == "2 5"


def test_walk_digits_changes_color_every_block() -> None:
    cfg = _small_poster()
    canvas = Canvas(cfg.width, cfg.height)
    turtle = walk_digits(canvas, DIGITS, cfg)

    # initial color, then breaks at indices 0, 10 and 20 of the remaining digits
    assert len(turtle.paths) == 5
    assert sum(len(p) - 1 for p in turtle.paths) == len(DIGITS) - 1
    for previous, current in zip(turtle.paths, turtle.paths[1:]):
        assert current[0] == previous[-1]

    x0, y0 = turtle.paths[0][0]
    assert (x0, y0) == (cfg.width / 2 + 180, cfg.height / 2 + cfg.margin - 600)
    x1, y1 = turtle.paths[2][1]
    theta = make_direction(DIGITS[0])
    assert x1 == pytest.approx(x0 + cfg.step_length * math.cos(theta))
    assert y1 == pytest.approx(y0 + cfg.step_length * math.sin(theta))


def test_poster_layers(tmp_path) -> None:
    canvas = paint_pi_poster(DIGITS, _small_poster(), FontConfig())
    svg_text = canvas.to_svg()

    texts = [t.text for t in _elements(svg_text, "text")]
    assert texts[0] == "3."
    assert texts[1] == "14159 26535"
    assert "π" in texts
    assert "2 5" in texts
    assert "digits of" in texts
    assert [str(d) for d in range(10)] == [t for t in texts if len(t) == 1 and t.isdigit()]

    # background plus color scale swatches
    assert len(_elements(svg_text, "rect")) == 1 + 100


def _digit_lines(canvas: Canvas) -> list[ET.Element]:
    # the "3." prefix comes first, then one text element per digit line
    return _elements(canvas.to_svg(), "text")[1:4]


def test_digit_block_tints_every_nth_line() -> None:
    cfg = _small_poster().model_copy(update={"emphasis_every": 2})
    canvas = Canvas(cfg.width, cfg.height)
    paint_digit_block(canvas, DIGITS, cfg, FontConfig())

    fills = [line.attrib["fill"] for line in _digit_lines(canvas)]
    tint = make_color(10 / len(DIGITS), saturation=0.3, brightness=0.85)
    assert fills == [gray(0.8), tint, gray(0.8)]
    assert tint != gray(0.8)


def test_digit_block_without_emphasis_is_gray() -> None:
    cfg = _small_poster().model_copy(update={"emphasis_every": 0})
    canvas = Canvas(cfg.width, cfg.height)
    paint_digit_block(canvas, DIGITS, cfg, FontConfig())

    texts = _elements(canvas.to_svg(), "text")
    assert len(texts) == 4
    assert {t.attrib["fill"] for t in texts} == {gray(0.8)}


def test_digit_block_spans_margins_with_partial_last_line() -> None:
    cfg = _small_poster()
    canvas = Canvas(cfg.width, cfg.height)
    paint_digit_block(canvas, DIGITS, cfg, FontConfig())

    ys = [float(line.attrib["y"]) for line in _digit_lines(canvas)]
    assert ys[1] - ys[0] == pytest.approx(ys[2] - ys[1], abs=1e-2)
    assert ys[2] - ys[0] == pytest.approx(cfg.height - 2 * cfg.margin, abs=1e-2)
    assert ys[2] < cfg.height


def test_digit_block_single_line_stays_on_top_margin() -> None:
    cfg = _small_poster()
    canvas = Canvas(cfg.width, cfg.height)
    paint_digit_block(canvas, DIGITS[:7], cfg, FontConfig())

    texts = _elements(canvas.to_svg(), "text")
    assert [t.text for t in texts] == ["3.", "14159 26"]


def test_poster_needs_digits() -> None:
    with pytest.raises(ValueError):
        paint_pi_poster([], _small_poster(), FontConfig())


def test_render_pi_poster(tmp_path) -> None:
    digits_path = tmp_path / "pi.txt"
    digits_path.write_text("".join(map(str, DIGITS)) + "\n", encoding="utf-8")
    config = Config(output_dir=tmp_path, digits_path=digits_path, poster=_small_poster())

    out = render_pi_poster(config)
    assert out == tmp_path / "turtle.svg"
    assert out.exists()


def test_render_pi_poster_without_digits_fails(tmp_path) -> None:
    config = Config(output_dir=tmp_path, digits_path=tmp_path / "missing.txt", poster=_small_poster())
    with pytest.raises(FileNotFoundError):
        render_pi_poster(config)
    assert not (tmp_path / "turtle.svg").exists()
