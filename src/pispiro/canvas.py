"""SVG canvas with a current color and font, painted in call order."""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import drawsvg as svg
import numpy as np

from .fonts import Font

logger = logging.getLogger(__name__)

_DECIMALS = 3


def _flatten(points: Sequence[tuple[float, float]] | np.ndarray) -> list[float]:
    coords = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return np.round(coords, _DECIMALS).ravel().tolist()


class Canvas:
    """Vector drawing surface.

    Later draw calls paint over earlier ones. Strokes and fills use the
    current ``color``; text uses the current ``font``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: str = "#FFFFFF",
        color: str = "#000000",
        stroke_width: float = 1.0,
    ):
        self.width = width
        self.height = height
        self.stroke_width = stroke_width
        self.font: Font | None = None
        self.drawing = svg.Drawing(width, height)
        self.color = background
        self.fill_rect(0, 0, width, height)
        self.color = color

    @contextmanager
    def with_color(self, color: str) -> Iterator["Canvas"]:
        previous = self.color
        self.color = color
        try:
            yield self
        finally:
            self.color = previous

    def _stroke_args(self) -> dict:
        return {
            "fill": "none",
            "stroke": self.color,
            "stroke_width": self.stroke_width,
            "stroke_linecap": "round",
            "stroke_linejoin": "round",
        }

    def draw_polyline(self, points: Sequence[tuple[float, float]] | np.ndarray):
        """Stroke an open polyline. Fewer than two points draws nothing."""
        coords = _flatten(points)
        if len(coords) < 4:
            return
        self.drawing.append(svg.Lines(*coords, close=False, **self._stroke_args()))

    def draw_line(self, x0: float, y0: float, x1: float, y1: float):
        self.draw_polyline([(x0, y0), (x1, y1)])

    def fill_polygon(self, points: Sequence[tuple[float, float]] | np.ndarray):
        coords = _flatten(points)
        if len(coords) < 6:
            return
        self.drawing.append(svg.Lines(*coords, close=True, fill=self.color, stroke="none"))

    def fill_rect(self, x: float, y: float, width: float, height: float):
        self.drawing.append(svg.Rectangle(x, y, width, height, fill=self.color))

    def _require_font(self) -> Font:
        if self.font is None:
            raise ValueError("No font selected")
        return self.font

    def string_width(self, text: str) -> float:
        return self._require_font().string_width(text)

    def draw_string(self, text: str, x: float, y: float):
        """Draw text with its baseline starting at (x, y)."""
        font = self._require_font()
        self.drawing.append(
            svg.Text(
                text,
                font.size,
                round(x, _DECIMALS),
                round(y, _DECIMALS),
                font_family=font.family,
                font_style=font.style,
                fill=self.color,
            )
        )

    def draw_centered_string(self, text: str, x0: float, y0: float):
        """Draw text centered horizontally and vertically on (x0, y0)."""
        font = self._require_font()
        self.draw_string(
            text,
            x0 - font.string_width(text) / 2,
            y0 + (font.ascent - font.descent) / 2,
        )

    def draw_string_outline(self, text: str, x: float, y: float):
        """Stroke the glyph outlines of text instead of filling them."""
        font = self._require_font()
        self.drawing.append(
            svg.Text(
                text,
                font.size,
                round(x, _DECIMALS),
                round(y, _DECIMALS),
                font_family=font.family,
                font_style=font.style,
                **self._stroke_args(),
            )
        )

    def to_svg(self) -> str:
        return self.drawing.as_svg()

    def save(self, path: str | Path) -> Path:
        """Serialize to path. The parent directory must already exist."""
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_svg())
        logger.info("Wrote %s", path)
        return path
