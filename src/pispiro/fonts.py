"""Font resolution for text layout and SVG output."""

import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path

from PIL import ImageFont

from .config import FontConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Font:
    """A font role: SVG family/style for output, a Pillow font for metrics."""

    family: str
    size: int
    italic: bool = False
    file: str = ""
    font_dirs: tuple[Path, ...] = ()

    @property
    def style(self) -> str:
        return "italic" if self.italic else "normal"

    @property
    def metrics(self) -> ImageFont.FreeTypeFont:
        return _load_font(self.file, self.size, self.font_dirs)

    @property
    def ascent(self) -> float:
        return float(self.metrics.getmetrics()[0])

    @property
    def descent(self) -> float:
        return float(self.metrics.getmetrics()[1])

    def string_width(self, text: str) -> float:
        return float(self.metrics.getlength(text))


@cache
def _load_font(file: str, size: int, font_dirs: tuple[Path, ...]) -> ImageFont.FreeTypeFont:
    for font_dir in font_dirs:
        candidate = Path(font_dir) / file
        if candidate.is_file():
            return ImageFont.truetype(str(candidate), size)

    if file:
        try:
            # Pillow also searches the system font directories
            return ImageFont.truetype(file, size)
        except OSError:
            logger.warning("Font %s not found, using Pillow default for metrics", file)

    return ImageFont.load_default(size=size)


def code_font(config: FontConfig, size: int) -> Font:
    return Font(config.code_family, size, False, config.code_file, tuple(config.font_dirs))


def roman_font(config: FontConfig, size: int, italic: bool = False) -> Font:
    file = config.roman_italic_file if italic else config.roman_file
    return Font(config.roman_family, size, italic, file, tuple(config.font_dirs))
