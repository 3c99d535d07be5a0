"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class FontConfig(BaseModel):
    code_family: str = "Fira Code"
    code_file: str = "FiraCode-Regular.ttf"
    roman_family: str = "Nimbus Roman"
    roman_file: str = "NimbusRoman-Regular.otf"
    roman_italic_file: str = "NimbusRoman-Italic.otf"
    font_dirs: list[Path] = Field(default_factory=list)


class SpirographConfig(BaseModel):
    size: int = Field(1000, gt=0)
    grid: int = Field(10, gt=0)
    color: str = "#FF0000"
    stroke_width: float = 1.0
    t_end: float = 100.0
    t_step: float = Field(0.2, gt=0)
    filename: str = "spirograph.svg"


class PosterConfig(BaseModel):
    width: int = Field(2100, gt=0)
    height: int = Field(2970, gt=0)
    margin: float = 50.0
    max_digits: int | None = Field(None, gt=0)
    digits_per_line: int = Field(400, gt=0)
    groups_per_line: int = Field(8, gt=0)
    text_font_size: int = 8
    emphasis_every: int = Field(10, ge=0)  # 0 disables tinted lines
    color_every: int = Field(1000, gt=0)
    step_length: float = 5.2
    legend_unit: float = 40.0
    legend_width: float = 500.0
    legend_height: float = 8.0
    color_scale_steps: int = Field(100, gt=1)
    pointer_length: float = 20.0
    pointer_gap: float = 8.0
    filename: str = "turtle.svg"


class Config(BaseModel):
    output_dir: Path = Path("out")
    digits_path: Path = Path("resources/pi100000.txt")
    fonts: FontConfig = FontConfig()
    spirograph: SpirographConfig = SpirographConfig()
    poster: PosterConfig = PosterConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/render.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/render.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=4)
