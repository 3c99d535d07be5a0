"""Turtle graphics for path generation."""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol


class PathSink(Protocol):
    color: str

    def draw_polyline(self, points: list[tuple[float, float]]) -> None: ...


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


class TurtleControl:
    """The operations available inside a ``Turtle.paint`` session."""

    def __init__(self, turtle: "Turtle", canvas: PathSink):
        self._turtle = turtle
        self._canvas = canvas

    def walk(self, length: float):
        t = self._turtle
        t.position.x += length * math.cos(t.heading)
        t.position.y += length * math.sin(t.heading)
        t._current_path.append((t.position.x, t.position.y))

    def turn(self, angle: float):
        self._turtle.heading += angle

    def direction(self, angle: float):
        self._turtle.heading = angle

    def color(self, color: str):
        """Stroke the buffered path, restart it here and switch color."""
        self._turtle._flush(self._canvas)
        self._canvas.color = color


@dataclass
class Turtle:
    """Turtle graphics state machine.

    Every path flushed during the latest ``paint`` session is kept in
    ``paths`` in draw order.
    """

    x0: float = 0.0
    y0: float = 0.0
    theta0: float = 0.0
    position: Point = field(init=False)
    heading: float = field(init=False)
    paths: list = field(default_factory=list, init=False)
    _current_path: list = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self._reset()

    def _reset(self):
        self.position = Point(self.x0, self.y0)
        self.heading = self.theta0
        self.paths = []
        self._current_path = [(self.x0, self.y0)]

    def _flush(self, canvas: PathSink):
        path = self._current_path
        self.paths.append(path)
        # a lone start point has nothing to stroke
        if len(path) > 1:
            canvas.draw_polyline(path)
        self._current_path = [(self.position.x, self.position.y)]

    @contextmanager
    def paint(self, canvas: PathSink) -> Iterator[TurtleControl]:
        """Drawing session; the last path is flushed even if the block raises."""
        self._reset()
        try:
            yield TurtleControl(self, canvas)
        finally:
            self._flush(canvas)
