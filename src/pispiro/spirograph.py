"""Spirograph curves: sampled trochoids."""

import math
from dataclasses import dataclass

import numpy as np

from .canvas import Canvas


def sample_times(t_end: float = 100.0, step: float = 0.2, t0: float = 0.0) -> np.ndarray:
    """Parameter values t0, t0+step, ... up to and including t_end."""
    # computed count and i*step so float accumulation never drops the last sample
    count = math.floor((t_end - t0) / step + 1e-9) + 1
    return t0 + np.arange(max(count, 0)) * step


@dataclass(frozen=True)
class Spirograph:
    """Curve traced by a pen at offset rho inside a circle of radius r2 rolling in a circle of radius r1."""

    cx: float
    cy: float
    r1: float
    r2: float
    rho: float

    @property
    def k(self) -> float:
        return self.rho / self.r2

    @property
    def l(self) -> float:  # noqa: E743
        return self.r2 / self.r1

    @property
    def omega_f(self) -> float:
        """Pen angular frequency; infinite when rho is 0, where its term vanishes."""
        k = self.k
        if k == 0:
            return math.inf
        return (1 - k) / k

    def x(self, t):
        k = self.k
        wobble = 0.0 if k == 0 else self.l * k * np.cos(self.omega_f * t)
        return self.cx + self.r1 * ((1 - k) * np.cos(t) + wobble)

    def y(self, t):
        k = self.k
        wobble = 0.0 if k == 0 else self.l * k * np.sin(self.omega_f * t)
        return self.cy + self.r1 * ((1 - k) * np.sin(t) - wobble)

    def points(self, t_end: float = 100.0, step: float = 0.2) -> np.ndarray:
        """Sampled curve as an (N, 2) array."""
        t = sample_times(t_end, step)
        return np.column_stack([self.x(t), self.y(t)])

    def paint(self, canvas: Canvas, t_end: float = 100.0, step: float = 0.2):
        canvas.draw_polyline(self.points(t_end, step))
