"""Color helpers: HSB conversion and the poster's color ramp."""

import colorsys
import math


def hsb_to_hex(hue: float, saturation: float, brightness: float) -> str:
    """Convert HSB to #RRGGBB. Hue wraps modulo 1, as java.awt.Color.getHSBColor does."""
    hue = hue - math.floor(hue)
    r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
    return "#{:02X}{:02X}{:02X}".format(*(int(c * 255 + 0.5) for c in (r, g, b)))


def gray(brightness: float) -> str:
    return hsb_to_hex(0.0, 0.0, brightness)


def make_color(t: float, saturation: float = 1.0, brightness: float = 0.8) -> str:
    """Ramp color for position t in [0, 1] along the digit sequence."""
    return hsb_to_hex(0.8 * (t + 0.65) % 1.0, saturation, brightness)
