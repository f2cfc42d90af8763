"""
Scalar-to-size and HSL-to-RGB primitives used by the style resolver.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

DEFAULT_MIN_SIZE = 9.0
DEFAULT_MAX_SIZE = 42.0
DEFAULT_GAMMA = 0.65

# (hue degrees, saturation %, lightness %)
CATEGORY_COLORS: Dict[str, Tuple[float, float, float]] = {
    "People": (280, 70, 60),
    "Accomplishments": (45, 95, 60),
    "Life Story": (200, 75, 55),
    "Ideas/Likes": (140, 70, 55),
    "Other": (0, 0, 62),
}
DEFAULT_COLOR_CATEGORY = "Other"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def metric_to_size(
    metric: float,
    min_size: float = DEFAULT_MIN_SIZE,
    max_size: float = DEFAULT_MAX_SIZE,
    gamma: float = DEFAULT_GAMMA,
) -> float:
    """
    Map a metric in [0, 1] onto a marker size.

    Values outside [0, 1] are clamped first. A gamma below 1 spreads out the low end
    so small entries stay distinguishable from each other.
    """

    m = clamp(metric, 0.0, 1.0)
    return min_size + (max_size - min_size) * math.pow(m, gamma)


def base_hsl(category: str) -> Tuple[float, float, float]:
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS[DEFAULT_COLOR_CATEGORY])


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """
    Convert HSL (hue in degrees, saturation and lightness in percent) to 0-255 RGB.

    Uses the chroma formulation with six 60 degree hue sectors. Channels are rounded
    half up.
    """

    s = saturation / 100.0
    l = lightness / 100.0
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((hue / 60.0) % 2) - 1))
    m = l - c / 2

    if hue < 60:
        r, g, b = c, x, 0.0
    elif hue < 120:
        r, g, b = x, c, 0.0
    elif hue < 180:
        r, g, b = 0.0, c, x
    elif hue < 240:
        r, g, b = 0.0, x, c
    elif hue < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (_round_channel(r + m), _round_channel(g + m), _round_channel(b + m))


def _round_channel(value: float) -> int:
    return int(math.floor(value * 255 + 0.5))


def format_rgba(rgb: Tuple[int, int, int], alpha: float) -> str:
    r, g, b = rgb
    return f"rgba({r},{g},{b},{alpha})"
