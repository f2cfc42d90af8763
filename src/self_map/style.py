"""
Visual style resolver: marker sizes and RGBA colors per entry, plus the interaction
multipliers the renderer applies on top.
"""

from __future__ import annotations

import re
from typing import List, Mapping, Sequence

from .colors import base_hsl, clamp, format_rgba, hsl_to_rgb, metric_to_size
from .metrics import size_metric_value
from .models import Entry

SELECTED_SIZE_FACTOR = 1.3
HIGHLIGHTED_SIZE_FACTOR = 1.15
HALO_MAX_SIZE = 80.0
HALO_ALPHA = 0.10
DIMMED_ALPHA = 0.15

_ALPHA_PATTERN = re.compile(r"[^,]+\)$")


def sizes_for(
    entries: Sequence[Entry],
    metric: str,
    degrees: Mapping[str, float],
    scale: float = 1.0,
) -> List[float]:
    """Marker sizes, index-aligned with `entries`."""
    return [metric_to_size(size_metric_value(entry, metric, degrees)) * scale for entry in entries]


def entry_color(entry: Entry, alpha: float) -> str:
    hue, saturation, lightness = base_hsl(entry.category)
    adjusted_l = clamp(lightness + entry.power * 15, 35, 85)
    adjusted_s = clamp(saturation + entry.valence * 10, 30, 100)
    return format_rgba(hsl_to_rgb(hue, adjusted_s, adjusted_l), alpha)


def colors_for(entries: Sequence[Entry], alpha: float) -> List[str]:
    """
    RGBA strings, index-aligned with `entries`.

    Higher power gives a lighter tone, higher valence a more saturated one, both within
    the category's hue family. Unknown categories use the "Other" family.
    """

    return [entry_color(entry, alpha) for entry in entries]


def emphasized_size(size: float, selected: bool = False, highlighted: bool = False) -> float:
    if selected:
        return size * SELECTED_SIZE_FACTOR
    if highlighted:
        return size * HIGHLIGHTED_SIZE_FACTOR
    return size


def halo_size(size: float) -> float:
    return min(HALO_MAX_SIZE, size * 1.55 + 8)


def with_alpha(rgba: str, alpha: float) -> str:
    """Replace the alpha component of an `rgba(...)` string."""
    return _ALPHA_PATTERN.sub(f"{alpha})", rgba)
