"""
Self map layout and visual-encoding engine.

Exports the pure engine entry points consumed by renderers.
"""

from .colors import hsl_to_rgb, metric_to_size
from .layout import R_MAX, compute_position_by_power, compute_position_by_valence, compute_positions
from .metrics import size_metric_value, weighted_degree
from .models import Association, Entry, Position, RingGuide, SelfMapData
from .rings import generate_ring_guides, ring_guides
from .style import colors_for, sizes_for
from .validation import parse_document

__all__ = [
    "R_MAX",
    "Association",
    "Entry",
    "Position",
    "RingGuide",
    "SelfMapData",
    "colors_for",
    "compute_position_by_power",
    "compute_position_by_valence",
    "compute_positions",
    "generate_ring_guides",
    "hsl_to_rgb",
    "metric_to_size",
    "parse_document",
    "ring_guides",
    "size_metric_value",
    "sizes_for",
    "weighted_degree",
]
