"""
Tabular view of a resolved self map (positions, metrics and styles per entry).
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .config import ViewConfig
from .layout import compute_polar, compute_positions
from .metrics import size_metric_value, weighted_degree
from .models import SelfMapData
from .style import colors_for, sizes_for

VIEW_COLUMNS: List[str] = [
    "label",
    "category",
    "power",
    "valence",
    "radius",
    "angle",
    "x",
    "y",
    "weighted_degree",
    "metric_value",
    "size",
    "color",
]


def build_view_frame(data: SelfMapData, config: ViewConfig) -> pd.DataFrame:
    """
    One row per entry, in input order, with everything the renderer needs.

    Inputs:
        data: Validated self map.
        config: View settings (size metric, radius mode, scale, opacity).

    Outputs:
        DataFrame with VIEW_COLUMNS.
    """

    entries = list(data.entries)
    if not entries:
        return pd.DataFrame(columns=VIEW_COLUMNS)

    polar = compute_polar(entries, config.radius_mode)
    positions = compute_positions(entries, config.radius_mode)
    degrees = weighted_degree(entries, data.associations)
    sizes = sizes_for(entries, config.size_metric, degrees, config.size_scale)
    colors = colors_for(entries, config.opacity)

    records = []
    for entry, size, color in zip(entries, sizes, colors):
        radius, angle = polar[entry.label]
        position = positions[entry.label]
        records.append(
            {
                "label": entry.label,
                "category": entry.category,
                "power": entry.power,
                "valence": entry.valence,
                "radius": radius,
                "angle": angle,
                "x": position.x,
                "y": position.y,
                "weighted_degree": degrees[entry.label],
                "metric_value": size_metric_value(entry, config.size_metric, degrees),
                "size": size,
                "color": color,
            }
        )
    return pd.DataFrame.from_records(records, columns=VIEW_COLUMNS)


def category_summary(frame: pd.DataFrame) -> pd.DataFrame:
    """Entry count and mean power/valence/degree per category, sorted by category."""
    if frame.empty:
        return pd.DataFrame(columns=["category", "entries", "mean_power", "mean_valence", "mean_degree"])
    grouped = frame.groupby("category", sort=True)
    return grouped.agg(
        entries=("label", "count"),
        mean_power=("power", "mean"),
        mean_valence=("valence", "mean"),
        mean_degree=("weighted_degree", "mean"),
    ).reset_index()
