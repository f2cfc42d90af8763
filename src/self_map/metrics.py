"""
Per-entry derived scalars: normalized weighted degree and the selectable size metric.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

from .models import Association, Entry

logger = logging.getLogger(__name__)

DEFAULT_SIZE_METRIC = "power"


def weighted_degree(
    entries: Iterable[Entry],
    associations: Iterable[Association],
) -> Dict[str, float]:
    """
    Sum incident association weights per entry, normalized to [0, 1].

    Inputs:
        entries: Entries whose labels receive a degree.
        associations: Edges; a missing or zero weight counts as 1.0. Endpoints that are
                      not among the entries are skipped. Totals driven negative by
                      negative weights are floored at 0.

    Outputs:
        Dict of label -> degree divided by max(maximum raw degree, 1.0).
    """

    degrees: Dict[str, float] = {entry.label: 0.0 for entry in entries}

    for assoc in associations:
        weight = assoc.weight or 1.0
        if assoc.src in degrees:
            degrees[assoc.src] += weight
        if assoc.dst in degrees:
            degrees[assoc.dst] += weight

    totals = {label: max(total, 0.0) for label, total in degrees.items()}
    max_degree = max([*totals.values(), 1.0])
    return {label: total / max_degree for label, total in totals.items()}


def size_metric_value(entry: Entry, metric: str, degrees: Mapping[str, float]) -> float:
    if metric == "power":
        return entry.power
    if metric == "valence_abs":
        return abs(entry.valence)
    if metric == "power_x_val":
        return entry.power * abs(entry.valence)
    if metric == "weighted_degree":
        return degrees.get(entry.label, 0.0)
    logger.debug("Unknown size metric %r; using %s", metric, DEFAULT_SIZE_METRIC)
    return size_metric_value(entry, DEFAULT_SIZE_METRIC, degrees)
