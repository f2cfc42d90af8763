"""
Polar sector layout: every entry sits in its category's angular sector around the
Self origin, at a radius driven by valence or power.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List, Tuple

from .models import Entry, Position

logger = logging.getLogger(__name__)

R_MAX = 120.0

CATEGORY_SECTORS: Dict[str, Tuple[float, float]] = {
    "People": (0.0, 90.0),
    "Accomplishments": (90.0, 180.0),
    "Life Story": (180.0, 270.0),
    "Ideas/Likes": (270.0, 360.0),
    "Other": (270.0, 360.0),
}
DEFAULT_SECTOR: Tuple[float, float] = CATEGORY_SECTORS["Ideas/Likes"]


def sector_for(category: str) -> Tuple[float, float]:
    return CATEGORY_SECTORS.get(category, DEFAULT_SECTOR)


def valence_radius(valence: float, r_max: float = R_MAX) -> float:
    """Valence +1 sits on the origin, valence -1 on the outer ring."""
    return ((1.0 - valence) / 2.0) * r_max


def power_radius(power: float, r_max: float = R_MAX) -> float:
    return (1.0 - power) * r_max


def group_by_category(entries: Iterable[Entry]) -> Dict[str, List[Entry]]:
    groups: Dict[str, List[Entry]] = {}
    for entry in entries:
        groups.setdefault(entry.category, []).append(entry)
    return groups


def sector_angles(entries: List[Entry], start: float, end: float) -> List[Tuple[Entry, float]]:
    """
    Spread entries evenly over [start, end) degrees, sorted by label.

    The i-th of N entries sits at start + (end - start) * (i + 0.5) / N, so no entry
    ever lands on a sector boundary.
    """

    ordered = sorted(entries, key=lambda entry: entry.label)
    count = len(ordered)
    return [
        (entry, start + (end - start) * (index + 0.5) / count)
        for index, entry in enumerate(ordered)
    ]


def _polar(entries: Iterable[Entry], radius_fn: Callable[[Entry], float]) -> Dict[str, Tuple[float, float]]:
    polar: Dict[str, Tuple[float, float]] = {}
    for category, items in group_by_category(entries).items():
        if category not in CATEGORY_SECTORS:
            logger.debug("Unknown category %r placed in the default sector", category)
        start, end = sector_for(category)
        for entry, theta_deg in sector_angles(items, start, end):
            polar[entry.label] = (radius_fn(entry), theta_deg)
    return polar


def _radius_fn(mode: str) -> Callable[[Entry], float]:
    if mode == "power":
        return lambda entry: power_radius(entry.power)
    if mode != "valence":
        logger.warning("Unknown radius mode %r; using valence", mode)
    return lambda entry: valence_radius(entry.valence)


def _to_cartesian(polar: Dict[str, Tuple[float, float]]) -> Dict[str, Position]:
    positions: Dict[str, Position] = {}
    for label, (r, theta_deg) in polar.items():
        theta = math.radians(theta_deg)
        positions[label] = Position(x=r * math.cos(theta), y=r * math.sin(theta))
    return positions


def compute_polar(entries: Iterable[Entry], mode: str = "valence") -> Dict[str, Tuple[float, float]]:
    """Label -> (radius, angle in degrees) before the cartesian conversion."""
    return _polar(entries, _radius_fn(mode))


def compute_position_by_valence(entries: Iterable[Entry]) -> Dict[str, Position]:
    return _to_cartesian(compute_polar(entries, "valence"))


def compute_position_by_power(entries: Iterable[Entry]) -> Dict[str, Position]:
    return _to_cartesian(compute_polar(entries, "power"))


def compute_positions(entries: Iterable[Entry], mode: str = "valence") -> Dict[str, Position]:
    """
    Position every entry on the polar plane.

    Inputs:
        entries: Entries with unique labels.
        mode: "valence" or "power". Anything else falls back to "valence".

    Outputs:
        Dict mapping label to Position. Identical input always yields identical output.
    """

    return _to_cartesian(compute_polar(entries, mode))
