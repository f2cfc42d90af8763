"""
Concentric ring guides drawn behind the map at fixed valence thresholds.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .layout import R_MAX, valence_radius
from .models import RingGuide

RING_VALENCES = (0.8, 0.4, 0.0, -0.4, -0.8)
RING_STEP_DEGREES = 5
RING_POINTS = 360 // RING_STEP_DEGREES + 1


def generate_ring_guides(r_max: float = R_MAX) -> List[RingGuide]:
    """
    Build one closed polyline per valence threshold.

    Each ring has RING_POINTS samples from 0 to 360 degrees inclusive, so the last
    point repeats the first up to floating point rounding.
    """

    angles = np.deg2rad(np.arange(RING_POINTS, dtype=float) * RING_STEP_DEGREES)
    cos, sin = np.cos(angles), np.sin(angles)

    guides: List[RingGuide] = []
    for valence in RING_VALENCES:
        radius = valence_radius(valence, r_max)
        guides.append(
            RingGuide(
                valence=valence,
                radius=radius,
                x=(radius * cos).tolist(),
                y=(radius * sin).tolist(),
            )
        )
    return guides


ring_guides = generate_ring_guides
