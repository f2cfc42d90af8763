"""
Dataclasses shared across the self_map package.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

SIZE_METRICS: Tuple[str, ...] = ("power_x_val", "power", "valence_abs", "weighted_degree")
RADIUS_MODES: Tuple[str, ...] = ("valence", "power")


@dataclass(frozen=True)
class Entry:
    """
    A single identity concept placed on the map.
    """

    label: str
    category: str
    power: float
    valence: float


@dataclass(frozen=True)
class Association:
    """
    Directed, typed, weighted link between two entries, keyed by label.
    """

    src: str
    dst: str
    relation: str = "associates_with"
    weight: float = 1.0


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class RingGuide:
    """
    Closed reference circle drawn behind the entries.
    """

    valence: float
    radius: float
    x: List[float] = field(default_factory=list)
    y: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class SelfMapData:
    """
    The whole entry/association set. Replaced wholesale, never mutated.
    """

    entries: Tuple[Entry, ...] = ()
    associations: Tuple[Association, ...] = ()

    def labels(self) -> List[str]:
        return [entry.label for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [asdict(entry) for entry in self.entries],
            "associations": [asdict(assoc) for assoc in self.associations],
        }
