"""
View configuration: defaults plus an optional YAML override file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .errors import SelfMapValidationError
from .validation import DANGLING_POLICIES, LENIENT


@dataclass
class ViewConfig:
    size_metric: str = "power_x_val"
    radius_mode: str = "valence"
    show_edges: bool = True
    show_labels: bool = True
    size_scale: float = 1.0
    opacity: float = 0.9
    dangling_policy: str = LENIENT

    input_path: Optional[str] = None
    output_html: str = "self_map.html"
    output_csv: Optional[str] = None


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise SelfMapValidationError(f"Config section '{name}' must be a mapping.")
    return section


def _number(section: Dict[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise SelfMapValidationError(f"Config value '{key}' must be a number, got {value!r}.") from exc


def load_config(config_path: Optional[str]) -> ViewConfig:
    """
    Load a ViewConfig from YAML.

    Expected sections (all optional):
        view:   size_metric, radius_mode, show_edges, show_labels, size_scale, opacity
        data:   input, dangling_policy
        output: html, csv
    A missing path or file yields the defaults.

    Raises:
        SelfMapValidationError: A section is not a mapping, a numeric value is not a number,
                                or the dangling policy is unknown.
    """

    if not config_path or not os.path.exists(config_path):
        return ViewConfig()
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise SelfMapValidationError("Config file must contain a mapping at the top level.")

    defaults = ViewConfig()
    view = _section(data, "view")
    source = _section(data, "data")
    output = _section(data, "output")

    dangling_policy = source.get("dangling_policy", defaults.dangling_policy)
    if dangling_policy not in DANGLING_POLICIES:
        raise SelfMapValidationError(
            f"Unknown dangling policy: {dangling_policy!r} (expected one of {', '.join(DANGLING_POLICIES)})."
        )

    return ViewConfig(
        size_metric=view.get("size_metric", defaults.size_metric),
        radius_mode=view.get("radius_mode", defaults.radius_mode),
        show_edges=bool(view.get("show_edges", defaults.show_edges)),
        show_labels=bool(view.get("show_labels", defaults.show_labels)),
        size_scale=_number(view, "size_scale", defaults.size_scale),
        opacity=_number(view, "opacity", defaults.opacity),
        dangling_policy=dangling_policy,
        input_path=source.get("input", defaults.input_path),
        output_html=output.get("html", defaults.output_html),
        output_csv=output.get("csv", defaults.output_csv),
    )
