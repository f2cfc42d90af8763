"""
Interactive HTML rendering of a self map with PyVis.

The engine works in map units with y pointing up; vis.js uses pixels with y pointing
down, so coordinates are scaled by PIXELS_PER_UNIT and y is flipped here.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Optional, Sequence

from pyvis.network import Network

from .config import ViewConfig
from .graph import dimmed_labels
from .layout import R_MAX, compute_positions
from .metrics import weighted_degree
from .models import SelfMapData
from .rings import generate_ring_guides
from .style import (
    DIMMED_ALPHA,
    HALO_ALPHA,
    colors_for,
    emphasized_size,
    halo_size,
    sizes_for,
    with_alpha,
)

logger = logging.getLogger(__name__)

PIXELS_PER_UNIT = 4.0

CATEGORY_SHAPES: Dict[str, str] = {
    "People": "dot",
    "Accomplishments": "square",
    "Life Story": "diamond",
    "Ideas/Likes": "hexagon",
    "Other": "triangle",
}
DEFAULT_SHAPE = CATEGORY_SHAPES["Other"]

EDGE_STYLES: Dict[str, Dict[str, object]] = {
    "affirms": {"color": "rgba(34,197,94,0.45)", "width": 2},
    "threatens": {"color": "rgba(239,68,68,0.5)", "width": 2},
    "associates_with": {"color": "rgba(148,163,184,0.4)", "width": 2},
}
DEFAULT_EDGE_STYLE = EDGE_STYLES["associates_with"]

GUIDE_COLOR = "rgba(148,163,184,0.3)"
AXIS_COLOR = "rgba(148,163,184,0.4)"
SELF_COLOR = "#8b5cf6"
BLANK_LABEL = " "


def _screen(x: float, y: float) -> Dict[str, float]:
    return {"x": x * PIXELS_PER_UNIT, "y": -y * PIXELS_PER_UNIT}


def _hover_title(entry) -> str:
    return (
        f"{entry.label}<br>Category: {entry.category}<br>"
        f"Power: {entry.power:.0%}<br>Valence: {entry.valence:+.2f}"
    )


def _add_polyline(net: Network, prefix: str, xs: Sequence[float], ys: Sequence[float], color: str) -> None:
    previous: Optional[str] = None
    for index, (x, y) in enumerate(zip(xs, ys)):
        node_id = f"{prefix}:{index}"
        net.add_node(
            node_id, label=BLANK_LABEL, shape="dot", size=0.5, color=color,
            fixed=True, physics=False, **_screen(x, y),
        )
        if previous is not None:
            net.add_edge(previous, node_id, color=color, width=1)
        previous = node_id


def build_network(
    data: SelfMapData,
    config: ViewConfig,
    selected: Optional[str] = None,
    highlighted: Iterable[str] = (),
    focus: Optional[str] = None,
) -> Network:
    """
    Assemble the PyVis network for a self map.

    Inputs:
        data: Validated self map.
        config: View settings.
        selected: Label drawn enlarged (x1.3) with a solid border.
        highlighted: Labels drawn slightly enlarged (x1.15).
        focus: Hovered label; entries outside its neighbourhood are dimmed.

    Outputs:
        Network with fixed positions and physics disabled.
    """

    entries = list(data.entries)
    highlighted = set(highlighted)
    title = f"Self Map - {len(entries)} entries, {len(data.associations)} associations"

    net = Network(
        height="800px", width="100%", directed=False, notebook=False,
        heading=title, cdn_resources="remote",
    )
    net.toggle_physics(False)

    for index, ring in enumerate(generate_ring_guides(R_MAX)):
        _add_polyline(net, f"ring:{index}", ring.x, ring.y, GUIDE_COLOR)
    _add_polyline(net, "axis:x", [-R_MAX, R_MAX], [0.0, 0.0], AXIS_COLOR)
    _add_polyline(net, "axis:y", [0.0, 0.0], [-R_MAX, R_MAX], AXIS_COLOR)

    positions = compute_positions(entries, config.radius_mode)
    degrees = weighted_degree(entries, data.associations)
    sizes = sizes_for(entries, config.size_metric, degrees, config.size_scale)
    colors = colors_for(entries, config.opacity)
    dimmed = dimmed_labels(focus, data) if focus else set()

    for entry, size, color in zip(entries, sizes, colors):
        position = positions[entry.label]
        shape = CATEGORY_SHAPES.get(entry.category, DEFAULT_SHAPE)
        is_selected = entry.label == selected
        is_highlighted = entry.label in highlighted
        is_dimmed = entry.label in dimmed
        display_color = with_alpha(color, DIMMED_ALPHA) if is_dimmed else color

        net.add_node(
            f"halo:{entry.label}", label=BLANK_LABEL, shape=shape, size=halo_size(size) / 2,
            color=with_alpha(display_color, HALO_ALPHA), borderWidth=0,
            fixed=True, physics=False, **_screen(position.x, position.y),
        )

        if is_selected:
            border, border_width = "rgba(255,255,255,1)", 2.5
        elif is_highlighted:
            border, border_width = "rgba(255,255,255,0.7)", 1.8
        elif is_dimmed:
            border, border_width = "rgba(255,255,255,0.15)", 1.3
        else:
            border, border_width = "rgba(0,0,0,0.45)", 1.3

        net.add_node(
            f"entry:{entry.label}",
            label=entry.label if config.show_labels else BLANK_LABEL,
            title=_hover_title(entry),
            shape=shape,
            size=emphasized_size(size, is_selected, is_highlighted) / 2,
            color={"background": display_color, "border": border},
            borderWidth=border_width,
            fixed=True,
            physics=False,
            **_screen(position.x, position.y),
        )

    net.add_node(
        "self", label="Self", title="Self", shape="star", size=10, color=SELF_COLOR,
        fixed=True, physics=False, **_screen(0.0, 0.0),
    )

    if config.show_edges:
        skipped = 0
        for assoc in data.associations:
            if assoc.src not in positions or assoc.dst not in positions:
                skipped += 1
                continue
            style = EDGE_STYLES.get(assoc.relation, DEFAULT_EDGE_STYLE)
            net.add_edge(
                f"entry:{assoc.src}",
                f"entry:{assoc.dst}",
                title=f"{assoc.relation} | {assoc.weight:.2f}",
                **style,
            )
        if skipped:
            logger.info("Skipped %d edge(s) with unknown endpoints", skipped)

    return net


def render_html(
    data: SelfMapData,
    config: ViewConfig,
    path: str,
    selected: Optional[str] = None,
    highlighted: Iterable[str] = (),
    focus: Optional[str] = None,
) -> str:
    """Write the network to `path` and return the absolute output path."""
    net = build_network(data, config, selected=selected, highlighted=highlighted, focus=focus)
    out_path = os.path.abspath(path)
    os.makedirs(os.path.dirname(out_path), exist_ok=True)
    net.write_html(out_path, notebook=False)
    return out_path
