"""
Association graph helpers used for hover neighbourhoods and dimming.
"""

from __future__ import annotations

from typing import Set

import networkx as nx

from .models import SelfMapData


def build_graph(data: SelfMapData) -> nx.MultiDiGraph:
    """
    Build a MultiDiGraph of entries keyed by label.

    Associations whose endpoints are not entries are left out, matching the lenient
    handling everywhere else.
    """

    graph = nx.MultiDiGraph()
    for entry in data.entries:
        graph.add_node(entry.label, category=entry.category, power=entry.power, valence=entry.valence)
    for assoc in data.associations:
        if assoc.src in graph and assoc.dst in graph:
            graph.add_edge(assoc.src, assoc.dst, relation=assoc.relation, weight=assoc.weight)
    return graph


def connected_labels(graph: nx.MultiDiGraph, label: str) -> Set[str]:
    """The label itself plus every label sharing an association with it, in either direction."""
    if label not in graph:
        return set()
    return {label} | set(nx.all_neighbors(graph, label))


def dimmed_labels(focus: str, data: SelfMapData) -> Set[str]:
    graph = build_graph(data)
    neighbourhood = connected_labels(graph, focus)
    if not neighbourhood:
        return set()
    return {label for label in graph.nodes if label not in neighbourhood}
