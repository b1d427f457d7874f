"""Graph primitives.

This package provides the weighted undirected multigraph container
`WeightedUndirectedMultigraph`, its value types (`Node`, `Line`), the aggregate
edge views (`Edge`, `WeightedEdge`), stock weight combination functions, and
NetworkX conversion helpers (`convert`).
"""

from __future__ import annotations

from mgraph.graph.edge import Edge, WeightedEdge
from mgraph.graph.multigraph import WeightedUndirectedMultigraph
from mgraph.graph.types import Line, Node, WeightFunc
from mgraph.graph.weights import weight_max, weight_mean, weight_min, weight_sum

__all__ = [
    "WeightedUndirectedMultigraph",
    "Node",
    "Line",
    "WeightFunc",
    "Edge",
    "WeightedEdge",
    "weight_sum",
    "weight_min",
    "weight_max",
    "weight_mean",
]
