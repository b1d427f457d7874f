"""mgraph: weighted undirected multigraph container.

mgraph stores any number of parallel lines between two nodes and presents them
as one logical edge whose weight is computed by a caller-supplied combination
function.

Primary API:
    WeightedUndirectedMultigraph - The multigraph container
    Node, Line - Value types stored in the container
    Edge, WeightedEdge - Aggregate views over parallel lines
    weight_sum, weight_min, weight_max, weight_mean - Stock weight functions
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from mgraph import Node, WeightedUndirectedMultigraph, weight_max

    g = WeightedUndirectedMultigraph(weight_func=weight_max)
    a, b = Node(0), Node(1)
    g.add_node(a)
    g.add_node(b)
    g.set_weighted_line(g.new_line(a, b, weight=2.0))
    g.set_weighted_line(g.new_line(a, b, weight=5.0))

    g.weight(a, b)  # (5.0, True)
"""

from __future__ import annotations

from mgraph import logging
from mgraph._version import __version__
from mgraph.config import GRAPH_CONFIG, MultigraphConfig
from mgraph.graph.convert import from_networkx, to_graph, to_networkx
from mgraph.graph.edge import Edge, WeightedEdge
from mgraph.graph.multigraph import WeightedUndirectedMultigraph
from mgraph.graph.types import Line, Node, WeightFunc
from mgraph.graph.weights import weight_max, weight_mean, weight_min, weight_sum
from mgraph.utils.uid import MAX_ID, IDSet, IDSpaceExhausted

__all__ = [
    # Version
    "__version__",
    # Container
    "WeightedUndirectedMultigraph",
    "Node",
    "Line",
    "Edge",
    "WeightedEdge",
    # Weight functions
    "WeightFunc",
    "weight_sum",
    "weight_min",
    "weight_max",
    "weight_mean",
    # Identifiers
    "IDSet",
    "IDSpaceExhausted",
    "MAX_ID",
    # Configuration
    "MultigraphConfig",
    "GRAPH_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    "to_graph",
    # Utilities
    "logging",
]
