"""Conversion utilities between WeightedUndirectedMultigraph and NetworkX graphs.

`to_networkx` keeps every parallel line as its own keyed edge of an
``nx.MultiGraph``; `to_graph` consolidates parallel lines into a single
``nx.Graph`` edge weighted by the container's weight function.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import networkx as nx

from mgraph.graph.multigraph import WeightedUndirectedMultigraph
from mgraph.graph.types import Line, Node, WeightFunc
from mgraph.logging import get_logger

LOGGER = get_logger(__name__)

NxGraph = Union[nx.Graph, nx.MultiGraph, nx.DiGraph, nx.MultiDiGraph]


def to_networkx(
    graph: WeightedUndirectedMultigraph, weight_attr: str = "weight"
) -> nx.MultiGraph:
    """Convert a multigraph to a NetworkX MultiGraph.

    Each line becomes one edge keyed by its line ID. Line attributes are copied
    and the line weight is stored under ``weight_attr``.

    Args:
        graph: The multigraph to convert.
        weight_attr: Edge attribute name for the line weight.

    Returns:
        A NetworkX MultiGraph with integer node labels.
    """
    nx_graph = nx.MultiGraph()
    for node in graph.nodes():
        nx_graph.add_node(node.id, **node.attrs)

    for edge in graph.edges():
        for line in edge:
            edge_data = {**line.attrs, weight_attr: line.weight}
            nx_graph.add_edge(line.source.id, line.target.id, key=line.id, **edge_data)
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    weight_func: Optional[WeightFunc] = None,
) -> WeightedUndirectedMultigraph:
    """Convert a NetworkX graph to a multigraph.

    Node labels must be non-negative integers; they become node IDs. Every
    NetworkX edge becomes one line, so the two directions of a directed graph
    end up as parallel lines. Integer multi-edge keys are kept as line IDs
    when still free, other edges get fresh IDs.

    Args:
        nx_graph: Any NetworkX graph (Graph, MultiGraph, DiGraph, MultiDiGraph).
        weight_attr: Edge attribute holding the line weight.
        default_weight: Weight used when ``weight_attr`` is missing.
        weight_func: Weight combination function for the new multigraph.

    Returns:
        WeightedUndirectedMultigraph: The converted graph.

    Raises:
        ValueError: If a node label is not a non-negative integer.
    """
    graph = WeightedUndirectedMultigraph(weight_func=weight_func)

    for label, attrs in nx_graph.nodes(data=True):
        if not _is_node_label(label):
            raise ValueError(
                f"Node label {label!r} is not a non-negative integer; relabel "
                f"the graph (e.g. nx.convert_node_labels_to_integers) first."
            )
        graph.add_node(Node(label, dict(attrs)))

    if nx_graph.is_multigraph():
        edge_iter = nx_graph.edges(keys=True, data=True)
    else:
        edge_iter = ((u, v, None, data) for u, v, data in nx_graph.edges(data=True))

    for u, v, key, data in edge_iter:
        source, target = graph.node(u), graph.node(v)
        assert source is not None and target is not None
        attrs = {k: val for k, val in data.items() if k != weight_attr}
        weight = float(data.get(weight_attr, default_weight))
        if _is_free_line_id(graph, key):
            line = Line(source, target, key, weight, attrs)
        else:
            line = graph.new_line(source, target, weight)
            line.attrs = attrs
        graph.set_weighted_line(line)

    LOGGER.debug(
        "Converted NetworkX graph: %d nodes, %d lines",
        len(graph),
        graph.number_of_lines(),
    )
    return graph


def to_graph(
    graph: WeightedUndirectedMultigraph, weight_attr: str = "weight"
) -> nx.Graph:
    """Convert a multigraph to a NetworkX Graph, one edge per joined node pair.

    The consolidated edge's ``weight_attr`` is the combined weight of its
    parallel lines; the IDs of those lines are kept under ``_lines``.

    Args:
        graph: The multigraph to convert.
        weight_attr: Edge attribute name for the combined weight.

    Returns:
        A NetworkX Graph with integer node labels.
    """
    nx_graph = nx.Graph()
    for node in graph.nodes():
        nx_graph.add_node(node.id, **node.attrs)

    for edge in graph.edges():
        source, target = edge.source, edge.target
        assert source is not None and target is not None
        nx_graph.add_edge(
            source.id,
            target.id,
            **{weight_attr: edge.weight(), "_lines": edge.line_ids()},
        )
    return nx_graph


def _is_node_label(label: Any) -> bool:
    return isinstance(label, int) and not isinstance(label, bool) and label >= 0


def _is_free_line_id(graph: WeightedUndirectedMultigraph, key: Any) -> bool:
    if not isinstance(key, int) or isinstance(key, bool):
        return False
    if key < 0 or key > graph.config.max_id:
        return False
    return graph.line(key) is None
