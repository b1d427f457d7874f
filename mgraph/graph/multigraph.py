"""Weighted undirected multigraph.

`WeightedUndirectedMultigraph` stores any number of parallel lines between two
nodes and presents them as a single logical edge whose weight is computed by a
pluggable combination function.

The adjacency structure is implemented with nested dictionaries:
    {node_id: {neighbor_id: {line_id: Line}}}
Every line is written under both endpoint orderings, so undirected adjacency
queries are a pair of dictionary lookups. A self-loop occupies a single slot.

The container is single-threaded. Sharing an instance across threads requires
external locking by the caller.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Dict, Iterator, List, Optional, Tuple, Union

from mgraph.config import GRAPH_CONFIG, MultigraphConfig
from mgraph.graph.edge import WeightedEdge
from mgraph.graph.types import Line, LineID, Node, NodeID, WeightFunc
from mgraph.logging import get_logger
from mgraph.utils.uid import IDSet

LOGGER = get_logger(__name__)


class WeightedUndirectedMultigraph:
    """Undirected multigraph with weighted parallel lines.

    Attributes:
        weight_func: Combination function turning the parallel lines between
            two nodes into one weight. None sums the line weights.
        config: Container configuration.
        _nodes: Node table, node ID -> Node.
        _lines: Symmetric line store, node ID -> neighbor ID -> line ID -> Line.
        _line_keys: Line ID -> (source ID, target ID) the line is stored under.
        _node_ids: Allocator for node IDs.
        _line_ids: Allocator for line IDs.
    """

    def __init__(
        self,
        weight_func: Optional[WeightFunc] = None,
        config: Optional[MultigraphConfig] = None,
    ) -> None:
        self.weight_func = weight_func
        self.config = config if config is not None else GRAPH_CONFIG
        self._nodes: Dict[NodeID, Node] = {}
        self._lines: Dict[NodeID, Dict[NodeID, Dict[LineID, Line]]] = {}
        self._line_keys: Dict[LineID, Tuple[NodeID, NodeID]] = {}
        self._node_ids = IDSet(self.config.max_id)
        self._line_ids = IDSet(self.config.max_id)

    def __contains__(self, node: Union[Node, NodeID]) -> bool:
        """Enables expressions like ``node in graph`` for nodes and node IDs."""
        if isinstance(node, Node):
            node = node.id
        return node in self._nodes

    def __iter__(self) -> Iterator[NodeID]:
        """Iterate over node IDs."""
        return iter(self._nodes)

    def __len__(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def copy(self) -> WeightedUndirectedMultigraph:
        """Make a deep copy of the graph using pickle.

        The weight function must be picklable (a module-level function).
        """
        return loads(dumps(self))

    #
    # Node management
    #
    def new_node(self) -> Node:
        """Return a node with an ID not used in this graph.

        The node is not added; its ID only becomes valid once passed to
        `add_node`.

        Raises:
            IDSpaceExhausted: If no node ID is left.
        """
        if not self._nodes:
            return Node(0)
        return Node(self._node_ids.issue())

    def add_node(self, node: Node) -> None:
        """Add a node to the graph.

        Args:
            node: Node to add.

        Raises:
            ValueError: If a node with the same ID is already a member, or the
                ID is outside the configured range.
        """
        nid = node.id
        if nid in self._nodes:
            LOGGER.error("Node ID collision: %d", nid)
            raise ValueError(f"Node ID collision: {nid}")
        self._node_ids.claim(nid)
        self._nodes[nid] = node
        self._lines[nid] = {}
        LOGGER.debug("Added node %d", nid)

    def remove_node(self, node: Node) -> None:
        """Remove a node and every line attached to it.

        Line IDs of the removed lines are released. Does nothing if the node
        is not a member.
        """
        nid = node.id
        if nid not in self._nodes:
            return

        adjacency = self._lines.pop(nid)
        removed = 0
        for nbr_id, slot in adjacency.items():
            for lid in slot:
                del self._line_keys[lid]
                self._line_ids.release(lid)
            removed += len(slot)
            if nbr_id != nid:
                del self._lines[nbr_id][nid]

        del self._nodes[nid]
        self._node_ids.release(nid)
        LOGGER.debug("Removed node %d with %d incident lines", nid, removed)

    #
    # Line management
    #
    def new_line(self, source: Node, target: Node, weight: float = 1.0) -> Line:
        """Return a line between two nodes carrying an unused line ID.

        The line is not added; call `set_weighted_line` to store it. Two calls
        without an intervening set return the same ID.

        Raises:
            IDSpaceExhausted: If no line ID is left.
        """
        return Line(source, target, self._line_ids.issue(), weight)

    def set_weighted_line(self, line: Line) -> None:
        """Add or update a line. Missing endpoint nodes are added first.

        A line whose ID is already stored replaces the stored value. If the
        stored line joined a different pair of nodes, it is moved.

        Nothing is changed when the call raises.

        Raises:
            ValueError: If the line ID or an endpoint ID is outside the
                configured range.
        """
        fid, tid, lid = line.source.id, line.target.id, line.id
        self._line_ids.check_range(lid)
        self._node_ids.check_range(fid)
        self._node_ids.check_range(tid)

        stored = self._line_keys.get(lid)
        if stored is not None and stored not in ((fid, tid), (tid, fid)):
            self._unlink_line(lid, *stored)

        if fid not in self._nodes:
            self.add_node(line.source)
        if tid not in self._nodes:
            self.add_node(line.target)
        self._line_ids.claim(lid)

        self._lines[fid].setdefault(tid, {})[lid] = line
        self._lines[tid].setdefault(fid, {})[lid] = line
        self._line_keys[lid] = (fid, tid)
        LOGGER.debug("Set line %d between %d and %d", lid, fid, tid)

    def remove_line(self, line: Line) -> None:
        """Remove a line, leaving its endpoint nodes in the graph.

        Does nothing if either endpoint is not a member or the line is not
        stored.
        """
        if line.source.id not in self._nodes or line.target.id not in self._nodes:
            return
        stored = self._line_keys.get(line.id)
        if stored is None:
            return
        self._unlink_line(line.id, *stored)
        self._line_ids.release(line.id)
        LOGGER.debug("Removed line %d between %d and %d", line.id, *stored)

    def _unlink_line(self, lid: LineID, fid: NodeID, tid: NodeID) -> None:
        # Drop both mirrored entries and prune slots left empty
        for u, v in ((fid, tid), (tid, fid)):
            slot = self._lines[u].get(v)
            if slot is None:
                continue
            slot.pop(lid, None)
            if not slot:
                del self._lines[u][v]
        del self._line_keys[lid]

    #
    # Queries
    #
    def node(self, node_id: NodeID) -> Optional[Node]:
        """Return the member node with the given ID, or None."""
        return self._nodes.get(node_id)

    def has(self, node: Node) -> bool:
        """Return True if the node is a member of the graph."""
        return node.id in self._nodes

    def nodes(self) -> List[Node]:
        """Return all member nodes in no particular order."""
        return list(self._nodes.values())

    def neighbors(self, node: Node) -> List[Node]:
        """Return all nodes joined to ``node`` by at least one line."""
        if node.id not in self._nodes:
            return []
        return [self._nodes[nbr_id] for nbr_id in self._lines[node.id]]

    def has_edge_between(self, x: Node, y: Node) -> bool:
        """Return True if at least one line joins x and y."""
        return bool(self._lines.get(x.id, {}).get(y.id))

    def lines_between(self, x: Node, y: Node) -> List[Line]:
        """Return every line joining x and y, each exactly once."""
        slot = self._lines.get(x.id, {}).get(y.id)
        if not slot:
            return []
        return list(slot.values())

    def edge_between(self, x: Node, y: Node) -> Optional[WeightedEdge]:
        """Return the aggregate edge between x and y, or None if no line joins them."""
        lines = self.lines_between(x, y)
        if not lines:
            return None
        return WeightedEdge(lines, self.weight_func)

    def weight(self, x: Node, y: Node) -> Tuple[float, bool]:
        """Return the combined weight of the lines between x and y.

        Returns:
            Tuple[float, bool]: ``(weight, True)`` if a line joins x and y,
            otherwise ``(config.absent_weight, False)``. The weight function is
            not called when there are no lines.
        """
        edge = self.edge_between(x, y)
        if edge is None:
            return self.config.absent_weight, False
        return edge.weight(), True

    def degree(self, node: Node) -> int:
        """Return the number of lines incident to ``node``.

        Parallel lines count individually; a self-loop counts once. Zero for
        a node that is not a member.
        """
        adjacency = self._lines.get(node.id)
        if adjacency is None:
            return 0
        return sum(len(slot) for slot in adjacency.values())

    def edges(self) -> List[WeightedEdge]:
        """Return one aggregate edge per joined node pair.

        Each line belongs to exactly one returned edge, even though it is
        stored under both of its endpoints.
        """
        edges: List[WeightedEdge] = []
        seen = set()
        for adjacency in self._lines.values():
            for slot in adjacency.values():
                lines = [line for lid, line in slot.items() if lid not in seen]
                if not lines:
                    continue
                seen.update(line.id for line in lines)
                edges.append(WeightedEdge(lines, self.weight_func))
        return edges

    def line(self, line_id: LineID) -> Optional[Line]:
        """Return the stored line with the given ID, or None."""
        stored = self._line_keys.get(line_id)
        if stored is None:
            return None
        return self._lines[stored[0]][stored[1]][line_id]

    def number_of_lines(self) -> int:
        """Return the number of lines stored in the graph."""
        return len(self._line_keys)

    #
    # Aliases. Undirected, so "from u to v" and "between x and y" coincide.
    #
    def lines(self, u: Node, v: Node) -> List[Line]:
        """Same as `lines_between`."""
        return self.lines_between(u, v)

    def weighted_lines(self, u: Node, v: Node) -> List[Line]:
        """Same as `lines_between`."""
        return self.lines_between(u, v)

    def weighted_lines_between(self, x: Node, y: Node) -> List[Line]:
        """Same as `lines_between`."""
        return self.lines_between(x, y)

    def edge(self, u: Node, v: Node) -> Optional[WeightedEdge]:
        """Same as `edge_between`."""
        return self.edge_between(u, v)

    def weighted_edge(self, u: Node, v: Node) -> Optional[WeightedEdge]:
        """Same as `edge_between`."""
        return self.edge_between(u, v)

    def weighted_edge_between(self, x: Node, y: Node) -> Optional[WeightedEdge]:
        """Same as `edge_between`."""
        return self.edge_between(x, y)
