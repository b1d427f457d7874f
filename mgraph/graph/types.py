"""Node and line value types for the multigraph containers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Sequence

NodeID = int
LineID = int
AttrDict = Dict[str, Any]


@dataclass(frozen=True)
class Node:
    """A graph node.

    Identity is the integer ID alone: two nodes compare and hash equal iff
    their IDs match, whatever their attributes.

    Attributes:
        id (int): Non-negative node identifier.
        attrs (Dict[str, Any]): Arbitrary metadata, ignored for identity.
    """

    id: NodeID
    attrs: AttrDict = field(default_factory=dict, compare=False, hash=False)


@dataclass
class Line:
    """One parallel edge between two nodes.

    The line's storage position inside a container is derived from
    ``source``/``target`` when the line is set; changing them afterwards has
    no effect until the line is set again.

    Attributes:
        source (Node): One endpoint.
        target (Node): The other endpoint.
        id (int): Line identifier, unique within a graph.
        weight (float): Scalar weight of this line.
        attrs (Dict[str, Any]): Additional metadata.
    """

    source: Node
    target: Node
    id: LineID
    weight: float = 1.0
    attrs: AttrDict = field(default_factory=dict)

    def reversed(self) -> Line:
        """Return a copy of this line with its endpoints swapped."""
        return replace(self, source=self.target, target=self.source)


#: Reduces the parallel lines between two nodes to one scalar weight.
#: Must be pure and defined for an empty sequence.
WeightFunc = Callable[[Sequence[Line]], float]
