"""Aggregate edge views over parallel lines.

An edge is never stored by a container. It is built on each query from the
set of parallel lines joining two nodes and presents them as one logical
edge. `WeightedEdge` adds an effective weight computed by a pluggable
combination function.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from mgraph.graph.types import Line, LineID, Node, WeightFunc
from mgraph.graph.weights import weight_sum


class Edge:
    """Read-only aggregate of the parallel lines between two nodes.

    Endpoints are taken from the first line, so ``source``/``target`` are
    only meaningful for a non-empty edge.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[Line]) -> None:
        self._lines: Tuple[Line, ...] = tuple(lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lines={list(self.line_ids())})"

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def source(self) -> Optional[Node]:
        if not self._lines:
            return None
        return self._lines[0].source

    @property
    def target(self) -> Optional[Node]:
        if not self._lines:
            return None
        return self._lines[0].target

    def line_ids(self) -> List[LineID]:
        """Return the IDs of all lines in this edge."""
        return [line.id for line in self._lines]

    def reversed(self) -> Edge:
        """Return a new edge whose lines all have their endpoints swapped."""
        return Edge(line.reversed() for line in self._lines)


class WeightedEdge(Edge):
    """Edge whose weight is computed on demand from its lines.

    Args:
        lines: Parallel lines making up the edge.
        weight_func: Combination function applied to ``lines``. When None,
            line weights are summed.
    """

    __slots__ = ("weight_func",)

    def __init__(
        self, lines: Iterable[Line], weight_func: Optional[WeightFunc] = None
    ) -> None:
        super().__init__(lines)
        self.weight_func = weight_func

    def weight(self) -> float:
        """Return the combined weight of the parallel lines.

        The value is recomputed on every call and never cached.
        """
        if self.weight_func is None:
            return weight_sum(self._lines)
        return self.weight_func(self._lines)

    def reversed(self) -> WeightedEdge:
        return WeightedEdge(
            (line.reversed() for line in self._lines), self.weight_func
        )
