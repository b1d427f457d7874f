"""Stock weight combination functions.

Each function reduces a collection of parallel lines to a single scalar and
returns ``0.0`` for an empty collection.
"""

from __future__ import annotations

from typing import Sequence

from mgraph.graph.types import Line


def weight_sum(lines: Sequence[Line]) -> float:
    """Total weight of all parallel lines."""
    return float(sum(line.weight for line in lines))


def weight_min(lines: Sequence[Line]) -> float:
    """Lightest parallel line."""
    return float(min((line.weight for line in lines), default=0.0))


def weight_max(lines: Sequence[Line]) -> float:
    """Heaviest parallel line."""
    return float(max((line.weight for line in lines), default=0.0))


def weight_mean(lines: Sequence[Line]) -> float:
    if not lines:
        return 0.0
    return weight_sum(lines) / len(lines)
