"""Reusable integer identifier allocation.

`IDSet` tracks which non-negative integer IDs in ``[0, max_id]`` are in use and
hands out the smallest free one on request. Released IDs are reused, which keeps
the ID space dense under long-running add/remove churn.

Issuing and claiming are separate steps: ``issue()`` only proposes an ID, the
owner makes it live with ``claim()`` once the entity is actually stored.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Set

from mgraph.logging import get_logger

LOGGER = get_logger(__name__)

#: Largest identifier representable in a signed 64-bit integer.
MAX_ID = 2**63 - 1


class IDSpaceExhausted(RuntimeError):
    """Raised when no free identifier is left in the allocator's range."""


class IDSet:
    """Dense, reusable set of non-negative integer identifiers.

    Attributes:
        _used: IDs currently claimed.
        _released: Min-heap of released IDs below ``_floor``. Entries that were
            claimed again after release are dropped lazily.
        _in_released: IDs currently sitting in ``_released``, each held once.
        _floor: Low-water mark. Every ID below it is either used or sitting in
            ``_released``; it only ever moves forward.
    """

    def __init__(self, max_id: int = MAX_ID) -> None:
        if max_id < 0:
            raise ValueError(f"max_id must be non-negative, got {max_id}")
        self._max_id = max_id
        self._used: Set[int] = set()
        self._released: List[int] = []
        self._in_released: Set[int] = set()
        self._floor: int = 0

    def __contains__(self, id_: int) -> bool:
        return id_ in self._used

    def __len__(self) -> int:
        return len(self._used)

    def __repr__(self) -> str:
        return f"IDSet(used={len(self._used)}, max_id={self._max_id})"

    @property
    def max_id(self) -> int:
        """Largest identifier this set may hand out."""
        return self._max_id

    def is_used(self, id_: int) -> bool:
        """Return True if ``id_`` is currently claimed."""
        return id_ in self._used

    def issue(self) -> int:
        """Return the smallest unused ID without claiming it.

        Returns:
            int: A free identifier. Zero for a fresh set.

        Raises:
            IDSpaceExhausted: If every ID in ``[0, max_id]`` is in use.
        """
        self._advance_floor()
        released = self._released
        while released and released[0] in self._used:
            self._in_released.discard(heappop(released))
        if released:
            return released[0]
        if self._floor > self._max_id:
            LOGGER.error("ID space exhausted: all %d IDs in use", self._max_id + 1)
            raise IDSpaceExhausted(
                f"cannot allocate ID: no free slot in [0, {self._max_id}]"
            )
        return self._floor

    def claim(self, id_: int) -> None:
        """Mark ``id_`` as in use.

        Args:
            id_: Identifier to claim.

        Raises:
            ValueError: If ``id_`` lies outside ``[0, max_id]``.
        """
        self.check_range(id_)
        self._used.add(id_)

    def check_range(self, id_: int) -> None:
        """Raise ValueError if ``id_`` lies outside ``[0, max_id]``."""
        if id_ < 0 or id_ > self._max_id:
            raise ValueError(f"ID {id_} outside of [0, {self._max_id}]")

    def release(self, id_: int) -> None:
        """Mark ``id_`` as free for reuse. Releasing a free ID does nothing."""
        if id_ not in self._used:
            return
        self._used.remove(id_)
        if id_ < self._floor and id_ not in self._in_released:
            heappush(self._released, id_)
            self._in_released.add(id_)

    def _advance_floor(self) -> None:
        while self._floor in self._used:
            self._floor += 1
