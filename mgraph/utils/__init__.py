"""Utility helpers.

Currently provides the `uid` module with the reusable integer ID allocator
used by the graph containers.
"""

from __future__ import annotations

from mgraph.utils.uid import MAX_ID, IDSet, IDSpaceExhausted

__all__ = ["MAX_ID", "IDSet", "IDSpaceExhausted"]
