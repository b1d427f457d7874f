"""Configuration classes for mgraph containers."""

from dataclasses import dataclass

from mgraph.utils.uid import MAX_ID


@dataclass
class MultigraphConfig:
    """Configuration for weighted multigraph containers."""

    # Weight reported by ``weight(x, y)`` when no line joins x and y
    absent_weight: float = 0.0

    # Largest node or line ID the container's allocators may hand out
    max_id: int = MAX_ID

    def __post_init__(self) -> None:
        if self.max_id < 0 or self.max_id > MAX_ID:
            raise ValueError(f"max_id must be within [0, {MAX_ID}], got {self.max_id}")


# Global configuration instance
GRAPH_CONFIG = MultigraphConfig()
