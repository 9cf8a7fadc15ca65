"""Configuration classes for routegraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GraphConfig:
    """Configuration for graph mutation checks and path enumeration."""

    # Log a warning when an edge with a negative weight is inserted
    warn_on_negative_weight: bool = True

    # Largest hop/cost limit accepted by path counting (None disables the check)
    max_enumeration_budget: Optional[int] = None

    def check_enumeration_budget(self, limit: int) -> None:
        """Reject enumeration limits above ``max_enumeration_budget``.

        Args:
            limit: Hop or cost limit requested by the caller.

        Raises:
            ValueError: If a cap is configured and ``limit`` exceeds it.
        """
        if self.max_enumeration_budget is None:
            return
        if limit > self.max_enumeration_budget:
            raise ValueError(
                f"Enumeration limit {limit} exceeds configured maximum "
                f"{self.max_enumeration_budget}."
            )


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
