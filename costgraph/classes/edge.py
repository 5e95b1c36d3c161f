"""
Edge value type.
"""

from dataclasses import dataclass
from typing import Hashable

from ..errors import InvalidEdgeError


@dataclass(frozen=True)
class pyedge:
    """
    A weighted edge between two nodes.

    Attributes:
        node: Source node identifier
        neighbor: Destination node identifier
        cost: Non-negative integer cost of travelling the edge
    """

    node: Hashable
    neighbor: Hashable
    cost: int = 0

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful cost
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise InvalidEdgeError(
                f"Edge cost must be an integer, got {self.cost!r}",
                cost=self.cost,
            )
        if self.cost < 0:
            raise InvalidEdgeError(
                f"Edge cost must be non-negative, got {self.cost}",
                cost=self.cost,
            )

    def reversed(self) -> 'pyedge':
        """Return the same edge pointing the other way."""
        return pyedge(self.neighbor, self.node, self.cost)
