"""Typed errors for the costgraph library.

Every failure is raised as a subclass of CostGraphError so callers can
branch on the kind of failure instead of matching message text:

- LoopInDagError: a directed insertion would close a cycle
- NodeNotFoundError: a queried node is not part of the graph
- NoPathError: two known nodes are not connected
- InvalidEdgeError: an edge carries a negative or non-integer cost
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass
class CostGraphError(Exception):
    """Base error for the costgraph library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LoopInDagError(CostGraphError):
    """Inserting an edge would create a cycle in a directed graph.

    The graph is left untouched when this is raised.

    Attributes:
        node: Source of the rejected edge
        neighbor: Destination of the rejected edge
    """

    node: Optional[Hashable] = None
    neighbor: Optional[Hashable] = None


@dataclass
class NodeNotFoundError(CostGraphError):
    """Node not found in the graph.

    Attributes:
        node: The node that was looked up
    """

    node: Optional[Hashable] = None


@dataclass
class NoPathError(CostGraphError):
    """No path exists between the requested nodes.

    Attributes:
        source: Start of the requested path
        target: End of the requested path
    """

    source: Optional[Hashable] = None
    target: Optional[Hashable] = None


@dataclass
class InvalidEdgeError(CostGraphError):
    """Edge rejected because of its cost.

    Attributes:
        cost: The offending cost value
    """

    cost: Any = None


# Sentinel name kept for callers that check the loop error by kind
ErrLoopInDag = LoopInDagError
