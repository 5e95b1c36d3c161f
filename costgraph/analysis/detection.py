"""
Cycle detection for directed graphs.

This module provides the reachability check run before every directed insertion.
"""

import logging
from typing import Hashable, Set

from ..core.graph import AdjacencyGraph

logger = logging.getLogger(__name__)


class CycleDetector:
    """
    Detects cycles that an insertion would introduce.

    This class provides methods for:
    - Finding every node reachable from a starting node
    - Checking whether a new directed edge would close a cycle
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the cycle detector.

        Args:
            graph: AdjacencyGraph instance to analyze
        """
        self.graph = graph

    def find_reachable(self, start: Hashable) -> Set[Hashable]:
        """
        Get all nodes reachable from a starting node, the start included.

        Args:
            start: Node to search from

        Returns:
            Set of reachable nodes
        """
        reachable = {start}
        stack = [start]

        while stack:
            current = stack.pop()
            for neighbor, _ in self.graph.adjacency_list.get(current, ()):
                if neighbor not in reachable:
                    reachable.add(neighbor)
                    stack.append(neighbor)

        return reachable

    def creates_cycle(self, node: Hashable, neighbor: Hashable) -> bool:
        """
        Check whether adding ``node -> neighbor`` would create a cycle.

        The edge closes a cycle exactly when ``neighbor`` already reaches
        ``node``. A self-loop always does.

        Args:
            node: Source of the candidate edge
            neighbor: Destination of the candidate edge

        Returns:
            True if the edge must be rejected
        """
        if node == neighbor:
            return True

        if not self.graph.has_node(node) or not self.graph.has_node(neighbor):
            return False

        visited = {neighbor}
        stack = [neighbor]

        while stack:
            current = stack.pop()
            for next_node, _ in self.graph.adjacency_list[current]:
                if next_node == node:
                    logger.debug(f"Path {neighbor} -> {node} exists, edge {node} -> {neighbor} closes a cycle")
                    return True
                if next_node not in visited:
                    visited.add(next_node)
                    stack.append(next_node)

        return False
