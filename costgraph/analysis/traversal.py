"""
Breadth-first and depth-first traversal.

This module walks the adjacency store without mutating it.
"""

import logging
from typing import Callable, Hashable, List, Optional, Set
from collections import deque

from ..classes.nodedepth import pynodedepth
from ..core.graph import AdjacencyGraph
from ..errors import NodeNotFoundError

logger = logging.getLogger(__name__)

# BFS callback: (node, neighbor, cost) -> skip neighbor
EdgeFunc = Callable[[Hashable, Hashable, int], bool]


class GraphTraversal:
    """
    Traversal algorithms over an adjacency graph.

    This class provides methods for:
    - Breadth-first search from a start node with per-edge pruning
    - Whole-graph depth-first search with depth labels
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the traversal engine.

        Args:
            graph: AdjacencyGraph instance to walk
        """
        self.graph = graph

    def bfs(self, start: Hashable, fn: Optional[EdgeFunc] = None) -> List[Hashable]:
        """
        Breadth-first search from ``start``.

        ``fn(node, neighbor, cost)`` is called for every edge examined while
        expanding the frontier. A truthy return keeps that neighbor out of the
        queue; the rest of the search continues.

        Args:
            start: Node to start from
            fn: Optional pruning callback

        Returns:
            Nodes in the order they were dequeued

        Raises:
            NodeNotFoundError: If ``start`` is not in the graph
        """
        if not self.graph.has_node(start):
            raise NodeNotFoundError(f"Node not found: {start}", node=start)

        visited: Set[Hashable] = {start}
        queue = deque([start])
        aNode_visited: List[Hashable] = []

        while queue:
            current = queue.popleft()
            aNode_visited.append(current)

            for neighbor, cost in self.graph.adjacency_list[current]:
                if fn is not None and fn(current, neighbor, cost):
                    continue
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        logger.debug(f"BFS from {start} visited {len(aNode_visited)} nodes")
        return aNode_visited

    def _get_roots(self) -> List[Hashable]:
        if self.graph.iFlag_directed:
            return self.graph.get_sources()
        return self.graph.nodes()

    def dfs(self) -> List[pynodedepth]:
        """
        Depth-first search over the whole graph.

        One descent is started per root: nodes without incoming edges for a
        directed graph, every node for an undirected one, in discovery order.
        Nodes already reached by an earlier descent are skipped. Depth restarts
        at 0 for each descent root.

        Returns:
            List of (node, depth) pairs in visiting order
        """
        visited: Set[Hashable] = set()
        aNode_depth: List[pynodedepth] = []

        for root in self._get_roots():
            if root in visited:
                continue

            stack = [(root, 0)]
            while stack:
                current, depth = stack.pop()
                if current in visited:
                    continue

                visited.add(current)
                aNode_depth.append(pynodedepth(current, depth))

                # reversed so the first inserted neighbor is descended first
                for neighbor, _ in reversed(self.graph.adjacency_list[current]):
                    if neighbor not in visited:
                        stack.append((neighbor, depth + 1))

        logger.info(f"DFS visited {len(aNode_depth)} of {self.graph.order()} nodes")
        return aNode_depth
