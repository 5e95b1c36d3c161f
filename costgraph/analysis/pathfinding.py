"""
Shortest-path computation using Dijkstra's algorithm.

This module finds one minimum-cost path between two nodes, or every path
sharing that minimum cost.
"""

import heapq
import logging
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ..config import get_config
from ..core.graph import AdjacencyGraph
from ..errors import NodeNotFoundError, NoPathError

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for weighted graphs.

    This class provides methods for:
    - Finding a single minimum-cost path
    - Enumerating all minimum-cost paths
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the path finder.

        Args:
            graph: AdjacencyGraph instance to analyze
        """
        self.graph = graph

    def _check_endpoints(self, source: Hashable, target: Hashable):
        for node in (source, target):
            if not self.graph.has_node(node):
                raise NodeNotFoundError(f"Node not found: {node}", node=node)

    def shortest_path_and_cost(self, source: Hashable, target: Hashable) -> Tuple[List[Hashable], int]:
        """
        Compute one minimum-cost path from ``source`` to ``target``.

        Args:
            source: Start node
            target: End node

        Returns:
            Tuple of (path, cost), the path including both endpoints

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            NoPathError: If ``target`` cannot be reached from ``source``
        """
        self._check_endpoints(source, target)

        distances: Dict[Hashable, int] = {source: 0}
        previous: Dict[Hashable, Hashable] = {}
        finalized: Set[Hashable] = set()
        heap: List[Tuple[int, Hashable]] = [(0, source)]

        while heap:
            current_distance, u = heapq.heappop(heap)

            if u in finalized:
                continue

            finalized.add(u)

            if u == target:
                break

            for v, cost in self.graph.adjacency_list[u]:
                new_distance = current_distance + cost
                if v not in distances or new_distance < distances[v]:
                    distances[v] = new_distance
                    previous[v] = u
                    heapq.heappush(heap, (new_distance, v))

        if target not in finalized:
            raise NoPathError(f"No path from {source} to {target}", source=source, target=target)

        path = [target]
        while path[-1] != source:
            path.append(previous[path[-1]])
        path.reverse()

        logger.debug(f"Shortest path {source} -> {target}: {path} with cost {distances[target]}")
        return path, distances[target]

    def find_all_shortest_paths_and_cost(self, source: Hashable, target: Hashable,
                                         limit: Optional[int] = None) -> Tuple[List[List[Hashable]], int]:
        """
        Enumerate every minimum-cost path from ``source`` to ``target``.

        Every node keeps the list of predecessors reaching it at its best known
        distance. Paths are then rebuilt by backtracking from ``target``
        through those lists with an explicit stack. The number of tied paths
        can grow exponentially with the graph, hence the optional cap.

        Args:
            source: Start node
            target: End node
            limit: Maximum number of paths to return; defaults to the
                ``max_shortest_paths`` setting, None meaning no cap

        Returns:
            Tuple of (paths, cost) where every path shares the same cost

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            NoPathError: If ``target`` cannot be reached from ``source``
        """
        self._check_endpoints(source, target)

        if limit is None:
            limit = get_config().max_shortest_paths

        distances: Dict[Hashable, int] = {source: 0}
        predecessors: Dict[Hashable, List[Hashable]] = {source: []}
        finalized: Set[Hashable] = set()
        heap: List[Tuple[int, Hashable]] = [(0, source)]

        while heap:
            current_distance, u = heapq.heappop(heap)

            if u in finalized:
                continue

            # zero-cost edges can still tie with the target after it is finalized
            if target in finalized and current_distance > distances[target]:
                break

            finalized.add(u)

            for v, cost in self.graph.adjacency_list[u]:
                new_distance = current_distance + cost
                if v not in distances or new_distance < distances[v]:
                    distances[v] = new_distance
                    predecessors[v] = [u]
                    heapq.heappush(heap, (new_distance, v))
                elif new_distance == distances[v] and u not in predecessors[v]:
                    predecessors[v].append(u)

        if target not in finalized:
            raise NoPathError(f"No path from {source} to {target}", source=source, target=target)

        paths: List[List[Hashable]] = []
        stack: List[List[Hashable]] = [[target]]

        while stack:
            partial = stack.pop()
            head = partial[-1]

            if head == source:
                paths.append(partial[::-1])
                if limit is not None and len(paths) >= limit:
                    logger.warning(f"Stopped enumerating shortest paths {source} -> {target} at {limit}")
                    break
                continue

            for u in reversed(predecessors[head]):
                # zero-cost ties may point back into the partial path
                if u not in partial:
                    stack.append(partial + [u])

        logger.info(f"Found {len(paths)} shortest paths {source} -> {target} with cost {distances[target]}")
        return paths, distances[target]
