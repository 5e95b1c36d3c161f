"""
Topological ordering for directed acyclic graphs.

This module assigns every node a topological depth and orders nodes so that
no node comes before any of its predecessors.
"""

import heapq
import logging
from typing import Dict, Hashable, List, Tuple

from ..classes.nodedepth import pynodedepth
from ..core.graph import AdjacencyGraph
from ..errors import LoopInDagError

logger = logging.getLogger(__name__)


class TopologyManager:
    """
    Manages graph topology.

    This class provides methods for:
    - Computing topological depths
    - Ordering nodes by dependency
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the topology manager.

        Args:
            graph: AdjacencyGraph instance to order
        """
        self.graph = graph

    def topological_sort(self) -> List[pynodedepth]:
        """
        Order the graph topologically with depth labels.

        A node's depth is one more than the largest depth among its direct
        predecessors, 0 for nodes without incoming edges. A node becomes ready
        once all its predecessors have been emitted. Ready nodes are emitted by
        increasing depth, then fewer outgoing edges, then discovery order.

        Returns:
            List of (node, depth) pairs in emission order

        Raises:
            LoopInDagError: If the graph contains a cycle
        """
        discovery = {node: i for i, node in enumerate(self.graph.nodes())}
        remaining: Dict[Hashable, int] = {node: self.graph.in_degree[node] for node in discovery}
        depth: Dict[Hashable, int] = {node: 0 for node in discovery}

        ready: List[Tuple[int, int, int, Hashable]] = []
        for node in self.graph.get_sources():
            heapq.heappush(ready, (0, self.graph.out_degree[node], discovery[node], node))

        aNode_depth: List[pynodedepth] = []

        while ready:
            node_depth, _, _, node = heapq.heappop(ready)
            aNode_depth.append(pynodedepth(node, node_depth))

            for neighbor, _ in self.graph.adjacency_list[node]:
                depth[neighbor] = max(depth[neighbor], node_depth + 1)
                remaining[neighbor] -= 1
                if remaining[neighbor] == 0:
                    heapq.heappush(ready, (depth[neighbor], self.graph.out_degree[neighbor],
                                           discovery[neighbor], neighbor))

        if len(aNode_depth) != self.graph.order():
            nUnresolved = self.graph.order() - len(aNode_depth)
            raise LoopInDagError(f"Graph contains a cycle, {nUnresolved} nodes cannot be ordered")

        logger.info(f"Topologically sorted {len(aNode_depth)} nodes")
        return aNode_depth
