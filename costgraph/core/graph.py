"""
Core graph data structure for weighted graphs.

This module provides the fundamental adjacency store without high-level operations.
"""

import logging
from typing import List, Dict, Tuple, Callable, Hashable, DefaultDict
from collections import defaultdict

import numpy as np

from ..classes.edge import pyedge

logger = logging.getLogger(__name__)

# Visit callback: (neighbor, cost) -> skip
VisitFunc = Callable[[Hashable, int], bool]


class AdjacencyGraph:
    """
    Core graph data structure for weighted graphs.

    This class manages the adjacency representation shared by the directed and
    undirected variants. It provides:
    - Implicit node registration in discovery order
    - Adjacency list maintenance with per-node insertion order
    - Degree tracking (in/out)
    - Basic graph queries (sources, sinks, node lookup)

    Cycle checks are not performed here; the directed variant validates an
    edge with the cycle detector before calling ``add_with_cost``.
    """

    def __init__(self, iFlag_directed: bool = True):
        """
        Initialize an empty graph.

        Args:
            iFlag_directed: True for a directed graph, False for an undirected one
        """
        self.iFlag_directed = iFlag_directed

        # Graph structure, keyed in discovery order
        self.adjacency_list: Dict[Hashable, List[Tuple[Hashable, int]]] = {}
        self.in_degree: DefaultDict[Hashable, int] = defaultdict(int)
        self.out_degree: DefaultDict[Hashable, int] = defaultdict(int)

        logger.debug(f"Initializing {'directed' if iFlag_directed else 'undirected'} AdjacencyGraph")

    def _register_node(self, node: Hashable):
        if node not in self.adjacency_list:
            self.adjacency_list[node] = []

    def add_with_cost(self, edge: pyedge):
        """
        Append one directed adjacency entry.

        Args:
            edge: Edge to insert from ``edge.node`` to ``edge.neighbor``
        """
        self._register_node(edge.node)
        self._register_node(edge.neighbor)

        self.adjacency_list[edge.node].append((edge.neighbor, edge.cost))
        self.out_degree[edge.node] += 1
        self.in_degree[edge.neighbor] += 1

        logger.debug(f"Added edge {edge.node} -> {edge.neighbor} with cost {edge.cost}")

    def add_with_cost_both(self, edge: pyedge):
        """
        Append the edge in both directions with the same cost.

        Args:
            edge: Edge to insert as ``node -> neighbor`` and ``neighbor -> node``
        """
        self.add_with_cost(edge)
        self.add_with_cost(edge.reversed())

    def order(self) -> int:
        """Get the number of distinct nodes."""
        return len(self.adjacency_list)

    def size(self) -> int:
        """Get the number of directed adjacency entries."""
        return sum(len(neighbors) for neighbors in self.adjacency_list.values())

    def has_node(self, node: Hashable) -> bool:
        return node in self.adjacency_list

    def nodes(self) -> List[Hashable]:
        """Get all nodes in the order they were first seen."""
        return list(self.adjacency_list.keys())

    def visit(self, node: Hashable, fn: VisitFunc):
        """
        Call ``fn(neighbor, cost)`` for each outgoing entry of ``node``.

        Iteration stops as soon as ``fn`` returns a truthy value.

        Args:
            node: Node whose adjacency entries are visited
            fn: Callback returning True to stop the iteration
        """
        for neighbor, cost in self.adjacency_list.get(node, ()):
            if fn(neighbor, cost):
                break

    def get_sources(self) -> List[Hashable]:
        """Get source nodes with no incoming edges."""
        return [node for node in self.adjacency_list if self.in_degree[node] == 0]

    def get_sinks(self) -> List[Hashable]:
        """Get sink nodes with no outgoing edges."""
        return [node for node in self.adjacency_list if self.out_degree[node] == 0]

    def edges(self) -> List[pyedge]:
        """Get every adjacency entry as an edge, grouped by source node."""
        return [
            pyedge(node, neighbor, cost)
            for node, neighbors in self.adjacency_list.items()
            for neighbor, cost in neighbors
        ]

    def cost_matrix(self) -> Tuple[List[Hashable], np.ndarray]:
        """
        Build a dense cost matrix of the graph.

        Multi-edges collapse to their cheapest entry.

        Returns:
            Tuple of (nodes, matrix) where ``matrix[i, j]`` is the cost from
            ``nodes[i]`` to ``nodes[j]`` and ``inf`` where no edge exists
        """
        aNode = self.nodes()
        index = {node: i for i, node in enumerate(aNode)}
        matrix = np.full((len(aNode), len(aNode)), np.inf)

        for node, neighbors in self.adjacency_list.items():
            for neighbor, cost in neighbors:
                i, j = index[node], index[neighbor]
                matrix[i, j] = min(matrix[i, j], cost)

        return aNode, matrix

    def __str__(self) -> str:
        header = (f"{'Directed' if self.iFlag_directed else 'Undirected'} graph "
                  f"(order={self.order()}, size={self.size()})")
        lines = [header]
        for node, neighbors in self.adjacency_list.items():
            targets = " ".join(f"{neighbor}({cost})" for neighbor, cost in neighbors)
            lines.append(f"{node} -> {targets}".rstrip())
        return "\n".join(lines)
