"""
Main facade class for weighted graph analysis.

This module provides the pycostgraph class that owns the adjacency store and
delegates queries to specialized modules.
"""

import logging
from typing import Hashable, List, Optional, Tuple

import numpy as np

from ..classes.edge import pyedge
from ..classes.nodedepth import pynodedepth
from ..errors import LoopInDagError, NodeNotFoundError
from .graph import AdjacencyGraph, VisitFunc
from ..analysis.detection import CycleDetector
from ..analysis.pathfinding import PathFinder
from ..analysis.traversal import EdgeFunc, GraphTraversal
from ..operations.topology import TopologyManager

logger = logging.getLogger(__name__)


class pycostgraph:
    """
    Main facade class for weighted graph analysis.

    A directed instance stays acyclic: every insertion is checked before the
    adjacency store is touched. An undirected instance accepts any edge.
    """

    def __init__(self, iFlag_directed: bool = True):
        """
        Initialize an empty graph.

        Args:
            iFlag_directed: True for a directed acyclic graph, False for undirected
        """
        # Initialize core graph
        self._graph = AdjacencyGraph(iFlag_directed)

        # Initialize analysis components
        self._detector = CycleDetector(self._graph)
        self._traversal = GraphTraversal(self._graph)
        self._pathfinder = PathFinder(self._graph)

        # Initialize operation components
        self._topology = TopologyManager(self._graph)

    @property
    def iFlag_directed(self) -> bool:
        return self._graph.iFlag_directed

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_with_cost(self, edge: pyedge):
        """
        Insert a single directed edge.

        Raises:
            LoopInDagError: If the graph is directed and the edge would close a cycle
        """
        if self.iFlag_directed and self._detector.creates_cycle(edge.node, edge.neighbor):
            logger.warning(f"Rejected edge {edge.node} -> {edge.neighbor}: it would create a cycle")
            raise LoopInDagError(
                f"Edge {edge.node} -> {edge.neighbor} creates a loop in the DAG",
                node=edge.node,
                neighbor=edge.neighbor,
            )
        self._graph.add_with_cost(edge)

    def add_with_cost_both(self, edge: pyedge):
        """
        Insert an edge in both directions with the same cost.

        Raises:
            LoopInDagError: If the graph is directed, where a two-way edge is always a cycle
        """
        if self.iFlag_directed:
            logger.warning(f"Rejected two-way edge {edge.node} <-> {edge.neighbor} on a directed graph")
            raise LoopInDagError(
                f"Edge {edge.node} <-> {edge.neighbor} creates a loop in the DAG",
                node=edge.node,
                neighbor=edge.neighbor,
            )
        self._graph.add_with_cost_both(edge)

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def order(self) -> int:
        """Get the number of distinct nodes."""
        return self._graph.order()

    def size(self) -> int:
        """Get the number of directed adjacency entries."""
        return self._graph.size()

    def nodes(self) -> List[Hashable]:
        """Get all nodes in discovery order."""
        return self._graph.nodes()

    def edges(self) -> List[pyedge]:
        """Get every adjacency entry as an edge."""
        return self._graph.edges()

    def has_node(self, node: Hashable) -> bool:
        return self._graph.has_node(node)

    def in_degree(self, node: Hashable) -> int:
        return self._graph.in_degree.get(node, 0)

    def out_degree(self, node: Hashable) -> int:
        return self._graph.out_degree.get(node, 0)

    def get_sources(self) -> List[Hashable]:
        """Get source nodes with no incoming edges."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[Hashable]:
        """Get sink nodes with no outgoing edges."""
        return self._graph.get_sinks()

    def cost_matrix(self) -> Tuple[List[Hashable], np.ndarray]:
        """Build a dense cost matrix of the graph."""
        return self._graph.cost_matrix()

    def visit(self, node: Hashable, fn: VisitFunc):
        """Call ``fn(neighbor, cost)`` for each outgoing edge until it returns True."""
        self._graph.visit(node, fn)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def bfs(self, start: Hashable, fn: Optional[EdgeFunc] = None) -> List[Hashable]:
        """Breadth-first search from a start node."""
        return self._traversal.bfs(start, fn)

    def dfs(self) -> List[pynodedepth]:
        """Depth-first search over the whole graph with depth labels."""
        return self._traversal.dfs()

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path_and_cost(self, source: Hashable, target: Hashable) -> Tuple[List[Hashable], int]:
        """Find one minimum-cost path and its cost."""
        return self._pathfinder.shortest_path_and_cost(source, target)

    def find_all_shortest_paths_and_cost(self, source: Hashable, target: Hashable,
                                         limit: Optional[int] = None) -> Tuple[List[List[Hashable]], int]:
        """Find every minimum-cost path and their shared cost."""
        return self._pathfinder.find_all_shortest_paths_and_cost(source, target, limit)

    def find_reachable(self, node: Hashable) -> set:
        """Get every node reachable from ``node``, itself included."""
        if not self._graph.has_node(node):
            raise NodeNotFoundError(f"Node not found: {node}", node=node)
        return self._detector.find_reachable(node)

    # ========================================================================
    # TOPOLOGY
    # ========================================================================

    def topological_sort(self) -> List[pynodedepth]:
        """Order the nodes topologically with depth labels."""
        return self._topology.topological_sort()

    def __contains__(self, node: Hashable) -> bool:
        return self._graph.has_node(node)

    def __len__(self) -> int:
        return self._graph.order()

    def __str__(self) -> str:
        return str(self._graph)


def new_directed_graph() -> pycostgraph:
    """Create an empty directed acyclic graph."""
    return pycostgraph(iFlag_directed=True)


def new_undirected_graph() -> pycostgraph:
    """Create an empty undirected graph."""
    return pycostgraph(iFlag_directed=False)
