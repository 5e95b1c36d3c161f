"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
combining it with the analysis and operation modules.
"""

from .graph import AdjacencyGraph
from .costgraph import pycostgraph, new_directed_graph, new_undirected_graph

__all__ = [
    'AdjacencyGraph',
    'pycostgraph',
    'new_directed_graph',
    'new_undirected_graph',
]
