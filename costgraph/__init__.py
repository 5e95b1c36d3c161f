"""
costgraph - Weighted Graph Analysis Library

A Python library for building directed and undirected weighted graphs and
querying them with traversal, shortest-path and topological-ordering
algorithms. Directed graphs reject any insertion that would create a cycle.

Main Classes:
    pycostgraph: Main class for graph analysis (facade)
    pyedge: Edge representation between two nodes
    pynodedepth: Node and depth pair returned by DFS and topological sort

Example:
    >>> from costgraph import new_undirected_graph, pyedge
    >>> graph = new_undirected_graph()
    >>> graph.add_with_cost_both(pyedge("a", "b", 3))
    >>> graph.shortest_path_and_cost("a", "b")
    (['a', 'b'], 3)
"""

__version__ = "0.1.0"

from costgraph.classes.edge import pyedge
from costgraph.classes.nodedepth import pynodedepth
from costgraph.core.costgraph import pycostgraph, new_directed_graph, new_undirected_graph
from costgraph.config import GraphSettings, get_config, reset_config
from costgraph.errors import (
    CostGraphError,
    LoopInDagError,
    ErrLoopInDag,
    NodeNotFoundError,
    NoPathError,
    InvalidEdgeError,
)

__all__ = [
    'pycostgraph',
    'new_directed_graph',
    'new_undirected_graph',
    'pyedge',
    'pynodedepth',
    'GraphSettings',
    'get_config',
    'reset_config',
    'CostGraphError',
    'LoopInDagError',
    'ErrLoopInDag',
    'NodeNotFoundError',
    'NoPathError',
    'InvalidEdgeError',
]
