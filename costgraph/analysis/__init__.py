"""
Graph analysis modules for traversal, path finding and cycle detection.
"""

from .detection import CycleDetector
from .pathfinding import PathFinder
from .traversal import GraphTraversal

__all__ = ['CycleDetector', 'PathFinder', 'GraphTraversal']
