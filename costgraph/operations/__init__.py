"""
Graph operation modules.

This module contains topological ordering of directed acyclic graphs.
"""

from .topology import TopologyManager

__all__ = ['TopologyManager']
