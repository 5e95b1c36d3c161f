"""
Node and depth pair produced by depth-first traversal and topological ordering.
"""

from typing import Hashable, NamedTuple


class pynodedepth(NamedTuple):
    node: Hashable
    depth: int
