"""
Core data classes for graph representation.

This module contains the value types shared throughout the costgraph library.
"""

from .edge import pyedge
from .nodedepth import pynodedepth

__all__ = [
    'pyedge',
    'pynodedepth',
]
