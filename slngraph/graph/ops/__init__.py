"""Algorithms over project graph nodes."""

from .closure import (
    MAX_RECURSION_DEPTH,
    ChildSelector,
    ClosureCache,
    backward,
    deep_closure,
    forward,
    node_levels,
)
from .cycles import dependency_digraph, find_cycles
from .pure import find_pure_dependencies
from .toposort import topological_order

__all__ = [
    "ChildSelector",
    "ClosureCache",
    "MAX_RECURSION_DEPTH",
    "backward",
    "deep_closure",
    "dependency_digraph",
    "find_cycles",
    "find_pure_dependencies",
    "forward",
    "node_levels",
    "topological_order",
]
