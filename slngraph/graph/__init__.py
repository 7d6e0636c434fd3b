"""Public graph API surface."""

from slngraph.graph.errors import (
    CyclicGraphError,
    DuplicateIdentityError,
    GraphError,
    RecursionLimitExceeded,
)
from slngraph.graph.identifiers import make_project_key, unique_names
from slngraph.graph.manager import ProjectDependencyGraph, UnresolvedReference
from slngraph.graph.models import ProjectRecord, ProjectReference
from slngraph.graph.node import UNSORTED, GraphNode
from slngraph.graph.ops import MAX_RECURSION_DEPTH

__all__ = [
    "CyclicGraphError",
    "DuplicateIdentityError",
    "GraphError",
    "GraphNode",
    "MAX_RECURSION_DEPTH",
    "ProjectDependencyGraph",
    "ProjectRecord",
    "ProjectReference",
    "RecursionLimitExceeded",
    "UNSORTED",
    "UnresolvedReference",
    "make_project_key",
    "unique_names",
]
