"""Graph vertex for one project.

Edges are stored twice: as forward `depends_on` entries on the depender
and as `dependent_of` back-edges on the dependee. Only `link` in this
module touches the adjacency lists, and it always updates both sides
together.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, TypeVar

from .models import ProjectRecord

T = TypeVar("T")

UNSORTED = -1


class GraphNode:
    """A project vertex in a `ProjectDependencyGraph`."""

    __slots__ = ("identity", "payload", "_depends_on", "_dependent_of", "topo_order")

    def __init__(self, payload: ProjectRecord) -> None:
        self.identity: str = payload.identity
        self.payload = payload
        self._depends_on: List["GraphNode"] = []
        self._dependent_of: List["GraphNode"] = []
        self.topo_order: int = UNSORTED

    @property
    def depends_on(self) -> Tuple["GraphNode", ...]:
        """Nodes this project depends on, in declaration order."""
        return tuple(self._depends_on)

    @property
    def dependent_of(self) -> Tuple["GraphNode", ...]:
        """Nodes that depend on this project."""
        return tuple(self._dependent_of)

    @property
    def is_leaf(self) -> bool:
        return not self._depends_on

    @property
    def is_root(self) -> bool:
        return not self._dependent_of

    @property
    def is_stub(self) -> bool:
        return self.payload.is_stub

    @property
    def label(self) -> str:
        return self.payload.label

    def lookup(self, mapping: Dict[str, T], default: Optional[T] = None) -> Optional[T]:
        """Return this node's entry in an identity-keyed map, or `default`."""
        return mapping.get(self.identity, default)

    def __repr__(self) -> str:
        return f"GraphNode({self.label!r})"


def link(depender: GraphNode, dependee: GraphNode) -> bool:
    """Register `depender -> dependee` on both endpoints.

    Returns:
        False when the edge already existed (nothing changes), True otherwise.
    """
    if any(existing is dependee for existing in depender._depends_on):
        return False
    depender._depends_on.append(dependee)
    dependee._dependent_of.append(depender)
    return True
