"""Project dependency graph.

`ProjectDependencyGraph` is built once from a complete list of project
records and then queried. The only mutation allowed after construction is
stripping isolated stub nodes, which drops every cached result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

import networkx as nx

from .errors import DuplicateIdentityError
from .identifiers import make_project_key
from .models import ProjectRecord, ProjectReference
from .node import UNSORTED, GraphNode, link
from .ops.closure import (
    MAX_RECURSION_DEPTH,
    backward,
    deep_closure,
    forward,
    node_levels,
)
from .ops.cycles import dependency_digraph, find_cycles
from .ops.pure import find_pure_dependencies
from .ops.toposort import topological_order

logger = logging.getLogger("slngraph.graph.manager")

NodeRef = Union[GraphNode, str]


class UnresolvedReference(NamedTuple):
    """A declared reference whose target is not part of the graph."""

    source: str
    reference: ProjectReference


@dataclass
class _GraphCaches:
    """Cached query results for one version of the node set.

    Closure caches map an identity to the identities reachable from it.
    """

    version: int
    depends_on: Dict[str, FrozenSet[str]] = field(default_factory=dict)
    dependent_of: Dict[str, FrozenSet[str]] = field(default_factory=dict)
    topo_order: Optional[Tuple[GraphNode, ...]] = None


class ProjectDependencyGraph:
    """Dependency graph over the projects of one solution.

    The structure is not synchronized. Callers sharing an instance between
    threads must serialize stub stripping and the first query of each kind.
    """

    def __init__(self, records: Iterable[ProjectRecord]) -> None:
        """Build the graph.

        Args:
            records: Project records in solution order. The order determines
                node enumeration order and therefore tie-breaking in the
                topological sort.

        Raises:
            DuplicateIdentityError: Two records share a normalized name.
        """
        self._nodes: Dict[str, GraphNode] = {}
        self._unresolved: List[UnresolvedReference] = []
        self._limit = MAX_RECURSION_DEPTH

        for record in records:
            existing = self._nodes.get(record.identity)
            if existing is not None:
                raise DuplicateIdentityError(
                    record.label, existing.payload.path, record.path
                )
            self._nodes[record.identity] = GraphNode(record)

        edge_count = 0
        for depender in self._nodes.values():
            for reference in depender.payload.references:
                target = self._nodes.get(make_project_key(reference.name))
                if target is None:
                    logger.debug(
                        "Unresolved reference %s -> %s", depender.label, reference.name
                    )
                    self._unresolved.append(UnresolvedReference(depender.label, reference))
                    continue
                if link(depender, target):
                    edge_count += 1
                else:
                    logger.debug(
                        "Ignoring repeated reference %s -> %s", depender.label, reference.name
                    )

        self._caches = _GraphCaches(version=0)
        logger.info(
            "Built dependency graph: %d nodes, %d edges, %d unresolved references",
            len(self._nodes),
            edge_count,
            len(self._unresolved),
        )

    # ------------------------------------------------------------------
    # Node access
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[GraphNode, ...]:
        """Snapshot of the current nodes, in input order."""
        return tuple(self._nodes.values())

    @property
    def unresolved_references(self) -> Tuple[UnresolvedReference, ...]:
        return tuple(self._unresolved)

    @property
    def version(self) -> int:
        """Incremented by every structural mutation."""
        return self._caches.version

    def edge_count(self) -> int:
        return sum(len(node.depends_on) for node in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and make_project_key(name) in self._nodes

    def find_node(self, name: str) -> Optional[GraphNode]:
        """Return the node for a project name (case-insensitive), or None."""
        return self._nodes.get(make_project_key(name))

    def nodes_for(self, identities: Iterable[str]) -> List[GraphNode]:
        """Resolve identity keys to nodes, sorted by label."""
        nodes = [self._nodes[identity] for identity in identities]
        nodes.sort(key=lambda node: node.label.casefold())
        return nodes

    def _resolve(self, node: NodeRef) -> GraphNode:
        if isinstance(node, str):
            found = self.find_node(node)
            if found is None:
                raise KeyError(f"Unknown project: {node}")
            return found
        if self._nodes.get(node.identity) is not node:
            raise KeyError(f"Node {node.label!r} is not part of this graph")
        return node

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def strip_singleton_stubs(self) -> List[GraphNode]:
        """Remove stub nodes that have no dependencies and no dependents.

        Returns:
            The removed nodes, in input order.
        """
        removed = [
            node
            for node in self._nodes.values()
            if node.is_stub and node.is_leaf and node.is_root
        ]
        for node in removed:
            del self._nodes[node.identity]
            node.topo_order = UNSORTED
        self._invalidate()
        if removed:
            logger.info(
                "Stripped %d singleton stub(s): %s",
                len(removed),
                ", ".join(node.label for node in removed),
            )
        return removed

    def _invalidate(self) -> None:
        version = self._caches.version + 1
        self._caches = _GraphCaches(version=version)
        for node in self._nodes.values():
            node.topo_order = UNSORTED
        logger.debug("Graph caches invalidated (version %d)", version)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def deep_depends_on(self, node: NodeRef) -> FrozenSet[str]:
        """Identities of every project `node` depends on, directly or not."""
        return deep_closure(
            self._caches.depends_on, self._resolve(node), forward, limit=self._limit
        )

    def deep_dependent_of(self, node: NodeRef) -> FrozenSet[str]:
        """Identities of every project that depends on `node`, directly or not."""
        return deep_closure(
            self._caches.dependent_of, self._resolve(node), backward, limit=self._limit
        )

    def find_pure_dependencies(self, node: NodeRef) -> FrozenSet[str]:
        """Direct dependencies of `node` not implied by another direct dependency."""
        return find_pure_dependencies(
            self._caches.depends_on, self._resolve(node), limit=self._limit
        )

    def get_leaf_levels(self) -> Dict[str, int]:
        """Longest dependency chain below each node (0 for leaves)."""
        return node_levels(self._nodes.values(), forward, limit=self._limit)

    def get_root_levels(self) -> Dict[str, int]:
        """Longest dependent chain above each node (0 for roots)."""
        return node_levels(self._nodes.values(), backward, limit=self._limit)

    @property
    def topologically_sorted(self) -> Tuple[GraphNode, ...]:
        """Nodes in build order; dependencies always come first.

        Raises:
            CyclicGraphError: The graph contains a cycle.
        """
        if self._caches.topo_order is None:
            self._caches.topo_order = topological_order(self.nodes)
        return self._caches.topo_order

    def find_cycles(self) -> List[List[str]]:
        """Labels of the projects in each dependency cycle."""
        return find_cycles(self._nodes.values())

    def to_networkx(self) -> nx.DiGraph:
        """Project the current node set onto a NetworkX DiGraph."""
        return dependency_digraph(self._nodes.values())
