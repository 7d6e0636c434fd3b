"""Error taxonomy for the project dependency graph.

All errors are fatal for the operation that raises them. None of them are
retried internally: they either describe contradictory input or a
structural problem (a real cycle) that the caller has to fix.
"""

from __future__ import annotations

from typing import Optional, Sequence


class GraphError(Exception):
    """Base class for dependency graph failures."""
    pass


class DuplicateIdentityError(GraphError):
    """Two input records normalize to the same project identity.

    Raised during graph construction; the graph is not created.
    """

    def __init__(
        self,
        identity: str,
        first_path: Optional[str],
        second_path: Optional[str],
    ) -> None:
        self.identity = identity
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(
            f"Duplicate project identity '{identity}': "
            f"'{first_path or '<unknown>'}' and '{second_path or '<unknown>'}'"
        )


class RecursionLimitExceeded(GraphError):
    """A closure or level computation went deeper than the fixed ceiling.

    This usually means the graph contains a cycle that has not been
    reported yet, or that projects are nested unreasonably deep.
    """

    def __init__(self, identity: str, limit: int) -> None:
        self.identity = identity
        self.limit = limit
        super().__init__(
            f"Recursion limit exceeded at '{identity}' (limit {limit}); "
            "the dependency graph probably contains a cycle"
        )


class CyclicGraphError(GraphError):
    """Topological sorting could not place every node."""

    def __init__(self, stranded: int, stranded_nodes: Sequence[str] = ()) -> None:
        self.stranded = stranded
        self.stranded_nodes = sorted(stranded_nodes, key=str.casefold)
        super().__init__(
            f"Dependency graph contains a cycle: {stranded} project(s) "
            "could not be ordered"
        )
