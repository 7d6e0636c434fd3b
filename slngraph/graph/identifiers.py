"""Identifier helpers for project graph nodes.

Projects are identified by name. Solution tooling treats project names
case-insensitively, so every lookup in the graph goes through
`make_project_key` instead of relying on plain string comparison.
"""

from __future__ import annotations

from typing import Iterable, List


def make_project_key(name: str) -> str:
    """Return the canonical identity key for a project name.

    Args:
        name: Project name as written in a solution or project file.

    Returns:
        Case-folded, whitespace-trimmed key. Two names map to the same node
        if and only if their keys are equal.
    """
    if name is None:
        raise ValueError("Project name must not be None")
    return name.strip().casefold()


def unique_names(names: Iterable[str]) -> List[str]:
    """Drop case-insensitive duplicates while keeping first-seen order."""
    seen = set()
    result: List[str] = []
    for name in names:
        key = make_project_key(name)
        if key in seen:
            continue
        seen.add(key)
        result.append(name)
    return result
