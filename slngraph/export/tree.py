"""Solution folder tree serialization."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from uuid import UUID

from slngraph.parsers.solution import SolutionInfo, SolutionProjectInfo

logger = logging.getLogger("slngraph.export.tree")

MAX_FOLDER_NESTING = 5


class NestingTooDeepError(ValueError):
    """Solution folders are nested deeper than supported."""
    pass


@dataclass
class SolutionTreeNode:
    """A solution entry with its nested entries, ready to serialize."""

    name: str
    id: UUID
    typeid: UUID
    type: str
    children: List["SolutionTreeNode"] = field(default_factory=list)

    @classmethod
    def from_project_info(cls, info: SolutionProjectInfo) -> "SolutionTreeNode":
        return cls._build(info, MAX_FOLDER_NESTING)

    @classmethod
    def _build(cls, info: SolutionProjectInfo, remaining: int) -> "SolutionTreeNode":
        if remaining <= 0:
            raise NestingTooDeepError(
                f"Unsupported deep nesting of solution folders at '{info.label}'"
            )
        children = [
            cls._build(child, remaining - 1)
            for child in sorted(info.children, key=lambda c: c.label.casefold())
        ]
        return cls(
            name=info.label,
            id=info.project_id,
            typeid=info.project_type_id,
            type=info.project_type_name,
            children=children,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "id": str(self.id),
            "type": self.type,
            "typeid": str(self.typeid),
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def build_solution_tree(info: SolutionInfo) -> List[SolutionTreeNode]:
    """Top-level solution entries with their nested contents, sorted by name."""
    top = sorted(info.top_level_projects, key=lambda p: p.label.casefold())
    return [SolutionTreeNode.from_project_info(project) for project in top]


def export_solution_tree(info: SolutionInfo, output_path: Path, indent: int = 2) -> None:
    """Write the solution tree to a JSON file."""
    logger.info("Exporting solution tree to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = [node.to_dict() for node in build_solution_tree(info)]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
