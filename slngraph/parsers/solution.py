"""Visual Studio solution (.sln) parser.

Only the parts relevant to dependency analysis are read: the project
header lines and the solution folder nesting section. Everything else in
the file (configurations, properties) is ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Dict, List, Optional, Union
from uuid import UUID

from .base import ParseError
from .project_types import project_type_name

logger = logging.getLogger("slngraph.parsers.solution")

SOLUTION_HEADER = "Microsoft Visual Studio Solution File, Format Version"

_PROJECT_HEADER_RE = re.compile(r"^Project\(([^)]+)\)\s+=\s+([^,]+),\s+([^,]+),\s+(.+?)\s*$")
_NESTING_RE = re.compile(r"^(\{[^}]+\})\s*=\s*(\{[^}]+\})$")


def _unquote(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


@dataclass(eq=False)
class SolutionProjectInfo:
    """One `Project(...)` entry of a solution file."""

    project_type_id: UUID
    label: str
    path: str
    project_id: UUID
    parent: Optional["SolutionProjectInfo"] = field(default=None, repr=False)
    children: List["SolutionProjectInfo"] = field(default_factory=list, repr=False)

    @classmethod
    def parse_header(cls, line: str) -> Optional["SolutionProjectInfo"]:
        """Parse a `Project("{type}") = "name", "path", "{id}"` line.

        Returns None when the line does not match the expected shape.
        """
        match = _PROJECT_HEADER_RE.match(line.strip())
        if not match:
            return None
        try:
            type_id = UUID(_unquote(match.group(1)))
            project_id = UUID(_unquote(match.group(4)))
        except ValueError:
            return None
        return cls(
            project_type_id=type_id,
            label=_unquote(match.group(2)),
            path=_unquote(match.group(3)),
            project_id=project_id,
        )

    @property
    def project_type_name(self) -> str:
        return project_type_name(self.project_type_id)

    def tree_path(self) -> str:
        """Path of this entry in the solution folder tree, e.g. `/libs/Core`."""
        prefix = self.parent.tree_path() if self.parent is not None else ""
        return f"{prefix}/{self.label}"


class SolutionInfo:
    """Project list and folder structure of one solution file."""

    def __init__(
        self,
        path: Union[str, Path],
        projects: Optional[List[SolutionProjectInfo]] = None,
    ) -> None:
        self.solution_file = Path(path).resolve()
        self.solution_folder = self.solution_file.parent
        self.name = self.solution_file.stem
        self.projects: List[SolutionProjectInfo] = list(projects or [])

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SolutionInfo":
        """Load a solution file.

        Raises:
            ParseError: The file is unreadable, lacks the solution header, or
                contains a malformed project line.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(f"Unable to read solution file: {exc}", path) from exc

        had_header = False
        in_nesting = False
        projects: List[SolutionProjectInfo] = []
        nesting: List[tuple] = []

        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if not had_header:
                if stripped.startswith(SOLUTION_HEADER):
                    had_header = True
                    continue
                raise ParseError("This file does not look like a solution file", path)

            if stripped.startswith("Project("):
                info = SolutionProjectInfo.parse_header(stripped)
                if info is None:
                    raise ParseError(f"Unable to parse line: {stripped}", path)
                projects.append(info)
            elif stripped.startswith("GlobalSection(NestedProjects)"):
                in_nesting = True
            elif in_nesting and stripped == "EndGlobalSection":
                in_nesting = False
            elif in_nesting:
                match = _NESTING_RE.match(stripped)
                if match:
                    nesting.append((match.group(1), match.group(2)))
                else:
                    logger.warning("Skipping malformed nesting entry in %s: %s", path, stripped)

        if not had_header:
            raise ParseError("This file does not look like a solution file", path)

        info = cls(path, projects)
        info._apply_nesting(nesting)
        logger.info("Loaded solution %s with %d project entries", info.name, len(projects))
        return info

    def _apply_nesting(self, nesting: List[tuple]) -> None:
        """Link nested entries to their solution folders.

        Raises:
            ParseError: An entry would end up nested inside itself.
        """
        by_id: Dict[UUID, SolutionProjectInfo] = {p.project_id: p for p in self.projects}
        for child_text, parent_text in nesting:
            try:
                child = by_id.get(UUID(child_text))
                parent = by_id.get(UUID(parent_text))
            except ValueError:
                child = parent = None
            if child is None or parent is None:
                logger.warning("Ignoring nesting of unknown project %s in %s", child_text, parent_text)
                continue
            if child.parent is not None:
                logger.warning(
                    "Ignoring repeated nesting of %s (already in %s)",
                    child.label,
                    child.parent.label,
                )
                continue
            ancestor: Optional[SolutionProjectInfo] = parent
            while ancestor is not None:
                if ancestor is child:
                    raise ParseError(
                        f"Solution folder nesting loops through {child.label}",
                        self.solution_file,
                    )
                ancestor = ancestor.parent
            child.parent = parent
            parent.children.append(child)

    @property
    def top_level_projects(self) -> List[SolutionProjectInfo]:
        """Entries that are not nested in a solution folder."""
        return [project for project in self.projects if project.parent is None]

    def project_file_path(self, info: SolutionProjectInfo) -> Path:
        """Filesystem location of a project's build file (may not exist)."""
        return self.solution_folder / PureWindowsPath(info.path).as_posix()

    def try_project_file(self, info: SolutionProjectInfo) -> Optional[Path]:
        """Return the project file path if it exists, else None."""
        candidate = self.project_file_path(info)
        return candidate if candidate.is_file() else None
