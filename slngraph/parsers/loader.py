"""Load a solution and its projects into graph input records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from slngraph.graph.models import ProjectRecord

from .project_file import ProjectFile
from .project_types import NON_BUILD_TYPES
from .solution import SolutionInfo, SolutionProjectInfo

logger = logging.getLogger("slngraph.parsers.loader")


@dataclass
class Solution:
    """A parsed solution together with one record per project entry."""

    info: SolutionInfo
    records: List[ProjectRecord] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.info.name


def load_project(info: SolutionInfo, project: SolutionProjectInfo) -> ProjectRecord:
    """Build the record for one solution entry.

    Solution folders, setup projects and entries whose project file is
    missing become stub records without references.
    """
    content = None
    if project.project_type_id not in NON_BUILD_TYPES:
        project_path = info.try_project_file(project)
        if project_path is None:
            logger.warning(
                "Project file for %s not found: %s",
                project.label,
                info.project_file_path(project),
            )
        else:
            content = ProjectFile.parse_file(project_path)

    return ProjectRecord(
        label=project.label,
        path=project.path,
        is_stub=content is None,
        references=content.references if content is not None else [],
        project_id=project.project_id,
        project_type_id=project.project_type_id,
        project_type=project.project_type_name,
        tree_path=project.tree_path(),
        sdk=content.sdk if content is not None else None,
        frameworks=content.frameworks if content is not None else [],
    )


def load_solution(path: Union[str, Path]) -> Solution:
    """Parse a solution file and every project file it lists.

    Raises:
        ParseError: The solution or one of its project files is malformed.
    """
    info = SolutionInfo.from_file(path)
    records = [load_project(info, project) for project in info.projects]
    stubs = sum(1 for record in records if record.is_stub)
    logger.info(
        "Loaded %d project(s) from %s (%d stub(s))", len(records), info.name, stubs
    )
    return Solution(info=info, records=records)
