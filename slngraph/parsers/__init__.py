"""Readers for solution and project files."""

from .base import ParseError
from .loader import Solution, load_project, load_solution
from .project_file import ProjectFile
from .project_types import project_type_name
from .solution import SolutionInfo, SolutionProjectInfo

__all__ = [
    "ParseError",
    "ProjectFile",
    "Solution",
    "SolutionInfo",
    "SolutionProjectInfo",
    "load_project",
    "load_solution",
    "project_type_name",
]
