"""Well-known project type GUIDs used in solution files."""

from __future__ import annotations

from typing import Dict
from uuid import UUID

SOLUTION_FOLDER = UUID("2150e333-8fdc-42a3-9474-1a3956d46de8")
CSHARP_PROJECT = UUID("fae04ec0-301f-11d3-bf4b-00c04f79efbc")
CSHARP_SDK_PROJECT = UUID("9a19103f-16f7-4668-be54-9a1e7a4f7556")
FSHARP_PROJECT = UUID("f2a71f9b-5d33-465a-a702-920d77279786")
CPP_PROJECT = UUID("8bc9ceb8-8b4a-11d0-8d11-00a0c91bc942")
SETUP_PROJECT = UUID("54435603-dbb4-11d2-8724-00a0c9a8b90c")

_TYPE_NAMES: Dict[UUID, str] = {
    SOLUTION_FOLDER: "Solution Folder",
    CSHARP_PROJECT: "C# Project",
    CSHARP_SDK_PROJECT: "C# Project",
    FSHARP_PROJECT: "F# Project",
    CPP_PROJECT: "C++ Project",
    SETUP_PROJECT: "Setup Project",
}

# Project types that never have an MSBuild file to load.
NON_BUILD_TYPES = frozenset({SOLUTION_FOLDER, SETUP_PROJECT})


def project_type_name(project_type: UUID) -> str:
    """Return a friendly name for a project type GUID."""
    return _TYPE_NAMES.get(project_type, f"ProjectType({project_type})")
