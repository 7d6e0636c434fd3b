"""Input records consumed by the graph builder.

Parsers (or any other collaborator) describe each project with a
`ProjectRecord`. The graph only relies on the label, the stub flag and
the declared references; the remaining fields are carried through to
the reports untouched.
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifiers import make_project_key

logger = logging.getLogger("slngraph.graph.models")


class ProjectReference(BaseModel):
    """A reference from one project to another, by name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Annotated[str, Field(..., description="Name of the referenced project")]
    include: Annotated[
        str,
        Field(
            default="",
            description="Raw Include attribute from the project file, if any",
        ),
    ]

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Referenced project name must not be blank")
        return value


class ProjectRecord(BaseModel):
    """Flat description of one project, as produced by the parsers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: Annotated[str, Field(..., description="Human-readable project name")]
    path: Annotated[
        Optional[str],
        Field(default=None, description="Project path relative to the solution"),
    ]
    is_stub: Annotated[
        bool,
        Field(
            default=False,
            description="True when no build script could be resolved for the project",
        ),
    ]
    references: Annotated[
        List[ProjectReference],
        Field(default_factory=list, description="Declared project references"),
    ]
    project_id: Optional[UUID] = None
    project_type_id: Optional[UUID] = None
    project_type: Optional[str] = None
    tree_path: Optional[str] = None
    sdk: Optional[str] = None
    frameworks: List[str] = Field(default_factory=list)

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Project label must not be blank")
        return value

    @property
    def identity(self) -> str:
        """Normalized identity key of this project."""
        return make_project_key(self.label)

    @property
    def reference_names(self) -> List[str]:
        """Names of the referenced projects, in declaration order."""
        return [ref.name for ref in self.references]
