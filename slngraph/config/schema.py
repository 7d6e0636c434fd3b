"""Report configuration schema using Pydantic for validation.

Configuration only affects how results are rendered. The graph engine
itself has no tunables: the recursion ceiling is fixed.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

_RANKDIRS = {"TB", "BT", "LR", "RL"}


class DotConfig(BaseModel):
    """GraphViz rendering options.

    Attributes:
        reduced: Draw only pure dependency edges.
        rankdir: GraphViz layout direction.
        root_color: Fill color of projects nothing depends on.
        leaf_color: Fill color of projects without dependencies.
        default_color: Fill color of every other project.
        stub_color: Fill color of stub projects.
        redundant_edge_style: Style of edges implied by another dependency.
    """

    reduced: bool = False
    rankdir: str = "LR"
    root_color: str = "lightblue"
    leaf_color: str = "palegreen"
    default_color: str = "white"
    stub_color: str = "lightgray"
    redundant_edge_style: str = "dashed"

    model_config = {"extra": "forbid"}

    @field_validator("rankdir")
    @classmethod
    def validate_rankdir(cls, v: str) -> str:
        """Validate that rankdir is a GraphViz direction."""
        value = v.upper()
        if value not in _RANKDIRS:
            raise ValueError(f"Invalid rankdir '{v}'. Valid values: {sorted(_RANKDIRS)}")
        return value


class ReportConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        strip_stubs: Remove isolated stub projects before reporting.
        indent: JSON indentation for written reports.
        dot: GraphViz options.
    """

    strip_stubs: bool = True
    indent: int = Field(default=2, ge=0, le=8)
    dot: DotConfig = Field(default_factory=DotConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "ReportConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportConfig":
        return cls.model_validate(data)
