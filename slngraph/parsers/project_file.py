"""MSBuild project file (.csproj/.fsproj/.vcxproj) reader.

Extracts project references, the SDK and target frameworks. Both legacy
files (with the 2003 MSBuild namespace) and SDK-style files (no
namespace) are supported.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import List, Optional, Union

from slngraph.graph.models import ProjectReference

from .base import ParseError

logger = logging.getLogger("slngraph.parsers.project_file")

MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"


def _detect_namespace(root: ET.Element) -> str:
    if root.tag.startswith("{"):
        return root.tag[1:].split("}", 1)[0]
    return ""


def _q(tag: str, ns: str) -> str:
    return f"{{{ns}}}{tag}" if ns else tag


def _reference_name(element: ET.Element, include: str, ns: str) -> str:
    name_el = element.find(_q("Name", ns))
    if name_el is not None and name_el.text and name_el.text.strip():
        return name_el.text.strip()
    # SDK-style references only carry the relative path.
    return PureWindowsPath(include).stem


@dataclass
class ProjectFile:
    """Subset of an MSBuild project file relevant to dependency analysis."""

    references: List[ProjectReference] = field(default_factory=list)
    sdk: Optional[str] = None
    frameworks: List[str] = field(default_factory=list)

    @classmethod
    def parse_file(cls, path: Union[str, Path]) -> "ProjectFile":
        """Load a project file.

        Raises:
            ParseError: The file cannot be read or is not well-formed XML.
        """
        path = Path(path)
        try:
            tree = ET.parse(path)
        except (OSError, ET.ParseError) as exc:
            raise ParseError(f"Error while loading project file: {exc}", path) from exc
        project = cls.from_element(tree.getroot())
        logger.debug(
            "Parsed %s: %d reference(s), sdk=%s, frameworks=%s",
            path,
            len(project.references),
            project.sdk,
            project.frameworks,
        )
        return project

    @classmethod
    def from_element(cls, root: ET.Element) -> "ProjectFile":
        """Build a ProjectFile from a parsed `<Project>` element."""
        ns = _detect_namespace(root)
        if ns and ns != MSBUILD_NAMESPACE:
            logger.warning("Unexpected project file namespace: %s", ns)

        references: List[ProjectReference] = []
        for element in root.iter(_q("ProjectReference", ns)):
            include = (element.get("Include") or "").strip()
            if not include:
                continue
            references.append(
                ProjectReference(
                    name=_reference_name(element, include, ns),
                    include=include,
                )
            )

        sdk = root.get("Sdk")
        if not sdk:
            sdk_el = root.find(_q("Sdk", ns))
            if sdk_el is not None:
                sdk = sdk_el.get("Name")

        frameworks: List[str] = []
        for tag in ("TargetFrameworks", "TargetFramework"):
            for element in root.iter(_q(tag, ns)):
                for framework in (element.text or "").split(";"):
                    framework = framework.strip()
                    if framework and framework not in frameworks:
                        frameworks.append(framework)

        return cls(references=references, sdk=sdk or None, frameworks=frameworks)
