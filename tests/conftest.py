"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List

import pytest

from slngraph.graph import ProjectDependencyGraph, ProjectRecord, ProjectReference

GraphFactory = Callable[..., ProjectDependencyGraph]


def _records(layout: Dict[str, List[str]], stubs: Iterable[str]) -> List[ProjectRecord]:
    stub_set = set(stubs)
    return [
        ProjectRecord(
            label=label,
            path=f"src/{label}/{label}.csproj",
            is_stub=label in stub_set,
            references=[ProjectReference(name=name) for name in refs],
        )
        for label, refs in layout.items()
    ]


@pytest.fixture
def build_graph() -> GraphFactory:
    """Return a factory building a graph from `{label: [referenced names]}`."""

    def _build(layout: Dict[str, List[str]], stubs: Iterable[str] = ()) -> ProjectDependencyGraph:
        return ProjectDependencyGraph(_records(layout, stubs))

    return _build


@pytest.fixture
def diamond(build_graph: GraphFactory) -> ProjectDependencyGraph:
    """A -> B, A -> C, B -> D, C -> D."""
    return build_graph({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})


_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
  </PropertyGroup>
  <ItemGroup>
{references}
  </ItemGroup>
</Project>
"""

_SOLUTION = """Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "App", "src\\App\\App.csproj", "{{11111111-1111-1111-1111-111111111111}}"
EndProject
Project("{{2150E333-8FDC-42A3-9474-1A3956D46DE8}}") = "libs", "libs", "{{22222222-2222-2222-2222-222222222222}}"
EndProject
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "Core", "libs\\Core\\Core.csproj", "{{33333333-3333-3333-3333-333333333333}}"
EndProject
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "Util", "libs\\Util\\Util.csproj", "{{44444444-4444-4444-4444-444444444444}}"
EndProject
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "Missing", "src\\Missing\\Missing.csproj", "{{55555555-5555-5555-5555-555555555555}}"
EndProject
Global
\tGlobalSection(NestedProjects) = preSolution
\t\t{{33333333-3333-3333-3333-333333333333}} = {{22222222-2222-2222-2222-222222222222}}
\t\t{{44444444-4444-4444-4444-444444444444}} = {{22222222-2222-2222-2222-222222222222}}
\tEndGlobalSection
EndGlobal
"""


def _write_project(path: Path, references: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = "\n".join(f'    <ProjectReference Include="{ref}" />' for ref in references)
    path.write_text(_CSPROJ.format(references=lines), encoding="utf-8")


@pytest.fixture
def sample_solution(tmp_path: Path) -> Path:
    """Write a small solution to disk and return the .sln path.

    App -> Core, App -> Util, App -> Ghost (unresolved), Core -> Util.
    `libs` is a solution folder holding Core and Util; `Missing` has no
    project file on disk.
    """
    _write_project(
        tmp_path / "src" / "App" / "App.csproj",
        ["..\\..\\libs\\Core\\Core.csproj", "..\\..\\libs\\Util\\Util.csproj", "..\\Ghost\\Ghost.csproj"],
    )
    _write_project(tmp_path / "libs" / "Core" / "Core.csproj", ["..\\Util\\Util.csproj"])
    _write_project(tmp_path / "libs" / "Util" / "Util.csproj", [])

    sln = tmp_path / "Sample.sln"
    sln.write_text(_SOLUTION.format(), encoding="utf-8")
    return sln
