"""Project file parser tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from slngraph.parsers import ParseError, ProjectFile

LEGACY_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <TargetFrameworkVersion>v4.7.2</TargetFrameworkVersion>
  </PropertyGroup>
  <ItemGroup>
    <ProjectReference Include="..\\Core\\Core.csproj">
      <Project>{33333333-3333-3333-3333-333333333333}</Project>
      <Name>Core</Name>
    </ProjectReference>
    <ProjectReference Include="..\\Util\\Util.Tools.csproj" />
  </ItemGroup>
</Project>
"""

SDK_PROJECT = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFrameworks>net8.0;net48</TargetFrameworks>
  </PropertyGroup>
  <ItemGroup>
    <ProjectReference Include="../Core/Core.csproj" />
    <ProjectReference Include="" />
  </ItemGroup>
</Project>
"""


def _write(tmp_path: Path, text: str, name: str = "App.csproj") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_legacy_project_references(tmp_path: Path) -> None:
    """Namespaced files use the Name child or fall back to the file stem."""
    project = ProjectFile.parse_file(_write(tmp_path, LEGACY_PROJECT))

    assert [ref.name for ref in project.references] == ["Core", "Util.Tools"]
    assert project.references[0].include == "..\\Core\\Core.csproj"
    assert project.sdk is None
    assert project.frameworks == []


def test_sdk_style_project(tmp_path: Path) -> None:
    """SDK-style files carry the SDK attribute and multi-targeting list."""
    project = ProjectFile.parse_file(_write(tmp_path, SDK_PROJECT))

    assert [ref.name for ref in project.references] == ["Core"]
    assert project.sdk == "Microsoft.NET.Sdk"
    assert project.frameworks == ["net8.0", "net48"]


def test_sdk_element_and_single_framework(tmp_path: Path) -> None:
    """The SDK may also be declared as a child element."""
    text = (
        "<Project><Sdk Name=\"Microsoft.NET.Sdk.Web\" />"
        "<PropertyGroup><TargetFramework>net8.0</TargetFramework></PropertyGroup>"
        "</Project>"
    )
    project = ProjectFile.parse_file(_write(tmp_path, text))

    assert project.sdk == "Microsoft.NET.Sdk.Web"
    assert project.frameworks == ["net8.0"]
    assert project.references == []


def test_malformed_xml_is_a_parse_error(tmp_path: Path) -> None:
    """Broken XML names the offending file."""
    path = _write(tmp_path, "<Project><ItemGroup></Project>")

    with pytest.raises(ParseError) as excinfo:
        ProjectFile.parse_file(path)
    assert excinfo.value.path == path
