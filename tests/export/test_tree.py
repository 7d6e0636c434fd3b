"""Solution tree export tests."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import uuid4

import pytest

from slngraph.export import NestingTooDeepError, build_solution_tree, export_solution_tree
from slngraph.parsers import SolutionInfo, SolutionProjectInfo
from slngraph.parsers.project_types import SOLUTION_FOLDER


def test_tree_nests_folder_contents(sample_solution: Path) -> None:
    """Folders list their children sorted by name; leaves omit children."""
    info = SolutionInfo.from_file(sample_solution)
    tree = [node.to_dict() for node in build_solution_tree(info)]

    assert [node["name"] for node in tree] == ["App", "libs", "Missing"]
    libs = tree[1]
    assert libs["type"] == "Solution Folder"
    assert [child["name"] for child in libs["children"]] == ["Core", "Util"]
    assert "children" not in tree[0]
    assert tree[0]["id"] == "11111111-1111-1111-1111-111111111111"


def test_export_solution_tree(sample_solution: Path, tmp_path: Path) -> None:
    """The tree is written as a JSON list."""
    output = tmp_path / "tree.json"
    export_solution_tree(SolutionInfo.from_file(sample_solution), output)

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data) == 3


def test_deep_folder_nesting_is_rejected(tmp_path: Path) -> None:
    """Folder nesting is limited to five levels."""
    folders = [SolutionProjectInfo(SOLUTION_FOLDER, f"F{i}", f"F{i}", uuid4()) for i in range(6)]
    for parent, child in zip(folders, folders[1:]):
        child.parent = parent
        parent.children.append(child)
    info = SolutionInfo(tmp_path / "Deep.sln", folders)

    with pytest.raises(NestingTooDeepError):
        build_solution_tree(info)
