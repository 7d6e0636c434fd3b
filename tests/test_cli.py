"""Tests for slngraph CLI entrypoints."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import slngraph.main as main
from slngraph.cli import order as order_module
from slngraph.cli.export import export_command


def test_main_dispatches_export_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Verify that `main` parses args and dispatches export_command."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    captured: dict[str, object] = {}

    def fake_export_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "export_command", fake_export_command)

    exit_code = main.main(["dot", "Demo.sln", "-o", str(tmp_path / "g.dot"), "--reduced"])

    assert exit_code == 0
    parsed = captured["args"]
    assert parsed.command == "dot"
    assert parsed.solution == "Demo.sln"
    assert parsed.reduced is True


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure missing subcommands make the CLI print help and fail."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    exit_code = main.main([])

    assert exit_code == 1
    assert "slngraph" in capsys.readouterr().out


def test_summary_command_writes_file(sample_solution: Path, tmp_path: Path) -> None:
    """The summary command writes summaries for buildable projects."""
    output = tmp_path / "summary.json"
    args = SimpleNamespace(command="summary", solution=str(sample_solution), output=str(output), config=None)

    assert export_command(args) == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert list(data) == ["Util", "Core", "App"]


def test_export_command_reports_parse_errors(tmp_path: Path) -> None:
    """Unreadable solutions produce a failing exit code."""
    args = SimpleNamespace(
        command="tree",
        solution=str(tmp_path / "absent.sln"),
        output=str(tmp_path / "tree.json"),
        config=None,
    )
    assert export_command(args) == 1


def test_order_command_prints_table(sample_solution: Path) -> None:
    """The order command lists projects in build order."""
    console = Console(record=True, width=120)
    args = SimpleNamespace(solution=str(sample_solution), config=None, fail_on_cycle=True)

    assert order_module.order_command(args, console=console) == 0
    text = console.export_text()
    assert text.index("Util") < text.index("Core") < text.index("App")
    assert "libs" not in text


def test_order_command_respects_fail_on_cycle(monkeypatch: pytest.MonkeyPatch, build_graph) -> None:
    """A cyclic graph fails only when fail_on_cycle is set."""
    graph = build_graph({"A": ["B"], "B": ["A"]})
    solution = SimpleNamespace(name="Cyclic")
    monkeypatch.setattr(order_module, "load_graph", lambda path, config: (solution, graph))

    args_fail = SimpleNamespace(solution="x.sln", config=None, fail_on_cycle=True)
    args_ignore = SimpleNamespace(solution="x.sln", config=None, fail_on_cycle=False)

    assert order_module.order_command(args_fail, console=Console(record=True)) == 1
    assert order_module.order_command(args_ignore, console=Console(record=True)) == 0


def test_tree_command_reports_nesting_loop(tmp_path: Path) -> None:
    """A solution whose folders nest inside each other fails cleanly."""
    sln = tmp_path / "Loop.sln"
    sln.write_text(
        "Microsoft Visual Studio Solution File, Format Version 12.00\n"
        'Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "F1", "F1", "{AAAAAAAA-AAAA-AAAA-AAAA-AAAAAAAAAAAA}"\n'
        "EndProject\n"
        'Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "F2", "F2", "{BBBBBBBB-BBBB-BBBB-BBBB-BBBBBBBBBBBB}"\n'
        "EndProject\n"
        "Global\n"
        "\tGlobalSection(NestedProjects) = preSolution\n"
        "\t\t{AAAAAAAA-AAAA-AAAA-AAAA-AAAAAAAAAAAA} = {BBBBBBBB-BBBB-BBBB-BBBB-BBBBBBBBBBBB}\n"
        "\t\t{BBBBBBBB-BBBB-BBBB-BBBB-BBBBBBBBBBBB} = {AAAAAAAA-AAAA-AAAA-AAAA-AAAAAAAAAAAA}\n"
        "\tEndGlobalSection\n"
        "EndGlobal\n",
        encoding="utf-8",
    )
    output = tmp_path / "tree.json"
    args = SimpleNamespace(command="tree", solution=str(sln), output=str(output), config=None)

    assert export_command(args) == 1
    assert not output.exists()
