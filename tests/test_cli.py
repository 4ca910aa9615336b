"""Tests for the guidecheck CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from guidecheck.cli import main
from guidecheck.report import DEFAULT_REPORT_NAME
from guidecheck.style_import import DEFAULT_PACKAGE, DEFAULT_STATEMENT

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def _clean_manifest(write: Callable[..., Path]) -> None:
    write("package.json", json.dumps({"dependencies": {"react": "^18.2.0"}}))


class TestAnalyzeCommand:
    def test_failures_exit_1_and_write_report(self, project: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["analyze", "--project", str(project)])
        assert result.exit_code == 1, result.output
        assert "--- Guideline Analysis Summary ---" in result.output
        assert "[FAIL] No error boundaries found." in result.output
        assert (project / DEFAULT_REPORT_NAME).is_file()
        assert "Report written to" in result.output

    def test_clean_run_exits_0(self, project: Path, write: Callable[..., Path]) -> None:
        _clean_manifest(write)
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["analyze", "--project", str(project), "--only", "state-management", "--no-report"],
        )
        assert result.exit_code == 0, result.output
        assert "[ok] No Redux dependencies found." in result.output
        assert "Total Checks: 1" in result.output
        assert not (project / DEFAULT_REPORT_NAME).exists()

    def test_json_output(self, project: Path, write: Callable[..., Path]) -> None:
        _clean_manifest(write)
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "analyze",
                "--project",
                str(project),
                "--format",
                "json",
                "--only",
                "state-management",
                "--no-report",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["passed"] == ["No Redux dependencies found."]
        assert data["summary"]["total"] == 1

    def test_custom_report_path(self, project: Path, tmp_path: Path) -> None:
        target = tmp_path / "out.html"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["analyze", "--project", str(project), "--only", "react", "--report", str(target)],
        )
        assert result.exit_code == 1
        assert target.is_file()
        assert not (project / DEFAULT_REPORT_NAME).exists()

    def test_unwritable_report_exits_2(self, project: Path, tmp_path: Path) -> None:
        target = tmp_path / "no-such-dir" / "out.html"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["analyze", "--project", str(project), "--only", "react", "--report", str(target)],
        )
        assert result.exit_code == 2
        assert "Cannot write report" in result.output

    def test_unknown_group_exits_2(self, project: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["analyze", "--project", str(project), "--only", "nope"])
        assert result.exit_code == 2
        assert "unknown rule group" in result.output

    def test_bad_config_exits_2(self, project: Path, write: Callable[..., Path]) -> None:
        write(".guidecheck.yml", "ignore: not-a-list\n")
        runner = CliRunner()
        result = runner.invoke(main, ["analyze", "--project", str(project), "--no-report"])
        assert result.exit_code == 2
        assert "'ignore' must be a list" in result.output

    def test_undecodable_config_falls_back_to_defaults(
        self, project: Path, write: Callable[..., Path]
    ) -> None:
        _clean_manifest(write)
        write(".guidecheck.yml", b"code_style:\n  max_line_length: \xff\xfe\n")
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["analyze", "--project", str(project), "--only", "state-management", "--no-report"],
        )
        assert result.exception is None, result.output
        assert result.exit_code == 0

    def test_ignore_option(self, project: Path, write: Callable[..., Path]) -> None:
        write("src/Old.tsx", "class Old extends React.Component {}\n")
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "analyze",
                "--project",
                str(project),
                "--only",
                "react",
                "--ignore",
                "src/Old.tsx",
                "--no-report",
            ],
        )
        assert "[ok] No class components found." in result.output

    def test_missing_project_dir(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["analyze", "--project", str(tmp_path / "missing")])
        assert result.exit_code == 2


class TestRulesCommand:
    def test_lists_groups_and_checks(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["rules"])
        assert result.exit_code == 0
        assert "react: React conventions" in result.output
        assert "  - class-components [failed]" in result.output
        assert "  - long-lines [warnings]" in result.output


class TestCheckStyleImportCommand:
    def test_passes_without_package(self, project: Path, write: Callable[..., Path]) -> None:
        _clean_manifest(write)
        runner = CliRunner()
        result = runner.invoke(main, ["check-style-import", "--project", str(project)])
        assert result.exit_code == 0
        assert result.output.startswith("[ok] No ")

    def test_fails_without_statement(self, project: Path, write: Callable[..., Path]) -> None:
        write("package.json", json.dumps({"dependencies": {DEFAULT_PACKAGE: "^31.0.0"}}))
        write("src/index.tsx", "import React from 'react';\n")
        runner = CliRunner()
        result = runner.invoke(main, ["check-style-import", "--project", str(project)])
        assert result.exit_code == 1
        assert DEFAULT_STATEMENT in result.output

    def test_min_major_option(self, project: Path, write: Callable[..., Path]) -> None:
        write("package.json", json.dumps({"dependencies": {DEFAULT_PACKAGE: "^31.0.0"}}))
        runner = CliRunner()
        result = runner.invoke(
            main, ["check-style-import", "--project", str(project), "--min-major", "40"]
        )
        assert result.exit_code == 0
        assert "No check needed" in result.output


class TestVersion:
    def test_version(self) -> None:
        from guidecheck import __version__

        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
