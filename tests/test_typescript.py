"""Tests for guidecheck.rules.typescript."""

from __future__ import annotations

from typing import TYPE_CHECKING

from guidecheck.rules import typescript

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from guidecheck.results import ResultSet


class TestAnyType:
    def test_counts_annotations_and_casts(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/a.ts", "let a: any;\nconst b = c as any;\nconst d = <any>e;\n")
        entry = find_entry(run_group(typescript.GROUP).failed, "Found 3 uses of 'any'")
        assert "  src/a.ts (3 uses)" in entry.splitlines()

    def test_words_containing_any_do_not_count(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/a.ts", "const company: Company = anything;\n")
        assert 'No uses of "any" found.' in run_group(typescript.GROUP).passed

    def test_js_files_not_scanned(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/a.js", "let a: any;\n")
        assert 'No uses of "any" found.' in run_group(typescript.GROUP).passed


class TestEnumsAndExports:
    def test_enums(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/a.ts", "enum Color { Red }\nexport const enum Size { S }\n")
        find_entry(run_group(typescript.GROUP).failed, "Found 2 enums.")

    def test_default_export(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/A.tsx", "export default A;\n")
        find_entry(run_group(typescript.GROUP).failed, "Found 1 default exports in TypeScript")

    def test_wildcard_barrel_only_in_index(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/index.ts", "export * from './a';\nexport * from './b';\n")
        write("src/other.ts", "export * from './c';\n")
        entry = find_entry(run_group(typescript.GROUP).failed, "Found 2 barrel exports.")
        assert entry.splitlines()[1:] == ["  src/index.ts (2 wildcard re-exports)"]

    def test_clean_project(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/a.ts", "export const a: number = 1;\n")
        results = run_group(typescript.GROUP)
        assert results.failed == []
        assert len(results.passed) == len(typescript.CHECKS)
