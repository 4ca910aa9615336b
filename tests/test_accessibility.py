"""Tests for guidecheck.rules.accessibility."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from guidecheck.rules import accessibility
from guidecheck.rules.accessibility import in_translations_dir

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from guidecheck.results import ResultSet


class TestTranslationFiles:
    def test_missing_fails(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/App.tsx", "export const App = () => null;\n")
        find_entry(run_group(accessibility.GROUP).failed, "No translation files found")

    def test_translations_directory(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/translations/en.json", '{"a": "A"}')
        assert "Translation files are present." in run_group(accessibility.GROUP).passed

    def test_resource_mentioning_translations(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("config/i18n.yml", "translations:\n  path: locales\n")
        assert "Translation files are present." in run_group(accessibility.GROUP).passed

    @pytest.mark.parametrize(
        ("rel", "expected"),
        [
            ("translations/en.json", True),
            ("src/translations/de/web.json", True),
            ("src/translations.ts", False),
            ("src/my-translations/en.json", False),
        ],
    )
    def test_in_translations_dir(self, rel: str, expected: bool) -> None:
        assert in_translations_dir(rel) is expected


class TestKeyboardNavigation:
    def test_counts_handler_occurrences(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("A.tsx", "<div onKeyDown={f} />\n<div onKeyUp={g} />\n")
        write("B.jsx", "<input onKeyPress={h} />\n")
        entry = find_entry(
            run_group(accessibility.GROUP).warnings,
            "Found only 3 instances of keyboard navigation controls",
        )
        assert entry.splitlines()[1:] == ["  A.tsx", "  B.jsx"]

    def test_enough_handlers_pass(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("A.tsx", "<div onKeyDown={f} />\n" * 10)
        results = run_group(accessibility.GROUP)
        assert "Sufficient keyboard navigation controls found (10)." in results.passed

    def test_test_files_excluded(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("A.test.tsx", "<div onKeyDown={f} />\n" * 10)
        find_entry(
            run_group(accessibility.GROUP).warnings,
            "Found only 0 instances of keyboard navigation controls",
        )


class TestAttributes:
    def test_aria_and_role_below_limit(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("A.tsx", '<button aria-label="x" aria-pressed="true" role="button" />\n')
        write("B.tsx", "<div />\n")
        results = run_group(accessibility.GROUP)
        aria = find_entry(results.warnings, "Found only 2 ARIA attributes")
        role = find_entry(results.warnings, "Found only 1 role attributes")
        # only files that contain the attribute are listed
        assert aria.splitlines()[1:] == ["  A.tsx"]
        assert role.splitlines()[1:] == ["  A.tsx"]

    def test_aria_sufficient(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("A.tsx", '<i aria-hidden="true" />\n' * 20)
        assert "Sufficient ARIA attributes found (20)." in run_group(accessibility.GROUP).passed

    def test_group_emits_one_entry_per_check(self, run_group: Callable[..., ResultSet]) -> None:
        assert len(run_group(accessibility.GROUP)) == len(accessibility.CHECKS)
