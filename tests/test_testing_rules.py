"""Tests for guidecheck.rules.testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from guidecheck.rules import testing

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from guidecheck.results import ResultSet


SPEC_FILE = """\
it('renders', () => {
  render(<Banner />);
  expect(screen.getByText('Hello')).toBeInTheDocument();
  expect(screen.getByRole('alert')).toBeInTheDocument();
  expect(screen.getByText(t('banner.title'))).toBeVisible();
});
"""


class TestDocumentAssertions:
    def test_counts_assertions_in_test_files(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/Banner.test.tsx", SPEC_FILE)
        entry = find_entry(
            run_group(testing.GROUP).warnings, "Found 2 .toBeInTheDocument() assertions"
        )
        assert "  src/Banner.test.tsx (2 assertions)" in entry.splitlines()

    def test_non_test_files_ignored(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/Banner.tsx", SPEC_FILE)
        results = run_group(testing.GROUP)
        assert "No .toBeInTheDocument() usage found." in results.passed
        assert "No tests found asserting against translation keys." in results.passed


class TestTranslationKeyAssertions:
    def test_flags_t_calls_inside_expect(
        self,
        write: Callable[..., Path],
        run_group: Callable[..., ResultSet],
        find_entry: Callable[[list[str], str], str],
    ) -> None:
        write("src/Banner.spec.js", SPEC_FILE)
        entry = find_entry(
            run_group(testing.GROUP).warnings, "Found 1 tests asserting against translation keys"
        )
        assert entry.splitlines()[1].startswith("  src/Banner.spec.js:5 | expect(")

    def test_get_by_text_alone_is_not_a_translation_call(
        self, write: Callable[..., Path], run_group: Callable[..., ResultSet]
    ) -> None:
        write("src/A.test.ts", "expect(getByText('x')).toBeVisible();\n")
        passed = run_group(testing.GROUP).passed
        assert "No tests found asserting against translation keys." in passed
