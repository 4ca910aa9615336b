"""Tests for the result model: checks, findings, result set, summary."""

from __future__ import annotations

import pytest

from guidecheck.results import (
    Check,
    Finding,
    Location,
    ResultSet,
    Severity,
    Trigger,
    summarize,
)


def _check(trigger: Trigger = Trigger.ANY, limit: int = 0) -> Check:
    return Check(
        name="sample",
        severity=Severity.WARNING,
        message="Found {count} things (limit {limit}):",
        passed="All good ({count}).",
        trigger=trigger,
        limit=limit,
    )


class TestTrigger:
    @pytest.mark.parametrize(
        ("trigger", "limit", "count", "expected"),
        [
            (Trigger.ANY, 0, 0, False),
            (Trigger.ANY, 0, 1, True),
            (Trigger.MISSING, 0, 0, True),
            (Trigger.MISSING, 0, 3, False),
            (Trigger.BELOW, 10, 9, True),
            (Trigger.BELOW, 10, 10, False),
            (Trigger.ABOVE, 10, 10, False),
            (Trigger.ABOVE, 10, 11, True),
        ],
    )
    def test_is_triggered(self, trigger: Trigger, limit: int, count: int, expected: bool) -> None:
        assert _check(trigger, limit).is_triggered(count) is expected


class TestFinding:
    def test_add_file_lists_file_once(self) -> None:
        finding = Finding()
        finding.add_file("a.tsx")
        finding.add_file("a.tsx", occurrences=2)
        finding.add_file("b.tsx")
        assert finding.count == 4
        assert finding.files == ["a.tsx", "b.tsx"]
        assert len(finding.locations) == 2

    def test_add_tally_note(self) -> None:
        finding = Finding()
        finding.add_tally("a.css", 3, "colors")
        assert finding.count == 3
        assert finding.locations[0].render() == "  a.css (3 colors)"

    def test_add_line_truncates_excerpt(self) -> None:
        finding = Finding()
        finding.add_line("a.ts", 7, "   " + "x" * 200 + "   ")
        loc = finding.locations[0]
        assert loc.line == 7
        assert loc.excerpt is not None
        assert len(loc.excerpt) == 120
        assert loc.excerpt.endswith("...")

    def test_add_line_keeps_every_occurrence(self) -> None:
        finding = Finding()
        finding.add_line("a.ts", 1)
        finding.add_line("a.ts", 2)
        assert finding.count == 2
        assert finding.files == ["a.ts"]
        assert len(finding.locations) == 2


class TestLocation:
    def test_render_full(self) -> None:
        loc = Location("src/a.ts", line=4, excerpt="let x = 1", note="90 chars")
        assert loc.render() == "  src/a.ts:4 (90 chars) | let x = 1"

    def test_render_file_only(self) -> None:
        assert Location("src/a.ts").render() == "  src/a.ts"


class TestCheckRender:
    def test_not_triggered_uses_passed_template(self) -> None:
        severity, text = _check().render(Finding())
        assert severity is Severity.PASSED
        assert text == "All good (0)."

    def test_triggered_lists_locations(self) -> None:
        finding = Finding()
        finding.add_file("a.tsx")
        finding.add_file("b.tsx")
        severity, text = _check(limit=5).render(finding)
        assert severity is Severity.WARNING
        assert text.splitlines() == ["Found 2 things (limit 5):", "  a.tsx", "  b.tsx"]

    def test_limit_override(self) -> None:
        finding = Finding()
        finding.add_file("a.tsx")
        _, text = _check(limit=5).render(finding, limit=99)
        assert text.startswith("Found 1 things (limit 99):")


class TestResultSet:
    def test_record_routes_to_bucket(self) -> None:
        results = ResultSet()
        finding = Finding()
        finding.add_file("a.ts")
        assert results.record(_check(), finding) is Severity.WARNING
        assert results.record(_check(), Finding()) is Severity.PASSED
        assert len(results.warnings) == 1
        assert len(results.passed) == 1
        assert results.failed == []

    def test_entries_never_deduplicated(self) -> None:
        results = ResultSet()
        results.record_pass("same")
        results.record_pass("same")
        assert results.passed == ["same", "same"]
        assert len(results) == 2

    def test_snapshot_returns_live_lists(self) -> None:
        results = ResultSet()
        snap = results.snapshot()
        results.record_fail("boom")
        assert snap.failed == ["boom"]
        assert snap.passed is results.passed

    def test_insertion_order(self) -> None:
        results = ResultSet()
        for message in ("one", "two", "three"):
            results.record_warning(message)
        assert results.warnings == ["one", "two", "three"]


class TestSummary:
    def test_counts_and_exit_code(self) -> None:
        results = ResultSet()
        results.record_pass("p")
        results.record_warning("w")
        summary = summarize(results)
        assert (summary.total, summary.passed, summary.failed, summary.warnings) == (2, 1, 0, 1)
        assert summary.exit_code == 0

        results.record_fail("f")
        assert summarize(results).exit_code == 1
