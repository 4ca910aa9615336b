"""Formatting check shared by the styling and code-style groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.base import SCRIPT_EXTS

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

BLANK_LINE_BEFORE_RETURN = Check(
    name="blank-line-before-return",
    severity=Severity.WARNING,
    message="Found {count} missing blank lines before return statements in these files:",
    passed="Found proper spacing before return statements.",
)


def missing_blank_lines(content: str) -> list[int]:
    """1-based numbers of ``return`` lines whose previous line is not blank.

    The first line of a file is never reported.
    """
    lines = content.split("\n")
    return [
        index + 1
        for index in range(1, len(lines))
        if lines[index].strip().startswith("return") and lines[index - 1].strip() != ""
    ]


def check_blank_line_before_return(ctx: ScanContext, results: ResultSet) -> None:
    finding = Finding()
    for _path, rel, content in ctx.sources(SCRIPT_EXTS):
        issues = missing_blank_lines(content)
        if issues:
            finding.add_note(
                rel,
                f"lines {', '.join(str(n) for n in issues)}",
                occurrences=len(issues),
            )
    results.record(BLANK_LINE_BEFORE_RETURN, finding)
