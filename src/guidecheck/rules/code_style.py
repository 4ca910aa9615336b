"""Code style: line length, barrel re-exports, default exports."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.base import SCRIPT_EXTS, RuleGroup
from guidecheck.rules.formatting import (
    BLANK_LINE_BEFORE_RETURN,
    check_blank_line_before_return,
)

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_EXPORT_FROM_RE = re.compile(r"""export\s+.*\s+from\s+['"].*['"]""")
_SPECIFIERS_RE = re.compile(r"\{([^}]+)\}")
_DEFAULT_EXPORT_RE = re.compile(r"export\s+default\s+")

LONG_LINES = Check(
    name="long-lines",
    severity=Severity.WARNING,
    message="Found {count} lines exceeding {limit} chars. Consider breaking these lines down.",
    passed="Line lengths are within limits.",
)
BARREL_EXPORTS = Check(
    name="barrel-exports",
    severity=Severity.FAILED,
    message=(
        "Found {count} files with multiple barrel exports. "
        "Only single exports are allowed from a barrel file."
    ),
    passed="No invalid barrel exports found.",
)
DEFAULT_EXPORTS = Check(
    name="default-exports",
    severity=Severity.FAILED,
    message="Found {count} default exports. Always use named exports as per guidelines.",
    passed="No default exports found.",
)

CHECKS = (LONG_LINES, BARREL_EXPORTS, DEFAULT_EXPORTS, BLANK_LINE_BEFORE_RETURN)


def describe_reexports(content: str) -> str | None:
    """Describe a file's multi-symbol re-exports, or None when it has at most one.

    Counts the identifiers named across every ``export ... from '...'`` clause;
    any ``*`` re-export counts as a wildcard.
    """
    identifiers = 0
    wildcard = False
    for match in _EXPORT_FROM_RE.finditer(content):
        clause = match.group(0)
        if "*" in clause:
            wildcard = True
            continue
        specifiers = _SPECIFIERS_RE.search(clause)
        if specifiers:
            identifiers += len([s for s in specifiers.group(1).split(",") if s.strip()])

    if not wildcard and identifiers <= 1:
        return None
    parts: list[str] = []
    if wildcard:
        parts.append("a wildcard (`*`) export")
    if identifiers > 1:
        parts.append(f"{identifiers} identifiers")
    return "exports " + " and ".join(parts)


def check_code_style_rules(ctx: ScanContext, results: ResultSet) -> None:
    max_length = ctx.settings.code_style.max_line_length
    long_lines = Finding()
    barrels = Finding()
    defaults = Finding()

    for _path, rel, content in ctx.sources(SCRIPT_EXTS):
        for number, line in enumerate(content.splitlines(), start=1):
            if len(line) > max_length:
                long_lines.add_line(rel, number, excerpt=line, note=f"{len(line)} chars")

        description = describe_reexports(content)
        if description is not None:
            barrels.add_note(rel, description)

        if _DEFAULT_EXPORT_RE.search(content):
            defaults.add_file(rel)

    results.record(LONG_LINES, long_lines, limit=max_length)
    results.record(BARREL_EXPORTS, barrels)
    results.record(DEFAULT_EXPORTS, defaults)
    check_blank_line_before_return(ctx, results)


GROUP = RuleGroup(
    name="code-style",
    title="Code style",
    extensions=SCRIPT_EXTS,
    checks=CHECKS,
    run=check_code_style_rules,
)
