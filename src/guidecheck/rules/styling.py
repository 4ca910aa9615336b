"""Styling conventions: CSS modules, hardcoded colors, ``!important`` overrides."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity, Trigger
from guidecheck.rules.base import JSX_EXTS, SCRIPT_EXTS, STYLE_EXTS, RuleGroup
from guidecheck.rules.formatting import (
    BLANK_LINE_BEFORE_RETURN,
    check_blank_line_before_return,
)

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_CSS_MODULE_RE = re.compile(r"\.module\.(?:css|scss)$")
_COLOR_RE = re.compile(r"#[0-9a-f]{3,8}\b|\brgba?\(", re.IGNORECASE)

COLOR_EXTS = STYLE_EXTS | JSX_EXTS

CSS_MODULES = Check(
    name="css-modules",
    severity=Severity.FAILED,
    message="No CSS Modules found. Should be using CSS Modules.",
    passed="CSS Modules are being used ({count} module files).",
    trigger=Trigger.MISSING,
)
HARDCODED_COLORS = Check(
    name="hardcoded-colors",
    severity=Severity.FAILED,
    message="Found {count} hardcoded colors. Use design tokens/variables.",
    passed="No hardcoded colors found.",
)
IMPORTANT_DECLARATIONS = Check(
    name="important-declarations",
    severity=Severity.WARNING,
    message="Found {count} !important declarations. Consider refactoring CSS specificity.",
    passed="No !important declarations found. Good CSS specificity.",
)

CHECKS = (CSS_MODULES, HARDCODED_COLORS, IMPORTANT_DECLARATIONS, BLANK_LINE_BEFORE_RETURN)


def check_style_rules(ctx: ScanContext, results: ResultSet) -> None:
    modules = Finding()
    colors = Finding()
    important = Finding()

    for path in ctx.files(COLOR_EXTS):
        rel = ctx.relative(path)
        if _CSS_MODULE_RE.search(path.name):
            modules.add_file(rel)

        content = ctx.read(path)
        if content is None:
            continue

        color_count = len(_COLOR_RE.findall(content))
        if color_count:
            colors.add_tally(rel, color_count, "colors")

        if path.suffix.lower() in STYLE_EXTS:
            important_count = content.count("!important")
            if important_count:
                important.add_tally(rel, important_count, "declarations")

    results.record(CSS_MODULES, modules)
    results.record(HARDCODED_COLORS, colors)
    results.record(IMPORTANT_DECLARATIONS, important)
    check_blank_line_before_return(ctx, results)


GROUP = RuleGroup(
    name="styling",
    title="Styling conventions",
    extensions=COLOR_EXTS | SCRIPT_EXTS,
    checks=CHECKS,
    run=check_style_rules,
)
