"""Security heuristics: type-only imports, sensitive logging, inline scripts."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity, Trigger
from guidecheck.rules.base import MARKUP_EXTS, SCRIPT_EXTS, RuleGroup

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_TYPE_IMPORT_RE = re.compile(r"\bimport\s+type\s")
_LOG_CALL_RE = re.compile(r"\bconsole\.(?:log|info|debug|warn|error)\(")
_SENSITIVE_RE = re.compile(r"password|token|secret", re.IGNORECASE)
_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^>]*>([\s\S]*?)</script>", re.IGNORECASE)
_SCRIPT_OPEN_RE = re.compile(r"<script\b[^>]*>", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"""\bon[a-z]+\s*=\s*["'].*?["']""")

TYPE_IMPORTS = Check(
    name="type-imports",
    severity=Severity.WARNING,
    message="No type imports found. Consider using them.",
    passed="Using type imports for better type safety ({count} files).",
    trigger=Trigger.MISSING,
)
SENSITIVE_LOGGING = Check(
    name="sensitive-logging",
    severity=Severity.FAILED,
    message="Found {count} potential sensitive data logs. Remove or secure these logs.",
    passed="No sensitive data logging detected.",
)
INLINE_SCRIPTS = Check(
    name="inline-scripts",
    severity=Severity.WARNING,
    message="Found {count} inline scripts. Move to external files.",
    passed="No inline scripts found.",
)

CHECKS = (TYPE_IMPORTS, SENSITIVE_LOGGING, INLINE_SCRIPTS)


def find_inline_scripts(content: str) -> list[str]:
    """Script blocks with a body and ``on<event>=`` handler attributes.

    Externally sourced scripts (``src=``) and empty blocks are excluded.
    """
    matches: list[str] = []
    for block in _SCRIPT_BLOCK_RE.finditer(content):
        opening = _SCRIPT_OPEN_RE.match(block.group(0))
        if opening and "src=" in opening.group(0):
            continue
        if not block.group(1).strip():
            continue
        matches.append(block.group(0))
    matches.extend(
        m.group(0) for m in _EVENT_HANDLER_RE.finditer(content) if "src=" not in m.group(0)
    )
    return matches


def check_security_rules(ctx: ScanContext, results: ResultSet) -> None:
    type_imports = Finding()
    sensitive = Finding()
    inline = Finding()

    for path in ctx.files(SCRIPT_EXTS | MARKUP_EXTS):
        content = ctx.read(path)
        if content is None:
            continue
        rel = ctx.relative(path)

        if path.suffix.lower() in SCRIPT_EXTS:
            if _TYPE_IMPORT_RE.search(content):
                type_imports.add_file(rel)
            for number, line in enumerate(content.splitlines(), start=1):
                if _LOG_CALL_RE.search(line) and _SENSITIVE_RE.search(line):
                    sensitive.add_line(rel, number, excerpt=line)
        else:
            scripts = find_inline_scripts(content)
            if scripts:
                inline.add_tally(rel, len(scripts), "inline script(s)")

    results.record(TYPE_IMPORTS, type_imports)
    results.record(SENSITIVE_LOGGING, sensitive)
    results.record(INLINE_SCRIPTS, inline)


GROUP = RuleGroup(
    name="security",
    title="Security",
    extensions=SCRIPT_EXTS | MARKUP_EXTS,
    checks=CHECKS,
    run=check_security_rules,
)
