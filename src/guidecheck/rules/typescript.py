"""TypeScript conventions: ``any``, enums, default exports, wildcard index barrels.

Default-export detection overlaps with the code-style group on purpose; both
groups report independently.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.base import TS_EXTS, RuleGroup

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_ANY_RE = re.compile(r":\s*any\b|\bas\s+any\b|<any>")
_ENUM_RE = re.compile(r"\benum\s+\w+")
_DEFAULT_EXPORT_RE = re.compile(r"\bexport\s+default\b")
_WILDCARD_EXPORT_RE = re.compile(r"export\s*\*\s*from")
_INDEX_NAMES = frozenset({"index.ts", "index.tsx"})

ANY_TYPES = Check(
    name="any-type",
    severity=Severity.FAILED,
    message="Found {count} uses of 'any'. Avoid using 'any'.",
    passed='No uses of "any" found.',
)
ENUMS = Check(
    name="enums",
    severity=Severity.FAILED,
    message="Found {count} enums. Use 'as const' objects or union types instead.",
    passed="No enums found.",
)
DEFAULT_EXPORTS = Check(
    name="default-exports",
    severity=Severity.FAILED,
    message="Found {count} default exports in TypeScript files. Use named exports.",
    passed="No default exports found in TypeScript files.",
)
BARREL_EXPORTS = Check(
    name="barrel-exports",
    severity=Severity.FAILED,
    message="Found {count} barrel exports. Avoid barrel exports.",
    passed="No barrel exports found.",
)

CHECKS = (ANY_TYPES, ENUMS, DEFAULT_EXPORTS, BARREL_EXPORTS)


def check_typescript_rules(ctx: ScanContext, results: ResultSet) -> None:
    any_types = Finding()
    enums = Finding()
    defaults = Finding()
    barrels = Finding()

    for path, rel, content in ctx.sources(TS_EXTS):
        any_count = len(_ANY_RE.findall(content))
        if any_count:
            any_types.add_tally(rel, any_count, "uses")

        enum_count = len(_ENUM_RE.findall(content))
        if enum_count:
            enums.add_file(rel, enum_count)

        if _DEFAULT_EXPORT_RE.search(content):
            defaults.add_file(rel)

        if path.name in _INDEX_NAMES:
            wildcard_count = len(_WILDCARD_EXPORT_RE.findall(content))
            if wildcard_count:
                barrels.add_tally(rel, wildcard_count, "wildcard re-exports")

    results.record(ANY_TYPES, any_types)
    results.record(ENUMS, enums)
    results.record(DEFAULT_EXPORTS, defaults)
    results.record(BARREL_EXPORTS, barrels)


GROUP = RuleGroup(
    name="typescript",
    title="TypeScript conventions",
    extensions=TS_EXTS,
    checks=CHECKS,
    run=check_typescript_rules,
)
