"""State-management policy: no global-state library in declared dependencies."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.base import RuleGroup

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

PACKAGE_JSON = "package.json"
DISALLOWED_PACKAGES: tuple[str, ...] = ("redux", "react-redux", "@reduxjs/toolkit")
_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")

GLOBAL_STATE = Check(
    name="global-state-library",
    severity=Severity.FAILED,
    message="Redux detected ({count} packages). Global state should be avoided.",
    passed="No Redux dependencies found.",
)

CHECKS = (GLOBAL_STATE,)


def check_state_management_rules(ctx: ScanContext, results: ResultSet) -> None:
    finding = Finding()
    manifest = ctx.root / PACKAGE_JSON
    if manifest.is_file():
        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            results.record_warning(f"Error reading {PACKAGE_JSON}\n  {exc}")
            return

        declared: dict[str, object] = {}
        if isinstance(data, dict):
            for section in _DEPENDENCY_SECTIONS:
                deps = data.get(section)
                if isinstance(deps, dict):
                    declared.update(deps)

        for name in DISALLOWED_PACKAGES:
            if name in declared:
                finding.add_note(PACKAGE_JSON, f"{name} {declared[name]}")

    results.record(GLOBAL_STATE, finding)


GROUP = RuleGroup(
    name="state-management",
    title="State management",
    extensions=frozenset({".json"}),
    checks=CHECKS,
    run=check_state_management_rules,
)
