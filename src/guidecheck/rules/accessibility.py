"""Accessibility: translation resources, keyboard handlers, ARIA and role attributes."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity, Trigger
from guidecheck.rules.base import JSX_EXTS, RuleGroup, is_test_file

if TYPE_CHECKING:
    from pathlib import Path

    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_KEYBOARD_RE = re.compile(r"\bonKey(?:Down|Press|Up)\b")
_ARIA_RE = re.compile(r"aria-[a-z]+")
_ROLE_RE = re.compile(r"""role=["'][a-z]+["']""")

RESOURCE_EXTS: frozenset[str] = frozenset({".json", ".yml", ".yaml"})

KEYBOARD_NAV_MIN = 10
ARIA_MIN = 20
ROLE_MIN = 20

TRANSLATION_FILES = Check(
    name="translation-files",
    severity=Severity.FAILED,
    message="No translation files found. All text should be in translation files.",
    passed="Translation files are present.",
    trigger=Trigger.MISSING,
)
KEYBOARD_NAVIGATION = Check(
    name="keyboard-navigation",
    severity=Severity.WARNING,
    message=(
        "Found only {count} instances of keyboard navigation controls "
        "(e.g., onKeyDown). Ensure app is navigable via keyboard."
    ),
    passed="Sufficient keyboard navigation controls found ({count}).",
    trigger=Trigger.BELOW,
    limit=KEYBOARD_NAV_MIN,
)
ARIA_ATTRIBUTES = Check(
    name="aria-attributes",
    severity=Severity.WARNING,
    message="Found only {count} ARIA attributes. Ensure components are accessible.",
    passed="Sufficient ARIA attributes found ({count}).",
    trigger=Trigger.BELOW,
    limit=ARIA_MIN,
)
ROLE_ATTRIBUTES = Check(
    name="role-attributes",
    severity=Severity.WARNING,
    message="Found only {count} role attributes. Ensure semantic roles are used.",
    passed="Sufficient role attributes found ({count}).",
    trigger=Trigger.BELOW,
    limit=ROLE_MIN,
)

CHECKS = (TRANSLATION_FILES, KEYBOARD_NAVIGATION, ARIA_ATTRIBUTES, ROLE_ATTRIBUTES)


def in_translations_dir(rel: str) -> bool:
    return "translations" in rel.split("/")[:-1]


def _is_translation_resource(ctx: ScanContext, path: Path, rel: str) -> bool:
    if in_translations_dir(rel):
        return True
    if path.suffix.lower() not in RESOURCE_EXTS:
        return False
    content = ctx.read(path)
    return content is not None and "translations" in content


def check_accessibility_rules(ctx: ScanContext, results: ResultSet) -> None:
    translations = Finding()
    keyboard = Finding()
    aria = Finding()
    roles = Finding()

    for path in ctx.files():
        rel = ctx.relative(path)
        if _is_translation_resource(ctx, path, rel):
            translations.add_file(rel)

        if path.suffix.lower() not in JSX_EXTS or is_test_file(path):
            continue
        content = ctx.read(path)
        if content is None:
            continue

        handler_count = len(_KEYBOARD_RE.findall(content))
        if handler_count:
            keyboard.add_file(rel, handler_count)

        aria_count = len(_ARIA_RE.findall(content))
        if aria_count:
            aria.add_file(rel, aria_count)

        role_count = len(_ROLE_RE.findall(content))
        if role_count:
            roles.add_file(rel, role_count)

    results.record(TRANSLATION_FILES, translations)
    results.record(KEYBOARD_NAVIGATION, keyboard)
    results.record(ARIA_ATTRIBUTES, aria)
    results.record(ROLE_ATTRIBUTES, roles)


GROUP = RuleGroup(
    name="accessibility",
    title="Accessibility",
    extensions=JSX_EXTS | RESOURCE_EXTS,
    checks=CHECKS,
    run=check_accessibility_rules,
)
