"""Testing conventions: assertion style in ``*.test.*`` / ``*.spec.*`` files."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.base import SCRIPT_EXTS, RuleGroup, is_test_file

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_TRANSLATION_ASSERT_RE = re.compile(r"expect\(.*\bt\(.*\).*\)")

DOCUMENT_ASSERTIONS = Check(
    name="to-be-in-the-document",
    severity=Severity.WARNING,
    message="Found {count} .toBeInTheDocument() assertions in tests. Prefer .toBeVisible().",
    passed="No .toBeInTheDocument() usage found.",
)
TRANSLATION_KEY_ASSERTIONS = Check(
    name="translation-key-assertions",
    severity=Severity.WARNING,
    message=(
        "Found {count} tests asserting against translation keys. "
        "Assert against rendered text instead."
    ),
    passed="No tests found asserting against translation keys.",
)

CHECKS = (DOCUMENT_ASSERTIONS, TRANSLATION_KEY_ASSERTIONS)


def check_testing_rules(ctx: ScanContext, results: ResultSet) -> None:
    document = Finding()
    translation_keys = Finding()

    for path, rel, content in ctx.sources(SCRIPT_EXTS):
        if not is_test_file(path):
            continue
        in_document = content.count(".toBeInTheDocument()")
        if in_document:
            document.add_tally(rel, in_document, "assertions")
        for number, line in enumerate(content.splitlines(), start=1):
            if _TRANSLATION_ASSERT_RE.search(line):
                translation_keys.add_line(rel, number, excerpt=line)

    results.record(DOCUMENT_ASSERTIONS, document)
    results.record(TRANSLATION_KEY_ASSERTIONS, translation_keys)


GROUP = RuleGroup(
    name="testing",
    title="Testing conventions",
    extensions=SCRIPT_EXTS,
    checks=CHECKS,
    run=check_testing_rules,
)
