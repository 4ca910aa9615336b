"""Translation hygiene: key ordering, plural key names, concatenated ``t()`` calls."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

import yaml

from guidecheck.results import Check, Finding, Severity
from guidecheck.rules.accessibility import in_translations_dir
from guidecheck.rules.base import JSX_EXTS, RuleGroup

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

COUNT_PLACEHOLDER = "{{count}}"
PLURAL_SUFFIXES: tuple[str, ...] = ("_plural", "_zero", "_one", "_two", "_few", "_many", "_other")
RESOURCE_NAMES: frozenset[str] = frozenset({"web.json"})
JSON_EXTS: frozenset[str] = frozenset({".json"})
YAML_EXTS: frozenset[str] = frozenset({".yml", ".yaml"})

_TEMPLATE_T_RE = re.compile(r"`[^`\n]*\bt\([^`\n]*\)[^`\n]*`")
_PLUS_T_RE = re.compile(r"\bt\([^()\n]*\)\s*\+|\+\s*\bt\(")

UNSORTED_KEYS = Check(
    name="sorted-keys",
    severity=Severity.WARNING,
    message="Found {count} translation files not sorted alphabetically:",
    passed="All translation files are sorted alphabetically.",
)
PLURAL_KEYS = Check(
    name="plural-keys",
    severity=Severity.WARNING,
    message="Found {count} keys with '{{{{count}}}}' that do not end in '_plural':",
    passed="Plural keys follow the `_plural` convention.",
)
CONCATENATION = Check(
    name="translation-concatenation",
    severity=Severity.WARNING,
    message="Found {count} translation concatenations. Use interpolation.",
    passed="No translation string concatenation detected.",
)

CHECKS = (UNSORTED_KEYS, PLURAL_KEYS, CONCATENATION)


def is_translation_resource(rel: str, path: Path) -> bool:
    suffix = path.suffix.lower()
    if path.name in RESOURCE_NAMES:
        return True
    return in_translations_dir(rel) and suffix in JSON_EXTS | YAML_EXTS


def load_resource(path: Path) -> Any:
    """Parse a JSON or YAML translation resource.

    Raises ``ValueError`` (``json.JSONDecodeError``), ``yaml.YAMLError``,
    ``OSError`` or ``UnicodeDecodeError`` on unreadable input.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_EXTS:
        return yaml.safe_load(text)
    return json.loads(text)


def is_sorted(keys: list[str]) -> bool:
    return keys == sorted(keys, key=lambda k: (k.casefold(), k))


def unpluralized_keys(
    data: dict[str, Any],
    prefix: str = "",
    _ancestors: frozenset[int] = frozenset(),
) -> Iterator[str]:
    """Yield dotted key paths whose string value uses ``{{count}}`` without a plural suffix.

    A mapping that contains itself (a recursive YAML alias) is not descended
    into a second time along the same path.
    """
    ancestors = _ancestors | {id(data)}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            if id(value) in ancestors:
                continue
            yield from unpluralized_keys(value, prefix=f"{name}.", _ancestors=ancestors)
        elif (
            isinstance(value, str)
            and COUNT_PLACEHOLDER in value
            and not str(key).endswith(PLURAL_SUFFIXES)
        ):
            yield name


def count_concatenations(content: str) -> list[tuple[int, str]]:
    hits: list[tuple[int, str]] = []
    for number, line in enumerate(content.splitlines(), start=1):
        occurrences = len(_TEMPLATE_T_RE.findall(line)) + len(_PLUS_T_RE.findall(line))
        hits.extend((number, line) for _ in range(occurrences))
    return hits


def check_translation_rules(ctx: ScanContext, results: ResultSet) -> None:
    unsorted = Finding()
    plurals = Finding()
    concatenations = Finding()

    for path in ctx.files():
        rel = ctx.relative(path)

        if is_translation_resource(rel, path):
            try:
                data = load_resource(path)
            except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
                results.record_warning(f"Error reading translation file: {rel}\n  {exc}")
                data = None
            if isinstance(data, dict):
                if not is_sorted([str(k) for k in data]):
                    unsorted.add_file(rel)
                bad_keys = list(unpluralized_keys(data))
                if bad_keys:
                    plurals.add_note(rel, f"keys: {', '.join(bad_keys)}", occurrences=len(bad_keys))

        if path.suffix.lower() in JSX_EXTS:
            content = ctx.read(path)
            if content is None:
                continue
            for number, line in count_concatenations(content):
                concatenations.add_line(rel, number, excerpt=line)

    results.record(UNSORTED_KEYS, unsorted)
    results.record(PLURAL_KEYS, plurals)
    results.record(CONCATENATION, concatenations)


GROUP = RuleGroup(
    name="translations",
    title="Translation hygiene",
    extensions=JSX_EXTS | JSON_EXTS | YAML_EXTS,
    checks=CHECKS,
    run=check_translation_rules,
)
