"""React conventions: component style, props access, error boundaries, lazy loading."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity, Trigger
from guidecheck.rules.base import JSX_EXTS, RuleGroup

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext

_CLASS_COMPONENT_RE = re.compile(r"class\s+\w+\s+extends\s+(?:React\.)?(?:Pure)?Component\b")
_FC_TYPE_RE = re.compile(r"\b(?:FC|FunctionComponent)<")
_ERROR_BOUNDARY_RE = re.compile(r"componentDidCatch|static\s+getDerivedStateFromError")
_LAZY_RE = re.compile(r"React\.lazy|\blazy\(\s*\(\)\s*=>")
_CONDITIONAL_RE = re.compile(r"\{.*\?.*:.*\}|\{.*&&.*\}")
_PROPS_ACCESS_RE = re.compile(r"(?<!this\.)\bprops\.[A-Za-z0-9_]+")

CONDITIONAL_RENDER_LIMIT = 10

CLASS_COMPONENTS = Check(
    name="class-components",
    severity=Severity.FAILED,
    message="{count} class components found. Use function components.",
    passed="No class components found.",
)
INLINE_STYLES = Check(
    name="inline-styles",
    severity=Severity.FAILED,
    message="{count} inline style instances found. Use CSS modules.",
    passed="No inline styles found.",
)
FC_TYPES = Check(
    name="fc-type",
    severity=Severity.FAILED,
    message="{count} uses of FC/FunctionComponent type found. Avoid them.",
    passed="No FC/FunctionComponent usage found.",
)
ERROR_BOUNDARIES = Check(
    name="error-boundaries",
    severity=Severity.FAILED,
    message="No error boundaries found. Use them for graceful error handling.",
    passed="{count} error boundaries found.",
    trigger=Trigger.MISSING,
)
LAZY_LOADING = Check(
    name="lazy-loading",
    severity=Severity.FAILED,
    message="No lazy loading found. Use it for conditional components.",
    passed="{count} lazy-loaded components found.",
    trigger=Trigger.MISSING,
)
DIRECT_PROPS = Check(
    name="direct-props-access",
    severity=Severity.WARNING,
    message="Found {count} instances of direct props access. Consider destructuring.",
    passed="Props seem to be destructured correctly.",
)
CONDITIONAL_RENDERS = Check(
    name="conditional-rendering",
    severity=Severity.WARNING,
    message=(
        "Found {count} conditional renders. "
        "Consider extracting complex conditions into components."
    ),
    passed="Reasonable use of conditional rendering.",
    trigger=Trigger.ABOVE,
    limit=CONDITIONAL_RENDER_LIMIT,
)

CHECKS = (
    CLASS_COMPONENTS,
    INLINE_STYLES,
    FC_TYPES,
    ERROR_BOUNDARIES,
    LAZY_LOADING,
    DIRECT_PROPS,
    CONDITIONAL_RENDERS,
)


def check_react_rules(ctx: ScanContext, results: ResultSet) -> None:
    classes = Finding()
    inline_styles = Finding()
    fc_types = Finding()
    boundaries = Finding()
    lazy = Finding()
    props = Finding()
    conditionals = Finding()

    for _path, rel, content in ctx.sources(JSX_EXTS):
        class_matches = len(_CLASS_COMPONENT_RE.findall(content))
        if class_matches:
            classes.add_file(rel, class_matches)

        style_count = content.count("style={{")
        if style_count:
            inline_styles.add_file(rel, style_count)

        fc_count = len(_FC_TYPE_RE.findall(content))
        if fc_count:
            fc_types.add_file(rel, fc_count)

        if _ERROR_BOUNDARY_RE.search(content):
            boundaries.add_file(rel)
        if _LAZY_RE.search(content):
            lazy.add_file(rel)

        props_count = len(_PROPS_ACCESS_RE.findall(content))
        if props_count:
            props.add_tally(rel, props_count, "instances")

        conditional_count = len(_CONDITIONAL_RE.findall(content))
        if conditional_count:
            conditionals.add_tally(rel, conditional_count, "conditionals")

    results.record(CLASS_COMPONENTS, classes)
    results.record(INLINE_STYLES, inline_styles)
    results.record(FC_TYPES, fc_types)
    results.record(ERROR_BOUNDARIES, boundaries)
    results.record(LAZY_LOADING, lazy)
    results.record(DIRECT_PROPS, props)
    results.record(CONDITIONAL_RENDERS, conditionals)


GROUP = RuleGroup(
    name="react",
    title="React conventions",
    extensions=JSX_EXTS,
    checks=CHECKS,
    run=check_react_rules,
)
