"""Performance heuristics: memoization hooks, data-fetching hooks, large assets."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from guidecheck.results import Check, Finding, Severity, Trigger
from guidecheck.rules.base import JSX_EXTS, RuleGroup

if TYPE_CHECKING:
    from guidecheck.results import ResultSet
    from guidecheck.rules.base import ScanContext
    from guidecheck.settings import PerformanceMetrics

logger = logging.getLogger(__name__)

_DATA_HOOK_RE = re.compile(r"\buse(?:Query|Mutation|InfiniteQuery)\(")

LARGE_ASSET_BYTES = 100 * 1024

# asset class -> suffixes; classes are reported in this order
ASSET_TYPES: dict[str, frozenset[str]] = {
    "images": frozenset({".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico"}),
    "fonts": frozenset({".woff", ".woff2", ".ttf", ".otf", ".eot"}),
    "scripts": frozenset({".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"}),
    "styles": frozenset({".css", ".scss", ".less"}),
}

USE_MEMO = Check(
    name="use-memo",
    severity=Severity.WARNING,
    message="No useMemo optimizations found.",
    passed="Found {count} useMemo optimizations.",
    trigger=Trigger.MISSING,
)
USE_CALLBACK = Check(
    name="use-callback",
    severity=Severity.WARNING,
    message="No useCallback optimizations found.",
    passed="Found {count} useCallback optimizations.",
    trigger=Trigger.MISSING,
)
DATA_FETCHING = Check(
    name="data-fetching",
    severity=Severity.WARNING,
    message="No React Query usage found.",
    passed="Found {count} React Query usages.",
    trigger=Trigger.MISSING,
)
LARGE_ASSETS = Check(
    name="large-assets",
    severity=Severity.WARNING,
    message="Found {count} large assets (>100KB).",
    passed="No large static assets found (>100KB).",
)

CHECKS = (USE_MEMO, USE_CALLBACK, DATA_FETCHING, LARGE_ASSETS)


def format_size(size: int) -> str:
    """``1.50MB`` at or above one megabyte, ``120.0KB`` below."""
    megabytes = size / 1024 / 1024
    if megabytes >= 1:
        return f"{megabytes:.2f}MB"
    return f"{size / 1024:.1f}KB"


def classify_asset(suffix: str) -> str | None:
    for asset_type, suffixes in ASSET_TYPES.items():
        if suffix.lower() in suffixes:
            return asset_type
    return None


def format_budget(metrics: PerformanceMetrics) -> str:
    return (
        "Performance targets:\n"
        f"  FCP: {metrics.fcp:g}s, LCP: {metrics.lcp:g}s, TTFB: {metrics.ttfb:g}s, "
        f"INP: {metrics.inp:g}ms, CLS: {metrics.cls:g}"
    )


def _scan_large_assets(ctx: ScanContext, results: ResultSet) -> None:
    by_type: dict[str, Finding] = {name: Finding() for name in ASSET_TYPES}
    for path in ctx.files():
        asset_type = classify_asset(path.suffix)
        if asset_type is None:
            continue
        try:
            size = path.stat().st_size
        except OSError:
            logger.debug("Cannot stat %s", path)
            continue
        if size > LARGE_ASSET_BYTES:
            by_type[asset_type].add_note(ctx.relative(path), format_size(size))

    flagged = [(name, finding) for name, finding in by_type.items() if finding.count]
    if not flagged:
        results.record(LARGE_ASSETS, Finding())
        return
    for name, finding in flagged:
        lines = [f"Found {finding.count} large {name} assets (>100KB):"]
        lines.extend(loc.render() for loc in finding.locations)
        results.record_warning("\n".join(lines))


def check_performance_rules(ctx: ScanContext, results: ResultSet) -> None:
    # Budget is echoed as an informational entry regardless of findings.
    results.record_warning(format_budget(ctx.settings.performance.metrics))

    memo = Finding()
    callback = Finding()
    data_hooks = Finding()
    for _path, rel, content in ctx.sources(JSX_EXTS):
        if "useMemo(" in content:
            memo.add_file(rel)
        if "useCallback(" in content:
            callback.add_file(rel)
        if _DATA_HOOK_RE.search(content):
            data_hooks.add_file(rel)

    _scan_large_assets(ctx, results)
    results.record(USE_MEMO, memo)
    results.record(USE_CALLBACK, callback)
    results.record(DATA_FETCHING, data_hooks)


GROUP = RuleGroup(
    name="performance",
    title="Performance",
    extensions=JSX_EXTS.union(*ASSET_TYPES.values()),
    checks=CHECKS,
    run=check_performance_rules,
)
