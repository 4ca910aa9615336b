"""Report rendering: console summary, Rich listing, JSON, and the HTML report."""

from __future__ import annotations

import json
from html import escape
from typing import TYPE_CHECKING

from guidecheck import GuidecheckError
from guidecheck.results import summarize

if TYPE_CHECKING:
    from pathlib import Path

    from guidecheck.results import ResultSet, Summary

DEFAULT_REPORT_NAME = "guidelines-report.html"


class ReportError(GuidecheckError):
    """Raised when the HTML report cannot be written."""


def split_entry(entry: str) -> tuple[str, list[str]]:
    """Split an entry into its headline and its non-blank detail lines."""
    headline, *details = entry.split("\n")
    return headline, [d.strip() for d in details if d.strip()]


# ---------------------------------------------------------------------------
# Keyword hints (category, priority, suggestions)
# ---------------------------------------------------------------------------

_FAILED_SUGGESTIONS: dict[str, str] = {
    "class components": (
        "Convert class components to function components using hooks "
        "for better maintainability and reduced bundle size."
    ),
    "inline style": (
        "Move styles to CSS modules or styled-components "
        "for better maintainability and performance."
    ),
    "error boundaries": (
        "Implement error boundaries at key points in your component tree "
        "to gracefully handle runtime errors."
    ),
    "hardcoded colors": (
        "Use CSS variables or a theme system to maintain consistent colors "
        "across the application."
    ),
}

_WARNING_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "inline scripts": (
        "Move inline JavaScript to external .js files",
        "Use defer attribute for non-critical scripts",
        "Consider using module type scripts",
        "Implement proper CSP headers",
    ),
    "keyboard navigation": (
        "Add focusable elements with tabIndex",
        "Implement keyboard event handlers",
        "Add visible focus indicators",
        "Test with screen readers",
    ),
    "!important declarations": (
        "Use more specific selectors instead of !important",
        "Review CSS specificity hierarchy",
        "Consider using CSS modules or scoped styles",
        "Refactor styles to use proper cascading",
    ),
}


def failed_category(headline: str) -> str:
    if "TypeScript" in headline or "type" in headline:
        return "TypeScript"
    if "component" in headline or "React" in headline:
        return "React"
    if "CSS" in headline or "style" in headline:
        return "Styling"
    return "Other"


def warning_category(entry: str) -> str:
    lowered = entry.lower()
    if "performance" in lowered or "optimization" in lowered:
        return "Performance"
    if "accessib" in lowered or "ARIA" in entry or "keyboard" in lowered:
        return "Accessibility"
    if "security" in lowered or "script" in lowered or "sensitive" in lowered:
        return "Security"
    return "Other"


def warning_priority(entry: str) -> str:
    if warning_category(entry) == "Security":
        return "high"
    if "optimization" in entry or "suggestion" in entry:
        return "low"
    return "medium"


def failed_suggestion(headline: str) -> str | None:
    for keyword, suggestion in _FAILED_SUGGESTIONS.items():
        if keyword in headline:
            return suggestion
    return None


def warning_recommendations(entry: str) -> tuple[str, ...]:
    for keyword, steps in _WARNING_RECOMMENDATIONS.items():
        if keyword in entry:
            return steps
    return ()


# ---------------------------------------------------------------------------
# Text formatters
# ---------------------------------------------------------------------------


def format_summary(summary: Summary) -> str:
    """Format the console summary block printed after every run."""
    return "\n".join(
        [
            "",
            "--- Guideline Analysis Summary ---",
            f"Total Checks: {summary.total}",
            f"✓ Passed: {summary.passed}",
            f"✗ Failed: {summary.failed}",
            f"⚠ Warnings: {summary.warnings}",
            "----------------------------------",
            "",
        ]
    )


def format_text(results: ResultSet) -> str:
    """Plain listing: one marker line per entry, details indented beneath."""
    lines: list[str] = []
    passed, failed, warnings = results.snapshot()
    for entry in passed:
        lines.append(f"[ok] {entry}")
    for marker, bucket in (("[FAIL]", failed), ("[warn]", warnings)):
        for entry in bucket:
            headline, details = split_entry(entry)
            lines.append(f"{marker} {headline}")
            lines.extend(f"    {detail}" for detail in details)
    return "\n".join(lines)


def format_rich(results: ResultSet, *, width: int = 100) -> str:
    """Render the result set with Rich markup for terminal display."""
    from io import StringIO

    from rich.console import Console
    from rich.markup import escape as rich_escape
    from rich.text import Text

    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=width)
    passed, failed, warnings = results.snapshot()

    console.rule("[bold]Codebase Guidelines Analysis[/bold]", style="blue")
    sections = (
        ("Passing Guidelines", passed, "green", "✓"),
        ("Failed Guidelines", failed, "red", "✗"),
        ("Warnings", warnings, "yellow", "⚠"),
    )
    for title, bucket, style, icon in sections:
        if not bucket:
            continue
        console.print()
        console.rule(f"{title} ({len(bucket)})", style="dim")
        for entry in bucket:
            headline, details = split_entry(entry)
            line = Text()
            line.append(f"  {icon} ", style=f"bold {style}")
            line.append(headline)
            console.print(line)
            for detail in details:
                console.print(f"[dim]      {rich_escape(detail)}[/dim]")

    return buf.getvalue()


def format_json(results: ResultSet) -> str:
    """Structured JSON with the three buckets and a summary object."""
    passed, failed, warnings = results.snapshot()
    summary = summarize(results)
    output: dict[str, object] = {
        "passed": passed,
        "failed": failed,
        "warnings": warnings,
        "summary": {
            "total": summary.total,
            "passed": summary.passed,
            "failed": summary.failed,
            "warnings": summary.warnings,
        },
    }
    return json.dumps(output, ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

_STYLE = """
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
       line-height: 1.6; max-width: 1200px; margin: 0 auto; padding: 20px;
       background: #f5f5f5; }
.container { background: white; padding: 30px; border-radius: 8px; }
h1 { color: #2c3e50; border-bottom: 2px solid #eee; padding-bottom: 10px; }
.summary { font-size: 1.2em; margin: 20px 0; padding: 20px; background: #f8f9fa; }
.passed { color: #27ae60; } .failed { color: #e74c3c; } .warning { color: #f39c12; }
details { margin: 8px 0; } summary { cursor: pointer; padding: 10px; }
ul { list-style-type: none; padding-left: 0; }
li { margin: 10px 0; padding: 10px; border-radius: 4px; }
li.passed { background: #e8f5e9; } li.failed { background: #ffebee; }
li.warning { background: #fff3e0; }
.badge { border-radius: 12px; padding: 2px 8px; font-size: 12px; font-weight: bold; }
.badge.high { background: #fee2e2; color: #dc2626; }
.badge.medium { background: #fef3c7; color: #d97706; }
.badge.low { background: #f3f4f6; color: #4b5563; }
.file-list { margin: 8px 0; padding: 8px; background: #f1f5f9; font-family: monospace;
             font-size: 13px; white-space: pre-wrap; word-break: break-all; }
.file-entry { padding: 4px 8px; border-bottom: 1px solid #e2e8f0; }
.details { margin: 10px 0; padding: 10px; background: #f8fafc; font-size: 14px; }
.suggestion, .recommendation { margin-top: 8px; padding: 8px; background: #e0f2fe;
                               color: #0369a1; }
"""


def _file_list(details: list[str]) -> str:
    if not details:
        return ""
    entries = "".join(f'<div class="file-entry">{escape(d)}</div>' for d in details)
    return f'<div class="file-list">{entries}</div>'


def _render_failed(entry: str) -> str:
    headline, details = split_entry(entry)
    suggestion = failed_suggestion(headline)
    hint = (
        f'<div class="suggestion"><strong>Suggestion:</strong> {escape(suggestion)}</div>'
        if suggestion
        else ""
    )
    return (
        '<li class="failed"><details>'
        f"<summary>✗ {escape(headline)}</summary>"
        f"{_file_list(details)}"
        f'<div class="details"><strong>Category:</strong> {failed_category(headline)}{hint}</div>'
        "</details></li>"
    )


def _render_warning(entry: str) -> str:
    headline, details = split_entry(entry)
    priority = warning_priority(entry)
    steps = warning_recommendations(entry)
    recommendation = ""
    if steps:
        items = "".join(f"<li>{escape(step)}</li>" for step in steps)
        recommendation = (
            '<div class="recommendation"><strong>Recommendations:</strong>'
            f"<ul>{items}</ul></div>"
        )
    return (
        f'<li class="warning impact-{priority}"><details>'
        f"<summary>⚠ {escape(headline)} "
        f'<span class="badge {priority}">{priority} priority</span></summary>'
        f'<div class="details"><strong>Category:</strong> {warning_category(entry)}</div>'
        f"{_file_list(details)}{recommendation}"
        "</details></li>"
    )


def render_html(results: ResultSet) -> str:
    """Render a self-contained HTML report for *results*."""
    passed, failed, warnings = results.snapshot()
    summary = summarize(results)

    parts: list[str] = [
        "<!DOCTYPE html>",
        '<html><head><meta charset="utf-8">',
        "<title>Codebase Guidelines Analysis</title>",
        f"<style>{_STYLE}</style></head>",
        '<body><div class="container">',
        "<h1>Codebase Guidelines Analysis</h1>",
        '<div class="summary">',
        f"<p>Total Checks: {summary.total}</p>",
        f'<p class="passed">✓ Passed: {summary.passed}</p>',
        f'<p class="failed">✗ Failed: {summary.failed}</p>',
    ]
    if warnings:
        parts.append(f'<p class="warning">⚠ Warnings: {summary.warnings}</p>')
    parts.append("</div>")

    parts.append(
        '<details id="passed-section"><summary>✓ Passing Guidelines '
        f'<span class="badge">{len(passed)}</span></summary><ul>'
    )
    parts.extend(f'<li class="passed">✓ {escape(entry)}</li>' for entry in passed)
    parts.append("</ul></details>")

    parts.append(
        '<details id="failed-section"><summary>✗ Failed Guidelines '
        f'<span class="badge high">{len(failed)}</span></summary><ul>'
    )
    parts.extend(_render_failed(entry) for entry in failed)
    parts.append("</ul></details>")

    if warnings:
        parts.append(
            '<details id="warnings-section"><summary>⚠ Warnings '
            f'<span class="badge medium">{len(warnings)}</span></summary><ul>'
        )
        parts.extend(_render_warning(entry) for entry in warnings)
        parts.append("</ul></details>")

    parts.append("</div></body></html>")
    return "\n".join(parts)


def write_html_report(results: ResultSet, path: Path) -> Path:
    """Write the HTML report to *path* and return it.

    Raises
    ------
    ReportError
        When the file cannot be written.
    """
    try:
        path.write_text(render_html(results), encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write report to {path}: {exc}"
        raise ReportError(msg) from exc
    return path
