"""Guidecheck CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from guidecheck import __version__


@click.group()
@click.version_option(version=__version__, prog_name="guidecheck")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """Guidecheck - pattern-based codebase guideline scanner."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rich", "text", "json"]),
    default=None,
    help="Output format (default: rich if TTY, text if piped).",
)
@click.option(
    "--report",
    "report_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="HTML report path (default: <project>/guidelines-report.html).",
)
@click.option("--no-report", is_flag=True, default=False, help="Skip writing the HTML report.")
@click.option("--open", "open_report", is_flag=True, default=False, help="Open the report.")
@click.option(
    "--ignore",
    "ignores",
    multiple=True,
    help="Extra ignore pattern (gitignore syntax). Repeatable.",
)
@click.option(
    "--only",
    "only",
    multiple=True,
    help="Run only this rule group. Repeatable.",
)
def analyze(
    *,
    project: Path | None,
    fmt: str | None,
    report_path: Path | None,
    no_report: bool,
    open_report: bool,
    ignores: tuple[str, ...],
    only: tuple[str, ...],
) -> None:
    """Scan the project against the guideline rule groups.

    Exit codes: 0 = no failed guidelines, 1 = at least one failed guideline,
    2 = configuration or report error.
    """
    from guidecheck import GuidecheckError
    from guidecheck.analyzer import analyze as run_analysis
    from guidecheck.report import (
        DEFAULT_REPORT_NAME,
        format_json,
        format_rich,
        format_summary,
        format_text,
        write_html_report,
    )
    from guidecheck.rules import RULE_GROUPS, get_group

    project_root = (project or Path.cwd()).resolve()

    try:
        groups = tuple(get_group(name) for name in only) if only else RULE_GROUPS
    except KeyError as exc:
        click.echo(f"Error: unknown rule group {exc}", err=True)
        sys.exit(2)

    if fmt is None:
        fmt = "rich" if sys.stdout.isatty() else "text"

    try:
        analysis = run_analysis(project_root, extra_ignores=ignores, groups=groups)
    except (GuidecheckError, NotADirectoryError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    formatters = {"rich": format_rich, "text": format_text, "json": format_json}
    output = formatters[fmt](analysis.results)
    if output:
        click.echo(output)

    summary = analysis.summary
    if fmt != "json":
        click.echo(format_summary(summary))

    if not no_report:
        target = report_path or project_root / DEFAULT_REPORT_NAME
        try:
            written = write_html_report(analysis.results, target)
        except GuidecheckError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(2)
        if fmt != "json":
            click.echo(f"Report written to {written}")
        if open_report:
            click.launch(str(written))

    if summary.exit_code:
        sys.exit(summary.exit_code)


@main.command("rules")
def rules_cmd() -> None:
    """List rule groups and their checks."""
    from guidecheck.rules import RULE_GROUPS

    for group in RULE_GROUPS:
        click.echo(f"{group.name}: {group.title}")
        for check in group.checks:
            click.echo(f"  - {check.name} [{check.severity.value}]")


@main.command("check-style-import")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
@click.option("--package", default=None, help="Design-system package name.")
@click.option("--min-major", type=int, default=None, help="First major version needing the import.")
@click.option("--statement", default=None, help="Import statement to look for.")
def check_style_import_cmd(
    *,
    project: Path | None,
    package: str | None,
    min_major: int | None,
    statement: str | None,
) -> None:
    """Verify the design-system stylesheet import is present when required."""
    from guidecheck.style_import import (
        DEFAULT_MIN_MAJOR,
        DEFAULT_PACKAGE,
        DEFAULT_STATEMENT,
        check_style_import,
    )

    result = check_style_import(
        (project or Path.cwd()).resolve(),
        package=package or DEFAULT_PACKAGE,
        min_major=DEFAULT_MIN_MAJOR if min_major is None else min_major,
        statement=statement or DEFAULT_STATEMENT,
    )
    if result.passed:
        click.echo(f"[ok] {result.message}")
    else:
        click.echo(f"[FAIL] {result.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
