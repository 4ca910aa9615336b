"""Analysis orchestrator: load settings, build the ignore filter, run rule groups."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from guidecheck.infrastructure.ignore import load_ignore_filter
from guidecheck.results import ResultSet, Summary, summarize
from guidecheck.rules import RULE_GROUPS
from guidecheck.rules.base import ScanContext
from guidecheck.settings import load_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from guidecheck.rules.base import RuleGroup
    from guidecheck.settings import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class AnalysisResult:
    """Result of an analysis run."""

    results: ResultSet = field(default_factory=ResultSet)
    groups_run: int = 0
    elapsed_ms: float = 0.0

    @property
    def summary(self) -> Summary:
        return summarize(self.results)


# ---------------------------------------------------------------------------
# Main entry points
# ---------------------------------------------------------------------------


def run_groups(
    ctx: ScanContext,
    groups: Sequence[RuleGroup],
    results: ResultSet | None = None,
) -> ResultSet:
    """Run *groups* in order against *ctx*, appending to *results*.

    A group that raises is logged and reported as a warning entry; the
    remaining groups still run.  Files a group could not read are reported
    as warning entries after that group.
    """
    if results is None:
        results = ResultSet()
    for group in groups:
        logger.debug("Running rule group %s", group.name)
        try:
            group.run(ctx, results)
        except Exception as exc:
            logger.exception("Rule group %s failed", group.name)
            results.record_warning(f"Rule group '{group.name}' could not complete.\n  {exc}")
        for message in ctx.drain_errors():
            results.record_warning(message)
    return results


def analyze(
    project_root: Path,
    *,
    settings: Settings | None = None,
    extra_ignores: Iterable[str] = (),
    groups: Sequence[RuleGroup] = RULE_GROUPS,
) -> AnalysisResult:
    """Scan *project_root* with every rule group and return the categorized results.

    Parameters
    ----------
    project_root:
        Directory to scan; every path in the report is relative to it.
    settings:
        Thresholds to use.  When *None*, they are loaded from the project
        with :func:`guidecheck.settings.load_settings`.
    extra_ignores:
        Ignore patterns added on top of the defaults, ``.gitignore`` and
        ``settings.ignore``.
    groups:
        Rule groups to run, in report order.

    Raises
    ------
    NotADirectoryError
        When *project_root* is not an existing directory.
    """
    if not project_root.is_dir():
        msg = f"Project root is not a directory: {project_root}"
        raise NotADirectoryError(msg)

    start = time.monotonic()
    if settings is None:
        settings = load_settings(project_root)

    ignore = load_ignore_filter(project_root, [*settings.ignore, *extra_ignores])
    ctx = ScanContext(root=project_root, settings=settings, ignore=ignore)
    results = run_groups(ctx, groups)

    elapsed = (time.monotonic() - start) * 1000
    logger.info("Ran %d rule groups in %.0f ms", len(groups), elapsed)
    return AnalysisResult(results=results, groups_run=len(groups), elapsed_ms=elapsed)
