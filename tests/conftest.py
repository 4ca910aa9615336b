"""Shared test fixtures for guidecheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from guidecheck.analyzer import run_groups
from guidecheck.infrastructure.ignore import load_ignore_filter
from guidecheck.rules.base import ScanContext
from guidecheck.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from guidecheck.results import ResultSet
    from guidecheck.rules.base import RuleGroup


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture()
def write(project: Path) -> Callable[..., Path]:
    """Write a file relative to the project root, creating parent directories."""

    def _write(rel: str, content: str | bytes = "") -> Path:
        path = project / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def run_group(project: Path) -> Callable[..., ResultSet]:
    """Run a single rule group against the project root."""

    def _run(group: RuleGroup, settings: Settings | None = None) -> ResultSet:
        ctx = ScanContext(
            root=project,
            settings=settings or Settings(),
            ignore=load_ignore_filter(project),
        )
        return run_groups(ctx, [group])

    return _run


@pytest.fixture()
def find_entry() -> Callable[[list[str], str], str]:
    """Return the single entry in a bucket whose headline starts with a prefix."""

    def _find(bucket: list[str], prefix: str) -> str:
        matches = [e for e in bucket if e.startswith(prefix)]
        assert len(matches) == 1, f"expected one entry starting with {prefix!r}, got {bucket!r}"
        return matches[0]

    return _find
