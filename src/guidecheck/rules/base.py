"""Shared scaffolding for rule groups: scan context and group descriptor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from guidecheck.infrastructure.ignore import IgnoreFilter
from guidecheck.infrastructure.walker import iter_files
from guidecheck.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from guidecheck.results import Check, ResultSet

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Extension sets
# ---------------------------------------------------------------------------

JSX_EXTS: frozenset[str] = frozenset({".tsx", ".jsx"})
TS_EXTS: frozenset[str] = frozenset({".ts", ".tsx"})
SCRIPT_EXTS: frozenset[str] = frozenset({".ts", ".tsx", ".js", ".jsx"})
STYLE_EXTS: frozenset[str] = frozenset({".css", ".scss"})
MARKUP_EXTS: frozenset[str] = frozenset({".html", ".ejs"})


def is_test_file(path: Path) -> bool:
    """``foo.test.tsx`` / ``foo.spec.js`` style test modules."""
    stem_suffix = path.with_suffix("").suffix
    return stem_suffix in {".test", ".spec"} and path.suffix in SCRIPT_EXTS


# ---------------------------------------------------------------------------
# Scan context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScanContext:
    """Everything a rule group needs: the root, settings, and ignore filter."""

    root: Path
    settings: Settings = field(default_factory=Settings)
    ignore: IgnoreFilter = field(default_factory=IgnoreFilter)
    errors: list[str] = field(default_factory=list, compare=False, repr=False)

    def files(self, extensions: frozenset[str] | None = None) -> Iterator[Path]:
        """Walk the tree, yielding files whose suffix is in *extensions* (all when None)."""
        for path in iter_files(self.root, self.ignore):
            if extensions is None or path.suffix.lower() in extensions:
                yield path

    def read(self, path: Path) -> str | None:
        """Return the file text, or None when it cannot be read.

        Failures are queued on ``errors`` for the orchestrator to report.
        """
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            self.errors.append(f"Error reading file: {self.relative(path)}\n  {exc}")
            return None

    def sources(self, extensions: frozenset[str]) -> Iterator[tuple[Path, str, str]]:
        """Yield ``(path, relative_path, content)`` for readable files in *extensions*."""
        for path in self.files(extensions):
            content = self.read(path)
            if content is None:
                continue
            yield path, self.relative(path), content

    def relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def drain_errors(self) -> list[str]:
        """Return the distinct read errors collected so far and clear them."""
        pending = list(dict.fromkeys(self.errors))
        self.errors.clear()
        return pending


# ---------------------------------------------------------------------------
# Rule group descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RuleGroup:
    """A cohesive set of checks sharing one entry point.

    ``run`` performs the group's own tree walk(s) and records one entry per
    check into the result set it is given.
    """

    name: str
    title: str
    extensions: frozenset[str]
    checks: tuple[Check, ...]
    run: Callable[[ScanContext, ResultSet], None]
