"""Ignore filter: compile gitignore-style lines into path predicates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

IGNORE_FILE_NAME = ".gitignore"

# Always active, even when the project has no ignore file.
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    ".git",
    "node_modules",
    "dist",
    ".DS_Store",
    "coverage",
    "test/_coverage",
    "yarn-error.log",
    "!/package-lock.json",
    ".idea",
    ".vscode",
    "jscpd-report",
    "webpack/coverage",
    "libs/*/coverage",
    "accessibility-report.html",
    "pa11y-reports",
    "guidelines-report.html",
)

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IgnorePattern:
    """A compiled ignore line.

    ``regex`` is matched against a root-relative path that always starts
    with ``/`` and uses forward slashes.
    """

    source: str
    regex: re.Pattern[str]
    negated: bool = False

    def matches(self, path_to_match: str) -> bool:
        return self.regex.match(path_to_match) is not None


def _glob_to_regex(glob: str) -> str:
    return ".*".join(re.escape(chunk) for chunk in glob.split("*"))


def compile_pattern(line: str) -> IgnorePattern:
    """Compile one ignore-file line.

    * ``*`` matches any run of characters.
    * A pattern without a leading ``/`` matches at any directory depth.
    * A pattern matches the exact path or anything nested below it.
    * A leading ``**/`` matches at any depth, the root included, and
      ``/**/`` spans zero or more directories.
    * A leading ``!`` marks a re-inclusion.
    """
    source = line
    negated = line.startswith("!")
    if negated:
        line = line[1:]
    body = line.rstrip("/")

    anchored = body.startswith("/")
    if anchored:
        body = body[1:]
    if body.startswith("**/"):
        body = body[3:]
        anchored = False

    escaped = "/(?:.*/)?".join(_glob_to_regex(part) for part in body.split("/**/"))
    prefix = "/" if anchored else ".*/"
    regex = re.compile(f"^{prefix}{escaped}(?:$|/.*)")
    return IgnorePattern(source=source, regex=regex, negated=negated)


def _normalize(path: str) -> str:
    normalized = path.replace("\\", "/")
    if normalized.startswith("./"):
        normalized = normalized[1:]
    if not normalized.startswith("/"):
        normalized = f"/{normalized}"
    return normalized


class IgnoreFilter:
    """Predicate over root-relative paths built from ignore patterns."""

    def __init__(self, patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS) -> None:
        self.patterns: list[IgnorePattern] = []
        for raw in patterns:
            line = raw.strip()
            if not line or line.startswith("#") or not line.lstrip("!").strip("/"):
                continue
            self.patterns.append(compile_pattern(line))

    def __len__(self) -> int:
        return len(self.patterns)

    def is_ignored(self, relative_path: str) -> bool:
        """Return True if *relative_path* (relative to the project root) is excluded."""
        candidate = _normalize(relative_path)
        ignored = False
        for pattern in self.patterns:
            if not pattern.matches(candidate):
                continue
            if pattern.negated:
                return False
            ignored = True
        return ignored


def read_ignore_file(project_root: Path) -> list[str]:
    """Return the lines of ``<project_root>/.gitignore``, or an empty list."""
    path = project_root / IGNORE_FILE_NAME
    if not path.is_file():
        return []
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error reading %s, using default ignores only: %s", path, exc)
        return []


def load_ignore_filter(
    project_root: Path,
    extra_patterns: Iterable[str] = (),
) -> IgnoreFilter:
    """Build the filter: defaults, then the project's ignore file, then *extra_patterns*."""
    lines = [*DEFAULT_IGNORE_PATTERNS, *read_ignore_file(project_root), *extra_patterns]
    ignore = IgnoreFilter(lines)
    logger.debug("Compiled %d ignore patterns for %s", len(ignore), project_root)
    return ignore
