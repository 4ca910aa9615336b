"""Result model: checks, findings, and the three-bucket result set."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

# ---------------------------------------------------------------------------
# Severity and trigger policy
# ---------------------------------------------------------------------------


class Severity(enum.Enum):
    """Bucket a check outcome lands in."""

    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warnings"


class Trigger(enum.Enum):
    """When a check's count turns into a failed/warning entry."""

    ANY = "any"  # count > 0
    MISSING = "missing"  # count == 0
    BELOW = "below"  # count < limit
    ABOVE = "above"  # count > limit


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------

_EXCERPT_LIMIT = 120


@dataclass(frozen=True)
class Location:
    """Where a finding occurred: a file, optionally a line and its text."""

    file: str
    line: int | None = None
    excerpt: str | None = None
    note: str | None = None

    def render(self) -> str:
        text = f"  {self.file}"
        if self.line is not None:
            text += f":{self.line}"
        if self.note:
            text += f" ({self.note})"
        if self.excerpt:
            text += f" | {self.excerpt}"
        return text


@dataclass
class Finding:
    """Accumulated detection result for one check during one run.

    File-level locations are deduplicated per file; line-level locations are
    kept per occurrence.
    """

    count: int = 0
    locations: list[Location] = field(default_factory=list)
    _files: set[str] = field(default_factory=set, repr=False)

    def add_file(self, file: str, occurrences: int = 1) -> None:
        """Count *occurrences* in *file* and list the file once."""
        self.count += occurrences
        if file not in self._files:
            self._files.add(file)
            self.locations.append(Location(file))

    def add_tally(self, file: str, occurrences: int, unit: str) -> None:
        """Count *occurrences* in *file*, listing the file with a per-file tally."""
        self.count += occurrences
        self._files.add(file)
        self.locations.append(Location(file, note=f"{occurrences} {unit}"))

    def add_line(
        self,
        file: str,
        line: int,
        excerpt: str | None = None,
        note: str | None = None,
    ) -> None:
        """Count one occurrence at *line* of *file*."""
        self.count += 1
        self._files.add(file)
        if excerpt is not None:
            excerpt = excerpt.strip()
            if len(excerpt) > _EXCERPT_LIMIT:
                excerpt = excerpt[: _EXCERPT_LIMIT - 3] + "..."
        self.locations.append(Location(file, line=line, excerpt=excerpt, note=note))

    def add_note(self, file: str, note: str, occurrences: int = 1) -> None:
        """Count *occurrences* in *file*, listing the file with a free-form note."""
        self.count += occurrences
        self._files.add(file)
        self.locations.append(Location(file, note=note))

    @property
    def files(self) -> list[str]:
        seen: dict[str, None] = {}
        for loc in self.locations:
            seen.setdefault(loc.file, None)
        return list(seen)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Check:
    """Static description of one guideline check.

    ``message`` and ``passed`` are ``str.format`` templates receiving
    ``count`` and ``limit``.
    """

    name: str
    severity: Severity
    message: str
    passed: str
    trigger: Trigger = Trigger.ANY
    limit: int = 0

    def is_triggered(self, count: int) -> bool:
        if self.trigger is Trigger.ANY:
            return count > 0
        if self.trigger is Trigger.MISSING:
            return count == 0
        if self.trigger is Trigger.BELOW:
            return count < self.limit
        return count > self.limit

    def render(self, finding: Finding, *, limit: int | None = None) -> tuple[Severity, str]:
        """Return the bucket and the entry text for *finding*.

        The first line of a failed/warning entry is the headline; each
        following line is one location.
        """
        values = {"count": finding.count, "limit": self.limit if limit is None else limit}
        if not self.is_triggered(finding.count):
            return Severity.PASSED, self.passed.format(**values)
        lines = [self.message.format(**values)]
        lines.extend(loc.render() for loc in finding.locations)
        return self.severity, "\n".join(lines)


# ---------------------------------------------------------------------------
# Result set
# ---------------------------------------------------------------------------


class Snapshot(NamedTuple):
    passed: list[str]
    failed: list[str]
    warnings: list[str]


class ResultSet:
    """Append-only passed/failed/warnings collections.

    Insertion order is the report order.  Entries are never deduplicated.
    """

    def __init__(self) -> None:
        self.passed: list[str] = []
        self.failed: list[str] = []
        self.warnings: list[str] = []

    def record_pass(self, message: str) -> None:
        self.passed.append(message)

    def record_fail(self, message: str) -> None:
        self.failed.append(message)

    def record_warning(self, message: str) -> None:
        self.warnings.append(message)

    def record(self, check: Check, finding: Finding, *, limit: int | None = None) -> Severity:
        """Append exactly one entry for *check* and return the bucket used."""
        severity, message = check.render(finding, limit=limit)
        bucket = {
            Severity.PASSED: self.passed,
            Severity.FAILED: self.failed,
            Severity.WARNING: self.warnings,
        }[severity]
        bucket.append(message)
        return severity

    def snapshot(self) -> Snapshot:
        """Return the three collections by reference."""
        return Snapshot(self.passed, self.failed, self.warnings)

    def __len__(self) -> int:
        return len(self.passed) + len(self.failed) + len(self.warnings)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Summary:
    total: int
    passed: int
    failed: int
    warnings: int

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def summarize(results: ResultSet) -> Summary:
    passed, failed, warnings = results.snapshot()
    return Summary(
        total=len(passed) + len(failed) + len(warnings),
        passed=len(passed),
        failed=len(failed),
        warnings=len(warnings),
    )
