"""Style-import check: design-system packages from a given major version need their CSS import."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from guidecheck.infrastructure.ignore import load_ignore_filter
from guidecheck.rules.base import SCRIPT_EXTS, ScanContext

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE = "@simpplr/athena-ui"
DEFAULT_MIN_MAJOR = 31
DEFAULT_STATEMENT = "import '@simpplr/athena-ui/style';"

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")
_NON_VERSION_RE = re.compile(r"[^0-9.]")


@dataclass(frozen=True)
class StyleImportResult:
    """Outcome of :func:`check_style_import`."""

    passed: bool
    message: str
    version: str | None = None
    found_in: str | None = None


def declared_version(manifest: dict[str, object], package: str) -> str | None:
    """Return *package*'s version spec stripped to digits and dots, or None."""
    for section in _DEPENDENCY_SECTIONS:
        deps = manifest.get(section)
        if isinstance(deps, dict) and package in deps:
            return _NON_VERSION_RE.sub("", str(deps[package]))
    return None


def major_of(version: str) -> int | None:
    head = version.split(".", 1)[0]
    return int(head) if head.isdigit() else None


def find_statement(ctx: ScanContext, statement: str) -> str | None:
    """Return the first script file (relative path) containing *statement*."""
    for _path, rel, content in ctx.sources(SCRIPT_EXTS):
        if statement in content:
            return rel
    return None


def check_style_import(
    project_root: Path,
    *,
    package: str = DEFAULT_PACKAGE,
    min_major: int = DEFAULT_MIN_MAJOR,
    statement: str = DEFAULT_STATEMENT,
) -> StyleImportResult:
    """Check that projects on *package* >= *min_major* import its stylesheet.

    Passes when *package* is not declared, when its major version is below
    *min_major*, or when any script file contains *statement*.
    """
    manifest_path = project_root / "package.json"
    if not manifest_path.is_file():
        return StyleImportResult(passed=False, message="package.json not found.")

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return StyleImportResult(passed=False, message=f"Cannot read package.json: {exc}")
    if not isinstance(manifest, dict):
        manifest = {}

    version = declared_version(manifest, package)
    if not version:
        return StyleImportResult(passed=True, message=f"No {package} found. Passing.")

    major = major_of(version)
    if major is None or major < min_major:
        return StyleImportResult(
            passed=True,
            message=f"Detected {package} version {version} (<{min_major}.0.0). No check needed.",
            version=version,
        )

    logger.info("Detected %s %s, looking for style import", package, version)
    ctx = ScanContext(root=project_root, ignore=load_ignore_filter(project_root))
    found_in = find_statement(ctx, statement)
    if found_in is None:
        return StyleImportResult(
            passed=False,
            message=f"Import statement missing: {statement}",
            version=version,
        )
    return StyleImportResult(
        passed=True,
        message=f"Import statement found in {found_in}.",
        version=version,
        found_in=found_in,
    )
