"""Tree walker: enumerate regular files under a project root."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from guidecheck.infrastructure.ignore import IgnoreFilter

logger = logging.getLogger(__name__)


def iter_files(root: Path, ignore: IgnoreFilter | None = None) -> Iterator[Path]:
    """Yield every non-ignored regular file under *root*, depth-first.

    Entries are visited in name order so repeated runs over an unchanged
    tree produce the same sequence.  Ignore rules are tested against the
    root-relative path of both files and directories; an ignored directory
    is never descended into.  Directories that cannot be listed are skipped.
    """
    stack: list[Path] = [root]
    while stack:
        directory = stack.pop()
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            continue

        subdirs: list[Path] = []
        for entry in entries:
            if ignore is not None and ignore.is_ignored(entry.relative_to(root).as_posix()):
                continue
            try:
                if entry.is_dir():
                    subdirs.append(entry)
                elif entry.is_file():
                    yield entry
            except OSError:
                logger.debug("Cannot stat %s", entry)

        # Reversed so the first subdirectory is popped first.
        stack.extend(reversed(subdirs))


def walk(
    root: Path,
    visit: Callable[[Path], None],
    ignore: IgnoreFilter | None = None,
) -> int:
    """Call *visit* once per file yielded by :func:`iter_files`; return the file count."""
    count = 0
    for path in iter_files(root, ignore):
        visit(path)
        count += 1
    return count
