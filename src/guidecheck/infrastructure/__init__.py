"""Infrastructure: ignore-pattern filtering and project tree traversal."""

from guidecheck.infrastructure.ignore import (
    DEFAULT_IGNORE_PATTERNS,
    IgnoreFilter,
    IgnorePattern,
    compile_pattern,
    load_ignore_filter,
)
from guidecheck.infrastructure.walker import iter_files, walk

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "IgnoreFilter",
    "IgnorePattern",
    "compile_pattern",
    "iter_files",
    "load_ignore_filter",
    "walk",
]
