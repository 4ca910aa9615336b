"""Settings: numeric thresholds read from cursor rule files and ``.guidecheck.yml``."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

import yaml

from guidecheck import GuidecheckError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".guidecheck.yml"
CURSOR_RULES_DIR = (".cursor", "rules")

_NUMBER_RE = re.compile(r"(\d+\.?\d*)")
_MAX_LINE_RE = re.compile(r"Maximum line length: \d+")

# metric name -> phrase that introduces it in a performance rule file
_METRIC_PHRASES: dict[str, str] = {
    "fcp": "First Contentful Paint",
    "lcp": "Largest Contentful Paint",
    "ttfb": "Time to First Byte",
    "inp": "Interaction to Next Paint",
    "cls": "Cumulative Layout Shift",
}


class SettingsError(GuidecheckError):
    """Raised when ``.guidecheck.yml`` holds a value of the wrong type."""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CodeStyleSettings:
    max_line_length: int = 80


@dataclass(frozen=True)
class PerformanceMetrics:
    """Performance budget: seconds for fcp/lcp/ttfb, milliseconds for inp."""

    fcp: float = 0.0
    lcp: float = 0.0
    ttfb: float = 0.0
    inp: float = 0.0
    cls: float = 0.0


@dataclass(frozen=True)
class PerformanceSettings:
    metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)


@dataclass(frozen=True)
class Settings:
    """Analysis configuration, loaded once before any rule group runs."""

    code_style: CodeStyleSettings = field(default_factory=CodeStyleSettings)
    performance: PerformanceSettings = field(default_factory=PerformanceSettings)
    ignore: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Cursor rule files
# ---------------------------------------------------------------------------


def _parse_rule(lines: list[str], pattern: re.Pattern[str] | str) -> float | None:
    """Return the first number on the first line matching *pattern*."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for line in lines:
        if regex.search(line):
            match = _NUMBER_RE.search(line)
            return float(match.group(1)) if match else None
    return None


def _read_cursor_rules(project_root: Path, settings: Settings) -> Settings:
    rules_dir = project_root.joinpath(*CURSOR_RULES_DIR)
    if not rules_dir.is_dir():
        logger.warning("%s not found, using default thresholds", rules_dir)
        return settings

    try:
        rule_files = sorted(p for p in rules_dir.iterdir() if p.suffix == ".mdc")
    except OSError as exc:
        logger.warning("Cannot list %s: %s", rules_dir, exc)
        return settings

    for path in rule_files:
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read cursor rule file %s: %s", path, exc)
            continue

        if "code-style" in path.name:
            max_line = _parse_rule(lines, _MAX_LINE_RE)
            if max_line:
                settings = replace(
                    settings,
                    code_style=replace(settings.code_style, max_line_length=int(max_line)),
                )

        if "performance" in path.name:
            values = {
                name: _parse_rule(lines, re.escape(phrase)) or 0.0
                for name, phrase in _METRIC_PHRASES.items()
            }
            settings = replace(
                settings,
                performance=PerformanceSettings(metrics=PerformanceMetrics(**values)),
            )

    return settings


# ---------------------------------------------------------------------------
# YAML overlay
# ---------------------------------------------------------------------------


def _as_number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{CONFIG_FILE_NAME}: '{key}' must be a number, got {value!r}"
        raise SettingsError(msg)
    return float(value)


def _apply_overlay(data: dict[str, Any], settings: Settings) -> Settings:
    code_style = data.get("code_style")
    if isinstance(code_style, dict) and "max_line_length" in code_style:
        length = _as_number(code_style["max_line_length"], "code_style.max_line_length")
        settings = replace(
            settings,
            code_style=replace(settings.code_style, max_line_length=int(length)),
        )

    performance = data.get("performance")
    metrics_data = performance.get("metrics") if isinstance(performance, dict) else None
    if isinstance(metrics_data, dict):
        current = settings.performance.metrics
        updates = {
            name: _as_number(metrics_data[name], f"performance.metrics.{name}")
            for name in _METRIC_PHRASES
            if name in metrics_data
        }
        settings = replace(
            settings,
            performance=PerformanceSettings(metrics=replace(current, **updates)),
        )

    ignore = data.get("ignore")
    if ignore is not None:
        if not isinstance(ignore, list):
            msg = f"{CONFIG_FILE_NAME}: 'ignore' must be a list of patterns"
            raise SettingsError(msg)
        settings = replace(settings, ignore=(*settings.ignore, *(str(p) for p in ignore)))

    return settings


def _read_overlay(project_root: Path) -> dict[str, Any]:
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.is_file():
        return {}

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Failed to read %s, ignoring it: %s", config_path, exc)
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def load_settings(project_root: Path) -> Settings:
    """Load settings for *project_root*.

    Defaults are overridden by ``.cursor/rules/*.mdc`` and then by
    ``.guidecheck.yml``.  Missing or unreadable sources fall back to the
    defaults.

    Raises
    ------
    SettingsError
        When ``.guidecheck.yml`` parses but contains a wrongly typed value.
    """
    settings = _read_cursor_rules(project_root, Settings())
    return _apply_overlay(_read_overlay(project_root), settings)
