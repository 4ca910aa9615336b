"""Rule groups, in the order their entries appear in the report."""

from guidecheck.rules import (
    accessibility,
    code_style,
    performance,
    react,
    security,
    state_management,
    styling,
    testing,
    translations,
    typescript,
)
from guidecheck.rules.base import RuleGroup, ScanContext

RULE_GROUPS: tuple[RuleGroup, ...] = (
    react.GROUP,
    styling.GROUP,
    accessibility.GROUP,
    code_style.GROUP,
    performance.GROUP,
    security.GROUP,
    state_management.GROUP,
    testing.GROUP,
    translations.GROUP,
    typescript.GROUP,
)


def get_group(name: str) -> RuleGroup:
    """Return the rule group called *name*.

    Raises
    ------
    KeyError
        When no group has that name.
    """
    for group in RULE_GROUPS:
        if group.name == name:
            return group
    raise KeyError(name)


__all__ = ["RULE_GROUPS", "RuleGroup", "ScanContext", "get_group"]
