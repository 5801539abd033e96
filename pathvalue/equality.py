"""Structural and filesystem-aware path comparisons."""

from __future__ import annotations

import logging

from . import _path_utils as path_utils
from . import fs
from .platform import DEFAULT_RULES, PlatformRules

logger = logging.getLogger(__name__)


def _case_key(raw: str, rules: PlatformRules) -> str:
    return path_utils.normalize_path_string(raw, rules).lower()


def equals_string_ci(
    first: str, second: str, rules: PlatformRules = DEFAULT_RULES
) -> bool:
    """Return ``True`` if *first* and *second* normalize equal ignoring case."""
    return _case_key(first, rules) == _case_key(second, rules)


def equals_fs(first: str, second: str, rules: PlatformRules = DEFAULT_RULES) -> bool:
    """
    Return whether two canonical paths name the same filesystem entry.

    Paths differing only by case are equal when *first* lives on a
    case-insensitive filesystem. Probing failures (including a missing
    *first*) make the comparison answer ``False``.
    """
    if first.lower() != second.lower():
        return False

    try:
        case_sensitive = fs.is_case_sensitive_fs(first, rules)
    except (OSError, ValueError) as exc:
        logger.debug("Case sensitivity probe for %s failed: %s", first, exc)
        return False

    if case_sensitive:
        return first == second
    return True


__all__ = ["equals_fs", "equals_string_ci"]
