"""Lexical composition of canonical path strings."""

from __future__ import annotations

import typing as t

from . import _path_utils as path_utils
from .errors import PreconditionError, RelationError
from .platform import DEFAULT_RULES, PlatformRules


def join(
    first: str, others: t.Iterable[str], rules: PlatformRules = DEFAULT_RULES
) -> str:
    """Concatenate *first* with *others* and clean the result."""
    return path_utils.join([first, *others], rules)


def _anchor(canonical: str, rules: PlatformRules) -> tuple[str, bool, list[str]]:
    """Return ``(drive, rooted, segments)`` for a canonical path."""
    drive, rest = path_utils.strip_drive(canonical, rules)
    separator = rules.separator
    rooted = rest.startswith(separator)
    trimmed = rest.strip(separator)
    if trimmed in ("", path_utils.CURRENT_DIR):
        return drive, rooted, []
    return drive, rooted, trimmed.split(separator)


def _same_segment(first: str, second: str, rules: PlatformRules) -> bool:
    if rules.is_windows:
        return first.casefold() == second.casefold()
    return first == second


def relative(target: str, base: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """
    Return the lexical path leading from *base* to *target*.

    Both arguments must be canonical. The result is ``.`` when they are equal.

    Raises
    ------
    RelationError
        If only one side is rooted, the drives differ, or reaching *target*
        would require climbing out of a ``..`` segment of *base* whose real
        name is unknown.
    """
    if target == base:
        return path_utils.CURRENT_DIR

    target_drive, target_rooted, target_parts = _anchor(target, rules)
    base_drive, base_rooted, base_parts = _anchor(base, rules)
    if target_rooted != base_rooted or not _same_segment(
        target_drive, base_drive, rules
    ):
        msg = f"cannot make {target!r} relative to {base!r}"
        raise RelationError(msg)

    shared = 0
    for target_part, base_part in zip(target_parts, base_parts, strict=False):
        if not _same_segment(target_part, base_part, rules):
            break
        shared += 1

    remaining = base_parts[shared:]
    if remaining and remaining[0] == path_utils.PARENT_DIR:
        msg = f"cannot make {target!r} relative to {base!r}"
        raise RelationError(msg)

    climb = [path_utils.PARENT_DIR] * len(remaining)
    return path_utils.join([*climb, *target_parts[shared:]], rules)


def absolute_to(
    canonical: str, base: str, rules: PlatformRules = DEFAULT_RULES
) -> str:
    """Anchor a relative *canonical* path below the absolute *base*."""
    if path_utils.is_absolute(canonical, rules):
        return canonical
    if not path_utils.is_absolute(base, rules):
        msg = "other path must be absolute"
        raise PreconditionError(msg)
    return join(base, [canonical], rules)


__all__ = ["absolute_to", "join", "relative"]
