"""Structural views derived from canonical path strings.

Each function expects a value already produced by
:func:`pathvalue._path_utils.normalize_path_string` (or ``clean``) and never
touches the filesystem.
"""

from __future__ import annotations

from . import _path_utils as path_utils
from .platform import DEFAULT_RULES, PlatformRules

_DOT = "."


def parts(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> list[str]:
    """Return the segments of *canonical*; the root yields an empty list."""
    trimmed = canonical.strip(rules.separator)
    if not trimmed:
        return []
    return trimmed.split(rules.separator)


def root(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """
    Return the anchor of *canonical*.

    Absolute paths answer with the filesystem root (or the drive on Windows).
    For relative paths the root is the prefix that cannot be resolved without
    external context: every leading ``..`` plus the first real segment, so
    ``../../bar.js`` is its own root and ``foo/bar`` is rooted at ``foo``.
    """
    if not path_utils.is_absolute(canonical, rules):
        root_parts: list[str] = []
        for part in parts(canonical, rules):
            root_parts.append(part)
            if part != path_utils.PARENT_DIR:
                break
        return path_utils.join(root_parts, rules)

    separator = rules.separator
    if canonical == separator:
        return canonical

    head = canonical.split(separator, 1)[0]
    return head or separator


def split(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> tuple[str, str]:
    """Return ``(parent, base)`` where the root splits into ``(root, "")``."""
    drive, rest = path_utils.strip_drive(canonical, rules)
    index = rest.rfind(rules.separator)
    head, tail = drive + rest[: index + 1], rest[index + 1 :]
    return path_utils.clean(head, rules), tail


def parent(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return *canonical* without its final segment (``dirname``)."""
    return split(canonical, rules)[0]


def base(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return the final segment of *canonical* (``basename``)."""
    if not canonical:
        return _DOT
    separator = rules.separator
    stripped = canonical.rstrip(separator)
    stripped = path_utils.strip_drive(stripped, rules)[1]
    if not stripped:
        return separator
    return stripped.rsplit(separator, 1)[-1]


def _is_degenerate(name: str, rules: PlatformRules) -> bool:
    return name in (_DOT, path_utils.PARENT_DIR, rules.separator)


def extension(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return the last extension of the base name, dot included.

    A leading run of dots is never an extension separator, so ``..bar`` has
    no extension while ``..bar.js`` has ``.js``.
    """
    name = base(canonical, rules)
    if _is_degenerate(name, rules):
        return ""
    name = name.lstrip(_DOT)
    index = name.rfind(_DOT)
    return name[index:] if index >= 0 else ""


def extensions(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> list[str]:
    """Return every extension of the base name in left-to-right order."""
    name = base(canonical, rules)
    name = name.lstrip(_DOT).strip(rules.separator)
    return [_DOT + suffix for suffix in name.split(_DOT)[1:]]


def stem(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return the base name with its last extension removed."""
    name = base(canonical, rules)
    if name in (_DOT, rules.separator):
        return ""
    if name == path_utils.PARENT_DIR:
        return name
    return name[: len(name) - len(extension(canonical, rules))]


def minimal_stem(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return the base name with all extensions removed."""
    name = base(canonical, rules)
    if name in (_DOT, rules.separator):
        return ""
    suffix = "".join(extensions(canonical, rules))
    return name[: len(name) - len(suffix)]


__all__ = [
    "base",
    "extension",
    "extensions",
    "minimal_stem",
    "parent",
    "parts",
    "root",
    "split",
    "stem",
]
