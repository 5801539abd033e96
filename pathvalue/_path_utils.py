"""Lexical helpers that turn raw path strings into canonical form.

Nothing in this module touches the filesystem. Every helper receives the
:class:`~pathvalue.platform.PlatformRules` it should honour so that callers
(and tests) can evaluate Windows behaviour on POSIX hosts and vice versa.
"""

from __future__ import annotations

import ntpath
import typing as t

from .platform import DEFAULT_RULES, PlatformRules

CURRENT_DIR: t.Final[str] = "."
PARENT_DIR: t.Final[str] = ".."
_ESCAPED_SPACE: t.Final[str] = "\\ "


def unescape(raw: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Expand ``\\ `` to spaces and map remaining backslashes to separators."""
    if not rules.escapes_whitespace:
        return raw
    unescaped = raw.replace(_ESCAPED_SPACE, " ")
    return unescaped.replace("\\", rules.separator)


def escape_whitespace(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """Return the external form of *canonical* with spaces re-escaped."""
    if not rules.escapes_whitespace:
        return canonical
    return canonical.replace(" ", _ESCAPED_SPACE)


def _clean_segments(path: str, separator: str) -> str:
    rooted = path.startswith(separator)
    kept: list[str] = []
    for segment in path.split(separator):
        if segment in ("", CURRENT_DIR):
            continue
        if segment == PARENT_DIR:
            if kept and kept[-1] != PARENT_DIR:
                kept.pop()
            elif not rooted:
                # nothing left to resolve against in a relative path
                kept.append(PARENT_DIR)
            continue
        kept.append(segment)

    body = separator.join(kept)
    if rooted:
        return separator + body
    return body or CURRENT_DIR


def clean(path: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """
    Apply lexical cleaning to *path* without trimming or unescaping.

    Repeated separators collapse, ``.`` segments vanish and ``..`` segments
    cancel the preceding real segment. Leading ``..`` runs of relative paths
    are kept; ``..`` directly below the root is dropped. A trailing separator
    survives only for the root itself and an empty path becomes ``.``.

    Parameters
    ----------
    path : str
        A path whose escapes have already been expanded.
    rules : PlatformRules, optional
        Platform conventions to apply. Defaults to the host rules.

    Returns
    -------
    str
        The cleaned path.
    """
    if rules.is_windows:
        return ntpath.normpath(path)
    return _clean_segments(path, rules.separator)


def normalize_path_string(raw: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """
    Return the canonical form of *raw*. Never raises for string input.

    The result is stable under its own external form: re-normalizing
    ``escape_whitespace(result)`` yields ``result`` again. Cleaning can
    expose whitespace at the edges (``a/b /.`` becomes ``a/b ``) that the
    external form would not preserve, so such edges are trimmed again.
    """
    canonical = clean(unescape(raw.strip(), rules), rules)
    external = escape_whitespace(canonical, rules)
    while external != external.strip():
        canonical = clean(unescape(external.strip(), rules), rules)
        external = escape_whitespace(canonical, rules)
    return canonical


def is_absolute(canonical: str, rules: PlatformRules = DEFAULT_RULES) -> bool:
    """Return ``True`` when *canonical* is anchored at a filesystem root.

    Drive-letter prefixes such as ``c:`` are ordinary segments under POSIX
    rules, so ``c:/foo`` is relative there.
    """
    return rules.module.isabs(canonical)


def join(elements: t.Iterable[str], rules: PlatformRules = DEFAULT_RULES) -> str:
    """Join non-empty canonical *elements* and clean the result.

    Later absolute elements do not reset the result; joining is purely a
    matter of concatenation.
    """
    return clean(rules.separator.join(e for e in elements if e), rules)


def strip_drive(path: str, rules: PlatformRules = DEFAULT_RULES) -> tuple[str, str]:
    """Split *path* into its drive or UNC prefix and the remainder."""
    if rules.is_windows:
        return ntpath.splitdrive(path)
    return "", path


__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "clean",
    "escape_whitespace",
    "is_absolute",
    "join",
    "normalize_path_string",
    "strip_drive",
    "unescape",
]
