"""Filesystem queries behind :class:`~pathvalue.path.PathValue`.

Each helper takes canonical path strings, performs a small bounded number of
blocking calls and returns plain data. Presence probes are lenient and turn
stat failures into "does not exist"; everything else surfaces ``OSError`` or
one of the :mod:`pathvalue.errors` types.
"""

from __future__ import annotations

import collections
import dataclasses as dc
import enum
import errno
import glob as globlib
import logging
import os
import stat
import typing as t

from . import _path_utils as path_utils
from . import decompose
from .errors import InvalidArgumentError, NotFoundError
from .platform import DEFAULT_RULES, PlatformRules

logger = logging.getLogger(__name__)

# Matches the symlink hop limit most POSIX kernels enforce.
MAX_SYMLINK_HOPS: t.Final[int] = 255


class PathState(enum.Enum):
    """What a single ``stat`` call found at a path."""

    NOT_EXIST = "not_exist"
    FILE = "file"
    DIR = "dir"


@dc.dataclass(frozen=True, slots=True)
class Probe:
    """
    Result of probing a path.

    Attributes
    ----------
    state : PathState
        Classification of the path.
    identity : tuple[int, int] | None
        ``(st_dev, st_ino)`` of the stat result, ``None`` when missing.
    """

    state: PathState
    identity: tuple[int, int] | None = None

    @property
    def exists(self) -> bool:
        """Return ``True`` unless the path was missing or unreadable."""
        return self.state is not PathState.NOT_EXIST


_MISSING = Probe(PathState.NOT_EXIST)


def probe(path: str) -> Probe:
    """Stat *path* once and classify the result, swallowing any error."""
    try:
        info = os.stat(path)
    except (OSError, ValueError) as exc:
        logger.debug("Treating %s as missing: %s", path, exc)
        return _MISSING

    state = PathState.DIR if stat.S_ISDIR(info.st_mode) else PathState.FILE
    return Probe(state, (info.st_dev, info.st_ino))


def _append(resolved: str, part: str, separator: str) -> str:
    if not resolved:
        return part
    if resolved.endswith(separator):
        return resolved + part
    return resolved + separator + part


def _step_up(resolved: str, separator: str) -> str:
    """Apply ``..`` to an already symlink-free *resolved* prefix."""
    if resolved == separator:
        return resolved
    if not resolved or resolved.rsplit(separator, 1)[-1] == path_utils.PARENT_DIR:
        return _append(resolved, path_utils.PARENT_DIR, separator)
    head = resolved.rpartition(separator)[0]
    if not head and resolved.startswith(separator):
        return separator
    return head


def resolve_symlinks(path: str, rules: PlatformRules = DEFAULT_RULES) -> str:
    """
    Return *path* with every symbolic link replaced by its target.

    Components are walked left to right. Relative inputs stay relative to
    the working directory unless a link with an absolute target redirects
    them.

    Raises
    ------
    FileNotFoundError
        If a component (or a link target) does not exist.
    OSError
        ``ELOOP`` after :data:`MAX_SYMLINK_HOPS` links, or any other failure
        reported by ``lstat``/``readlink``.
    """
    if rules.is_windows:
        return os.path.realpath(path, strict=True)

    separator = rules.separator
    resolved = separator if path.startswith(separator) else ""
    pending = collections.deque(path.split(separator))
    hops = 0
    while pending:
        part = pending.popleft()
        if part in ("", path_utils.CURRENT_DIR):
            continue
        if part == path_utils.PARENT_DIR:
            resolved = _step_up(resolved, separator)
            continue

        candidate = _append(resolved, part, separator)
        if not stat.S_ISLNK(os.lstat(candidate).st_mode):
            resolved = candidate
            continue

        hops += 1
        if hops > MAX_SYMLINK_HOPS:
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
        target = os.readlink(candidate)
        logger.debug("Following symlink %s -> %s", candidate, target)
        if target.startswith(separator):
            resolved = separator
        pending.extendleft(reversed(target.split(separator)))

    return path_utils.clean(resolved, rules)


def _has_unterminated_class(pattern: str) -> bool:
    """Return ``True`` if a ``[`` character class in *pattern* never closes."""
    index = 0
    length = len(pattern)
    while index < length:
        if pattern[index] != "[":
            index += 1
            continue
        cursor = index + 1
        if cursor < length and pattern[cursor] in "!^":
            cursor += 1
        if cursor < length and pattern[cursor] == "]":
            cursor += 1
        close = pattern.find("]", cursor)
        if close < 0:
            return True
        index = close + 1
    return False


def _validate_glob_target(directory: str, pattern: str) -> None:
    if not pattern.strip():
        msg = "pattern must not be empty"
        raise InvalidArgumentError(msg)
    if _has_unterminated_class(pattern):
        msg = f"malformed glob pattern: {pattern!r}"
        raise InvalidArgumentError(msg)

    state = probe(directory).state
    if state is PathState.NOT_EXIST:
        msg = f"{directory!r} does not exist"
        raise InvalidArgumentError(msg)
    if state is not PathState.DIR:
        msg = f"{directory!r} is not a directory"
        raise InvalidArgumentError(msg)


def glob(
    directory: str, pattern: str, rules: PlatformRules = DEFAULT_RULES
) -> list[str]:
    """
    Return canonical paths below *directory* matching *pattern*.

    Wildcards match a single level only, so ``**`` behaves like ``*``.
    Entries that vanish during the scan are skipped and hidden entries are
    matched like any other.

    Raises
    ------
    InvalidArgumentError
        If *pattern* is blank or malformed, or *directory* is not an existing
        directory.
    """
    _validate_glob_target(directory, pattern)
    joined = path_utils.join([globlib.escape(directory), pattern], rules)
    matches = globlib.glob(joined, include_hidden=True)
    return sorted(path_utils.clean(match, rules) for match in matches)


def flip_case(name: str) -> str:
    """Return *name* with the case of its first cased character swapped."""
    for index, char in enumerate(name):
        swapped = char.swapcase()
        if swapped != char:
            return name[:index] + swapped + name[index + 1 :]
    return name


def is_case_sensitive_fs(path: str, rules: PlatformRules = DEFAULT_RULES) -> bool:
    """
    Return whether *path* lives on a case-sensitive filesystem.

    A sibling whose name differs only by the case of one character is
    stat-ed next to *path*. Missing sibling means case-sensitive; a sibling
    that is the same file means case-insensitive. Names without cased
    characters cannot be told apart and are reported as case-sensitive. The
    answer is a snapshot and can be invalidated by concurrent changes.

    Raises
    ------
    NotFoundError
        If *path* does not exist.
    OSError
        For any other stat failure.
    ValueError
        If *path* contains a NUL byte.
    """
    try:
        info = os.stat(path)
    except FileNotFoundError as exc:
        msg = f"{path!r} does not exist"
        raise NotFoundError(msg) from exc

    head, name = decompose.split(path, rules)
    flipped = flip_case(name)
    if flipped == name:
        logger.debug("No cased character in %r; assuming case-sensitive", name)
        return True

    sibling = path_utils.join([head, flipped], rules)
    try:
        sibling_info = os.stat(sibling)
    except FileNotFoundError:
        return True

    return not os.path.samestat(info, sibling_info)


__all__ = [
    "MAX_SYMLINK_HOPS",
    "PathState",
    "Probe",
    "flip_case",
    "glob",
    "is_case_sensitive_fs",
    "probe",
    "resolve_symlinks",
]
