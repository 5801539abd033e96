"""The immutable :class:`PathValue` type."""

from __future__ import annotations

import dataclasses as dc
import logging
import os
from pathlib import Path

from . import _path_utils as path_utils
from . import compose, decompose, equality, fs
from .errors import NotFoundError, PathValueError
from .platform import DEFAULT_RULES, PlatformRules

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True, repr=False)
class PathValue:
    """
    A canonicalized filesystem path.

    The raw string handed to the constructor is trimmed, unescaped and
    lexically cleaned once; :attr:`canonical` is the single source of truth
    for every other method. Instances never change; transformations return
    new values that share the same :class:`PlatformRules`.

    ``str()`` yields the external form (spaces escaped as ``\\ `` under POSIX
    rules) while ``os.fspath()`` yields the canonical form with literal
    spaces, suitable for handing to the operating system.

    Examples
    --------
    >>> PathValue("./foo//bar/../baz.tar.gz").canonical
    'foo/baz.tar.gz'
    >>> str(PathValue("with\\\\ whitespace"))
    'with\\\\ whitespace'
    """

    raw: dc.InitVar[str | os.PathLike[str]] = path_utils.CURRENT_DIR
    rules: PlatformRules = dc.field(
        default=DEFAULT_RULES, kw_only=True, compare=False
    )
    canonical: str = dc.field(init=False)

    def __post_init__(self, raw: str | os.PathLike[str]) -> None:
        """Normalize *raw* into :attr:`canonical`."""
        canonical = path_utils.normalize_path_string(os.fspath(raw), self.rules)
        object.__setattr__(self, "canonical", canonical)

    def _derive(self, canonical: str) -> PathValue:
        """Re-normalize a computed path, as if decoded from its external form."""
        external = path_utils.escape_whitespace(canonical, self.rules)
        return type(self)(external, rules=self.rules)

    # -- constructors -----------------------------------------------------

    @classmethod
    def cwd(cls, *, rules: PlatformRules = DEFAULT_RULES) -> PathValue:
        """Return the process working directory; ``OSError`` if unreadable."""
        return cls(os.getcwd(), rules=rules)

    @classmethod
    def home(cls, *, rules: PlatformRules = DEFAULT_RULES) -> PathValue:
        """Return the user's home directory.

        Raises ``RuntimeError`` when the home directory cannot be determined.
        """
        return cls(Path.home(), rules=rules)

    @classmethod
    def from_parts(
        cls, *parts: str, rules: PlatformRules = DEFAULT_RULES
    ) -> PathValue:
        """Combine *parts* into a new value relative to ``.``."""
        return cls(path_utils.CURRENT_DIR, rules=rules).join_strings(*parts)

    # -- protocols --------------------------------------------------------

    def __str__(self) -> str:
        """Return the external form with whitespace escaped."""
        return path_utils.escape_whitespace(self.canonical, self.rules)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"PathValue({str(self)!r})"

    def __fspath__(self) -> str:
        """Return the canonical form for use with :mod:`os` functions."""
        return self.canonical

    def __truediv__(self, other: PathValue | str) -> PathValue:
        """Join *other* onto this value."""
        if isinstance(other, PathValue):
            return self.join(other)
        if isinstance(other, str):
            return self.join_strings(other)
        return NotImplemented

    def copy(self) -> PathValue:
        """Return an equal but distinct instance."""
        return self._derive(self.canonical)

    # -- decomposition ----------------------------------------------------

    def parts(self) -> list[str]:
        """Return every segment; the root has none."""
        return decompose.parts(self.canonical, self.rules)

    def root(self) -> str:
        """Return the anchor of this value (see :func:`decompose.root`)."""
        return decompose.root(self.canonical, self.rules)

    def parent(self) -> PathValue:
        """Return the containing directory."""
        return self._derive(decompose.parent(self.canonical, self.rules))

    def base(self) -> str:
        """Return the final segment."""
        return decompose.base(self.canonical, self.rules)

    def split(self) -> tuple[PathValue, str]:
        """Return ``(parent, base)``; the root splits into ``(root, "")``."""
        head, tail = decompose.split(self.canonical, self.rules)
        return self._derive(head), tail

    def extension(self) -> str:
        """Return the last extension including its dot, or ``""``."""
        return decompose.extension(self.canonical, self.rules)

    def extensions(self) -> list[str]:
        """Return all extensions of the base name."""
        return decompose.extensions(self.canonical, self.rules)

    def stem(self) -> str:
        """Return the base name without its last extension."""
        return decompose.stem(self.canonical, self.rules)

    def minimal_stem(self) -> str:
        """Return the base name without any extension."""
        return decompose.minimal_stem(self.canonical, self.rules)

    def is_absolute(self) -> bool:
        """Return ``True`` if anchored at a filesystem root."""
        return path_utils.is_absolute(self.canonical, self.rules)

    def is_relative(self) -> bool:
        """Return the inverse of :meth:`is_absolute`."""
        return not self.is_absolute()

    def to_posix(self) -> str:
        """Return the external form using forward slashes."""
        return str(self).replace(self.rules.separator, "/")

    # -- composition ------------------------------------------------------

    def join(self, *others: PathValue) -> PathValue:
        """Return this value with *others* appended lexically."""
        joined = compose.join(
            self.canonical, (other.canonical for other in others), self.rules
        )
        return self._derive(joined)

    def join_strings(self, *others: str) -> PathValue:
        """Append raw strings, normalizing the joined text once."""
        pieces = [str(self), *others]
        joined = self.rules.separator.join(piece for piece in pieces if piece)
        return type(self)(joined, rules=self.rules)

    def with_name(self, name: str) -> PathValue:
        """Return a sibling of this value called *name*."""
        return self.parent().join_strings(name)

    def relative_to(self, other: PathValue) -> PathValue:
        """Return the lexical path from *other* to this value.

        Raises :class:`~pathvalue.errors.RelationError` when no such path
        exists.
        """
        relative = compose.relative(self.canonical, other.canonical, self.rules)
        return self._derive(relative)

    def absolute(self) -> PathValue:
        """Return this value anchored at the working directory if relative."""
        if self.is_absolute():
            return self
        return self.cwd(rules=self.rules).join(self)

    def absolute_to(self, other: PathValue) -> PathValue:
        """Return this value anchored below the absolute *other*.

        Raises :class:`~pathvalue.errors.PreconditionError` when *other* is
        relative and this value is not already absolute.
        """
        if self.is_absolute():
            return self
        return self._derive(
            compose.absolute_to(self.canonical, other.canonical, self.rules)
        )

    # -- filesystem -------------------------------------------------------

    def exists(self) -> bool:
        """Return ``True`` if something exists at this path."""
        return fs.probe(self.canonical).exists

    def is_file(self) -> bool:
        """Return ``True`` if this path is an existing non-directory."""
        return fs.probe(self.canonical).state is fs.PathState.FILE

    def is_dir(self) -> bool:
        """Return ``True`` if this path is an existing directory."""
        return fs.probe(self.canonical).state is fs.PathState.DIR

    def resolve(self) -> PathValue:
        """Return this value with all symbolic links resolved.

        Raises :class:`~pathvalue.errors.NotFoundError` if the path does not
        exist.
        """
        if not self.exists():
            msg = f"{self.canonical!r} does not exist"
            raise NotFoundError(msg)
        return self._derive(fs.resolve_symlinks(self.canonical, self.rules))

    def glob(self, pattern: str) -> list[PathValue]:
        """Return entries of this directory matching *pattern*."""
        matches = fs.glob(self.canonical, pattern, self.rules)
        return [self._derive(match) for match in matches]

    def contains(self, pattern: str) -> bool:
        """Return ``True`` if at least one entry matches *pattern*."""
        return bool(fs.glob(self.canonical, pattern, self.rules))

    def bcontains(self, pattern: str) -> bool:
        """Like :meth:`contains` but answer ``False`` instead of raising."""
        try:
            return self.contains(pattern)
        except (PathValueError, OSError) as exc:
            logger.debug("Glob of %r in %s failed: %s", pattern, self.canonical, exc)
            return False

    def is_case_sensitive_fs(self) -> bool:
        """Return whether this path lives on a case-sensitive filesystem."""
        return fs.is_case_sensitive_fs(self.canonical, self.rules)

    # -- equality ---------------------------------------------------------

    def equals(self, other: PathValue) -> bool:
        """Return ``True`` if both canonical forms match exactly."""
        return self.canonical == other.canonical

    def equals_string(self, other: str) -> bool:
        """Compare against the normalized form of the raw string *other*."""
        return self.canonical == path_utils.normalize_path_string(other, self.rules)

    def equals_ci(self, other: PathValue) -> bool:
        """Compare structurally, ignoring case."""
        return equality.equals_string_ci(str(self), str(other), self.rules)

    def equals_string_ci(self, other: str) -> bool:
        """Compare against the raw string *other*, ignoring case."""
        return equality.equals_string_ci(str(self), other, self.rules)

    def equals_fs(self, other: PathValue) -> bool:
        """Compare as the filesystem would, honouring its case sensitivity."""
        return equality.equals_fs(self.canonical, other.canonical, self.rules)


def is_case_sensitive_fs(path: PathValue) -> bool:
    """Return whether *path* lives on a case-sensitive filesystem."""
    return path.is_case_sensitive_fs()


__all__ = ["PathValue", "is_case_sensitive_fs"]
