"""Platform rules shared across pathvalue modules.

Separator and whitespace-escaping behaviour differ between Windows and POSIX
hosts. Everything platform specific is gathered in :class:`PlatformRules`,
resolved once at import time as :data:`DEFAULT_RULES` and passed explicitly
to the lexical helpers.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import ntpath
import os
import posixpath
import sys
import types
import typing as t

logger = logging.getLogger(__name__)

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATHVALUE_PLATFORM_OVERRIDE"

_KNOWN_PREFIXES: t.Final[tuple[str, ...]] = (
    "win",
    "linux",
    "darwin",
    "freebsd",
    "openbsd",
    "netbsd",
    "cygwin",
    "aix",
    "sunos",
    "emscripten",
    "wasi",
)


@dc.dataclass(frozen=True, slots=True)
class PlatformRules:
    """
    Lexical conventions of a target platform.

    Attributes
    ----------
    name : str
        Short label used in reprs and log messages.
    separator : str
        The directory separator emitted in canonical paths.
    escapes_whitespace : bool
        Whether ``\\ `` denotes an escaped space and bare backslashes act as
        separators.
    module : types.ModuleType
        The ``os.path`` flavour (:mod:`posixpath` or :mod:`ntpath`) used for
        absolute-path checks and Windows cleaning.
    """

    name: str
    separator: str
    escapes_whitespace: bool
    module: types.ModuleType = dc.field(repr=False)

    @property
    def is_windows(self) -> bool:
        """Return ``True`` when these rules describe Windows paths."""
        return self.module is ntpath


POSIX_RULES: t.Final[PlatformRules] = PlatformRules(
    name="posix", separator="/", escapes_whitespace=True, module=posixpath
)
WINDOWS_RULES: t.Final[PlatformRules] = PlatformRules(
    name="windows", separator="\\", escapes_whitespace=False, module=ntpath
)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        normalised = _normalise(override)
        if not normalised.startswith(_KNOWN_PREFIXES):
            logger.warning(
                "Unrecognised %s value %r; assuming POSIX path rules",
                PLATFORM_OVERRIDE_ENV,
                override,
            )
        return normalised

    return _normalise(sys.platform)


def rules_for_platform(platform: str | None = None) -> PlatformRules:
    """Return the path rules for *platform* (default: current host)."""
    if _current_platform(platform).startswith("win"):
        return WINDOWS_RULES
    return POSIX_RULES


DEFAULT_RULES: t.Final[PlatformRules] = rules_for_platform()


__all__ = [
    "DEFAULT_RULES",
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_RULES",
    "WINDOWS_RULES",
    "PlatformRules",
    "rules_for_platform",
]
