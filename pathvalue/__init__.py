"""Canonical, immutable filesystem path values.

:class:`PathValue` normalizes any path string once at construction and
derives every structural view (parts, root, parent, stem, extensions) and
composition (join, relative_to, absolute_to) from that canonical form. A few
methods consult the filesystem: existence probes, symlink resolution, glob
matching and case-sensitivity detection.
"""

from __future__ import annotations

from .errors import (
    InvalidArgumentError,
    NotFoundError,
    PathValueError,
    PreconditionError,
    RelationError,
)
from .fs import PathState, Probe
from .path import PathValue, is_case_sensitive_fs
from .platform import (
    DEFAULT_RULES,
    PLATFORM_OVERRIDE_ENV,
    POSIX_RULES,
    WINDOWS_RULES,
    PlatformRules,
    rules_for_platform,
)
from .serialization import (
    PathValueJSONEncoder,
    decode,
    dump_paths,
    encode,
    load_paths,
)

__all__ = [
    "DEFAULT_RULES",
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_RULES",
    "WINDOWS_RULES",
    "InvalidArgumentError",
    "NotFoundError",
    "PathState",
    "PathValue",
    "PathValueError",
    "PathValueJSONEncoder",
    "PlatformRules",
    "PreconditionError",
    "Probe",
    "RelationError",
    "decode",
    "dump_paths",
    "encode",
    "is_case_sensitive_fs",
    "load_paths",
    "rules_for_platform",
]
