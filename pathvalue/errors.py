"""Exception hierarchy raised by :mod:`pathvalue`."""

from __future__ import annotations


class PathValueError(Exception):
    """Base class for all pathvalue errors."""


class NotFoundError(PathValueError, FileNotFoundError):
    """Raised when an operation requires an existing path that is missing."""


class InvalidArgumentError(PathValueError, ValueError):
    """Raised for unusable arguments such as blank glob patterns."""


class RelationError(PathValueError, ValueError):
    """Raised when no lexical relative path links two values."""


class PreconditionError(PathValueError, ValueError):
    """Raised when an operation's precondition on its operands is violated."""


__all__ = [
    "InvalidArgumentError",
    "NotFoundError",
    "PathValueError",
    "PreconditionError",
    "RelationError",
]
