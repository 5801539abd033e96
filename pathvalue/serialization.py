"""Text and JSON serialization for :class:`~pathvalue.path.PathValue`.

A value travels as its external form (``str(value)``), which is what
configuration files and structured documents should store. Decoding feeds
the text back through the normalizer, so ``decode(encode(v)) == v`` for
every value.
"""

from __future__ import annotations

import json
import typing as t

from .path import PathValue
from .platform import DEFAULT_RULES, PlatformRules

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from collections.abc import Iterable


def encode(value: PathValue) -> str:
    """Return the external text form of *value*."""
    return str(value)


def decode(text: str | bytes, *, rules: PlatformRules = DEFAULT_RULES) -> PathValue:
    """Build a value from *text*; bytes are decoded as UTF-8."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return PathValue(text, rules=rules)


class PathValueJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes :class:`PathValue` objects as strings."""

    def default(self, o: object) -> t.Any:  # noqa: ANN401 - JSONEncoder contract
        """Encode path values, deferring everything else to the base class."""
        if isinstance(o, PathValue):
            return encode(o)
        return json.JSONEncoder.default(self, o)


def dump_paths(values: Iterable[PathValue], *, indent: int | None = None) -> str:
    """Serialize *values* as a JSON array of external forms."""
    return json.dumps([encode(value) for value in values], indent=indent)


def load_paths(
    text: str | bytes, *, rules: PlatformRules = DEFAULT_RULES
) -> list[PathValue]:
    """
    Parse a JSON array of path strings.

    Parameters
    ----------
    text : str | bytes
        JSON document whose top level is an array of strings.
    rules : PlatformRules, optional
        Platform conventions for the decoded values.

    Returns
    -------
    list[PathValue]
        One value per array element, in document order.

    Raises
    ------
    json.JSONDecodeError
        If *text* is not valid JSON.
    TypeError
        If the document is not an array or an element is not a string.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        actual = type(data).__name__
        msg = f"Expected a JSON array of paths, got {actual}"
        raise TypeError(msg)

    values: list[PathValue] = []
    for index, item in enumerate(data):
        if not isinstance(item, str):
            actual = type(item).__name__
            msg = f"Path entry {index} must be a string, got {actual}"
            raise TypeError(msg)
        values.append(decode(item, rules=rules))
    return values


__all__ = [
    "PathValueJSONEncoder",
    "decode",
    "dump_paths",
    "encode",
    "load_paths",
]
