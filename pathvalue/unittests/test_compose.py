"""Unit tests for lexical path composition."""

from __future__ import annotations

import pytest

from pathvalue import compose
from pathvalue._path_utils import normalize_path_string
from pathvalue.errors import PreconditionError, RelationError
from pathvalue.platform import POSIX_RULES, WINDOWS_RULES


def _canon(raw: str) -> str:
    return normalize_path_string(raw, POSIX_RULES)


@pytest.mark.parametrize(
    ("first", "others", "expected"),
    [
        ("/", ["."], "/"),
        ("/", ["foo"], "/foo"),
        ("/", ["../"], "/"),
        ("/", ["../b"], "/b"),
        ("a", ["b"], "a/b"),
        ("a", ["../b"], "b"),
        ("../a", ["../b"], "../b"),
        ("../a", ["../../b"], "../../b"),
        ("a", ["/b", "/c"], "a/b/c"),
    ],
)
def test_join(first: str, others: list[str], expected: str) -> None:
    """Later absolute operands are appended rather than replacing the base."""
    canonical_others = [_canon(other) for other in others]
    assert compose.join(_canon(first), canonical_others, POSIX_RULES) == expected


@pytest.mark.parametrize(
    ("target", "base", "expected"),
    [
        ("/a/b", "/", "a/b"),
        ("/a/b", "/a", "b"),
        ("a/b", "a", "b"),
        ("a/b/d", "a/b/c", "../d"),
        ("/b", "/a", "../b"),
        ("/b/d", "/a/c", "../../b/d"),
        ("/", "/a/b", "../.."),
        ("../b", "a/b", "../../../b"),
        ("a/b\\ whitespace/c", "a/d", "../b whitespace/c"),
        ("foo", "foo", "."),
        ("foo", ".", "foo"),
        (".", "foo", ".."),
    ],
)
def test_relative(target: str, base: str, expected: str) -> None:
    """Relative paths climb out of the unshared part of the base."""
    result = compose.relative(_canon(target), _canon(base), POSIX_RULES)
    assert result == expected


@pytest.mark.parametrize(
    ("target", "base"),
    [
        ("", "/a/b"),
        ("../", "/a/b"),
        ("/a", "a"),
        ("a", "../b"),
    ],
)
def test_relative_raises_when_unrelated(target: str, base: str) -> None:
    """Mixed anchoring or an unresolvable ``..`` in the base is rejected."""
    with pytest.raises(RelationError, match="cannot make"):
        compose.relative(_canon(target), _canon(base), POSIX_RULES)


def test_relative_windows_ignores_case_and_checks_drive() -> None:
    """Windows rules compare segments case-insensitively and per drive."""
    target = normalize_path_string("C:/Data/Logs/app.log", WINDOWS_RULES)
    base = normalize_path_string("c:/data", WINDOWS_RULES)
    assert compose.relative(target, base, WINDOWS_RULES) == "Logs\\app.log"

    other_drive = normalize_path_string("D:/data", WINDOWS_RULES)
    with pytest.raises(RelationError):
        compose.relative(target, other_drive, WINDOWS_RULES)


@pytest.mark.parametrize(
    ("path", "base", "expected"),
    [
        ("/", ".", "/"),
        (".", "/foo", "/foo"),
        ("hello", "/foo", "/foo/hello"),
        ("../hello", "/foo", "/hello"),
        ("hello/bar", "/foo", "/foo/hello/bar"),
    ],
)
def test_absolute_to(path: str, base: str, expected: str) -> None:
    """Relative paths are anchored below the absolute base."""
    assert compose.absolute_to(_canon(path), _canon(base), POSIX_RULES) == expected


def test_absolute_to_requires_absolute_base() -> None:
    """A relative base cannot anchor a relative path."""
    with pytest.raises(PreconditionError, match="other path must be absolute"):
        compose.absolute_to(".", ".", POSIX_RULES)
