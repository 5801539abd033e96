"""Step definitions for path value behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import shutil
import tempfile
import typing as t
from pathlib import Path

from behave import given, then, when  # type: ignore[attr-defined]

from pathvalue import PathValue
from pathvalue.errors import InvalidArgumentError, PathValueError, RelationError
from pathvalue.platform import POSIX_RULES


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    raw: str
    value: PathValue
    directory: PathValue
    result: t.Any
    error: PathValueError | None

    def add_cleanup(self, cleanup_func: t.Callable[..., object], *args: object) -> None:
        """Register *cleanup_func* to run after the scenario."""


@given('the raw path "{raw}"')
def step_raw_path(context: BehaveContext, raw: str) -> None:
    """Remember the raw text exactly as written."""
    context.raw = raw


@given('a directory containing "{first}" and "{second}"')
def step_populated_directory(context: BehaveContext, first: str, second: str) -> None:
    """Create a temporary directory holding *first* and *second*."""
    root = Path(tempfile.mkdtemp()).resolve()
    context.add_cleanup(shutil.rmtree, root)
    for name in (first, second):
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch()
    context.directory = PathValue(root, rules=POSIX_RULES)


@when("I build a path value")
def step_build_value(context: BehaveContext) -> None:
    """Construct a value under POSIX rules."""
    context.value = PathValue(context.raw, rules=POSIX_RULES)


@when('I make "{target}" relative to "{base}"')
def step_make_relative(context: BehaveContext, target: str, base: str) -> None:
    """Compute *target* relative to *base*."""
    context.result = None
    context.error = None
    try:
        context.result = PathValue(target, rules=POSIX_RULES).relative_to(
            PathValue(base, rules=POSIX_RULES)
        )
    except RelationError as exc:
        context.error = exc


@when('I glob the directory for "{pattern}"')
def step_glob(context: BehaveContext, pattern: str) -> None:
    """Glob the scenario directory."""
    context.result = None
    context.error = None
    try:
        context.result = context.directory.glob(pattern)
    except InvalidArgumentError as exc:
        context.error = exc


@then('the canonical form is "{expected}"')
def step_check_canonical(context: BehaveContext, expected: str) -> None:
    """Compare the internal representation."""
    assert context.value.canonical == expected  # noqa: S101


@then('the external form is "{expected}"')
def step_check_external(context: BehaveContext, expected: str) -> None:
    """Compare the escaped external representation."""
    assert str(context.value) == expected  # noqa: S101


@then('the extensions are "{expected}"')
def step_check_extensions(context: BehaveContext, expected: str) -> None:
    """Compare the comma separated extension list."""
    assert context.value.extensions() == expected.split(",")  # noqa: S101


@then('the minimal stem is "{expected}"')
def step_check_minimal_stem(context: BehaveContext, expected: str) -> None:
    """Compare the base name without any extension."""
    assert context.value.minimal_stem() == expected  # noqa: S101


@then('the relative path is "{expected}"')
def step_check_relative(context: BehaveContext, expected: str) -> None:
    """The computed relative value matches *expected*."""
    assert context.error is None  # noqa: S101
    assert context.result == PathValue(expected, rules=POSIX_RULES)  # noqa: S101


@then("a relation error is reported")
def step_check_relation_error(context: BehaveContext) -> None:
    """The paths could not be related."""
    assert isinstance(context.error, RelationError)  # noqa: S101


@then("an invalid argument error is reported")
def step_check_invalid_argument(context: BehaveContext) -> None:
    """The argument was rejected."""
    assert isinstance(context.error, InvalidArgumentError)  # noqa: S101


@then("{count:d} matches are found")
def step_check_match_count(context: BehaveContext, count: int) -> None:
    """The glob produced *count* path values."""
    assert context.error is None  # noqa: S101
    assert len(context.result) == count  # noqa: S101
