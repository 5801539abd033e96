"""Global test configuration and shared fixtures."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_SYMLINKS_SUPPORTED: bool | None = None


def _can_create_symlink() -> bool:
    """Return ``True`` when the platform allows creating symbolic links."""
    try:
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = Path(tmp_dir) / "target"
            target.touch()
            os.symlink(target, Path(tmp_dir) / "probe")
    except (OSError, NotImplementedError):
        return False
    else:
        return True


def _symlinks_supported() -> bool:
    global _SYMLINKS_SUPPORTED
    if _SYMLINKS_SUPPORTED is None:
        _SYMLINKS_SUPPORTED = _can_create_symlink()
    return _SYMLINKS_SUPPORTED


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers and cache platform capability checks."""
    config.addinivalue_line(
        "markers",
        "requires_symlinks: mark test as requiring symbolic link support",
    )
    _symlinks_supported()


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip tests needing symlinks when the platform disallows them."""
    if _symlinks_supported():
        return
    skip = pytest.mark.skip(
        reason="Symbolic links are not permitted in this environment"
    )
    for item in items:
        if "requires_symlinks" in item.keywords:
            item.add_marker(skip)
