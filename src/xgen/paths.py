"""Path helpers for bundles and the references inside them.

Key functions: relative_path(), bundle_path().
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from pathlib import Path, PurePath, PureWindowsPath

from .errors import InvalidPathError


def _as_pure_path(path: str | PurePath) -> PurePath:
    """Collapse "." and ".." components, keeping the path flavour."""
    if isinstance(path, PurePath):
        if isinstance(path, PureWindowsPath):
            return type(path)(ntpath.normpath(path))
        return type(path)(posixpath.normpath(path))
    return PurePath(os.path.normpath(path))


def relative_path(base: str | PurePath, target: str | PurePath) -> str:
    """Return ``target`` expressed relative to the ``base`` directory.

    Components are always joined with ``/`` since the result is written into
    settings documents, not used to open files.

    Args:
        base: Absolute path of the directory the result is relative to.
        target: Absolute path to reference.

    Returns:
        The relative path, or ``"."`` when both paths are the same.

    Raises:
        InvalidPathError: If either path is not absolute, or the paths live
            under different anchors (e.g. two Windows drives).
    """
    base_path = _as_pure_path(base)
    target_path = _as_pure_path(target)

    if not base_path.is_absolute():
        raise InvalidPathError(base, target, "base path is not absolute")
    if not target_path.is_absolute():
        raise InvalidPathError(base, target, "target path is not absolute")
    if base_path.anchor != target_path.anchor:
        raise InvalidPathError(base, target, "paths do not share a common root")

    base_parts = base_path.parts[1:]
    target_parts = target_path.parts[1:]

    common = 0
    for base_part, target_part in zip(base_parts, target_parts):
        if base_part != target_part:
            break
        common += 1

    parts = [".."] * (len(base_parts) - common) + list(target_parts[common:])
    return "/".join(parts) or "."


def bundle_path(path: str | os.PathLike[str], extension: str) -> Path:
    """Return ``path`` with the bundle ``extension`` appended unless already present.

    ``bundle_path("out/Demo", ".playground")`` and
    ``bundle_path("out/Demo.playground", ".playground")`` both give
    ``out/Demo.playground``.
    """
    result = Path(path)
    if result.suffix != extension:
        result = result.with_name(result.name + extension)
    return result
