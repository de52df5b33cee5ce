"""Exceptions raised by the generators."""

from __future__ import annotations

from pathlib import PurePath


class XgenError(Exception):
    """Base class for all errors raised by xgen."""


class InvalidPathError(XgenError):
    """A path cannot be expressed relative to its containing bundle."""

    def __init__(self, base: str | PurePath, target: str | PurePath, reason: str) -> None:
        super().__init__(f"Cannot reference {target} from {base}: {reason}")
        self.base = base
        self.target = target


class FileSystemError(XgenError):
    """Creating a directory or writing a file failed."""

    def __init__(self, path: PurePath, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
