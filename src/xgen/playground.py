"""Playground bundles: a code snippet plus its target platform.

A Playground is plain configuration; PlaygroundGenerator writes it out as:
  <Name>.playground/
    Contents.swift          (code, verbatim)
    contents.xcplayground   (settings document naming the platform)

Key classes: Platform, Playground, PlaygroundGenerator.
Key function: default_code().
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from pathlib import Path

from .documents import (
    PLAYGROUND_DOCUMENT_NAME,
    PLAYGROUND_SOURCE_NAME,
    playground_document,
    serialize,
)
from .filesystem import FileWriter
from .paths import bundle_path

logger = logging.getLogger(__name__)

PLAYGROUND_EXTENSION = ".playground"


class Platform(StrEnum):
    """Platform a playground runs on. Values are the IDE's identifiers."""

    IOS = "ios"
    MACOS = "macos"
    TVOS = "tvos"

    @classmethod
    def parse(cls, value: str) -> Platform:
        """Look up a platform by name, ignoring case ("iOS", "macos", ...)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown platform: {value!r} (expected one of {names})"
            ) from None


_DEFAULT_CODE = {
    Platform.IOS: 'import UIKit\n\nvar str = "Hello, playground"\n',
    Platform.MACOS: 'import Cocoa\n\nvar str = "Hello, playground"\n',
    Platform.TVOS: 'import UIKit\n\nvar str = "Hello, playground"\n',
}


def default_code(platform: Platform) -> str:
    """Return the boilerplate snippet used when no code was supplied."""
    return _DEFAULT_CODE[platform]


class Playground:
    """In-memory description of a playground bundle.

    Until ``code`` is set explicitly it tracks ``platform``: switching the
    platform swaps in that platform's default snippet. Custom code is never
    touched by platform changes.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        platform: Platform = Platform.IOS,
        code: str | None = None,
    ) -> None:
        self.path = bundle_path(path, PLAYGROUND_EXTENSION)
        self._platform = platform
        self._code_is_default = code is None
        self._code = default_code(platform) if code is None else code

    def __repr__(self) -> str:
        return f"Playground(path={str(self.path)!r}, platform={self._platform.value!r})"

    @property
    def name(self) -> str:
        """Bundle name without the .playground extension."""
        return self.path.stem

    @property
    def platform(self) -> Platform:
        return self._platform

    @platform.setter
    def platform(self, platform: Platform) -> None:
        self._platform = platform
        if self._code_is_default:
            self._code = default_code(platform)

    @property
    def code(self) -> str:
        return self._code

    @code.setter
    def code(self, code: str) -> None:
        self._code = code
        self._code_is_default = False

    @property
    def code_is_default(self) -> bool:
        """True while the code is still the platform's default snippet."""
        return self._code_is_default

    def generate(self, writer: FileWriter | None = None) -> None:
        """Write the bundle to ``path``. See PlaygroundGenerator.generate()."""
        PlaygroundGenerator(writer).generate(self)


class PlaygroundGenerator:
    """Writes Playground bundles through a FileWriter."""

    def __init__(self, writer: FileWriter | None = None) -> None:
        self.writer = writer or FileWriter()

    def generate(self, playground: Playground, root: Path | None = None) -> None:
        """Create the bundle directory, the code file and the settings document.

        ``root`` overrides ``playground.path``; workspaces use it to place
        embedded playgrounds inside their own bundle.

        Safe to call repeatedly; existing files are overwritten with the same
        content. Nothing is cleaned up if a write fails midway.

        Raises:
            FileSystemError: If a directory or file cannot be written.
        """
        if root is None:
            root = playground.path
        self.writer.create_directory(root)
        self.writer.write_file(
            root / PLAYGROUND_SOURCE_NAME, playground.code.encode("utf-8")
        )
        document = playground_document(playground.platform.value)
        self.writer.write_file(root / PLAYGROUND_DOCUMENT_NAME, serialize(document))
        logger.info(
            "Generated %s playground at %s", playground.platform.value, root
        )
