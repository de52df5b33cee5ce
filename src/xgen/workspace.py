"""Workspace bundles referencing projects and embedded playgrounds.

Layout written by WorkspaceGenerator:
  <Name>.xcworkspace/
    Contents.xcworkspacedata   (one FileRef per reference, in insertion order)
    <Embedded>.playground/     (one per embedded playground)

Key classes: Workspace, WorkspaceGenerator.
Reference entries: ProjectReference, EmbeddedPlayground.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from xml.etree import ElementTree as ET

from .documents import WORKSPACE_DOCUMENT_NAME, serialize, workspace_document
from .filesystem import FileWriter
from .paths import bundle_path, relative_path
from .playground import PLAYGROUND_EXTENSION, Platform, Playground, PlaygroundGenerator

logger = logging.getLogger(__name__)

WORKSPACE_EXTENSION = ".xcworkspace"


@dataclass(frozen=True)
class ProjectReference:
    """A project referenced by path. The path is kept exactly as given."""

    path: str | os.PathLike[str]


@dataclass(frozen=True)
class EmbeddedPlayground:
    """A playground generated inside the workspace bundle."""

    name: str
    playground: Playground

    @property
    def bundle_name(self) -> str:
        """Directory name of the playground inside the workspace."""
        return bundle_path(self.name, PLAYGROUND_EXTENSION).name


Reference = ProjectReference | EmbeddedPlayground


class Workspace:
    """In-memory description of a workspace bundle."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = bundle_path(path, WORKSPACE_EXTENSION)
        self.references: list[Reference] = []

    @property
    def path(self) -> Path:
        """Bundle directory. Fixed at construction since embedded playgrounds live under it."""
        return self._path

    def __repr__(self) -> str:
        return f"Workspace(path={str(self.path)!r}, references={len(self.references)})"

    @property
    def projects(self) -> list[ProjectReference]:
        return [r for r in self.references if isinstance(r, ProjectReference)]

    @property
    def playgrounds(self) -> list[Playground]:
        return [r.playground for r in self.references if isinstance(r, EmbeddedPlayground)]

    def add_project(self, path: str | os.PathLike[str]) -> ProjectReference:
        """Reference an existing project. Relative paths resolve against the cwd at generate time."""
        reference = ProjectReference(path)
        self.references.append(reference)
        return reference

    def add_playground(
        self,
        name: str = "Playground",
        platform: Platform = Platform.IOS,
        code: str | None = None,
    ) -> Playground:
        """Embed a new playground, created as ``<name>.playground`` inside the bundle.

        Returns:
            The Playground, which can still be changed before generate().

        Raises:
            ValueError: If the name is not a single directory name, or is
                already used by another embedded playground.
        """
        separators = {"/", os.sep, os.altsep} - {None}
        if name in ("", ".", "..") or any(sep in name for sep in separators):
            raise ValueError(f"Invalid playground name: {name!r}")
        reference = EmbeddedPlayground(
            name, Playground(self.path / name, platform=platform, code=code)
        )
        for existing in self.references:
            if (
                isinstance(existing, EmbeddedPlayground)
                and existing.bundle_name == reference.bundle_name
            ):
                raise ValueError(f"Playground already embedded: {reference.bundle_name}")
        self.references.append(reference)
        return reference.playground

    def generate(self, writer: FileWriter | None = None) -> None:
        """Write the bundle to ``path``. See WorkspaceGenerator.generate()."""
        WorkspaceGenerator(writer).generate(self)


class WorkspaceGenerator:
    """Writes Workspace bundles and their embedded playgrounds."""

    def __init__(self, writer: FileWriter | None = None) -> None:
        self.writer = writer or FileWriter()
        self.playground_generator = PlaygroundGenerator(self.writer)

    def build_document(self, workspace: Workspace) -> ET.Element:
        """Build the settings document with locations relative to the bundle root.

        Raises:
            InvalidPathError: If a reference cannot be expressed relative to
                the workspace.
        """
        root = Path(os.path.abspath(workspace.path))
        locations: list[str] = []
        for reference in workspace.references:
            if isinstance(reference, ProjectReference):
                target = os.path.abspath(reference.path)
            elif isinstance(reference, EmbeddedPlayground):
                target = os.path.abspath(root / reference.bundle_name)
            else:
                raise TypeError(f"Unsupported workspace reference: {reference!r}")
            locations.append(relative_path(root, target))
        return workspace_document(locations)

    def generate(self, workspace: Workspace) -> None:
        """Create the bundle, its embedded playgrounds and the settings document.

        All reference locations are resolved before anything touches the disk.
        A failing write leaves earlier files in place.

        Raises:
            InvalidPathError: If a reference cannot be made relative.
            FileSystemError: If a directory or file cannot be written.
        """
        document = self.build_document(workspace)
        self.writer.create_directory(workspace.path)

        for reference in workspace.references:
            if isinstance(reference, EmbeddedPlayground):
                self.playground_generator.generate(
                    reference.playground, workspace.path / reference.bundle_name
                )

        self.writer.write_file(workspace.path / WORKSPACE_DOCUMENT_NAME, serialize(document))
        logger.info(
            "Generated workspace at %s with %d reference(s)",
            workspace.path,
            len(workspace.references),
        )
