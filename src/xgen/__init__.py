"""Xgen - generate Xcode workspaces and playgrounds from Python.

Build a Workspace or Playground in memory, tweak it, then call generate()
to write the bundle the IDE opens as is.
"""

from .errors import FileSystemError, InvalidPathError, XgenError
from .paths import relative_path
from .playground import Platform, Playground, PlaygroundGenerator, default_code
from .workspace import EmbeddedPlayground, ProjectReference, Workspace, WorkspaceGenerator

__version__ = "0.1.0"

__all__ = [
    "EmbeddedPlayground",
    "FileSystemError",
    "InvalidPathError",
    "Platform",
    "Playground",
    "PlaygroundGenerator",
    "ProjectReference",
    "Workspace",
    "WorkspaceGenerator",
    "XgenError",
    "default_code",
    "relative_path",
]
