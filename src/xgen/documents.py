"""Settings documents for workspace and playground bundles.

Builds the XML the IDE reads from Contents.xcworkspacedata and
contents.xcplayground. Element names, attribute names and the location
prefix are the IDE's wire format and must not change.

Key functions: workspace_document(), playground_document(), serialize().
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from xml.etree import ElementTree as ET

WORKSPACE_DOCUMENT_NAME = "Contents.xcworkspacedata"
PLAYGROUND_DOCUMENT_NAME = "contents.xcplayground"
PLAYGROUND_SOURCE_NAME = "Contents.swift"

WORKSPACE_VERSION = "1.0"
PLAYGROUND_VERSION = "5.0"

# Locations prefixed with this resolve against the workspace container
LOCATION_PREFIX = "group:"

_INDENT = "   "


def workspace_document(locations: Iterable[str]) -> ET.Element:
    """Build the <Workspace> root with one <FileRef> per relative location, in order."""
    root = ET.Element("Workspace", version=WORKSPACE_VERSION)
    for location in locations:
        ET.SubElement(root, "FileRef", location=f"{LOCATION_PREFIX}{location}")
    return root


def playground_document(platform: str) -> ET.Element:
    """Build the <playground> root for the given lowercase platform identifier."""
    return ET.Element(
        "playground",
        {"version": PLAYGROUND_VERSION, "target-platform": platform},
    )


def serialize(root: ET.Element) -> bytes:
    """Render a document as UTF-8 bytes with an XML declaration.

    Output is deterministic for a given tree, so regenerating an unchanged
    bundle rewrites identical bytes.
    """
    tree = ET.ElementTree(root)
    ET.indent(tree, space=_INDENT, level=0)
    buffer = io.BytesIO()
    tree.write(buffer, encoding="UTF-8", xml_declaration=True)
    return buffer.getvalue() + b"\n"
