"""Command line entry point.

  xgen workspace PATH   - generate a .xcworkspace referencing projects and
                          embedding new playgrounds.
  xgen playground PATH  - generate a standalone .playground.

Defaults for platform and playground name come from load_settings().
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .errors import XgenError
from .playground import Platform, Playground
from .settings import GeneratorSettings, load_settings
from .workspace import Workspace

logger = logging.getLogger(__name__)


def _setup(verbose: bool) -> GeneratorSettings:
    """Configure logging and load settings, turning bad settings into a usage error."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else settings.log_level
    logging.getLogger("xgen").setLevel(level)
    logger.debug("Using settings: %s", settings)
    return settings


def _parse_platform(value: str | None, settings: GeneratorSettings) -> Platform:
    if value is None:
        return settings.default_platform
    try:
        return Platform.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--platform") from e


@click.group()
@click.version_option(package_name="xgen")
def main() -> None:
    """Xgen - generate Xcode workspaces and playgrounds."""


@main.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--project", "projects", multiple=True, type=click.Path(path_type=Path),
    help="Project to reference (repeatable).",
)
@click.option(
    "--playground", "playgrounds", multiple=True,
    help="Name of a playground to embed (repeatable).",
)
@click.option("--platform", default=None, help="Platform for embedded playgrounds (ios, macos, tvos).")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def workspace(
    path: Path,
    projects: tuple[Path, ...],
    playgrounds: tuple[str, ...],
    platform: str | None,
    verbose: bool,
) -> None:
    """Generate a workspace bundle at PATH."""
    settings = _setup(verbose)
    target_platform = _parse_platform(platform, settings)

    ws = Workspace(path)
    for project in projects:
        ws.add_project(project)
    try:
        for name in playgrounds:
            ws.add_playground(name, platform=target_platform)
        ws.generate()
    except (XgenError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Workspace generated: {ws.path}")


@main.command()
@click.argument("path", type=click.Path(path_type=Path), required=False)
@click.option("--platform", default=None, help="Target platform (ios, macos, tvos).")
@click.option("--code", default=None, help="Source code for Contents.swift.")
@click.option(
    "--code-file", default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the source code from a file.",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def playground(
    path: Path | None,
    platform: str | None,
    code: str | None,
    code_file: Path | None,
    verbose: bool,
) -> None:
    """Generate a playground bundle at PATH (defaults to the configured name in the cwd)."""
    if code is not None and code_file is not None:
        raise click.UsageError("--code and --code-file are mutually exclusive.")

    settings = _setup(verbose)
    target_platform = _parse_platform(platform, settings)

    if code_file is not None:
        # Decode the raw bytes so line endings reach Contents.swift unchanged
        try:
            code = code_file.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise click.ClickException(f"{code_file} is not valid UTF-8: {e}") from e

    pg = Playground(
        path if path is not None else Path(settings.default_playground_name),
        platform=target_platform,
        code=code,
    )
    try:
        pg.generate()
    except XgenError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Playground generated: {pg.path}")
