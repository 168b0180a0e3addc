"""Main CLI entry point for the Gradle classpath resolver."""

import sys
from pathlib import Path

import click

from src.cli.display import (
    classpath_to_json,
    paths_to_json,
    show_build_script_classpath,
    show_classpath,
    show_error,
)
from src.core.config.settings import Settings, get_settings
from src.core.exceptions.errors import ClasspathError
from src.core.logger.logger import setup_logging
from src.resolvers import GradleClassPathResolver, __version__
from src.resolvers.gradle.resolver import GROOVY_BUILD_FILE, KOTLIN_BUILD_FILE


def find_build_file(path: Path) -> Path:
    """Return the build file for a path that may be a project directory.

    The Kotlin DSL build file wins when a directory has both.
    """
    if path.is_dir():
        for name in (KOTLIN_BUILD_FILE, GROOVY_BUILD_FILE):
            candidate = path / name
            if candidate.exists():
                return candidate
    return path


def create_resolver(ctx: click.Context, path: str) -> GradleClassPathResolver:
    """Create a resolver for PATH or exit with an error panel."""
    build_file = find_build_file(Path(path).absolute())
    settings: Settings = ctx.obj["settings"]
    resolver = GradleClassPathResolver.maybe_create(build_file, settings=settings.gradle)
    if resolver is None:
        show_error("Not a Gradle project", f"No build.gradle or build.gradle.kts at {build_file}")
        sys.exit(1)
    return resolver


@click.group()
@click.version_option(version=__version__, prog_name="gradle-classpath")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML settings file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Resolve Java/Kotlin classpaths of Gradle projects."""
    try:
        settings = Settings.from_yaml(Path(config_path)) if config_path else get_settings()
    except ClasspathError as e:
        show_error("Configuration Error", str(e))
        sys.exit(1)

    setup_logging(settings.logging, level="DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print entries as JSON")
@click.pass_context
def classpath(ctx: click.Context, path: str, as_json: bool) -> None:
    """Resolve the compile classpath of the project at PATH.

    Example:
        gradle-classpath classpath /path/to/project
    """
    resolver = create_resolver(ctx, path)
    try:
        entries = resolver.classpath()
    except ClasspathError as e:
        show_error("Resolution Failed", str(e))
        sys.exit(1)

    if as_json:
        click.echo(classpath_to_json(entries))
    else:
        show_classpath(resolver.project_directory.name, entries)


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print jars as JSON")
@click.pass_context
def buildscript(ctx: click.Context, path: str, as_json: bool) -> None:
    """Resolve the classpath of the build scripts at PATH (Kotlin DSL only).

    Example:
        gradle-classpath buildscript /path/to/project/build.gradle.kts
    """
    resolver = create_resolver(ctx, path)
    try:
        jars = resolver.build_script_classpath()
    except ClasspathError as e:
        show_error("Resolution Failed", str(e))
        sys.exit(1)

    if as_json:
        click.echo(paths_to_json(jars))
    else:
        show_build_script_classpath(resolver.project_directory.name, jars)


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def version(ctx: click.Context, path: str) -> None:
    """Print the build file version used for cache invalidation."""
    resolver = create_resolver(ctx, path)
    click.echo(str(resolver.current_build_file_version()))


if __name__ == "__main__":
    main()
