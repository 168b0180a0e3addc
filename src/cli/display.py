"""Display components for CLI using Rich."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.models.classpath import ClassPathEntry

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_info(title: str, message: str) -> None:
    """Display an info message."""
    console.print()
    console.print(
        Panel(
            escape(message),
            title=f"[bold]{escape(title)}[/]",
            border_style="blue",
        )
    )


def show_classpath(project: str, entries: set[ClassPathEntry]) -> None:
    """Display resolved classpath entries in a table.

    Args:
        project: Project name used in the table title.
        entries: Entries to display.
    """
    if not entries:
        show_info("Classpath", f"No dependencies resolved for '{project}'")
        return

    table = Table(title=f"[bold]Classpath of {escape(project)}[/]")
    table.add_column("Compiled", style="cyan", overflow="fold")
    table.add_column("Sources", style="white", overflow="fold")

    for entry in sorted(entries, key=lambda e: str(e.compiled_jar)):
        table.add_row(
            escape(str(entry.compiled_jar)),
            escape(str(entry.source_jar)) if entry.source_jar else "[dim]-[/]",
        )

    console.print(table)
    console.print(f"[dim]{len(entries)} entries[/]")


def show_build_script_classpath(project: str, jars: set[Path]) -> None:
    """Display build script classpath jars."""
    if not jars:
        show_info("Build script classpath", f"No build script dependencies for '{project}'")
        return

    table = Table(title=f"[bold]Build script classpath of {escape(project)}[/]")
    table.add_column("Jar", style="cyan", overflow="fold")
    for jar in sorted(jars, key=str):
        table.add_row(escape(str(jar)))

    console.print(table)


def classpath_to_json(entries: set[ClassPathEntry]) -> str:
    """Serialize entries as a JSON array sorted by compiled jar."""
    ordered = sorted(entries, key=lambda e: str(e.compiled_jar))
    return json.dumps([entry.model_dump(mode="json") for entry in ordered], indent=2)


def paths_to_json(paths: set[Path]) -> str:
    """Serialize paths as a sorted JSON array."""
    return json.dumps(sorted(str(path) for path in paths), indent=2)
