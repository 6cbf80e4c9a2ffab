"""
Weex CLI - inspect plugins, run their commands and patch files.

A thin front end over the plugin loader and the patching extension.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weex.logging_config import setup_logging

app = typer.Typer(
    name="weex",
    help="Weex - plugin loading and file patching for command-line tools",
    no_args_is_help=True,
)

console = Console()


def _init_logging() -> None:
    # Fall back to console logging if the log directory is not writable
    try:
        setup_logging(context="cli")
    except PermissionError:
        import logging

        logging.basicConfig(level=logging.WARNING)


@app.command()
def inspect(
    directory: str = typer.Argument(..., help="Plugin directory"),
    name: Optional[str] = typer.Option(None, help="Override the plugin name"),
    hidden: bool = typer.Option(False, "--hidden", help="Load the plugin as hidden"),
) -> None:
    """
    Show what a plugin directory provides.

    Lists the plugin's commands, extensions and defaults without running
    any of them.
    """
    from weex.exceptions import WeexError
    from weex.loaders import load_plugin_from_directory

    _init_logging()

    try:
        plugin = load_plugin_from_directory(directory, {"name": name, "hidden": hidden})
    except WeexError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold blue]Plugin:[/bold blue] {escape(plugin.name)}")
    console.print(f"  Directory: {escape(plugin.directory)}")
    console.print(f"  Hidden: {plugin.hidden}")
    if plugin.description:
        console.print(f"  Description: {escape(plugin.description)}")
    console.print(f"  Defaults: {escape(str(plugin.defaults))}")
    console.print()

    if plugin.commands:
        table = Table(title="Commands")
        table.add_column("Name")
        table.add_column("Path")
        table.add_column("Hidden")
        table.add_column("Description")
        for command in plugin.commands:
            table.add_row(
                escape(command.name),
                escape(" ".join(command.command_path)),
                "yes" if command.hidden else "",
                escape(command.description),
            )
        console.print(table)
    else:
        console.print("[yellow]No commands found[/yellow]")

    if plugin.extensions:
        table = Table(title="Extensions")
        table.add_column("Name")
        table.add_column("Description")
        for extension in plugin.extensions:
            table.add_row(escape(extension.name), escape(extension.description))
        console.print(table)
    else:
        console.print("[yellow]No extensions found[/yellow]")


@app.command()
def run(
    directory: str = typer.Argument(..., help="Plugin directory"),
    command: str = typer.Argument(..., help="Command name or alias"),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments for the command"),
) -> None:
    """
    Run a plugin command.

    Builds a toolbox with the built-in extensions and the plugin's own
    extensions, then calls the command's ``run(toolbox, *args)``.
    """
    from weex.core.toolbox import Toolbox
    from weex.exceptions import WeexError
    from weex.extensions import BUILTIN_EXTENSIONS
    from weex.loaders import load_plugin_from_directory

    _init_logging()

    try:
        plugin = load_plugin_from_directory(directory)
        found = plugin.find_command(command)
        if found is None:
            console.print(
                f"[bold red]Error:[/bold red] Command not found in "
                f"{escape(plugin.name)}: {escape(command)}"
            )
            raise typer.Exit(1)

        toolbox = Toolbox(plugin=plugin, parameters=list(args or []))
        for install in BUILTIN_EXTENSIONS:
            install(toolbox)
        toolbox.setup_extensions(plugin.extensions)

        result = found.run(toolbox, *(args or []))
    except WeexError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if result is not None:
        console.print(result, markup=False, highlight=False)


@app.command()
def patch(
    file: str = typer.Argument(..., help="File to patch"),
    replace: Optional[str] = typer.Option(None, help="Text to replace with --insert"),
    before: Optional[str] = typer.Option(None, help="Insert before this text"),
    after: Optional[str] = typer.Option(None, help="Insert after this text"),
    delete: Optional[str] = typer.Option(None, help="Text to delete"),
    insert: Optional[str] = typer.Option(None, help="Text to insert"),
) -> None:
    """
    Patch a text file in place.

    Exactly one of --replace, --before, --after or --delete must be given.
    """
    from weex.exceptions import WeexError
    from weex.extensions import patching

    _init_logging()

    spec = {
        key: value
        for key, value in {
            "replace": replace,
            "before": before,
            "after": after,
            "delete": delete,
            "insert": insert,
        }.items()
        if value is not None
    }

    try:
        patching.patch(file, spec)
    except FileNotFoundError:
        console.print(f"[bold red]Error:[/bold red] File not found: {escape(file)}")
        raise typer.Exit(1)
    except WeexError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]✓ Patched {escape(file)}[/green]")


if __name__ == "__main__":
    app()
