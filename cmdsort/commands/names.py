"""cmdsort names command - show how member names resolve."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdsort.constants import ExitCode
from cmdsort.exceptions import ParseError, SourceIOError
from cmdsort.extractor import extract_declarations, parse_source
from cmdsort.naming import resolve_name
from cmdsort.validator import read_source

console = Console()


@click.command()
@click.argument("file", type=click.Path())
def names(file: str) -> None:
    """Show the effective command name of every subcommand enum member.

    Examples:

        cmdsort names app/cli.py
    """
    try:
        unit = parse_source(read_source(file), file)
    except (ParseError, SourceIOError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(int(ExitCode.FAILED)) from e

    declarations = extract_declarations(unit)
    if not declarations:
        console.print(f"[yellow]No subcommand enums found in {escape(file)}[/yellow]")
        return

    for declaration in declarations:
        resolved = [resolve_name(m) for m in declaration.members]
        # Stable sort of member indices gives each member its target slot
        order = sorted(range(len(resolved)), key=resolved.__getitem__)
        sorted_position = {index: pos for pos, index in enumerate(order)}

        table = Table(title=f"{escape(declaration.qualname)} (line {declaration.lineno})")
        table.add_column("#", justify="right")
        table.add_column("Member", style="cyan")
        table.add_column("Override")
        table.add_column("Command name", style="bold")
        table.add_column("Sorted position", justify="right")

        for member, name in zip(declaration.members, resolved, strict=True):
            override = escape(member.override) if member.override is not None else "[dim]-[/dim]"
            position = sorted_position[member.position]
            marker = "" if position == member.position else " [red]✗[/red]"
            table.add_row(
                str(member.position),
                escape(member.identifier),
                override,
                escape(name),
                f"{position}{marker}",
            )

        console.print(table)
