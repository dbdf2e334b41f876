"""cmdsort init command - write a starter configuration file."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from cmdsort.config import CmdsortConfig
from cmdsort.constants import DEFAULT_CONFIG_PATH, MAX_JOBS, OutputFormat
from cmdsort.logging import get_logger

console = Console()
logger = get_logger("init")


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Default output format",
)
@click.option("--jobs", "-j", type=click.IntRange(1, MAX_JOBS), default=1, help="Default worker count")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.pass_context
def init(
    ctx: click.Context,
    paths: tuple[str, ...],
    output_format: str,
    jobs: int,
    force: bool,
) -> None:
    """Create a .cmdsort.yaml configuration file.

    PATHS become the default targets of `cmdsort check` (default: .).
    The file is written where --config points, else in the working
    directory.

    Examples:

        cmdsort init

        cmdsort init src tools --jobs 4
    """
    config_path = Path((ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH)

    if config_path.exists() and not force:
        console.print(f"[yellow]{escape(str(config_path))} already exists.[/yellow]")
        console.print("Use [cyan]--force[/cyan] to overwrite.")
        return

    config = CmdsortConfig(paths=list(paths) or ["."], jobs=jobs, output_format=output_format)
    config.save(config_path)
    logger.info("Wrote configuration", extra={"path": str(config_path)})

    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")
