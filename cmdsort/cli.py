"""cmdsort command-line interface."""

import click
from rich.console import Console
from rich.markup import escape

from cmdsort import __version__
from cmdsort.commands import check, init, names
from cmdsort.config import CmdsortConfig
from cmdsort.constants import ExitCode
from cmdsort.exceptions import ConfigurationError
from cmdsort.logging import setup_logging

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="cmdsort")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: .cmdsort.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """cmdsort - keep CLI subcommand enums sorted.

    Checks that enums marked with @subcommands list their members in
    alphabetical order of the command names users type.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    # init writes the config file and never reads it
    if ctx.invoked_subcommand == "init":
        config = CmdsortConfig()
    else:
        try:
            config = CmdsortConfig.load(config_path)
        except ConfigurationError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(int(ExitCode.FAILED)) from e

    setup_logging(
        level=log_level or config.logging.level,
        log_dir=config.logging.directory,
        json_output=config.logging.directory is not None,
    )
    ctx.obj["config"] = config


cli.add_command(check)
cli.add_command(init)
cli.add_command(names)


if __name__ == "__main__":
    cli()
