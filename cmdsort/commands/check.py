"""cmdsort check command - validate subcommand ordering in files."""

import click

from cmdsort.config import CmdsortConfig
from cmdsort.constants import MAX_JOBS, ExitCode, OutputFormat
from cmdsort.files import expand_paths
from cmdsort.logging import get_logger
from cmdsort.report import format_file_result, format_results, overall_passed
from cmdsort.validator import validate_paths

logger = get_logger("check")


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default=None,
    help="Output format (default: text)",
)
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(1, MAX_JOBS),
    default=None,
    help="Number of files validated in parallel",
)
@click.pass_context
def check(
    ctx: click.Context,
    paths: tuple[str, ...],
    output_format: str | None,
    jobs: int | None,
) -> None:
    """Check that subcommand enums are sorted alphabetically.

    PATHS may be files or directories; directories are searched
    recursively for *.py files.

    Examples:

        cmdsort check src/

        cmdsort check app/cli.py --format json

        cmdsort check . -j 8
    """
    config: CmdsortConfig = (ctx.obj or {}).get("config") or CmdsortConfig()
    targets = list(paths) or config.paths
    fmt = output_format or config.output_format

    if not targets:
        click.echo("No files specified", err=True)
        raise SystemExit(int(ExitCode.FAILED))

    files = expand_paths(targets, config.exclude)
    logger.info("Checking %d file(s)", len(files))

    results = validate_paths(files, jobs=jobs or config.jobs)
    passed = overall_passed(results)

    if fmt == OutputFormat.TEXT.value:
        for result in results:
            click.echo(format_file_result(result), err=not result.passed)
    else:
        click.echo(format_results(results, fmt))

    raise SystemExit(int(ExitCode.OK if passed else ExitCode.FAILED))
