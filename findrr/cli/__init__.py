"""Command-line interface."""

import logging
from pathlib import Path

import click

from ..config.settings import configure_logging, load_config
from ..core.arguments import HELP_TEXT, ArgumentError, parse_arguments
from ..core.executor import ExecutionError, Executor
from ..core.walker import TreeWalker

logger = logging.getLogger(__name__)


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (YAML) for logging",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: tuple[str, ...], config_file: Path | None, verbose: bool):
    """Find files under a path by inode, name, size or hardlink count.

    ARGS: root path followed by option/value pairs (-inum, -name, -size,
    -nlinks, -exec)
    """
    click.echo(HELP_TEXT)

    settings = load_config(config_file)
    configure_logging(settings, verbose)

    if not args:
        click.echo("Wrong usage, see help", err=True)

    try:
        filters = parse_arguments(list(args))
    except ArgumentError as e:
        raise click.ClickException(f"{e}, see help") from e

    if not filters.has_filters:
        logger.debug("No filters given, every non-directory entry matches")

    walker = TreeWalker(filters)
    result = walker.walk()
    logger.debug(
        f"Traversal of {filters.root} done: {len(result)} match(es), "
        f"{len(walker.skipped)} skipped"
    )

    for path in result:
        click.echo(path)

    if filters.exec_path is not None:
        try:
            Executor(filters.exec_path).run(result)
        except ExecutionError as e:
            raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
