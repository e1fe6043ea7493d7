"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from weathr import __version__
from weathr.cli.context import CliContext
from weathr.core.exceptions import WeathrError


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Custom configuration file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="weathr")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    """weathr - current weather in your terminal.

    Without a command, shows the live view (press 'q' to quit).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = CliContext.create(config_file=config_file, verbose=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(run.run)


# Import and register commands
from weathr.cli.commands import config, now, run

cli.add_command(run.run)
cli.add_command(now.now)
cli.add_command(config.config)


def main() -> None:
    """Main entry point."""
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        # Ctrl+C arrives here as Abort
        raise SystemExit(0)
    except click.ClickException as e:
        e.show()
        raise SystemExit(e.exit_code)
    except WeathrError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
