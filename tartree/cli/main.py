# tartree/cli/main.py
"""Main CLI entry point for tartree"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api.archiver import Archiver
from ..api.exceptions import ConfigError
from ..constants import APP_NAME, LOG_FORMAT
from ..models.config import ArchiveConfig
from ..services.config_service import ConfigService
from .utils.output import console, print_error

# Import all commands
from .commands import (
    create,
    extract,
    compress,
    listing,
)


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False,
                  default_level: str = "WARNING") -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        quiet: Only log errors
        default_level: Level used when neither flag is given
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, default_level, logging.WARNING)

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )
    # basicConfig leaves an already configured root logger alone
    logging.getLogger().setLevel(level)


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context

        Args:
            config_path: Explicit configuration file
        """
        self.config_service = ConfigService(config_path)
        self._archiver: Optional[Archiver] = None
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def config(self) -> ArchiveConfig:
        return self.config_service.config

    @property
    def archiver(self) -> Archiver:
        """Archiver built from the loaded configuration"""
        if self._archiver is None:
            self._archiver = Archiver(self.config)
        return self._archiver


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Only log errors')
@click.option(
    '--config', 'config_path',
    type=click.Path(path_type=Path, dir_okay=False),
    help='Configuration file (default: .tartree.yaml)'
)
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """tartree - Pack directories into tar archives and back

    Creates .tar archives from directory trees, gzips existing .tar files,
    and extracts .tar and .tar.gz archives into directories.
    """
    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug

    try:
        config = ctx.obj.config
    except ConfigError as e:
        print_error("Invalid configuration", e)
        ctx.exit(1)

    setup_logging(verbose=verbose, debug=debug, quiet=quiet, default_level=config.log_level)


# Register commands
cli.add_command(create.create)
cli.add_command(extract.extract)
cli.add_command(compress.gzip_command)
cli.add_command(listing.list_command)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
