"""List command implementation"""

from pathlib import Path

import click

from ..utils.output import format_contents, print_error
from ...api.exceptions import TarTreeError


@click.command(name='list')
@click.argument('archive', type=click.Path(path_type=Path))
@click.pass_context
def list_command(ctx, archive):
    """List the entries of a .tar or .tar.gz archive"""
    try:
        contents = ctx.obj.archiver.list_contents(archive)
    except TarTreeError as e:
        print_error("Cannot list archive", e)
        ctx.exit(1)

    format_contents(contents, title=f"Contents of {archive.name}")
