"""Extract command implementation"""

from pathlib import Path

import click

from ..utils.output import console, format_stats, print_error
from ...api.exceptions import TarTreeError
from ...constants import MSG_EXTRACT_SUCCESS


@click.command()
@click.argument('archive', type=click.Path(path_type=Path))
@click.argument('dest_dir', type=click.Path(path_type=Path), default='.')
@click.pass_context
def extract(ctx, archive, dest_dir):
    """Extract a .tar or .tar.gz archive into a directory

    Examples:
        tartree extract data.tar ./restored
        tartree extract data.tar.gz ./restored
    """
    try:
        stats = ctx.obj.archiver.extract_files(archive, dest_dir)
    except TarTreeError as e:
        print_error("Extraction failed", e)
        ctx.exit(1)

    console.print(MSG_EXTRACT_SUCCESS.format(count=stats.processed_files, path=dest_dir))
    if ctx.obj.verbose:
        format_stats(stats, "Extract Result")
