"""Create command implementation"""

from pathlib import Path

import click

from ..utils.output import console, format_stats, print_error
from ...api.exceptions import TarTreeError
from ...constants import MSG_CREATE_SUCCESS
from ...utils.file_utils import format_size


@click.command()
@click.argument('source_dir', type=click.Path(path_type=Path))
@click.argument('dest_archive', type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    '--include-dirs', 'include_dirs',
    is_flag=True,
    help='Write directory entries so empty directories are preserved'
)
@click.pass_context
def create(ctx, source_dir, dest_archive, include_dirs):
    """Archive a directory into a .tar file

    The directory itself is not stored; entry paths are relative to it.

    Examples:
        tartree create ./data data.tar
        tartree create ./site site.tar --include-dirs
    """
    try:
        stats = ctx.obj.archiver.create_directory_tar(
            source_dir, dest_archive, include_directories=include_dirs or None
        )
    except TarTreeError as e:
        print_error("Archive creation failed", e)
        ctx.exit(1)

    console.print(MSG_CREATE_SUCCESS.format(path=dest_archive, size=format_size(stats.result_size)))
    if ctx.obj.verbose:
        format_stats(stats, "Create Result")
