"""Gzip command implementation"""

from dataclasses import replace
from pathlib import Path

import click

from ..utils.output import console, format_stats, print_error
from ...api.archiver import Archiver
from ...api.exceptions import TarTreeError
from ...constants import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL, MSG_GZIP_SUCCESS
from ...utils.file_utils import format_size


@click.command(name='gzip')
@click.argument('source_tar', type=click.Path(path_type=Path))
@click.argument('dest_tar_gz', type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    '--level', '-l',
    type=click.IntRange(MIN_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL),
    default=None,
    help='Compression level (1-9, default from configuration)'
)
@click.pass_context
def gzip_command(ctx, source_tar, dest_tar_gz, level):
    """Gzip an existing .tar file into a new .tar.gz file

    The destination must not exist.

    Examples:
        tartree gzip data.tar data.tar.gz
        tartree gzip data.tar data.tar.gz --level 9
    """
    archiver = ctx.obj.archiver
    if level is not None:
        archiver = Archiver(replace(ctx.obj.config, compression_level=level))

    try:
        stats = archiver.gzip_tar_file(source_tar, dest_tar_gz)
    except TarTreeError as e:
        print_error("Compression failed", e)
        ctx.exit(1)

    console.print(MSG_GZIP_SUCCESS.format(path=dest_tar_gz, size=format_size(stats.result_size)))
    if ctx.obj.verbose:
        format_stats(stats, "Gzip Result")
