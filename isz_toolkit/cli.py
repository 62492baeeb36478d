"""ISZ Toolkit CLI."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log archive parsing details")
def main(verbose: bool):
    """ISZ Toolkit - Inspect and extract InstallShield 3 Z archives.

    \b
    Entry paths use backslashes as directory separators, exactly as
    stored in the archive.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("list")
@click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_(archive: Path):
    """List the files in a Z archive with their compressed sizes."""
    from .zarchive import ZArchive, ZArchiveError

    try:
        with ZArchive.open(archive) as reader:
            for entry in reader.list():
                click.echo(f"{entry.compressed_size}\t{entry.path}")

    except (ZArchiveError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("destination", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--raw",
    is_flag=True,
    help="Write compressed payloads without decompressing them",
)
def extract(archive: Path, destination: Path, raw: bool):
    """Extract all files of a Z archive into DESTINATION.

    The directory structure stored in the archive is recreated below
    DESTINATION.
    """
    from .zarchive import ZArchive, ZArchiveError

    try:
        with ZArchive.open(archive) as reader:
            for _entry, output_path in reader.extract_all(destination, raw=raw):
                click.echo(str(output_path), err=True)

    except (ZArchiveError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
