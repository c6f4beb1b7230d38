"""lvljson CLI entry point."""

import click

from ..converter import convert_all
from ..models import ConvertOptions

USAGE = "usage: lvljson [--pack] <lvl files>"


@click.command()
@click.option(
    "--pack", is_flag=True, help="Write packed JSON without any whitespace"
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Print each output file written"
)
@click.argument("files", nargs=-1, type=click.Path())
def cli(pack, verbose, files):
    """Convert binary level files to JSON.

    Each FILE has a trailing .lvl replaced with .json to name its output.
    Files are converted independently: a file that cannot be read, parsed
    or written is reported on stderr and the rest are still converted.

    Examples:
        lvljson level1.lvl level2.lvl        # Pretty JSON
        lvljson --pack levels/*.lvl          # Packed JSON
    """
    if not files:
        click.echo(USAGE)
        return

    options = ConvertOptions(pack=pack)
    for result in convert_all(files, options):
        if not result.succeeded:
            click.echo(str(result), err=True)
        elif verbose:
            click.echo(str(result))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
