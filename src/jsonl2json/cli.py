"""jsonl2json command line interface."""

import sys

import click

from . import __version__
from .errors import Error, TranscodeError
from .options import TranscodeOptions
from .streams import open_endpoints
from .transcoder import transcode


def run(options: TranscodeOptions) -> int:
    """Transcode according to ``options``; return the element count."""
    with open_endpoints(options.input, options.output) as (reader, writer):
        return transcode(reader, writer, pretty=options.pretty)


@click.command(name="jsonl2json")
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Input file (JSONL). Default: stdin",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Output file (JSON). Default: stdout",
)
@click.option("--pretty", is_flag=True, help="Pretty print output")
@click.option(
    "-v", "--verbose", is_flag=True, help="Report record count on stderr"
)
@click.version_option(__version__, prog_name="jsonl2json")
def cli(input_path, output_path, pretty, verbose):
    """Convert JSON Lines into a single JSON array.

    Each input line must hold one JSON value. Elements keep input order.

    Examples:
        jsonl2json --input data.jsonl --output data.json
        cat data.jsonl | jsonl2json --pretty
        jsonl2json --input - --output out.json < data.jsonl

    A blank or malformed line aborts the run with a non-zero exit status;
    output written up to that point is an incomplete array.
    """
    options = TranscodeOptions(
        input=input_path,
        output=output_path,
        pretty=pretty,
        verbose=verbose,
    )

    try:
        count = run(options)
    except (TranscodeError, OSError) as e:
        click.echo(f"Error: {Error.from_exception(e)}", err=True)
        sys.exit(1)

    if options.verbose:
        noun = "record" if count == 1 else "records"
        click.echo(f"Wrote {count} {noun}", err=True)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
