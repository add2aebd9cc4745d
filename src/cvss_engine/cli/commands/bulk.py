"""Bulk metric set scoring command"""

import sys

import click

from ...core.exceptions import CVSSError
from ...processing.processor import ScoreProcessor
from ..formatters import get_formatter
from ._output import emit


@click.command()
@click.option('--file', '-f', 'entries_file', required=True, type=click.Path(exists=True, dir_okay=False),
              help='JSON file with a list of {"id": ..., "metrics": {...}} entries')
@click.option('--format', 'output_format', type=click.Choice(['json', 'csv', 'table']), default=None,
              help='Output format (default: CVSS_OUTPUT_FORMAT or table)')
@click.option('--output', '-o', help='Output file path')
@click.option('--stop-on-error', is_flag=True, help='Abort at the first metric set that fails')
@click.pass_context
def bulk(ctx, entries_file, output_format, output, stop_on_error):
    """Score multiple metric sets from a JSON file

    Examples:
        cvss bulk --file advisories.json
        cvss bulk --file advisories.json --format csv -o scores.csv
    """
    config = ctx.obj['config']
    output_format = output_format or config.output_format
    if stop_on_error:
        config.stop_on_error = True

    processor = ScoreProcessor(config)

    try:
        entries = processor.load_entries(entries_file)
        if not entries:
            click.echo(f"Error: No metric sets found in {entries_file}", err=True)
            sys.exit(1)
        results = processor.process_bulk(entries)
    except CVSSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    emit(get_formatter(output_format).format_bulk(results), output)

    if any(result.error for result in results):
        sys.exit(1)
