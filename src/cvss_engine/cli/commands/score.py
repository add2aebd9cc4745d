"""Single metric set scoring command"""

import sys
from collections.abc import Mapping

import click

from ...core.exceptions import CVSSError, InvalidArgumentError
from ...processing.processor import ScoreProcessor
from ..formatters import get_formatter
from ._output import emit


def _parse_metric_options(ctx, param, values):
    metrics = {}
    for item in values:
        name, sep, value = item.partition('=')
        if not sep or not name.strip() or not value.strip():
            raise click.BadParameter(f"'{item}' must look like Name=Value", ctx=ctx, param=param)
        metrics[name.strip()] = value.strip()
    return metrics


@click.command()
@click.option('--metric', '-m', 'metric_options', multiple=True, callback=_parse_metric_options,
              help='Metric assignment as Name=Value (repeatable)')
@click.option('--file', '-f', 'metrics_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with a flat mapping of metric names to values')
@click.option('--label', help='Label for the result, e.g. a CVE id')
@click.option('--format', 'output_format', type=click.Choice(['json', 'table', 'csv']), default=None,
              help='Output format (default: CVSS_OUTPUT_FORMAT or table)')
@click.option('--output', '-o', help='Output file path')
@click.pass_context
def score(ctx, metric_options, metrics_file, label, output_format, output):
    """Calculate the CVSS scores of one metric set

    Temporal and Environmental scores are included when their metrics
    are given. Options given with -m override values read from --file.

    Examples:
        cvss score -m AccessVector=Remote -m AccessComplexity=Low \\
                   -m Authentication=Not-Required -m ConfidentialityImpact=Partial \\
                   -m IntegrityImpact=Partial -m AvailabilityImpact=Complete \\
                   -m ImpactBias=Availability
        cvss score --file metrics.json --format json
    """
    config = ctx.obj['config']
    output_format = output_format or config.output_format
    processor = ScoreProcessor(config)

    try:
        metrics = {}
        if metrics_file:
            entries = processor.load_entries(metrics_file)
            if len(entries) != 1:
                raise click.UsageError(f"{metrics_file} holds {len(entries)} metric sets, use 'cvss bulk'")
            file_metrics = entries[0].get('metrics') if isinstance(entries[0], Mapping) else None
            if not isinstance(file_metrics, Mapping):
                raise InvalidArgumentError(f"{metrics_file} has no 'metrics' mapping")
            metrics.update(file_metrics)
            label = label or entries[0].get('id')
        metrics.update(metric_options)

        if not metrics:
            raise click.UsageError("No metrics given, use -m Name=Value or --file")

        result = processor.process_single(metrics, label=label)
    except CVSSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    emit(get_formatter(output_format).format_single(result), output)
