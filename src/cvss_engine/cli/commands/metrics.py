"""Metric table listing command"""

import click

from ...core.models import MetricGroup
from ...scoring.tables import PARAMS_BY_GROUP


@click.command()
@click.option('--group', type=click.Choice([group.value.lower() for group in MetricGroup]),
              help='Only list metrics of this score group')
@click.option('--weights', is_flag=True, help='Show the weight of each value')
def metrics(group, weights):
    """List the metrics and their allowed values

    Values are case-insensitive.

    Example:
        cvss metrics
        cvss metrics --group temporal --weights
    """
    for metric_group in MetricGroup:
        if group and metric_group.value.lower() != group:
            continue

        click.echo(f"{metric_group.value} Score")
        params = PARAMS_BY_GROUP[metric_group]
        width = max(len(metric.value) for metric in params)

        for metric, values in params.items():
            if weights:
                allowed = ', '.join(f"{value} ({weight})" for value, weight in values.items())
            else:
                allowed = ', '.join(values)
            click.echo(f"  {metric.value.ljust(width)}  {allowed}")
        click.echo("")
