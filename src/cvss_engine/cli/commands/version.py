"""Version information command"""

import platform
import sys
from importlib.metadata import PackageNotFoundError, version as dist_version

import click

from ... import __version__


def _package_version(name: str) -> str:
    try:
        return dist_version(name)
    except PackageNotFoundError:
        return "not installed"


@click.command()
def version():
    """Show CVSS CLI version and system information"""
    click.echo("CVSS SCORING ENGINE")
    click.echo("=" * 50)

    click.echo("\nVersion Information:")
    click.echo(f"   cvss-engine Version: {__version__}")

    click.echo("\nScoring Formulas:")
    click.echo("   Base = 10 x AccessVector x AccessComplexity x Authentication x Impact")
    click.echo("   Temporal = Base x Exploitability x RemediationLevel x ReportConfidence")
    click.echo("   Environmental = (Temporal + (10 - Temporal) x CollateralDamagePotential)")
    click.echo("                   x TargetDistribution")

    click.echo("\nSystem Information:")
    click.echo(f"   Python Version: {sys.version.split()[0]}")
    click.echo(f"   Platform: {platform.platform()}")

    click.echo("\nDependencies:")
    click.echo(f"   - click: {_package_version('click')}")
    click.echo(f"   - python-dotenv: {_package_version('python-dotenv')}")
