"""Configuration management commands"""

import os
import sys

import click

from ...config.settings import CVSSConfig

ENV_VARS = ['CVSS_LOG_LEVEL', 'CVSS_OUTPUT_FORMAT', 'CVSS_STOP_ON_ERROR']


@click.command('config')
@click.option('--show-env', is_flag=True, help='Show all environment variables')
@click.option('--validate', is_flag=True, help='Validate configuration')
@click.option('--env-file', help='Specify custom .env file path')
def config_cmd(show_env, validate, env_file):
    """Show current CVSS engine configuration

    Example:
        cvss config
        cvss config --show-env
        cvss config --validate
        cvss config --env-file /path/to/custom.env
    """
    config = CVSSConfig.from_env(env_file)

    click.echo("CVSS ENGINE CONFIGURATION")
    click.echo("=" * 50)
    click.echo(f"   Log Level: {config.log_level}")
    click.echo(f"   Output Format: {config.output_format}")
    click.echo(f"   Stop On Error: {config.stop_on_error}")

    if show_env:
        click.echo("\nEnvironment Variables:")
        for var in ENV_VARS:
            click.echo(f"   {var}: {os.getenv(var) or 'Not Set'}")

    if validate:
        click.echo("\nConfiguration Validation:")
        issues = config.validate()

        if not issues:
            click.echo("   Configuration looks good!")
        else:
            click.echo("   Issues found:")
            for issue in issues:
                click.echo(f"      - {issue}")
            sys.exit(1)
