"""Shared output handling for CLI commands"""

import click


def emit(output_text: str, output: str = None):
    """Write command output to a file or stdout"""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(output_text + "\n")
        click.echo(f"Results saved to {output}")
    else:
        click.echo(output_text)
