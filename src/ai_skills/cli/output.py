"""Output helpers with clear intent.

user_output goes to stderr (progress, messages for humans). machine_output
goes to stdout (listings meant to be piped).
"""

import sys

import click
from rich.console import Console


def user_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)


def success(message: str) -> None:
    user_output(click.style("✓ ", fg="green") + message)


def info(message: str) -> None:
    user_output(click.style("• ", fg="cyan") + message)


def error(message: str) -> None:
    user_output(click.style("✗ ", fg="red") + message)


def stdout_console() -> Console:
    """Rich console bound to the current stdout, resolved at call time."""
    return Console(file=sys.stdout, soft_wrap=True)
