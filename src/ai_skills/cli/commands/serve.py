"""Serve command placeholder for the web viewer."""

import click

from ai_skills.cli.output import info


@click.command("serve")
def serve() -> None:
    """Launch the web viewer (not bundled with the CLI)."""
    info("The web viewer is not bundled. Use 'ai-skills list' to browse the catalog.")
