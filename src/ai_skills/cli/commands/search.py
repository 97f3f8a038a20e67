"""Search command."""

import click

from ai_skills.cli.output import info, machine_output
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.io.catalog import search_catalog


@click.command("search")
@click.argument("query", nargs=-1, required=True)
@cli_error_boundary
def search(query: tuple[str, ...]) -> None:
    """Search the builtin catalog by id, name and description."""
    text = " ".join(query)
    results = search_catalog(text)

    if not results:
        info(f'No results for "{text}"')
        return

    machine_output(f'\nResults for "{text}":\n')
    for item in results:
        machine_output(f"  [{item.type.value}] {item.name}")
        machine_output(f"    {item.description}\n")
