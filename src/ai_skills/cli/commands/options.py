"""Shared click options."""

from collections.abc import Callable
from typing import Any

import click

from ai_skills.errors import UnknownContentType
from ai_skills.models.content import ContentType


def _parse_content_type(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ContentType | None:
    if value is None:
        return None
    try:
        return ContentType.parse(value)
    except UnknownContentType as e:
        raise click.BadParameter(str(e)) from e


def _split_agents(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[str]:
    ids: list[str] = []
    for raw in value:
        ids.extend(part.strip() for part in raw.split(",") if part.strip())
    return ids


global_option = click.option(
    "--global",
    "-g",
    "is_global",
    is_flag=True,
    help="Use the home directory instead of the project",
)
type_option = click.option(
    "--type",
    "-t",
    "content_type",
    callback=_parse_content_type,
    help="Content type: skills, agents, commands, rules, prompts",
)
agent_option = click.option(
    "--agent",
    "-a",
    "agent_ids",
    multiple=True,
    callback=_split_agents,
    help="Target assistant id (repeatable or comma-separated)",
)
yes_option = click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")


def install_options[F: Callable[..., Any]](func: F) -> F:
    """Options shared by `add` and its shortcuts."""
    func = click.option(
        "--method",
        type=click.Choice(["symlink", "copy"]),
        default=None,
        help="Symlink to a shared copy under .ai/ or copy per assistant",
    )(func)
    func = click.option(
        "--all", "install_all", is_flag=True, help="Install all items to all agents"
    )(func)
    func = yes_option(func)
    func = type_option(func)
    func = agent_option(func)
    func = global_option(func)
    return func
