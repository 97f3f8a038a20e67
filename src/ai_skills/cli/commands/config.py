"""Config commands for ~/.ai/config.toml."""

import click

from ai_skills.assistants import get_assistants_by_ids
from ai_skills.cli.output import machine_output, success
from ai_skills.config import CONFIG_KEYS, config_path_for, save_config
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary


@click.group("config")
def config_group() -> None:
    """Manage ai-skills defaults."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: AiSkillsContext) -> None:
    """Print configuration keys and values."""
    machine_output(click.style(f"Configuration ({config_path_for(ctx.home)}):", bold=True))
    for key in CONFIG_KEYS:
        machine_output(f"  {key}={ctx.config.get_value(key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
@cli_error_boundary
def config_get(ctx: AiSkillsContext, key: str) -> None:
    """Print the value of a configuration key."""
    machine_output(ctx.config.get_value(key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
@cli_error_boundary
def config_set(ctx: AiSkillsContext, key: str, value: str) -> None:
    """Set a configuration key.

    Examples:

        ai-skills config set default_method copy

        ai-skills config set assistants claude-code,cursor
    """
    new_config = ctx.config.with_value(key, value)
    if key == "assistants":
        get_assistants_by_ids(new_config.assistants)
    path = save_config(ctx.home, new_config)
    success(f"Set {key}={new_config.get_value(key)} in {path}")
