"""Shortcut commands.

`ai-skills agents add SOURCE` installs with the type preset, `ai-skills rules`
lists available rules, and `ai-skills clean-code` installs a builtin skill.
"""

import click

from ai_skills.cli.commands.add import add
from ai_skills.cli.commands.list import list_items
from ai_skills.cli.commands.options import agent_option, global_option, yes_option
from ai_skills.models.content import ContentType

SHORTCUT_CONTENT_TYPES = (
    ContentType.AGENTS,
    ContentType.COMMANDS,
    ContentType.RULES,
    ContentType.PROMPTS,
)

method_option = click.option(
    "--method", type=click.Choice(["symlink", "copy"]), default=None, help="Install method"
)
all_option = click.option("--all", "install_all", is_flag=True, help="Install all items")


def make_content_type_shortcut(content_type: ContentType) -> click.Command:
    """Build `ai-skills <type> [add SOURCE]`."""

    @click.command(content_type.value)
    @click.argument("action", required=False, type=click.Choice(["add", "list"]))
    @click.argument("source", required=False)
    @global_option
    @agent_option
    @yes_option
    @all_option
    @method_option
    @click.pass_context
    def shortcut(
        click_ctx: click.Context,
        action: str | None,
        source: str | None,
        is_global: bool,
        agent_ids: list[str],
        yes: bool,
        install_all: bool,
        method: str | None,
    ) -> None:
        if action == "add":
            click_ctx.invoke(
                add,
                source=source,
                is_global=is_global,
                agent_ids=agent_ids,
                content_type=content_type,
                yes=yes,
                install_all=install_all,
                method=method,
            )
            return
        click_ctx.invoke(
            list_items,
            type_arg=None,
            installed=False,
            is_global=is_global,
            content_type=content_type,
        )

    shortcut.help = (
        f"{content_type.display_name}: list them, or `add SOURCE` to install one."
    )
    return shortcut


def make_skill_shortcut(item_id: str) -> click.Command:
    """Build `ai-skills <builtin-skill-id>`, equivalent to `ai-skills add <id>`."""

    @click.command(item_id)
    @global_option
    @agent_option
    @yes_option
    @method_option
    @click.pass_context
    def shortcut(
        click_ctx: click.Context,
        is_global: bool,
        agent_ids: list[str],
        yes: bool,
        method: str | None,
    ) -> None:
        click_ctx.invoke(
            add,
            source=item_id,
            is_global=is_global,
            agent_ids=agent_ids,
            content_type=ContentType.SKILLS,
            yes=yes,
            install_all=False,
            method=method,
        )

    shortcut.help = f"Install the builtin skill {item_id}."
    return shortcut
