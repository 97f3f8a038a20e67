import logging

import click

from ai_skills.context import create_context
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

COMMAND_ALIASES = {
    "install": "add",
    "i": "add",
    "rm": "remove",
    "uninstall": "remove",
    "ls": "list",
    "find": "search",
    "upgrade": "update",
    "create": "init",
    "context": "bridge",
    "web": "serve",
}

# Track whether commands are registered
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that lazily loads commands and resolves aliases and shortcuts."""

    def list_commands(self, ctx):
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx, cmd_name):
        """Get a command by name, alias, or builtin skill id."""
        if not _commands_registered:
            _register_commands()
        command = super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))
        if command is not None:
            return command
        return _builtin_skill_shortcut(cmd_name)


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="ai-skills")
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install skills, agents, commands, rules and prompts for AI coding assistants.

    Run without a command to start the interactive install wizard.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format=LOG_FORMAT)

    # Tests inject a context through CliRunner.invoke(obj=...)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        from ai_skills.cli.commands.add import add

        ctx.invoke(
            add,
            source=None,
            is_global=False,
            agent_ids=[],
            content_type=None,
            yes=False,
            install_all=False,
            method=None,
        )


def _builtin_skill_shortcut(name: str) -> click.Command | None:
    from ai_skills.cli.commands.shortcuts import make_skill_shortcut
    from ai_skills.io.catalog import find_catalog_item
    from ai_skills.models.content import ContentType

    item = find_catalog_item(ContentType.SKILLS, name)
    if item is None:
        return None
    return make_skill_shortcut(item.id)


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from ai_skills.cli.commands.add import add
    from ai_skills.cli.commands.bridge import bridge
    from ai_skills.cli.commands.config import config_group
    from ai_skills.cli.commands.init import init
    from ai_skills.cli.commands.list import list_items
    from ai_skills.cli.commands.remove import remove
    from ai_skills.cli.commands.search import search
    from ai_skills.cli.commands.serve import serve
    from ai_skills.cli.commands.shortcuts import (
        SHORTCUT_CONTENT_TYPES,
        make_content_type_shortcut,
    )
    from ai_skills.cli.commands.update import update

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(list_items)
    cli.add_command(search)
    cli.add_command(update)
    cli.add_command(init)
    cli.add_command(bridge)
    cli.add_command(serve)
    cli.add_command(config_group)

    for content_type in SHORTCUT_CONTENT_TYPES:
        cli.add_command(make_content_type_shortcut(content_type))

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
