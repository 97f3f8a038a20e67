"""Bridge command: generate context files pointing assistants at .ai/."""

import click

from ai_skills.assistants import get_assistants_by_ids
from ai_skills.cli.commands.install_flow import confirm_or_abort, detect
from ai_skills.cli.commands.options import agent_option, yes_option
from ai_skills.cli.output import error, info, user_output
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.operations.bridge import generate_bridge_files, write_bridge_files


@click.command("bridge")
@agent_option
@yes_option
@click.option("--overwrite", is_flag=True, help="Replace bridge files that already exist")
@click.pass_obj
@cli_error_boundary
def bridge(ctx: AiSkillsContext, agent_ids: list[str], yes: bool, overwrite: bool) -> None:
    """Generate CLAUDE.md, AGENTS.md, .windsurfrules and friends.

    Existing files are kept unless --overwrite is given.
    """
    assistants = get_assistants_by_ids(agent_ids) if agent_ids else detect(ctx)
    if not assistants:
        error("No assistants detected. Install an AI assistant first.")
        raise SystemExit(1)

    files = generate_bridge_files(assistants)
    if not files:
        info("No bridge files to generate.")
        return

    user_output("\nBridge files to generate:\n")
    for file in files:
        user_output(f"  {file.file_path} - {file.description}")
    user_output()

    confirm_or_abort(f"Generate {len(files)} context files?", yes=yes)

    result = write_bridge_files(files, ctx.cwd, overwrite=overwrite)
    if result.written:
        info(f"Created: {', '.join(result.written)}")
    if result.skipped:
        info(f"Skipped (already exist): {', '.join(result.skipped)}")
    info("Bridge files ready. Each assistant now reads .ai/")
