"""Init command: scaffold a new content item."""

from pathlib import Path

import click

from ai_skills.cli import prompts
from ai_skills.cli.output import success
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.io.frontmatter import render_item_template
from ai_skills.models.content import ContentType


@click.command("init")
@click.argument("type_arg", metavar="[TYPE]", required=False)
@click.argument("name", required=False)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
@click.pass_obj
@cli_error_boundary
def init(ctx: AiSkillsContext, type_arg: str | None, name: str | None, force: bool) -> None:
    """Create a new item template in ./NAME/.

    Examples:

        ai-skills init skills my-skill

        ai-skills init agents reviewer
    """
    content_type = ContentType.parse(type_arg) if type_arg else prompts.select_content_type()
    item_name = name or prompts.prompt_item_name()

    file_path = create_item_template(ctx.cwd, content_type, item_name, force=force)
    success(f"Created {file_path}")


def create_item_template(root: Path, content_type: ContentType, name: str, *, force: bool) -> Path:
    """Write `<root>/<name>/<FILE>.md` from the type's template.

    Raises:
        FileExistsError: If the file exists and force is False
    """
    file_path = root / name / content_type.file_name
    if file_path.exists() and not force:
        raise FileExistsError(f"{file_path} already exists. Use --force to overwrite")

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(render_item_template(content_type, name), encoding="utf-8")
    return file_path
