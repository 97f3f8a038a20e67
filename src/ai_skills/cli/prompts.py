"""Interactive prompts built on click.

Multi-select prompts show a numbered list and read comma-separated numbers.
Pressing enter accepts the preselected entries.
"""

from collections.abc import Callable, Sequence

import click

from ai_skills.assistants import get_assistants_for_content_type
from ai_skills.cli.output import user_output
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CONTENT_TYPE_HINTS, CatalogItem, ContentType
from ai_skills.models.install import InstallMethod, InstallScope


def parse_selection(raw: str, count: int) -> list[int]:
    """Parse `1,3-4` style input into zero-based indexes.

    Raises:
        click.BadParameter: If the input names an out-of-range or malformed entry
    """
    indexes: list[int] = []
    for part in raw.replace(" ", "").split(","):
        if not part:
            continue
        start, sep, end = part.partition("-")
        if not start.isdigit() or (sep and not end.isdigit()):
            raise click.BadParameter(f"'{part}' is not a number or range")
        first = int(start)
        last = int(end) if sep else first
        for number in range(first, last + 1):
            if number < 1 or number > count:
                raise click.BadParameter(f"{number} is not between 1 and {count}")
            if number - 1 not in indexes:
                indexes.append(number - 1)
    if not indexes:
        raise click.BadParameter("select at least one entry")
    return indexes


def multiselect[T](
    message: str,
    options: Sequence[T],
    label: Callable[[T], str],
    preselected: Sequence[T] = (),
) -> list[T]:
    """Prompt for one or more options."""
    user_output(message)
    for number, option in enumerate(options, start=1):
        marker = "*" if option in preselected else " "
        user_output(f"  {marker} {number:>2}. {label(option)}")

    default = ",".join(str(options.index(o) + 1) for o in preselected if o in options)
    indexes = click.prompt(
        "Select (comma-separated numbers)",
        default=default or None,
        value_proc=lambda raw: parse_selection(raw, len(options)),
        err=True,
    )
    return [options[i] for i in indexes]


def select_content_type() -> ContentType:
    """Select a single content type."""
    choices = [ct.value for ct in ContentType]
    for content_type in ContentType:
        user_output(f"  {content_type.value:<9} {CONTENT_TYPE_HINTS[content_type]}")
    value = click.prompt(
        "What type of content?",
        type=click.Choice(choices),
        default=ContentType.SKILLS.value,
        err=True,
    )
    return ContentType(value)


def select_items(items: list[CatalogItem], content_type: ContentType) -> list[CatalogItem]:
    def label(item: CatalogItem) -> str:
        hint = item.description[:60] + ("..." if len(item.description) > 60 else "")
        return f"{item.name} - {hint}" if hint else item.name

    return multiselect(f"Select {content_type.display_name.lower()} to install", items, label)


def select_assistants(
    content_type: ContentType, detected: list[AssistantConfig]
) -> list[AssistantConfig]:
    """Select target assistants; detected ones are preselected."""
    supported = get_assistants_for_content_type(content_type)
    preselected = [a for a in supported if a in detected]
    return multiselect(
        "Select AI assistants to install to",
        supported,
        lambda a: f"{a.name} - {a.description}",
        preselected,
    )


def select_scope(default: InstallScope = "project") -> InstallScope:
    user_output("  project  Install in current directory (committed with project)")
    user_output("  global   Install in home directory (available across all projects)")
    value = click.prompt(
        "Installation scope",
        type=click.Choice(["project", "global"]),
        default=default,
        err=True,
    )
    return "global" if value == "global" else "project"


def select_method(default: InstallMethod = "symlink") -> InstallMethod:
    user_output("  symlink  Single source of truth under .ai/, easy updates (recommended)")
    user_output("  copy     Independent copy for each assistant")
    value = click.prompt(
        "Installation method",
        type=click.Choice(["symlink", "copy"]),
        default=default,
        err=True,
    )
    return "copy" if value == "copy" else "symlink"


def prompt_item_name() -> str:
    return click.prompt("Enter a name for your item", default="my-skill", err=True)
