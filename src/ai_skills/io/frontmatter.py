"""Frontmatter parsing and item template rendering."""

import logging
import re
from dataclasses import dataclass
from typing import Any

import frontmatter
import yaml

from ai_skills.models.content import ContentType

logger = logging.getLogger(__name__)

# Closing delimiter must start a line; the block may be empty.
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)
_LINE_PATTERN = re.compile(r"^([A-Za-z0-9_][\w.-]*)\s*:\s*(.*)$")


@dataclass(frozen=True)
class ParsedDocument:
    """Markdown document split into frontmatter and body."""

    frontmatter: dict[str, Any]
    body: str

    def get_str(self, key: str) -> str | None:
        """Return a frontmatter value as a non-empty string, or None."""
        value = self.frontmatter.get(key)
        if value is None:
            return None
        text = str(value).strip()
        return text or None


def parse_frontmatter(content: str) -> ParsedDocument:
    """Split markdown content into frontmatter mapping and body.

    A document without a leading `---` block has empty frontmatter and the
    whole text as body. Block contents are read as YAML; when the YAML is
    malformed or is not a mapping, the block is read line by line as
    `key: value` pairs and lines that do not fit are skipped.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if match is None:
        return ParsedDocument(frontmatter={}, body=content)

    block = match.group(1) or ""
    body = content[match.end() :]
    return ParsedDocument(frontmatter=_parse_block(block), body=body)


def _parse_block(block: str) -> dict[str, Any]:
    if not block.strip():
        return {}
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.debug("Frontmatter is not valid YAML, falling back to line parsing: %s", e)
        return _parse_lines(block)
    if not isinstance(data, dict):
        return _parse_lines(block)
    return {str(key): value for key, value in data.items()}


def _parse_lines(block: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for line in block.splitlines():
        match = _LINE_PATTERN.match(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        result[key] = value
    return result


_TEMPLATE_METADATA: dict[ContentType, dict[str, Any]] = {
    ContentType.SKILLS: {
        "description": "Description of what this skill does",
        "category": "custom",
        "tags": ["tag1", "tag2"],
    },
    ContentType.AGENTS: {"description": "Description of this agent's role"},
    ContentType.COMMANDS: {"description": "Description of what this command does"},
    ContentType.RULES: {"description": "Description of this rule", "severity": "warning"},
    ContentType.PROMPTS: {"description": "Description of this prompt"},
}

_TEMPLATE_BODIES: dict[ContentType, str] = {
    ContentType.SKILLS: """# {name}

## Overview

Describe what this skill helps with.

## Rules

- DO: Good practice
- DON'T: Bad practice

## Examples

```python
# Example code
```
""",
    ContentType.AGENTS: """# {name} Agent

## Role

Describe the agent's purpose and expertise.

## Capabilities

- Capability 1
- Capability 2

## Instructions

When activated, this agent should...
""",
    ContentType.COMMANDS: """# {name}

## Usage

Describe how to use this command.

## Parameters

- `param1`: Description
- `param2`: Description

## Example

```
/run {name} [args]
```
""",
    ContentType.RULES: """# {name}

## Rule

Describe the rule and why it matters.

## Examples

### Bad

```python
# Code that violates the rule
```

### Good

```python
# Code that follows the rule
```
""",
    ContentType.PROMPTS: """# {name}

## Template

```
Your prompt template here with {{{{variables}}}}
```

## Variables

- `variable1`: Description
- `variable2`: Description
""",
}


def render_item_template(content_type: ContentType, name: str) -> str:
    """Render the starter markdown written by `init` for a new item."""
    body = _TEMPLATE_BODIES[content_type].format(name=name)
    post = frontmatter.Post(body, name=name, **_TEMPLATE_METADATA[content_type])
    return frontmatter.dumps(post) + "\n"
