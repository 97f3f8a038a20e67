"""Builtin catalog of bundled content.

Bundled items live in package data as `data/templates/<type>/<id>/<FILE>.md`.
The catalog is read-only.
"""

from pathlib import Path

from ai_skills.io.frontmatter import parse_frontmatter
from ai_skills.models.content import CatalogItem, ContentType


def get_templates_dir() -> Path:
    """Get the directory holding bundled templates."""
    return Path(__file__).parent.parent / "data" / "templates"


def load_content_type(
    content_type: ContentType, templates_dir: Path | None = None
) -> list[CatalogItem]:
    """Load builtin items of one content type, sorted by id."""
    base = templates_dir if templates_dir is not None else get_templates_dir()
    type_dir = base / content_type.value
    if not type_dir.is_dir():
        return []

    items: list[CatalogItem] = []
    for item_dir in sorted(type_dir.iterdir()):
        content_file = item_dir / content_type.file_name
        if not item_dir.is_dir() or not content_file.is_file():
            continue
        parsed = parse_frontmatter(content_file.read_text(encoding="utf-8"))
        items.append(
            CatalogItem(
                id=item_dir.name,
                name=parsed.get_str("name") or item_dir.name,
                description=parsed.get_str("description") or "",
                type=content_type,
                path=item_dir,
            )
        )
    return items


def load_catalog(templates_dir: Path | None = None) -> dict[ContentType, list[CatalogItem]]:
    """Load the whole builtin catalog grouped by content type."""
    return {ct: load_content_type(ct, templates_dir) for ct in ContentType}


def find_catalog_item(
    content_type: ContentType, query: str, templates_dir: Path | None = None
) -> CatalogItem | None:
    """Find a builtin item by id or display name."""
    for item in load_content_type(content_type, templates_dir):
        if item.id == query or item.name == query:
            return item
    return None


def search_catalog(query: str, templates_dir: Path | None = None) -> list[CatalogItem]:
    """Case-insensitive substring search over id, name and description."""
    needle = query.lower()
    results: list[CatalogItem] = []
    for items in load_catalog(templates_dir).values():
        for item in items:
            haystack = f"{item.id} {item.name} {item.description}".lower()
            if needle in haystack:
                results.append(item)
    return results


def get_catalog_stats(templates_dir: Path | None = None) -> dict[ContentType, int]:
    """Count builtin items per content type."""
    return {ct: len(items) for ct, items in load_catalog(templates_dir).items()}
