"""Pydantic models for the .skill-lock.json document."""

from pydantic import BaseModel, ConfigDict, Field, RootModel

from ai_skills.models.content import ContentType


class LockEntry(BaseModel):
    """Persisted record of one installed item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    type: ContentType
    source: str
    assistants: list[str]
    installed_at: str = Field(..., alias="installedAt")


class LockDocument(RootModel[dict[ContentType, list[LockEntry]]]):
    """Whole lock document: content type -> installed entries."""

    @classmethod
    def empty(cls) -> "LockDocument":
        return cls({})

    def entries(self) -> list[LockEntry]:
        """All entries in content type order."""
        result: list[LockEntry] = []
        for content_type in ContentType:
            result.extend(self.root.get(content_type, []))
        return result

    def entries_for(self, content_type: ContentType) -> list[LockEntry]:
        return list(self.root.get(content_type, []))

    def find(self, content_type: ContentType, item_id: str) -> LockEntry | None:
        for entry in self.root.get(content_type, []):
            if entry.id == item_id:
                return entry
        return None

    def upsert(self, entry: LockEntry) -> "LockDocument":
        """Return a new document with entry replacing any entry of the same (type, id)."""
        existing = [e for e in self.root.get(entry.type, []) if e.id != entry.id]
        return LockDocument({**self.root, entry.type: [*existing, entry]})

    def remove(self, content_type: ContentType, item_id: str) -> "LockDocument":
        """Return a new document without the (type, id) entry."""
        remaining = [e for e in self.root.get(content_type, []) if e.id != item_id]
        new_root = {**self.root, content_type: remaining}
        if not remaining:
            del new_root[content_type]
        return LockDocument(new_root)
