from collections.abc import Iterable
from datetime import datetime, timezone

from pydantic import BaseModel, field_validator

CONTEXT_MAX_CHARS = 6000
CONTEXT_MAX_NOTES = 10
SNIPPET_CHARS = 800


def normalize_tag(tag: str) -> str:
    return tag.strip().lstrip("#").lower()


def normalize_tags(tags: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    normalized: list[str] = []
    for tag in tags:
        value = normalize_tag(str(tag))
        if not value or value in seen:
            continue
        seen.add(value)
        normalized.append(value)
    return normalized


def parse_tag_input(value: str) -> list[str]:
    """Parse free-form tag input such as ``"#work, ideas #Work"`` into unique lowercase tags."""
    return normalize_tags(value.replace(",", " ").split())


class NoteSnippet(BaseModel):
    title: str = ""
    content: str | None = None
    tags: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return parse_tag_input(value)
        return normalize_tags(value)

    def sort_key(self) -> float:
        stamp = self.updated_at or self.created_at
        if stamp is None:
            return 0.0
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return stamp.timestamp()


def build_notes_context(notes: Iterable[NoteSnippet]) -> str:
    """Render the most recently edited notes into the context block used by the ask action.

    Notes are taken newest first. Each contributes a title, its tags and the first
    800 characters of content. Rendering stops before the combined blocks would
    exceed 6000 characters, or once 10 notes have been included.
    """
    ordered = sorted(notes, key=lambda note: note.sort_key(), reverse=True)
    blocks: list[str] = []
    total = 0
    for note in ordered:
        content = (note.content or "").strip()
        if not content and not note.title:
            continue
        tags = f"Tags: {', '.join(note.tags)}" if note.tags else "Tags: none"
        snippet = content[:SNIPPET_CHARS] if content else "No content"
        block = f"Title: {note.title}\n{tags}\nContent: {snippet}"
        if total + len(block) > CONTEXT_MAX_CHARS:
            break
        blocks.append(block)
        total += len(block)
        if len(blocks) >= CONTEXT_MAX_NOTES:
            break
    return "\n\n".join(blocks)
