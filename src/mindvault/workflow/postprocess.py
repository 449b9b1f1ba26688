import re
from typing import Any

from mindvault.errors import EmptyResultError

TAG_SEPARATORS = re.compile(r"[,\n]+")


def extract_text(data: Any) -> str:
    """Return the first candidate's first text part, trimmed."""
    text = ""
    try:
        candidates = data.get("candidates") or []
        if candidates:
            parts = (candidates[0].get("content") or {}).get("parts") or []
            if parts:
                text = str(parts[0].get("text") or "").strip()
    except (AttributeError, TypeError):
        text = ""
    if not text:
        raise EmptyResultError()
    return text


def parse_tags(text: str) -> list[str]:
    tags: list[str] = []
    for piece in TAG_SEPARATORS.split(text):
        tag = piece.strip().lstrip("#").strip()
        if tag:
            tags.append(tag)
    return tags
