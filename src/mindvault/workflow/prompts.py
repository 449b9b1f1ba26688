from collections.abc import Mapping
from enum import Enum
from typing import Any


class Action(str, Enum):
    SUMMARIZE = "summarize"
    IMPROVE = "improve"
    TAGS = "tags"
    GENERATE = "generate"
    ASK = "ask"

    @classmethod
    def parse(cls, value: "str | Action | None") -> "Action | None":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Tone(str, Enum):
    CASUAL = "casual"
    PROFESSIONAL = "professional"


DEFAULT_TONE = Tone.PROFESSIONAL


def build_prompt(action: "str | Action | None", payload: Mapping[str, Any]) -> str:
    """Map an action and its payload fields to the single instruction sent to Gemini.

    Returns an empty string for an unrecognized action; callers treat that as an
    invalid request.
    """
    resolved = Action.parse(action)
    if resolved is None:
        return ""

    content = _field(payload, "content").strip()
    tone = _field(payload, "tone") or DEFAULT_TONE.value

    if resolved is Action.SUMMARIZE:
        return f"Summarize this note in 3 concise bullet points. No extra commentary:\n\n{content}"
    if resolved is Action.IMPROVE:
        return (
            "Rewrite this note to improve clarity and structure. "
            f"Use a {tone} tone. "
            "Return ONLY a single rewritten version (no headings, no bullet points, no multiple options). "
            "Keep it concise (max 2 short paragraphs) and preserve the original meaning:\n\n"
            f"{content}"
        )
    if resolved is Action.TAGS:
        return (
            "Suggest 5 short tags for this note. "
            f"Respond as a comma-separated list without hashtags:\n\n{content}"
        )
    if resolved is Action.GENERATE:
        return (
            "Write a concise draft note based on the following topic. "
            "Return ONLY the draft (no headings, no options):\n\n"
            f"{_field(payload, 'prompt')}"
        )
    return (
        "You are an assistant with access to the user's notes. Use the notes to answer the question.\n"
        "If there are relevant notes, list them with their titles and a short reason. "
        "If not, say you could not find a relevant note.\n\n"
        f"Notes:\n{_field(payload, 'notesContext')}\n\n"
        f"Question: {_field(payload, 'question')}"
    )


def _field(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
