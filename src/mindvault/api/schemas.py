from pydantic import BaseModel, ConfigDict, Field

from mindvault.workflow.context import NoteSnippet
from mindvault.workflow.prompts import Tone


class AssistantRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: str | None = Field(default=None, description="One of summarize/improve/tags/generate/ask.")
    content: str | None = None
    tone: Tone | None = None
    prompt: str | None = None
    question: str | None = None
    notes_context: str | None = Field(default=None, alias="notesContext")
    notes: list[NoteSnippet] = Field(
        default_factory=list,
        description="Optional notes used to build notesContext for ask when it is not supplied.",
    )


class AssistantResponse(BaseModel):
    text: str
    tags: list[str] | None = None
