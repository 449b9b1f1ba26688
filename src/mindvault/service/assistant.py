import logging
from typing import Any

from mindvault.api.schemas import AssistantRequest
from mindvault.config import Settings, get_settings
from mindvault.errors import ConfigurationError, InvalidRequestError
from mindvault.providers.llm.gemini import GeminiClient
from mindvault.workflow.context import build_notes_context
from mindvault.workflow.postprocess import extract_text, parse_tags
from mindvault.workflow.prompts import Action, build_prompt

logger = logging.getLogger(__name__)


class AssistantService:
    """Prompt building, Gemini dispatch and post-processing for one request, in that order."""

    def __init__(self, settings: Settings | None = None, client: GeminiClient | None = None) -> None:
        self.settings = settings or get_settings()
        self.client = client or GeminiClient(self.settings)

    async def run(self, request: AssistantRequest) -> dict[str, Any]:
        if not self.settings.gemini_api_key:
            raise ConfigurationError("Missing GEMINI_API_KEY.")

        action = Action.parse(request.action)
        payload = request.model_dump(mode="json", by_alias=True, exclude={"notes"})
        if action is Action.ASK:
            payload["notesContext"] = self._resolve_notes_context(request)

        if action is None:
            raise InvalidRequestError("Unsupported action.")

        prompt = build_prompt(action, payload)
        if not prompt.strip():
            raise InvalidRequestError("Empty prompt.")

        logger.info("assistant.request action=%s prompt_chars=%d", action.value, len(prompt))
        data, decision = await self.client.generate(prompt)
        text = extract_text(data)
        result: dict[str, Any] = {"text": text}
        if action is Action.TAGS:
            result["tags"] = parse_tags(text)
        logger.info(
            "assistant.response action=%s chars=%d tags=%d fallback=%s",
            action.value,
            len(text),
            len(result.get("tags", [])),
            decision.as_meta(),
        )
        return result

    @staticmethod
    def _resolve_notes_context(request: AssistantRequest) -> str:
        if not (request.question or "").strip():
            raise InvalidRequestError("Missing question.")
        notes_context = request.notes_context or ""
        if not notes_context.strip() and request.notes:
            notes_context = build_notes_context(request.notes)
            logger.info("assistant.notes_context built notes=%d chars=%d", len(request.notes), len(notes_context))
        if not notes_context.strip():
            raise InvalidRequestError("Missing notes context.")
        return notes_context
