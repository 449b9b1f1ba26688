import json
import logging
from typing import Any

import httpx

from mindvault.config import Settings
from mindvault.errors import UpstreamError
from mindvault.pipeline.fallback import FallbackDecision, ModelFallbackPlanner

logger = logging.getLogger(__name__)
PAYLOAD_LOG_LIMIT = 4000

TEMPERATURE = 0.6
TOP_P = 0.9
MAX_OUTPUT_TOKENS = 1024


class GeminiClient:
    """Gemini generateContent client that walks the candidate models on 404."""

    def __init__(self, settings: Settings, planner: ModelFallbackPlanner | None = None) -> None:
        self.settings = settings
        self.base_url = settings.gemini_base_url
        self.planner = planner or ModelFallbackPlanner(settings.gemini_model)

    async def generate(self, prompt: str) -> tuple[dict[str, Any], FallbackDecision]:
        candidates = self.planner.candidates()
        attempted: list[str] = []
        body = self.build_body(prompt)
        logger.info(
            "gemini.request candidates=%s prompt_chars=%d",
            ",".join(candidates),
            len(prompt),
        )
        logger.info("gemini.request.payload=%s", self._clip(self._to_json(body), PAYLOAD_LOG_LIMIT))

        response: httpx.Response | None = None
        for index, model in enumerate(candidates):
            attempted.append(model)
            response = await self._request_model(model, body)
            logger.info("gemini.response model=%s status=%d", model, response.status_code)
            if not self.planner.should_fall_over(response.status_code, index, candidates):
                break
            logger.info("gemini.fallback from=%s to=%s", model, candidates[index + 1])

        model = attempted[-1]
        if not response.is_success:
            logger.warning(
                "gemini.error model=%s status=%d body=%s",
                model,
                response.status_code,
                self._clip(response.text, PAYLOAD_LOG_LIMIT),
            )
            raise UpstreamError(response.status_code, response.text, model=model)

        try:
            data = response.json()
        except ValueError:
            logger.warning("gemini.response.invalid_json model=%s", model)
            data = {}
        logger.info(
            "gemini.response.payload=%s",
            self._clip(self._to_json(data), PAYLOAD_LOG_LIMIT),
        )
        return data, FallbackDecision(candidates=candidates, attempted=attempted, resolved_model=model)

    @staticmethod
    def build_body(prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": TEMPERATURE,
                "topP": TOP_P,
                "maxOutputTokens": MAX_OUTPUT_TOKENS,
            },
        }

    def model_url(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def _request_model(self, model: str, body: dict[str, Any]) -> httpx.Response:
        # None leaves the request unbounded
        async with httpx.AsyncClient(timeout=self.settings.gemini_timeout_seconds) as client:
            return await client.post(
                self.model_url(model),
                params={"key": self.settings.gemini_api_key},
                json=body,
            )

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    @staticmethod
    def _to_json(payload: Any) -> str:
        try:
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(payload)
