from dataclasses import dataclass, field

DEFAULT_MODELS: tuple[str, ...] = (
    "gemini-1.5-flash-latest",
    "gemini-1.5-pro",
    "gemini-1.0-pro",
)

NOT_FOUND = 404


@dataclass(frozen=True)
class FallbackDecision:
    """Record of one dispatch across the candidate models."""

    candidates: tuple[str, ...]
    attempted: list[str] = field(default_factory=list)
    resolved_model: str | None = None

    @property
    def triggered(self) -> bool:
        return len(self.attempted) > 1

    def as_meta(self) -> dict:
        return {
            "fallback_triggered": self.triggered,
            "fallback_candidates": list(self.candidates),
            "fallback_attempted": list(self.attempted),
            "resolved_model": self.resolved_model,
        }


class ModelFallbackPlanner:
    """Ordered model candidates; only a 404 moves on to the next one."""

    def __init__(self, configured_model: str | None = None, default_models: tuple[str, ...] = DEFAULT_MODELS) -> None:
        self.configured_model = (configured_model or "").strip()
        self.default_models = default_models

    def candidates(self) -> tuple[str, ...]:
        if self.configured_model:
            return (self.configured_model,)
        return self.default_models

    @staticmethod
    def should_fall_over(status_code: int, attempt_index: int, candidates: tuple[str, ...]) -> bool:
        return status_code == NOT_FOUND and attempt_index < len(candidates) - 1
