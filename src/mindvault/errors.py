class AssistantError(Exception):
    """Terminal failure of a single assistant request, carrying its HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(AssistantError):
    status_code = 500


class InvalidRequestError(AssistantError):
    status_code = 400


class UpstreamError(AssistantError):
    """Gemini answered with a non-2xx status after the candidate list ran out."""

    def __init__(self, status_code: int, body: str, model: str = "") -> None:
        super().__init__(body or "Gemini request failed.", status_code=status_code)
        self.body = body
        self.model = model


class EmptyResultError(AssistantError):
    status_code = 500

    def __init__(self, message: str = "No content returned.") -> None:
        super().__init__(message)
