import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mindvault.api.schemas import AssistantRequest, AssistantResponse
from mindvault.errors import AssistantError
from mindvault.service.assistant import AssistantService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mindvault", version="0.1.0")
service = AssistantService()


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location}: {first.get('msg', '')}" if location else f"Invalid request: {first.get('msg', '')}"
    else:
        message = "Invalid request."
    logger.info("assistant.invalid_body detail=%s", message)
    return JSONResponse({"error": message}, status_code=400)


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.post("/api/gemini", response_model=AssistantResponse, response_model_exclude_none=True)
async def gemini(req: AssistantRequest):
    try:
        result = await service.run(req)
    except AssistantError as exc:
        logger.warning(
            "assistant.failed type=%s status=%d detail=%s",
            exc.__class__.__name__,
            exc.status_code,
            exc.message[:200],
        )
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
    except Exception as exc:
        logger.exception("assistant.failed action=%s", req.action)
        return JSONResponse({"error": str(exc) or "Gemini request failed."}, status_code=500)
    return AssistantResponse(**result)
