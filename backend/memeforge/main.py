import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .errors import GenerationError, MemeForgeError
from .logging_utils import setup_logging
from .models import ErrorResponse, GenerationResult
from .services.ai_service import MistralProvider, PlanGenerator

GENERIC_ERROR_MESSAGE = "Impossibile generare il blueprint al momento"

setup_logging(get_settings().APP_LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="MemeForge")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_provider() -> MistralProvider:
    """One SDK client per process, shared by every request"""
    settings = get_settings()
    return MistralProvider(api_key=settings.MISTRAL_API_KEY, model=settings.MISTRAL_MODEL)


def get_plan_generator(settings: Settings = Depends(get_settings)) -> PlanGenerator:
    provider = get_provider() if settings.provider_configured else None
    return PlanGenerator(settings, provider=provider)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@app.get("/api/health")
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "providerConfigured": settings.provider_configured}


@app.post(
    "/api/generate",
    response_model=GenerationResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_plan(request: Request, generator: PlanGenerator = Depends(get_plan_generator)):
    try:
        # Deployment precondition, checked before the body is even read
        generator.ensure_configured()
        payload = await request.json()
        return await generator.handle(payload)

    except GenerationError as e:
        logger.error("/api/generate error: %s", e.message)
        return _error(e.status_code, GENERIC_ERROR_MESSAGE)

    except MemeForgeError as e:
        logger.warning("/api/generate rejected (%s): %s", e.status_code, e.message)
        return _error(e.status_code, e.message)

    except Exception:
        logger.exception("/api/generate error")
        return _error(500, GENERIC_ERROR_MESSAGE)


def run() -> None:
    import uvicorn

    uvicorn.run("memeforge.main:app", host="0.0.0.0", port=8000)
