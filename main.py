# main.py

import datetime
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from google.api_core import exceptions as google_exceptions
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from ai.gemini import GeminiSource
from core.config import Settings, configure_logging, load_settings
from core.errors import ConfigError, ValidationError, user_message_for
from core.models import PlanResult
from core.normalizer import normalize_trip_request
from core.pipeline import synthesize_itinerary
from services.unsplash import UnsplashClient

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def _render_error(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "error.html", {"message": message}, status_code=status_code
    )


async def _read_fields(request: Request) -> Dict[str, Any]:
    """Form fields as scalars, or lists when a field is repeated (checkboxes)."""
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    form = await request.form()
    fields: Dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        fields[key] = values[0] if len(values) == 1 else values
    return fields


def build_plan(raw: Dict[str, Any], settings: Settings, source, images) -> PlanResult:
    req = normalize_trip_request(raw, max_days=settings.max_days)
    logger.info("Processing request for %s (%s, %d days)", req.city, req.interests, req.days)

    itinerary, used_fallback = synthesize_itinerary(req, source)
    return PlanResult(
        city=req.city,
        itinerary=itinerary,
        images=images.city_images(req.city),
        using_mock_data=used_fallback,
        days=req.days,
    )


def create_app(
    settings: Optional[Settings] = None,
    source: Optional[GeminiSource] = None,
    images: Optional[UnsplashClient] = None,
) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Smart Travel Planner")
    app.state.settings = settings
    app.state.source = source or GeminiSource(settings)
    app.state.images = images or UnsplashClient(settings)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return templates.TemplateResponse(
            request, "index.html", {"max_days": settings.max_days}
        )

    @app.post("/plan", response_class=HTMLResponse)
    async def plan(request: Request):
        raw = await _read_fields(request)
        logger.debug("Received data: %s", raw)
        try:
            result = await run_in_threadpool(
                build_plan, raw, settings, app.state.source, app.state.images
            )
        except ValidationError as e:
            return _render_error(request, e.user_message, 400)
        except Exception as e:
            logger.exception("Error generating travel plan")
            return _render_error(request, user_message_for(e), 500)

        return templates.TemplateResponse(
            request,
            "plan.html",
            {
                "city": result.city,
                "plan": result.itinerary.to_dict(),
                "images": result.images,
                "usingMockData": result.using_mock_data,
                "days": result.days,
            },
        )

    @app.get("/health")
    def health():
        return {
            "status": "OK",
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "services": settings.services(),
        }

    @app.get("/models")
    def models():
        try:
            available = app.state.source.available_models()
        except (google_exceptions.GoogleAPIError, OSError) as e:
            logger.warning("Error fetching models: %s", e)
            return JSONResponse(
                status_code=500,
                content={"message": "Cannot fetch models. Check your API key."},
            )
        return {"availableModels": available, "totalModels": len(available)}

    @app.get("/error", response_class=HTMLResponse)
    def error_page(request: Request):
        return _render_error(request, "Something went wrong. Please try again.", 200)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = "Page not found." if exc.status_code == 404 else str(exc.detail)
        return _render_error(request, message, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Global error handler")
        return _render_error(request, "Internal server error. Please try again later.", 500)

    return app


def serve() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error("%s", e)
        sys.exit(1)

    configure_logging(settings.log_level)
    services = settings.services()
    logger.info("Gemini API: %s", "Configured" if services["gemini"] else "Missing")
    logger.info("Unsplash API: %s", "Configured" if services["unsplash"] else "Missing")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
