"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from config.settings import settings
from withholding.api.form_fields import load_form
from withholding.api.routes import STATIC_DIR, router

logger = logging.getLogger(__name__)

# pydantic error type -> key under `messages` in config/form.yaml
_MESSAGE_KEYS: dict[str, str] = {
    "greater_than_equal": "minimum",
    "less_than_equal": "maximum",
    "int_from_float": "integer",
    "int_parsing": "integer",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting up...")

    yield

    logger.info("Shutting down...")


def localize_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Replace pydantic messages with the form's own wording where one exists."""
    messages = {field.name: field.messages for field in load_form().fields}
    localized = []
    for error in errors:
        loc = error.get("loc", ())
        field_name = loc[-1] if loc and loc[0] == "body" else None
        key = _MESSAGE_KEYS.get(error.get("type", ""))
        message = messages.get(field_name, {}).get(key) if key else None
        localized.append({**error, "msg": message} if message else error)
    return localized


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 response carrying the form's validation messages."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(localize_errors(list(exc.errors())))},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="IIT Withholding Calculator", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.include_router(router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app
