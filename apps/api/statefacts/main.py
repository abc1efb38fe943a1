from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from statefacts.api import router as api_router
from statefacts.core.config import Settings, get_settings, resolve_data_path
from statefacts.core.errors import StateFactsError, StoreError
from statefacts.core.logging import setup_logging
from statefacts.services.fact_store import FactStore
from statefacts.services.reference import StateRegistry

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StateFactsError)
    async def _state_facts_error(request: Request, exc: StateFactsError) -> JSONResponse:
        if isinstance(exc, StoreError):
            logger.error("Fact store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        first = exc.errors()[0] if exc.errors() else {}
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = first.get("msg", "Invalid request")
        return JSONResponse(
            status_code=400,
            content={"detail": f"{where}: {message}" if where else message},
        )

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="State Fun Facts API", version="0.1.0")

    app.state.registry = StateRegistry.from_json(settings.states_data_path)
    store_path = resolve_data_path(settings.facts_store_path) if settings.facts_store_path else None
    app.state.fact_store = FactStore(store_path)
    logger.info("Fun facts stored at %s", store_path or "<memory>")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
