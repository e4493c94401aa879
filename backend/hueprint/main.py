from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hueprint.common.exceptions import register_exception_handlers
from hueprint.common.request_context import RequestIdFilter, reset_request_id, set_request_id
from hueprint.common.responses import ApiResponse
from hueprint.config import get_settings
from hueprint.identity.pattern import PATTERN_ALGORITHM_VERSION
from hueprint.user.router import identity_router, router as user_router


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger(__name__).info(
        "startup app=%s env=%s pattern_version=%s",
        app.title,
        get_settings().app_env,
        PATTERN_ALGORITHM_VERSION,
    )
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        lifespan=lifespan,
    )

    cors_origins = settings.cors_origins_list()
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app, debug=settings.debug)

    @app.middleware("http")
    async def request_logging_middleware(request, call_next):
        logger = logging.getLogger("hueprint.request")
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = set_request_id(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000.0
            logger.exception(
                "request_failed request_id=%s method=%s path=%s duration_ms=%.2f",
                request_id,
                request.method,
                request.url.path,
                duration_ms,
            )
            raise
        finally:
            reset_request_id(token)

        duration_ms = (time.perf_counter() - start) * 1000.0
        response.headers["x-request-id"] = request_id
        log_fn = logger.info
        if response.status_code >= 500:
            log_fn = logger.error
        elif response.status_code >= 400:
            log_fn = logger.warning
        log_fn(
            "request_completed request_id=%s method=%s path=%s status=%s duration_ms=%.2f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    app.include_router(user_router)
    app.include_router(identity_router)

    @app.get("/health", response_model=ApiResponse)
    def health() -> ApiResponse:
        return ApiResponse.ok({"status": "ok", "patternVersion": PATTERN_ALGORITHM_VERSION})

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("hueprint.main:app", host=settings.host, port=settings.port, reload=settings.debug)
