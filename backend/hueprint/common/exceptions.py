from __future__ import annotations

import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from hueprint.common.request_context import get_request_id
from hueprint.common.responses import ApiResponse

# Business error codes carried in the response envelope
CODE_BAD_REQUEST = 40000
CODE_DUPLICATE = 40001
CODE_INVALID_INPUT = 40002
CODE_NOT_FOUND = 40400
CODE_VALIDATION = 42200
CODE_INTERNAL = 50000


class ApiException(StarletteHTTPException):
    def __init__(
        self,
        status_code: int = 400,
        code: int = CODE_BAD_REQUEST,
        message: str = "Bad Request",
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.details = details

    @classmethod
    def not_found(cls, entity: str, id: Any) -> "ApiException":
        return cls(status_code=404, code=CODE_NOT_FOUND, message=f"{entity} not found: {id}")

    @classmethod
    def invalid_input(cls, message: str, details: Optional[Any] = None) -> "ApiException":
        return cls(status_code=400, code=CODE_INVALID_INPUT, message=message, details=details)


def _request_id(request: Request) -> str | None:
    return get_request_id() or getattr(request.state, "request_id", None)


def register_exception_handlers(app: FastAPI, *, debug: bool = False) -> None:
    logger = logging.getLogger(__name__)

    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
        logger.warning(
            "api_exception request_id=%s method=%s path=%s status=%s code=%s message=%s",
            _request_id(request),
            request.method,
            request.url.path,
            exc.status_code,
            exc.code,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse.fail(code=exc.code, message=exc.message, data=exc.details).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "validation_error request_id=%s method=%s path=%s errors=%s",
            _request_id(request),
            request.method,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(
            status_code=422,
            content=ApiResponse.fail(
                code=CODE_VALIDATION,
                message="Validation Error",
                data=jsonable_errors(exc.errors()),
            ).model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = str(exc.detail) if exc.detail is not None else "HTTP Error"
        logger.warning(
            "http_exception request_id=%s method=%s path=%s status=%s message=%s",
            _request_id(request),
            request.method,
            request.url.path,
            exc.status_code,
            message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse.fail(code=exc.status_code, message=message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = _request_id(request)
        logger.exception(
            "unhandled_exception request_id=%s method=%s path=%s",
            request_id,
            request.method,
            request.url.path,
        )
        details: Any | None = None
        if debug:
            details = {
                "requestId": request_id,
                "type": exc.__class__.__name__,
                "message": str(exc),
                "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            }
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=ApiResponse.fail(code=CODE_INTERNAL, message="Internal Server Error", data=details).model_dump(),
        )


def jsonable_errors(errors: Any) -> Any:
    # pydantic may put the raw exception object under "ctx"; keep only its message.
    cleaned = []
    for error in errors:
        item = dict(error)
        ctx = item.get("ctx")
        if isinstance(ctx, dict):
            item["ctx"] = {key: str(value) for key, value in ctx.items()}
        cleaned.append(item)
    return cleaned
